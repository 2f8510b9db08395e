"""Market classification, selection parsing and layout."""

from .labels import format_column_label, format_row_label
from .layout import (
    build_grid,
    column_team_type,
    layout_rows,
    outcome_team_type,
    outcomes_per_row,
    row_team_types,
)
from .models import (
    NO_OFFER,
    ConditionState,
    Grid,
    Market,
    MarketConfiguration,
    MarketDataError,
    Outcome,
    ParsedSelection,
    TeamType,
)
from .patterns import COMPOUND_MARKET_PATTERNS, is_compound, resolve_configuration
from .section import MarketLayout, resolve_market, resolve_markets, sort_markets
from .selection import (
    clean_label,
    match_label,
    match_to_config,
    normalize_label,
    split_selection,
)

__all__ = [
    "NO_OFFER",
    "COMPOUND_MARKET_PATTERNS",
    "ConditionState",
    "Grid",
    "Market",
    "MarketConfiguration",
    "MarketDataError",
    "MarketLayout",
    "Outcome",
    "ParsedSelection",
    "TeamType",
    "build_grid",
    "clean_label",
    "column_team_type",
    "format_column_label",
    "format_row_label",
    "is_compound",
    "layout_rows",
    "match_label",
    "match_to_config",
    "normalize_label",
    "outcome_team_type",
    "outcomes_per_row",
    "resolve_configuration",
    "resolve_market",
    "resolve_markets",
    "row_team_types",
    "sort_markets",
    "split_selection",
]
