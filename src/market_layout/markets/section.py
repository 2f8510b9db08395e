"""Resolve the markets of a match into render-ready layouts."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..config import Settings
from .layout import build_grid, layout_rows, outcomes_per_row, row_team_types
from .models import Grid, Market, Outcome, TeamType
from .patterns import is_compound, resolve_configuration

logger = logging.getLogger(__name__)

GRID = "grid"
ROWS = "rows"


@dataclass
class MarketLayout:
    """How one market should be rendered.

    ``kind`` is ``"grid"`` when ``grid`` is set, otherwise ``"rows"`` with
    ``rows`` and a ``team_types`` entry per outcome in market order.
    """

    market: Market
    kind: str
    grid: Optional[Grid] = None
    rows: List[List[Outcome]] = field(default_factory=list)
    team_types: List[TeamType] = field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.market.is_active

    @property
    def is_empty(self) -> bool:
        if self.grid is not None:
            return self.grid.offered_count == 0
        return not self.rows


def resolve_market(market: Market, settings: Optional[Settings] = None) -> MarketLayout:
    """Lay out a single market as a grid or as wrapped rows.

    Compound markets without a known configuration fall back to rows over
    their unsplit selection labels.
    """
    outcomes = list(market.outcomes)

    if is_compound(market.name):
        config = resolve_configuration(market.name)
        if config is not None:
            return MarketLayout(market=market, kind=GRID, grid=build_grid(outcomes, config))

    if settings is not None:
        per_row = outcomes_per_row(
            outcomes,
            long_label_length=settings.long_label_length,
            medium_label_length=settings.medium_label_length,
            max_per_row=settings.max_outcomes_per_row,
        )
    else:
        per_row = outcomes_per_row(outcomes)

    return MarketLayout(
        market=market,
        kind=ROWS,
        rows=layout_rows(outcomes, per_row),
        team_types=row_team_types(outcomes),
    )


def sort_markets(markets: Iterable[Market]) -> List[Market]:
    """Active markets first; order is otherwise kept."""
    return sorted(markets, key=lambda m: not m.is_active)


def resolve_markets(
    markets: Iterable[Market], settings: Optional[Settings] = None
) -> List[MarketLayout]:
    layouts = [resolve_market(m, settings) for m in sort_markets(markets)]
    logger.debug(
        f"Resolved {len(layouts)} markets "
        f"({sum(1 for layout in layouts if layout.kind == GRID)} grids)"
    )
    return layouts
