"""Grid and row layouts for market outcomes.

Compound markets with a known configuration are laid out as a full
row x column grid. Everything else is wrapped into rows whose width depends
on how long the selection labels are.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .models import NO_OFFER, Cell, Grid, MarketConfiguration, Outcome, TeamType
from .selection import match_to_config, split_selection

logger = logging.getLogger(__name__)

LONG_LABEL_LENGTH = 40
MEDIUM_LABEL_LENGTH = 25
MAX_OUTCOMES_PER_ROW = 3

_LABEL_TEAM_TYPES = {
    "1": TeamType.HOME,
    "home": TeamType.HOME,
    "x": TeamType.DRAW,
    "draw": TeamType.DRAW,
    "2": TeamType.AWAY,
    "away": TeamType.AWAY,
}


def outcome_team_type(index: int, total: int) -> TeamType:
    """Positional role: first is home, middle of three is draw, the rest away."""
    if index == 0:
        return TeamType.HOME
    if total == 3 and index == 1:
        return TeamType.DRAW
    return TeamType.AWAY


def column_team_type(label: str, index: int, count: int) -> TeamType:
    """Role of a grid column, from its label when it names one, else its position."""
    team_type = _LABEL_TEAM_TYPES.get(label.lower())
    if team_type is not None:
        return team_type
    return outcome_team_type(index, count)


def build_grid(outcomes: Sequence[Outcome], config: MarketConfiguration) -> Grid:
    """Place compound outcomes into the configuration's grid.

    Every (row, column) pair gets a cell, ``NO_OFFER`` where nothing is
    priced. Outcomes whose labels don't split or don't match the
    configuration are left out and recorded on ``Grid.dropped``. If two
    outcomes land in the same cell the later one is kept.
    """
    cells: Dict[Tuple[str, str], Cell] = {
        (row, col): NO_OFFER
        for row in config.row_labels
        for col in config.column_labels
    }
    dropped: List[Outcome] = []

    for outcome in outcomes:
        parsed = split_selection(outcome.selection_name)
        if parsed is not None:
            parsed = match_to_config(parsed.row, parsed.col, config)
        if parsed is None:
            logger.debug(
                f"Dropping outcome {outcome.outcome_id}: "
                f"'{outcome.selection_name}' does not fit {config.shape} grid"
            )
            dropped.append(outcome)
            continue

        key = (parsed.row, parsed.col)
        previous = cells[key]
        if previous is not NO_OFFER:
            logger.warning(
                f"Outcomes {previous.outcome_id} and {outcome.outcome_id} "
                f"both map to cell {key}; keeping {outcome.outcome_id}"
            )
        cells[key] = outcome

    if dropped:
        logger.info(
            f"Dropped {len(dropped)} of {len(outcomes)} outcomes "
            f"from {config.row_header}/{config.column_header} grid"
        )

    column_count = len(config.column_labels)
    return Grid(
        row_labels=config.row_labels,
        column_labels=config.column_labels,
        cells=cells,
        column_team_types=tuple(
            column_team_type(label, i, column_count)
            for i, label in enumerate(config.column_labels)
        ),
        row_header=config.row_header,
        column_header=config.column_header,
        dropped=dropped,
    )


def outcomes_per_row(
    outcomes: Sequence[Outcome],
    long_label_length: int = LONG_LABEL_LENGTH,
    medium_label_length: int = MEDIUM_LABEL_LENGTH,
    max_per_row: int = MAX_OUTCOMES_PER_ROW,
) -> int:
    """Pick a row width from the average selection label length."""
    if not outcomes:
        return max_per_row

    avg_length = sum(len(o.selection_name) for o in outcomes) / len(outcomes)
    if avg_length > long_label_length:
        return 1
    if avg_length > medium_label_length:
        return min(2, max_per_row)
    return max_per_row


def layout_rows(
    outcomes: Sequence[Outcome], per_row: Optional[int] = None
) -> List[List[Outcome]]:
    """Chunk outcomes into rows, keeping their order."""
    if per_row is None:
        per_row = outcomes_per_row(outcomes)
    if per_row < 1:
        raise ValueError(f"per_row must be at least 1, got {per_row}")

    return [list(outcomes[i:i + per_row]) for i in range(0, len(outcomes), per_row)]


def row_team_types(outcomes: Sequence[Outcome]) -> List[TeamType]:
    """Team type of each outcome by its position in the whole list."""
    total = len(outcomes)
    return [outcome_team_type(i, total) for i in range(total)]
