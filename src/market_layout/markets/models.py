"""Market, outcome and grid records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union


class MarketDataError(ValueError):
    """Raised when an upstream market or outcome record cannot be read."""


class ConditionState(str, Enum):
    """Trading state of a market condition, as reported upstream."""

    ACTIVE = "Active"
    CANCELED = "Canceled"
    REMOVED = "Removed"
    RESOLVED = "Resolved"
    STOPPED = "Stopped"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ConditionState":
        """Map an upstream state string; missing means active, unknown means stopped."""
        if value is None:
            return cls.ACTIVE
        try:
            return cls(value)
        except ValueError:
            return cls.STOPPED


class TeamType(str, Enum):
    """Presentation role of an outcome or grid column."""

    HOME = "home"
    DRAW = "draw"
    AWAY = "away"


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass(frozen=True)
class Outcome:
    """One priced, selectable option within a market."""

    outcome_id: str
    condition_id: str
    selection_name: str = ""
    odds: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Outcome":
        if not isinstance(data, Mapping):
            raise MarketDataError(f"Outcome record must be an object, got {data!r}")
        outcome_id = _first(data, "outcomeId", "outcome_id")
        condition_id = _first(data, "conditionId", "condition_id")
        if outcome_id is None or condition_id is None:
            raise MarketDataError(f"Outcome record is missing its ids: {dict(data)!r}")

        raw_odds = data.get("odds", 0.0)
        try:
            odds = float(raw_odds)
        except (TypeError, ValueError) as e:
            raise MarketDataError(f"Outcome {outcome_id} has non-numeric odds {raw_odds!r}") from e

        selection_name = _first(data, "selectionName", "selection_name")

        return cls(
            outcome_id=str(outcome_id),
            condition_id=str(condition_id),
            selection_name="" if selection_name is None else str(selection_name),
            odds=odds,
        )


@dataclass(frozen=True)
class Market:
    """A single wager type offered for a match."""

    name: str
    outcomes: Tuple[Outcome, ...] = ()
    description: Optional[str] = None
    condition_state: ConditionState = ConditionState.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.condition_state is ConditionState.ACTIVE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Market":
        if not isinstance(data, Mapping):
            raise MarketDataError(f"Market record must be an object, got {data!r}")
        name = data.get("name")
        if not name:
            raise MarketDataError(f"Market record has no name: {dict(data)!r}")

        return cls(
            name=str(name),
            outcomes=tuple(Outcome.from_dict(o) for o in data.get("outcomes") or []),
            description=data.get("description"),
            condition_state=ConditionState.parse(_first(data, "state", "conditionState")),
        )


@dataclass(frozen=True)
class MarketConfiguration:
    """Row and column layout of a known compound market."""

    row_labels: Tuple[str, ...]
    column_labels: Tuple[str, ...]
    row_header: str
    column_header: str

    @property
    def shape(self) -> str:
        return f"{len(self.row_labels)}x{len(self.column_labels)}"


@dataclass(frozen=True)
class ParsedSelection:
    """Row and column halves of a compound selection label."""

    row: str
    col: str


class _NoOffer:
    """Placeholder for a grid cell without a priced outcome."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_OFFER"


NO_OFFER = _NoOffer()

Cell = Union[Outcome, _NoOffer]


@dataclass
class Grid:
    """Row x column matrix of a compound market.

    Every configured (row, column) pair has a cell; cells without a priced
    outcome hold ``NO_OFFER``. ``dropped`` keeps the outcomes whose labels
    could not be placed.
    """

    row_labels: Tuple[str, ...]
    column_labels: Tuple[str, ...]
    cells: Dict[Tuple[str, str], Cell]
    column_team_types: Tuple[TeamType, ...]
    row_header: str = ""
    column_header: str = ""
    dropped: List[Outcome] = field(default_factory=list)

    def cell(self, row: str, col: str) -> Cell:
        return self.cells[(row, col)]

    def rows(self) -> Iterator[Tuple[str, List[Cell]]]:
        """Yield ``(row_label, cells)`` in configured order."""
        for row in self.row_labels:
            yield row, [self.cells[(row, col)] for col in self.column_labels]

    @property
    def offered_count(self) -> int:
        return sum(1 for cell in self.cells.values() if cell is not NO_OFFER)

    def __len__(self) -> int:
        return len(self.cells)
