"""Tests for market records and market section resolution."""

import pytest

from market_layout.config import Settings
from market_layout.markets import (
    ConditionState,
    Market,
    MarketDataError,
    Outcome,
    TeamType,
    resolve_market,
    resolve_markets,
    sort_markets,
)


class TestRecords:
    """Test reading upstream market records."""

    def test_outcome_from_camel_case(self):
        outcome = Outcome.from_dict(
            {"outcomeId": "29", "conditionId": "100", "selectionName": "1", "odds": "1.85"}
        )

        assert outcome.outcome_id == "29"
        assert outcome.condition_id == "100"
        assert outcome.selection_name == "1"
        assert outcome.odds == pytest.approx(1.85)

    def test_outcome_from_snake_case_without_label(self):
        outcome = Outcome.from_dict({"outcome_id": 7, "condition_id": 8, "odds": 2})

        assert outcome.outcome_id == "7"
        assert outcome.selection_name == ""

    def test_outcome_missing_ids(self):
        with pytest.raises(MarketDataError):
            Outcome.from_dict({"selectionName": "1", "odds": 1.5})

    def test_outcome_bad_odds(self):
        with pytest.raises(MarketDataError, match="non-numeric odds"):
            Outcome.from_dict({"outcomeId": "1", "conditionId": "2", "odds": "evens"})

    def test_market_from_dict(self, sample_market_records):
        market = Market.from_dict(sample_market_records[0])

        assert market.name == "1X2"
        assert len(market.outcomes) == 3
        assert market.condition_state is ConditionState.STOPPED
        assert market.is_active is False

    def test_market_state_defaults(self):
        assert Market.from_dict({"name": "1X2"}).condition_state is ConditionState.ACTIVE
        assert Market.from_dict({"name": "1X2", "state": "Paused"}).condition_state is ConditionState.STOPPED

    def test_market_requires_name(self):
        with pytest.raises(MarketDataError):
            Market.from_dict({"outcomes": []})

    def test_market_data_error_is_value_error(self):
        assert issubclass(MarketDataError, ValueError)

    def test_numeric_selection_names_become_text(self):
        """Numeric provider labels are read as strings and lay out normally."""
        market = Market.from_dict({
            "name": "1X2",
            "outcomes": [
                {"outcomeId": "1", "conditionId": "c", "selectionName": 1, "odds": 1.5},
                {"outcomeId": "2", "conditionId": "c", "selectionName": 0, "odds": 3.1},
                {"outcomeId": "3", "conditionId": "c", "selectionName": 2, "odds": 4.0},
            ],
        })

        assert [o.selection_name for o in market.outcomes] == ["1", "0", "2"]
        layout = resolve_market(market)
        assert layout.rows == [list(market.outcomes)]
        assert layout.team_types == [TeamType.HOME, TeamType.DRAW, TeamType.AWAY]

    def test_numeric_market_name_becomes_text(self):
        market = Market.from_dict({"name": 12, "outcomes": []})

        assert market.name == "12"
        assert resolve_market(market).kind == "rows"


class TestResolveMarket:
    """Test choosing between grid and row layouts."""

    def test_known_compound_market_gets_grid(self, btts_result_outcomes):
        market = Market("Both Teams To Score & Full Time Result", tuple(btts_result_outcomes))
        layout = resolve_market(market)

        assert layout.kind == "grid"
        assert layout.grid.cell("No", "2").odds == 2.1
        assert layout.rows == []
        assert layout.is_empty is False

    def test_unknown_compound_market_falls_back_to_rows(self, outcome_factory):
        """Unmodeled compound markets show their raw labels in rows."""
        outcomes = (outcome_factory("Home & Over 9.5"), outcome_factory("Away & Under 9.5"))
        layout = resolve_market(Market("Half Time Result & Corners", outcomes))

        assert layout.kind == "rows"
        assert layout.grid is None
        assert layout.rows == [list(outcomes)]
        assert layout.rows[0][0].selection_name == "Home & Over 9.5"
        assert layout.team_types == [TeamType.HOME, TeamType.AWAY]

    def test_simple_market_gets_rows(self, match_winner_outcomes):
        layout = resolve_market(Market("1X2", tuple(match_winner_outcomes)))

        assert layout.kind == "rows"
        assert layout.rows == [match_winner_outcomes]
        assert layout.team_types == [TeamType.HOME, TeamType.DRAW, TeamType.AWAY]

    def test_settings_control_row_width(self, match_winner_outcomes):
        settings = Settings(max_outcomes_per_row=2)
        layout = resolve_market(Market("1X2", tuple(match_winner_outcomes)), settings)

        assert [len(row) for row in layout.rows] == [2, 1]

    def test_empty_market(self):
        layout = resolve_market(Market("1X2"))

        assert layout.rows == []
        assert layout.is_empty is True

    def test_compound_grid_without_offers_is_empty(self):
        layout = resolve_market(Market("Double Chance & Total"))

        assert layout.kind == "grid"
        assert len(layout.grid) == 6
        assert layout.is_empty is True

    def test_inactive_state_passes_through(self, sample_markets):
        layout = resolve_market(sample_markets[0])

        assert layout.is_active is False


class TestSortMarkets:
    """Test market ordering."""

    def test_active_markets_first(self, sample_markets):
        ordered = sort_markets(sample_markets)

        assert [m.name for m in ordered] == [
            "Both Teams To Score & Full Time Result",
            "1X2",
        ]

    def test_order_is_stable(self):
        markets = [
            Market("A", condition_state=ConditionState.STOPPED),
            Market("B"),
            Market("C", condition_state=ConditionState.RESOLVED),
            Market("D"),
        ]

        assert [m.name for m in sort_markets(markets)] == ["B", "D", "A", "C"]

    def test_resolve_markets(self, sample_markets):
        layouts = resolve_markets(sample_markets)

        assert [layout.kind for layout in layouts] == ["grid", "rows"]
        assert len(layouts[0].grid.dropped) == 1
        assert layouts[0].grid.dropped[0].outcome_id == "43"
