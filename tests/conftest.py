"""Pytest fixtures for the market layout test suite."""

import json

import pytest

from market_layout.markets import Market, Outcome


def make_outcome(selection_name, odds=2.0, outcome_id=None, condition_id="cond-1"):
    """Build an outcome with an id derived from its label."""
    return Outcome(
        outcome_id=outcome_id or f"out-{selection_name}",
        condition_id=condition_id,
        selection_name=selection_name,
        odds=odds,
    )


@pytest.fixture
def btts_result_outcomes():
    """Sparse 'Both Teams To Score & Full Time Result' outcomes."""
    return [
        make_outcome("Yes & 1", 1.5, outcome_id="o1"),
        make_outcome("Yes & X", 3.2, outcome_id="o2"),
        make_outcome("No & 2", 2.1, outcome_id="o3"),
    ]


@pytest.fixture
def match_winner_outcomes():
    """Three short 1X2 outcomes."""
    return [
        make_outcome("1", 1.8, outcome_id="h"),
        make_outcome("X", 3.4, outcome_id="d"),
        make_outcome("2", 4.2, outcome_id="a"),
    ]


@pytest.fixture
def sample_market_records():
    """Market records as the odds provider sends them."""
    return [
        {
            "name": "1X2",
            "state": "Stopped",
            "outcomes": [
                {"outcomeId": "29", "conditionId": "100", "selectionName": "1", "odds": 1.8},
                {"outcomeId": "30", "conditionId": "100", "selectionName": "X", "odds": "3.4"},
                {"outcomeId": "31", "conditionId": "100", "selectionName": "2", "odds": 4.2},
            ],
        },
        {
            "name": "Both Teams To Score & Full Time Result",
            "state": "Active",
            "outcomes": [
                {"outcomeId": "41", "conditionId": "200", "selectionName": "Yes & 1", "odds": 3.9},
                {"outcomeId": "42", "conditionId": "200", "selectionName": "No & X", "odds": 5.5},
                {"outcomeId": "43", "conditionId": "200", "selectionName": "Maybe", "odds": 9.0},
            ],
        },
    ]


@pytest.fixture
def markets_file(tmp_path, sample_market_records):
    """Write the sample market records to a JSON file."""
    path = tmp_path / "markets.json"
    path.write_text(json.dumps(sample_market_records), encoding="utf-8")
    return path


@pytest.fixture
def sample_markets(sample_market_records):
    return [Market.from_dict(record) for record in sample_market_records]


@pytest.fixture
def outcome_factory():
    """Factory for outcomes with ids derived from their labels."""
    return make_outcome
