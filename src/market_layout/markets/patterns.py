"""Compound market detection and the table of known compound layouts."""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .models import MarketConfiguration

logger = logging.getLogger(__name__)

COMPOUND_SEPARATOR = " & "

COMPOUND_MARKET_PATTERNS: Mapping[str, MarketConfiguration] = MappingProxyType({
    "Both Teams To Score & Full Time Result": MarketConfiguration(
        row_labels=("Yes", "No"),
        column_labels=("1", "X", "2"),
        row_header="BTTS",
        column_header="Result",
    ),
    "Both Teams To Score & Total": MarketConfiguration(
        row_labels=("Yes", "No"),
        column_labels=("Over", "Under"),
        row_header="BTTS",
        column_header="Total",
    ),
    "Full Time Result & Total Goals": MarketConfiguration(
        row_labels=("1", "X", "2"),
        column_labels=("Over", "Under"),
        row_header="Result",
        column_header="Total",
    ),
    "Total Goals Odd/Even & Total": MarketConfiguration(
        row_labels=("Even", "Odd"),
        column_labels=("Over", "Under"),
        row_header="Odd/Even",
        column_header="Total",
    ),
    "Both Teams To Score & Total Goals": MarketConfiguration(
        row_labels=("Yes", "No"),
        column_labels=("Over", "Under"),
        row_header="BTTS",
        column_header="Total",
    ),
    "Double Chance & Total": MarketConfiguration(
        row_labels=("1X", "X2", "12"),
        column_labels=("Over", "Under"),
        row_header="Double Chance",
        column_header="Total",
    ),
    "Double Chance & Both Teams To Score": MarketConfiguration(
        row_labels=("1X", "X2", "12"),
        column_labels=("Yes", "No"),
        row_header="Double Chance",
        column_header="BTTS",
    ),
})


def is_compound(market_name: str) -> bool:
    """Return True if the market name joins two wagers with ``" & "``."""
    return COMPOUND_SEPARATOR in market_name


def _contains_in_order(name: str, left: str, right: str) -> bool:
    left_at = name.find(left)
    if left_at < 0:
        return False
    return name.find(right, left_at + len(left)) >= 0


def resolve_configuration(market_name: str) -> Optional[MarketConfiguration]:
    """Find the grid layout for a compound market name.

    An exact name wins. Otherwise a pattern matches when the name contains
    both of its halves, case-insensitively, left half first. Returns None
    for markets with no known layout.
    """
    config = COMPOUND_MARKET_PATTERNS.get(market_name)
    if config is not None:
        return config

    lowered = market_name.lower()
    for pattern, config in COMPOUND_MARKET_PATTERNS.items():
        left, right = pattern.lower().split(COMPOUND_SEPARATOR)
        if _contains_in_order(lowered, left, right):
            logger.debug(f"Market '{market_name}' matched pattern '{pattern}'")
            return config

    if is_compound(market_name):
        logger.info(f"No grid layout for compound market '{market_name}'")
    return None
