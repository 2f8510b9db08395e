"""Parsing of compound selection labels such as ``"No & Over (2.5)"``."""

import re
from typing import Iterable, Optional

from .models import MarketConfiguration, ParsedSelection
from .patterns import COMPOUND_SEPARATOR

_TRAILING_ANNOTATION = re.compile(r"\s*\([^)]*\)\s*$")


def clean_label(part: str) -> str:
    """Drop a trailing parenthetical, e.g. ``"Over (2.5)"`` -> ``"Over"``."""
    return _TRAILING_ANNOTATION.sub("", part).strip()


def normalize_label(label: str) -> str:
    """Comparison key for a label: cleaned and lower-cased."""
    return clean_label(label).lower()


def split_selection(selection_name: str) -> Optional[ParsedSelection]:
    """Split a compound label into its row and column halves.

    Returns None unless the label has exactly one separator.
    """
    parts = selection_name.split(COMPOUND_SEPARATOR)
    if len(parts) != 2:
        return None
    return ParsedSelection(row=clean_label(parts[0]), col=clean_label(parts[1]))


def match_label(part: str, labels: Iterable[str]) -> Optional[str]:
    """Return the canonical label whose normalized form equals ``part``'s."""
    key = normalize_label(part)
    for label in labels:
        if normalize_label(label) == key:
            return label
    return None


def match_to_config(
    raw_row: str, raw_col: str, config: MarketConfiguration
) -> Optional[ParsedSelection]:
    """Align both halves to the configuration's labels; None unless both match."""
    row = match_label(raw_row, config.row_labels)
    if row is None:
        return None
    col = match_label(raw_col, config.column_labels)
    if col is None:
        return None
    return ParsedSelection(row=row, col=col)
