"""Display text for grid headers."""

from typing import Optional


def format_column_label(
    label: str,
    home_team: Optional[str] = None,
    away_team: Optional[str] = None,
) -> str:
    """Show team names in result columns when they are known."""
    if label == "1" and home_team:
        return home_team
    if label == "2" and away_team:
        return away_team
    if label == "X":
        return "Draw"
    if label == "1X" and home_team:
        return f"{home_team}/Draw"
    if label == "X2" and away_team:
        return f"Draw/{away_team}"
    if label == "12" and home_team and away_team:
        return f"{home_team}/{away_team}"
    return label


def format_row_label(label: str) -> str:
    if label == "1":
        return "Home"
    if label == "2":
        return "Away"
    if label == "X":
        return "Draw"
    return label
