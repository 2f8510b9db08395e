"""CLI for previewing how markets from a JSON dump will be laid out."""

import json
import logging
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from ..config import get_settings
from ..markets import (
    NO_OFFER,
    Market,
    MarketDataError,
    MarketLayout,
    format_column_label,
    format_row_label,
    resolve_markets,
)
from ..utils import setup_logging

console = Console()
logger = logging.getLogger(__name__)

TEAM_STYLES = {
    "home": "green",
    "draw": "white",
    "away": "blue",
}


def load_markets(path: Path) -> List[Market]:
    """Read a market, or a list of markets, from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise MarketDataError(f"{path} must contain a market object or a list of markets")

    markets = [Market.from_dict(item) for item in data]
    logger.debug(f"Loaded {len(markets)} markets from {path}")
    return markets


@click.command()
@click.argument("markets_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--home", "home_team", help="Home team name for result columns")
@click.option("--away", "away_team", help="Away team name for result columns")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Verbose output",
)
def main(markets_file: Path, home_team: Optional[str], away_team: Optional[str], verbose: bool):
    """Show the grid or row layout of every market in MARKETS_FILE."""
    setup_logging(level="DEBUG" if verbose else None, force=True)
    settings = get_settings()

    try:
        markets = load_markets(markets_file)
    except (json.JSONDecodeError, UnicodeDecodeError, MarketDataError) as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise click.Abort()

    if not markets:
        console.print("[yellow]No markets available for this match[/yellow]")
        return

    for layout in resolve_markets(markets, settings):
        if layout.grid is not None:
            display_grid(layout, home_team, away_team)
        else:
            display_rows(layout)


def _title(layout: MarketLayout) -> str:
    title = layout.market.name
    if not layout.is_active:
        title += f" [red]({layout.market.condition_state.value})[/red]"
    return title


def display_grid(layout: MarketLayout, home_team: Optional[str], away_team: Optional[str]):
    """Print a compound market as a row x column table."""
    grid = layout.grid
    table = Table(title=_title(layout))
    table.add_column(grid.row_header, style="dim")
    for label, team_type in zip(grid.column_labels, grid.column_team_types):
        table.add_column(
            format_column_label(label, home_team, away_team),
            justify="center",
            style=TEAM_STYLES[team_type.value],
        )

    for row_label, cells in grid.rows():
        table.add_row(
            format_row_label(row_label),
            *("-" if cell is NO_OFFER else f"{cell.odds:.2f}" for cell in cells),
        )

    console.print(table)
    if grid.dropped:
        console.print(f"[yellow]{len(grid.dropped)} outcome(s) could not be placed[/yellow]")


def display_rows(layout: MarketLayout):
    """Print a simple market as wrapped rows of outcomes."""
    if layout.is_empty:
        console.print(f"[yellow]{layout.market.name}: no outcomes[/yellow]")
        return

    table = Table(title=_title(layout), show_header=False)
    width = max(len(row) for row in layout.rows)
    for _ in range(width):
        table.add_column()

    index = 0
    for row in layout.rows:
        cells = []
        for outcome in row:
            style = TEAM_STYLES[layout.team_types[index].value]
            cells.append(f"[{style}]{outcome.selection_name}  {outcome.odds:.2f}[/{style}]")
            index += 1
        table.add_row(*cells)

    console.print(table)


if __name__ == "__main__":
    main()
