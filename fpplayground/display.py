"""
Rich rendering for change reports and age summaries.
"""

from collections.abc import Sequence
from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fpplayground.core.diff import SEPARATOR, format_instant


def build_changes_table(
    diffs: Sequence[str], keep_empty: bool = False, title: str = "Changes"
) -> Table:
    """
    One row per pair of snapshots, one line per changed attribute.

    diffs holds one entry per consecutive pair, as pairwise_diff returns
    them; rows are labelled with the snapshots they compare.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold",
        border_style="blue",
    )

    table.add_column("Snapshots", justify="right", style="dim")
    table.add_column("Change", style="cyan")

    for position, diff in enumerate(diffs, start=1):
        label = f"{position} → {position + 1}"
        if diff:
            table.add_row(label, Text("\n".join(diff.split(SEPARATOR))))
        elif keep_empty:
            table.add_row(label, "[dim]no change[/dim]")

    return table


def render_changes(
    console: Console, diffs: Sequence[str], snapshots: int, keep_empty: bool = False
) -> None:
    """Print the changes found in a trail of snapshots."""
    if not diffs or not (keep_empty or any(diffs)):
        console.print(f"[dim]No changes across {snapshots} snapshot(s)[/dim]")
        return
    console.print(
        build_changes_table(diffs, keep_empty, title=f"Changes across {snapshots} snapshots")
    )


def render_average_age(console: Console, average: float, at: datetime, lookups: int) -> None:
    """Print the average age as a panel."""
    body = Text()
    body.append(f"{average:.1f}", style="bold green")
    body.append(f" years, as of {format_instant(at)} ({lookups} key(s) looked up)")
    console.print(Panel(body, title="[bold]Average age[/bold]", border_style="green"))


def render_failure(console: Console, message: str) -> None:
    """Print a failure message."""
    console.print(Text(f"✗ {message}", style="red"))
