"""
Console output helpers built on rich.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

BADGE = "[bold white on dark_cyan] PH [/bold white on dark_cyan]"


# ============================================================================
# STATUS MESSAGES
# ============================================================================


def success(message: str, details: str = "", badge: bool = True):
    """Green success message with ✓

    Args:
        message: Main success message
        details: Optional additional details (dimmed)
        badge: Show PH badge (default: True)
    """
    prefix = f"{BADGE} " if badge else ""
    console.print(f"{prefix}[green]✓[/green] {escape(message)}")
    if details:
        console.print(f"    [dim]{escape(details)}[/dim]")


def error(message: str, details: str = "", badge: bool = True):
    """Red error message with ✗"""
    prefix = f"{BADGE} " if badge else ""
    console.print(f"{prefix}[red]✗[/red] {escape(message)}")
    if details:
        console.print(f"    [red]{escape(details)}[/red]")


def warning(message: str, details: str = "", badge: bool = True):
    """Yellow warning with ⚠"""
    prefix = f"{BADGE} " if badge else ""
    console.print(f"{prefix}[yellow]⚠[/yellow] {escape(message)}")
    if details:
        console.print(f"    [dim]{escape(details)}[/dim]")


# ============================================================================
# TABLES
# ============================================================================


def data_table(
    columns: list[dict[str, Any]],
    rows: list[list[Any]],
    title: str | None = None,
    show_header: bool = True,
    border_style: str = "dim",
) -> Table:
    """Create and display a data table

    Args:
        columns: List of column dicts with 'name', optional 'style', 'justify', 'no_wrap'
        rows: List of row data (list of values matching column order)
        title: Optional table title
        show_header: Show column headers (default: True)
        border_style: Border style (default: "dim")

    Returns:
        The created Table object

    Example:
        data_table(
            columns=[
                {"name": "Source", "style": "cyan"},
                {"name": "Translation", "style": "white"},
            ],
            rows=[["<b>%s</b>", "<i>%s</i>"]],
            title="Broken translations"
        )
    """
    table = Table(
        title=title,
        show_header=show_header,
        border_style=border_style,
        title_style="bold",
        padding=(0, 1),
    )

    for col in columns:
        table.add_column(
            col["name"],
            style=col.get("style", "white"),
            justify=col.get("justify", "left"),
            no_wrap=col.get("no_wrap", False),
        )

    # Cells are data, not rich markup; "[b]" in a translation must print as is.
    for row in rows:
        table.add_row(*[escape(str(cell)) for cell in row])

    console.print()
    console.print(table)
    console.print()

    return table
