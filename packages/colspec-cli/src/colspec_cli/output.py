"""Rich console output utilities for colspec-cli.

This module provides formatted console output with Rich,
supporting colored success/error/warning messages and
respecting NO_COLOR environment variable.
"""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from colspec_core import ColumnDescriptor

# Rich automatically respects NO_COLOR, but we also support --no-color flag
_force_no_color = os.environ.get("NO_COLOR") is not None

# Attribute names shown in the FLAGS column, in display order
ATTRIBUTE_LABELS = ("wide", "show", "hide", "time", "capacity")


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(force_terminal=force_terminal, no_color=no_color or _force_no_color)


# Default console instance
console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("3 columns compiled")
        ✓ 3 columns compiled
    """
    console.print(f"[green]✓[/green] {message}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red X.

    Example:
        >>> error("invalid column definition '***'")
        ✗ invalid column definition '***'
    """
    console.print(f"[red]✗[/red] {message}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print a warning message with yellow triangle."""
    console.print(f"[yellow]⚠[/yellow] {message}", **kwargs)


def print_json(data: dict[str, Any], **kwargs: Any) -> None:
    """Print JSON data with syntax highlighting."""
    console.print_json(json.dumps(data), **kwargs)


def print_columns(columns: list[ColumnDescriptor], *, title: str | None = None) -> None:
    """Print compiled columns as a table.

    Args:
        columns: Compiled column descriptors.
        title: Optional table title (e.g. the view name).
    """
    table = Table(title=Text(title) if title else None)
    table.add_column("NAME")
    table.add_column("PATH")
    table.add_column("ALIGN")
    table.add_column("FLAGS")

    for column in columns:
        flags = [label for label in ATTRIBUTE_LABELS if getattr(column.attrs, label)]
        # Cell text is user input, not markup
        table.add_row(
            Text(column.name),
            Text(column.path.expression or "-"),
            column.attrs.align.value,
            ",".join(flags) or "-",
        )

    console.print(table)


def set_no_color(no_color: bool) -> None:
    """Update the global console to enable/disable colors.

    Args:
        no_color: If True, disable colored output.
    """
    global console
    console = create_console(no_color=no_color)
