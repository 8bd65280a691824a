"""Result rendering for the media-format CLI."""

import os
import sys
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box


def should_use_plain_output() -> bool:
    """Detect if output should be plain text (when piping or NO_COLOR is set)."""
    # Check if output is being piped (not a terminal)
    if not sys.stdout.isatty():
        return True

    # Check for NO_COLOR environment variable
    if os.getenv('NO_COLOR'):
        return True

    return False


class ResultPrinter:
    """Prints formatted values either through rich or as plain text."""

    def __init__(self, plain: bool = False, console: Optional[Console] = None):
        self.plain = plain
        self.console = console or Console()

        # Color scheme
        self.colors = {
            'value': 'bright_green',
            'label': 'bright_cyan',
            'border': 'dim white',
            'title': 'bold',
        }

    def print_value(self, value: str) -> None:
        """Print a single result."""
        if self.plain:
            click.echo(value)
        else:
            self.console.print(value, style=self.colors['value'], markup=False, highlight=False)

    def print_rows(self, rows: List[Tuple[str, str]], title: Optional[str] = None) -> None:
        """Print labelled results as a table, or 'label: value' lines in plain mode."""
        if self.plain:
            for label, value in rows:
                click.echo(f"{label}: {value}")
            return

        table = Table(title=title, box=box.ROUNDED, border_style=self.colors['border'],
                      title_style=self.colors['title'])
        table.add_column("Field", style=self.colors['label'], no_wrap=True)
        table.add_column("Value", style=self.colors['value'])
        for label, value in rows:
            table.add_row(Text(label), Text(value))
        self.console.print(table)
