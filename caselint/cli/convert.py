"""Convert command.

Shows how caselint classifies a name and what it converts to, which is
handy when deciding what a mapping value should be.
"""

from __future__ import annotations

import typer
from rich.table import Table
from rich.text import Text

from caselint.cli.console import get_console
from caselint.core.case_utils import (
    camel_to_snake,
    classify_case,
    snake_to_camel,
    suggest_camel_case,
)


def convert_command(
    name: str = typer.Argument(..., help="Identifier to classify and convert"),
) -> None:
    """Classify a name and print its camelCase / snake_case forms.

    Examples:
        caselint convert userIDToken
        caselint convert created_at
    """
    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Input", Text(name))
    table.add_row("Case", classify_case(name).value)
    table.add_row("snake_case", Text(camel_to_snake(name)))
    table.add_row("camelCase", Text(snake_to_camel(name)))
    table.add_row("Suggested key", Text(suggest_camel_case(name)))

    get_console().print(table)
