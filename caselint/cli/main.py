"""caselint CLI - Main application entry point.

Registers all commands on a single Typer app.

Follows Commandments #4 (Small Functions) and #1 (Simple Control Flow).
"""

from __future__ import annotations

from typing import Optional

import typer

from caselint.cli.convert import convert_command
from caselint.cli.init import init_command
from caselint.cli.lint import check_command, code_command, tinybird_command
from caselint.cli.rules import rules_command

app = typer.Typer(
    name="caselint",
    help="Naming convention linter for camelCase APIs and snake_case Tinybird schemas",
    add_completion=False,
)

app.command("tinybird")(tinybird_command)
app.command("code")(code_command)
app.command("check")(check_command)
app.command("rules")(rules_command)
app.command("convert")(convert_command)
app.command("init")(init_command)


def version_callback(value: bool) -> None:
    """Show version and exit.

    Args:
        value: True if --version flag provided
    """
    if value:
        from caselint import __version__

        typer.echo(f"caselint version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """caselint - keep API camelCase and Tinybird snake_case in sync.

    Core Commands:
        tinybird - Check .datasource / .pipe / .incl files
        code     - Check object literals in Python source
        check    - Run both scans
        rules    - List naming rules
        convert  - Classify and convert a single name
        init     - Write a default caselint.yaml

    Examples:
        caselint tinybird tinybird/
        caselint check . --verbose

    For help on a specific command:
        caselint <command> --help
    """


def cli_main() -> None:
    """Entry point for console_scripts."""
    app()
