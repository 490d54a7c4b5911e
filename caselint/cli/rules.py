"""Rules command.

Lists every naming rule caselint can report.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.table import Table
from rich.text import Text

from caselint.cli.console import get_console
from caselint.core.linting.rules import ALL_RULES, RuleScope


def rules_command(
    scope: Optional[RuleScope] = typer.Option(
        None, "--scope", "-s", help="Only show rules for one scanner"
    ),
) -> None:
    """List available naming rules.

    Examples:
        caselint rules
        caselint rules --scope query
    """
    rules = [r for r in ALL_RULES if scope is None or r.scope == scope]

    table = Table(title="Naming Rules")
    table.add_column("Rule ID", style="cyan")
    table.add_column("Scope", style="yellow")
    table.add_column("Severity")
    table.add_column("Title", style="white")
    table.add_column("Message")

    for rule in rules:
        table.add_row(
            rule.rule_id,
            rule.scope.value,
            rule.severity.value,
            rule.title,
            Text(rule.message_template, style="dim"),
        )

    console = get_console()
    console.print(table)
    console.print(f"\n[dim]Total rules: {len(rules)}[/dim]")
