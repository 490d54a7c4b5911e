"""Console output helpers.

Provides the shared Rich console, issue rendering and ErrorRenderer for
fatal errors.

Follows Commandment #4 (Small Functions) and #6 (Smallest Scope).
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from caselint.core.exceptions import CaseLintError
from caselint.core.linting.report import IssueSeverity, LintIssue, LintReport

# Shared console instance
_console: Console | None = None

# Verbose mode flag (set by CLI --verbose flag)
_verbose_mode: bool = False

# JPL Rule #2: Fixed bounds
MAX_DISPLAYED_ISSUES = 200


def get_console() -> Console:
    """Get shared console instance (lazy-loaded).

    Returns:
        Rich Console instance
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_verbose_mode(enabled: bool) -> None:
    """Enable or disable verbose mode.

    Verbose mode prints per-file pass lines and error tracebacks.
    """
    global _verbose_mode
    _verbose_mode = enabled


def is_verbose_mode() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose_mode


def _severity_style(severity: IssueSeverity) -> str:
    """Get Rich style for severity level."""
    styles = {
        IssueSeverity.ERROR: "red",
        IssueSeverity.WARNING: "yellow",
    }
    return styles.get(severity, "white")


def display_issues(issues: List[LintIssue]) -> None:
    """Display issues in a table."""
    table = Table(title="Naming Issues")
    table.add_column("Severity", style="cyan", no_wrap=True)
    table.add_column("Rule", style="dim")
    table.add_column("File", style="yellow")
    table.add_column("Line", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Issue", style="white")

    for issue in issues[:MAX_DISPLAYED_ISSUES]:
        style = _severity_style(issue.severity)
        table.add_row(
            f"[{style}]{issue.severity.value.upper()}[/{style}]",
            issue.rule_id,
            Text(Path(issue.file).name),
            str(issue.line),
            Text(issue.column),
            Text(issue.issue),
        )

    get_console().print(table)
    if len(issues) > MAX_DISPLAYED_ISSUES:
        get_console().print(
            f"[dim]... {len(issues) - MAX_DISPLAYED_ISSUES} more not shown[/dim]"
        )


def display_report(report: LintReport, title: str) -> None:
    """Display a lint report summary, issues and verdict.

    Args:
        report: Report to display.
        title: Summary table title.
    """
    console = get_console()

    if is_verbose_mode():
        for passed in report.passed_files:
            console.print(Text.assemble(("✓ ", "green"), passed))

    summary = Table(title=title, show_header=False)
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="white")
    summary.add_row("Path Scanned", Text(report.scan_path))
    summary.add_row("Files Scanned", str(report.files_scanned))
    summary.add_row("Duration", f"{report.scan_duration_ms:.1f}ms")
    summary.add_row("Total Issues", str(len(report.issues)))
    console.print()
    console.print(summary)

    if report.issues:
        console.print()
        display_issues(report.issues)

    if report.truncated:
        console.print("[yellow]⚠ Issue limit reached, report truncated[/yellow]")

    if report.exit_code == 0:
        console.print("[green]✓ All names follow the conventions[/green]")
    else:
        console.print(f"[red]✗ Found {len(report.issues)} naming issue(s)[/red]")


class ErrorRenderer:
    """Renders fatal errors with "Why" and "How to fix" sections."""

    @staticmethod
    def render(exc: BaseException, context: str = "") -> None:
        """Render an exception as an error panel.

        Args:
            exc: Exception to render
            context: Optional context message (e.g., "While scanning tinybird/")
        """
        if isinstance(exc, CaseLintError):
            error_code = exc.error_code
            why = exc.why_it_happened
            how_to_fix = exc.how_to_fix
        else:
            error_code = "CL-ERR-999"
            why = "An unexpected error occurred"
            how_to_fix = ["Run with --verbose to see the traceback"]

        text = Text()
        if context:
            text.append(f"{context}\n\n", style="dim")
        text.append(str(exc), style="bold red")
        text.append("\n\nWhy it happened:\n", style="bold cyan")
        text.append(f"  {why}\n", style="cyan")
        text.append("\nHow to fix:\n", style="bold green")
        for fix in how_to_fix:
            text.append(f"  - {fix}\n", style="green")

        console = get_console()
        console.print(
            Panel(
                text,
                title=f"[bold red]Error: {error_code}[/bold red]",
                border_style="red",
                padding=(1, 2),
            )
        )

        if is_verbose_mode():
            tb_text = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )
            console.print("[dim]--- Traceback (--verbose mode) ---[/dim]")
            console.print(tb_text, style="dim", markup=False)
