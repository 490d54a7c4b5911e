"""Lint CLI Commands.

- tinybird: check .datasource / .pipe / .incl files
- code: check object literals in Python source
- check: run both scans and aggregate

Every command exits 0 when no issues are found and 1 otherwise. Fatal
errors (missing path, invalid config) exit 2.

JPL Power of Ten Compliance:
- Rule #4: All functions < 60 lines
- Rule #9: Complete type hints
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, List, Optional

import typer

from caselint.cli.console import (
    ErrorRenderer,
    display_report,
    get_console,
    set_verbose_mode,
)
from caselint.core.config import LintConfig, load_config
from caselint.core.exceptions import CaseLintError
from caselint.core.linting.object_literal_linter import create_linter
from caselint.core.linting.report import LintReport
from caselint.core.linting.tinybird_linter import lint_tinybird_files
from caselint.core.logging import configure_logging, get_logger

logger = get_logger(__name__)

Scanner = Callable[[Path, LintConfig], LintReport]

PATH_ARGUMENT = typer.Argument(
    None, help="Directory to scan (default: current directory)"
)
CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Config file (default: caselint.yaml in PATH)"
)
OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Write JSON report to file")
VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Print files that passed and error tracebacks"
)


def scan_tinybird(root: Path, config: LintConfig) -> LintReport:
    """Run the Tinybird file scan."""
    return lint_tinybird_files(root, config=config)


def scan_source(root: Path, config: LintConfig) -> LintReport:
    """Run the object literal scan."""
    return create_linter(config).lint_directory(
        root,
        exclude_patterns=config.exclude_patterns,
        extensions=config.source_extensions,
    )


def _save_json_report(report: LintReport, output: Path) -> None:
    """Save report to JSON file."""
    try:
        output.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
        get_console().print(f"\n[green]Report saved to: {output}[/green]")
    except OSError as e:
        get_console().print(f"[red]Failed to save report: {e}[/red]")
        logger.error("Failed to save report", path=output, error=e)


def run_scans(
    scanners: List[Scanner],
    title: str,
    path: Optional[Path],
    config_path: Optional[Path],
    output: Optional[Path],
    verbose: bool,
) -> None:
    """Load config, run scanners, display the merged report and exit.

    Raises:
        typer.Exit: Always; code 0 = clean, 1 = issues, 2 = fatal error.
    """
    set_verbose_mode(verbose)
    root = path or Path.cwd()

    try:
        config = load_config(config_path, base_path=root)
        configure_logging(config.log_level)

        report = LintReport(scan_path=str(root))
        for scanner in scanners:
            partial = scanner(root, config)
            report.merge(partial)
            report.scan_duration_ms += partial.scan_duration_ms
        report.complete(report.scan_duration_ms)

    except CaseLintError as e:
        ErrorRenderer.render(e, context=f"While scanning {root}")
        logger.error("Scan failed", error=e)
        raise typer.Exit(code=2)
    except Exception as e:
        ErrorRenderer.render(e, context=f"While scanning {root}")
        logger.exception("Unexpected scan failure")
        raise typer.Exit(code=2)

    display_report(report, title)
    if output:
        _save_json_report(report, output)

    raise typer.Exit(code=report.exit_code)


def tinybird_command(
    path: Optional[Path] = PATH_ARGUMENT,
    config: Optional[Path] = CONFIG_OPTION,
    output: Optional[Path] = OUTPUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Check Tinybird files: snake_case columns, camelCase aliases.

    Examples:
        caselint tinybird
        caselint tinybird tinybird/ --verbose
    """
    run_scans([scan_tinybird], "Tinybird Lint Summary", path, config, output, verbose)


def code_command(
    path: Optional[Path] = PATH_ARGUMENT,
    config: Optional[Path] = CONFIG_OPTION,
    output: Optional[Path] = OUTPUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Check object literal keys and field mappings in Python source.

    Examples:
        caselint code src/
        caselint code src/ -o report.json
    """
    run_scans([scan_source], "Source Lint Summary", path, config, output, verbose)


def check_command(
    path: Optional[Path] = PATH_ARGUMENT,
    config: Optional[Path] = CONFIG_OPTION,
    output: Optional[Path] = OUTPUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Run the Tinybird and source scans together.

    Examples:
        caselint check
    """
    run_scans(
        [scan_tinybird, scan_source],
        "Naming Lint Summary",
        path,
        config,
        output,
        verbose,
    )
