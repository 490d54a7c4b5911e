"""Init command.

Writes a caselint.yaml with the default settings so projects can tune
excludes and disabled rules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from caselint.cli.console import get_console
from caselint.core.config import CONFIG_FILENAMES, LintConfig, save_config


def init_command(
    path: Optional[Path] = typer.Argument(
        None, help="Project directory (default: current directory)"
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing caselint.yaml"
    ),
) -> None:
    """Create caselint.yaml with default settings.

    Examples:
        caselint init
        caselint init tinybird/ --force
    """
    root = path or Path.cwd()
    if not root.is_dir():
        get_console().print(f"[red]Not a directory: {root}[/red]")
        raise typer.Exit(code=2)

    config_path = root / CONFIG_FILENAMES[0]
    if config_path.exists() and not force:
        get_console().print(
            f"[yellow]{config_path} already exists (use --force to overwrite)[/yellow]"
        )
        raise typer.Exit(code=1)

    save_config(LintConfig(), config_path)
    get_console().print(f"[green]Created {config_path}[/green]")
