"""
Configuration Loading for caselint.

Settings come from a YAML file in the scan root (``caselint.yaml`` or
``.caselint.yaml``), then environment variables, then defaults.

Configuration precedence: 1. Env vars, 2. YAML file, 3. Defaults

Example caselint.yaml:

    exclude_patterns:
      - "**/fixtures/**"
    disabled_rules:
      - TB004
    max_file_size: ${CASELINT_MAX_SIZE:2000000}

Environment overrides:
    CASELINT_LOG_LEVEL     Log level (DEBUG, INFO, WARNING, ...)
    CASELINT_MAX_FILE_SIZE Maximum file size in bytes
    CASELINT_EXCLUDE       Comma-separated extra exclude patterns
"""

from __future__ import annotations

import os
import re
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from caselint.core.exceptions import ConfigurationError
from caselint.core.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAMES = ("caselint.yaml", ".caselint.yaml")

# JPL Rule #2: Fixed upper bounds
MAX_FILE_SIZE = 5_000_000  # Maximum file size to lint (5MB)

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LintConfig:
    """caselint configuration."""

    datasource_extensions: List[str] = field(default_factory=lambda: [".datasource"])
    query_extensions: List[str] = field(default_factory=lambda: [".pipe", ".incl"])
    source_extensions: List[str] = field(default_factory=lambda: [".py"])
    exclude_patterns: List[str] = field(default_factory=list)
    disabled_rules: List[str] = field(default_factory=list)
    max_file_size: int = MAX_FILE_SIZE
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LintConfig":
        """Build config from a parsed YAML mapping.

        Unknown keys are ignored with a warning.

        Raises:
            ConfigurationError: If a value has the wrong type.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown config key", key=key)
                continue
            kwargs[key] = value

        config = cls(**kwargs)
        config.validate()
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def validate(self) -> None:
        """Check value types and ranges.

        Raises:
            ConfigurationError: On the first invalid value.
        """
        for name in (
            "datasource_extensions",
            "query_extensions",
            "source_extensions",
            "exclude_patterns",
            "disabled_rules",
        ):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(
                isinstance(item, str) for item in value
            ):
                raise ConfigurationError(f"'{name}' must be a list of strings")

        try:
            self.max_file_size = int(self.max_file_size)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"'max_file_size' must be an integer, got {self.max_file_size!r}"
            ) from e
        if self.max_file_size <= 0:
            raise ConfigurationError("'max_file_size' must be positive")

        if str(self.log_level).upper() not in _VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")
        self.log_level = str(self.log_level).upper()


def expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in config values.

    Strings may use ${VAR_NAME} or ${VAR_NAME:default}. Nested dicts and
    lists are expanded item by item; other values are returned unchanged.
    """
    if isinstance(value, str):

        def replace_env_var(match: re.Match) -> str:
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(match.group(1), default_value)

        return _ENV_VAR_PATTERN.sub(replace_env_var, value)
    elif isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def _apply_env_overrides(config: LintConfig) -> LintConfig:
    """Apply environment variable overrides to configuration."""
    log_level = os.environ.get("CASELINT_LOG_LEVEL")
    if log_level:
        config.log_level = log_level

    max_size = os.environ.get("CASELINT_MAX_FILE_SIZE")
    if max_size:
        config.max_file_size = max_size  # type: ignore[assignment]

    extra_excludes = os.environ.get("CASELINT_EXCLUDE")
    if extra_excludes:
        config.exclude_patterns = config.exclude_patterns + [
            p.strip() for p in extra_excludes.split(",") if p.strip()
        ]

    config.validate()
    return config


def find_config_file(base_path: Path) -> Optional[Path]:
    """Return the first config file present in base_path, if any."""
    for filename in CONFIG_FILENAMES:
        candidate = base_path / filename
        if candidate.is_file():
            return candidate
    return None


def load_config(
    config_path: Optional[Path] = None, base_path: Optional[Path] = None
) -> LintConfig:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Explicit config file. Must exist if given.
        base_path: Directory searched for a config file when config_path is
            None. Defaults to the current directory.

    Returns:
        LintConfig with all settings.

    Raises:
        ConfigurationError: If the file is missing (explicit path only),
            unreadable, or invalid.
    """
    if config_path is None:
        config_path = find_config_file(base_path or Path.cwd())
        if config_path is None:
            return _apply_env_overrides(LintConfig())
    elif not config_path.is_file():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config root must be a mapping: {config_path}")

    logger.debug("Loaded config", path=config_path)
    config = LintConfig.from_dict(expand_env_vars(data))
    return _apply_env_overrides(config)


def save_config(config: LintConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
