"""Tests for configuration loading."""

from pathlib import Path

import pytest

from caselint.core.config import (
    MAX_FILE_SIZE,
    LintConfig,
    expand_env_vars,
    load_config,
    save_config,
)
from caselint.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove caselint environment overrides."""
    for name in ("CASELINT_LOG_LEVEL", "CASELINT_MAX_FILE_SIZE", "CASELINT_EXCLUDE"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        """Test defaults when no config file exists."""
        config = load_config(base_path=tmp_path)

        assert config.datasource_extensions == [".datasource"]
        assert config.query_extensions == [".pipe", ".incl"]
        assert config.max_file_size == MAX_FILE_SIZE
        assert config.disabled_rules == []

    def test_loads_yaml_from_base_path(self, tmp_path: Path) -> None:
        """Test caselint.yaml is discovered."""
        (tmp_path / "caselint.yaml").write_text(
            "disabled_rules:\n  - TB004\nexclude_patterns:\n  - '**/fixtures/**'\n",
            encoding="utf-8",
        )
        config = load_config(base_path=tmp_path)

        assert config.disabled_rules == ["TB004"]
        assert config.exclude_patterns == ["**/fixtures/**"]

    def test_hidden_config_file(self, tmp_path: Path) -> None:
        """Test .caselint.yaml is discovered."""
        (tmp_path / ".caselint.yaml").write_text("log_level: debug\n", encoding="utf-8")
        assert load_config(base_path=tmp_path).log_level == "DEBUG"

    def test_env_var_expansion(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test ${VAR:default} values in YAML."""
        monkeypatch.setenv("TB_MAX", "1234")
        path = tmp_path / "custom.yaml"
        path.write_text(
            "max_file_size: ${TB_MAX}\nlog_level: ${TB_LEVEL:error}\n",
            encoding="utf-8",
        )
        config = load_config(path)

        assert config.max_file_size == 1234
        assert config.log_level == "ERROR"

    def test_env_overrides(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test CASELINT_* variables win over the file."""
        (tmp_path / "caselint.yaml").write_text(
            "log_level: INFO\nexclude_patterns: ['a']\n", encoding="utf-8"
        )
        monkeypatch.setenv("CASELINT_LOG_LEVEL", "error")
        monkeypatch.setenv("CASELINT_MAX_FILE_SIZE", "99")
        monkeypatch.setenv("CASELINT_EXCLUDE", "b, c")

        config = load_config(base_path=tmp_path)

        assert config.log_level == "ERROR"
        assert config.max_file_size == 99
        assert config.exclude_patterns == ["a", "b", "c"]

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        """Test an explicit path must exist."""
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ConfigurationError."""
        path = tmp_path / "caselint.yaml"
        path.write_text("disabled_rules: [TB001\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    @pytest.mark.parametrize(
        "content",
        [
            "- just\n- a list\n",
            "disabled_rules: TB001\n",
            "max_file_size: lots\n",
            "max_file_size: 0\n",
            "log_level: LOUD\n",
        ],
    )
    def test_invalid_values(self, tmp_path: Path, content: str) -> None:
        """Test invalid values raise ConfigurationError."""
        path = tmp_path / "caselint.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        """Test unknown keys do not fail loading."""
        path = tmp_path / "caselint.yaml"
        path.write_text("colour: blue\n", encoding="utf-8")
        assert load_config(path) == LintConfig()

    def test_save_and_reload(self, tmp_path: Path) -> None:
        """Test save_config output loads back."""
        path = tmp_path / "caselint.yaml"
        config = LintConfig(disabled_rules=["CASE004"], max_file_size=100)

        save_config(config, path)

        assert load_config(path) == config


class TestExpandEnvVars:
    """Tests for expand_env_vars."""

    def test_nested_structures(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test dicts and lists are expanded recursively."""
        monkeypatch.setenv("TB_DIR", "vendor")
        value = {"exclude": ["**/${TB_DIR}/**", "${MISSING:x}"], "size": 5}

        assert expand_env_vars(value) == {"exclude": ["**/vendor/**", "x"], "size": 5}
