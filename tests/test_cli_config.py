from __future__ import annotations

import pytest

from watson_cli.cli.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT,
    load_cli_config,
    normalize_log_level,
)
from watson_cli.errors import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch) -> None:
    monkeypatch.delenv("WATSON_CLI_TIMEOUT", raising=False)
    monkeypatch.delenv("WATSON_CLI_LOG_LEVEL", raising=False)


def test_defaults_when_default_file_missing(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr("watson_cli.cli.config.DEFAULT_CONFIG_PATH", tmp_path / "missing.toml")
    config = load_cli_config()
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.log_level == DEFAULT_LOG_LEVEL
    assert config.progress_notices is True


def test_explicit_missing_path_is_an_error(tmp_path) -> None:
    with pytest.raises(ConfigError, match="config file not found"):
        load_cli_config(tmp_path / "missing.toml")


def test_top_level_keys_are_read(tmp_path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        'timeout = 12.5\nlog_level = "debug"\nprogress_notices = false\n', encoding="utf-8"
    )
    config = load_cli_config(config_path)
    assert config.timeout == 12.5
    assert config.log_level == "DEBUG"
    assert config.progress_notices is False


def test_cli_section_takes_precedence_over_top_level(tmp_path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("timeout = 5\n\n[cli]\ntimeout = 30\n", encoding="utf-8")
    assert load_cli_config(config_path).timeout == 30.0


def test_env_overrides_config_file(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text('[cli]\ntimeout = 30\nlog_level = "ERROR"\n', encoding="utf-8")
    monkeypatch.setenv("WATSON_CLI_TIMEOUT", "7")
    monkeypatch.setenv("WATSON_CLI_LOG_LEVEL", "info")
    config = load_cli_config(config_path)
    assert config.timeout == 7.0
    assert config.log_level == "INFO"


@pytest.mark.parametrize(
    "body, message",
    [
        ("timeout = 0\n", "timeout must be a positive number"),
        ('timeout = "soon"\n', "timeout must be a positive number"),
        ('log_level = "loud"\n', "log_level must be one of"),
        ('progress_notices = "maybe"\n', "progress_notices must be a boolean"),
        ('cli = "x"\n', r"\[cli\] must be a table"),
        ("timeout = \n", "invalid TOML"),
    ],
)
def test_invalid_values_raise_config_error(tmp_path, body, message) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError, match=message):
        load_cli_config(config_path)


def test_normalize_log_level() -> None:
    assert normalize_log_level(" warning ") == "WARNING"
    with pytest.raises(ConfigError):
        normalize_log_level("trace")
