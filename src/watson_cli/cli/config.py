"""Configuration helpers for the watson CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from watson_cli.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".watson_cli" / "config.toml"
DEFAULT_TIMEOUT = 60.0
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
TIMEOUT_ENV_VAR = "WATSON_CLI_TIMEOUT"
LOG_LEVEL_ENV_VAR = "WATSON_CLI_LOG_LEVEL"


@dataclass(frozen=True)
class CLIConfig:
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    progress_notices: bool = True


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc

    try:  # Python 3.11+
        import tomllib  # type: ignore[attr-defined]
        try:
            return tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
    except ModuleNotFoundError:
        try:
            import tomli
        except ModuleNotFoundError as exc:
            raise ConfigError("toml parser unavailable; install tomli for Python < 3.11") from exc
        try:
            return tomli.loads(raw)
        except tomli.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _to_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "1", "yes", "on"}:
            return True
        if lowered in {"false", "0", "no", "off"}:
            return False
    raise ConfigError(f"{field_name} must be a boolean")


def _to_timeout(value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError("timeout must be a positive number of seconds")
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError("timeout must be a positive number of seconds") from exc
    if timeout <= 0:
        raise ConfigError("timeout must be a positive number of seconds")
    return timeout


def normalize_log_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
    return level


def load_cli_config(path: str | Path | None = None) -> CLIConfig:
    config_path = Path(path).expanduser() if path else DEFAULT_CONFIG_PATH
    if path and not config_path.exists():
        raise ConfigError(f"config file not found: {config_path}")

    source: dict[str, Any] = {}
    if config_path.exists():
        parsed = _load_toml(config_path)
        section = parsed.get("cli")
        if isinstance(section, dict):
            source = section
        elif section is None:
            source = parsed
        else:
            raise ConfigError("[cli] must be a table")

    env_timeout = os.getenv(TIMEOUT_ENV_VAR)
    timeout = _to_timeout(env_timeout.strip() if env_timeout else source.get("timeout", DEFAULT_TIMEOUT))

    env_log_level = os.getenv(LOG_LEVEL_ENV_VAR)
    log_level = normalize_log_level(
        env_log_level if env_log_level else source.get("log_level", DEFAULT_LOG_LEVEL)
    )

    progress_notices = _to_bool(source.get("progress_notices", True), "progress_notices")

    return CLIConfig(timeout=timeout, log_level=log_level, progress_notices=progress_notices)
