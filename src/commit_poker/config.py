"""Configuration loading and management for Commit Poker.

Configuration sources are merged in priority order:
    1. Defaults (defined in PokerConfig)
    2. Global config (~/.commit-poker.toml)
    3. Explicit config file (--config)
    4. Environment variables (COMMIT_POKER_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(reveal_delay_ms=0)
    >>> config.reveal_delay_ms
    0
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "COMMIT_POKER_"
GLOBAL_CONFIG_NAME = ".commit-poker.toml"


@dataclass(frozen=True)
class PokerConfig:
    """Runtime configuration.

    Attributes:
        ledger_path: Explicit high-score file (None = per-user data directory)
        git_executable: git binary to invoke
        reveal_delay_ms: Pause between revealed hash characters
        animate: Reveal the hash one character at a time
        highscore_limit: Default number of records listed by ``highscores``
        verbosity: Logging verbosity level
        log_file: Also append log records to this file
    """

    ledger_path: Optional[str] = None
    git_executable: str = "git"
    reveal_delay_ms: int = 200
    animate: bool = True
    highscore_limit: int = 10
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if self.reveal_delay_ms < 0:
            raise InvalidConfigError(
                "reveal_delay_ms", self.reveal_delay_ms, "must be non-negative"
            )
        if self.highscore_limit < 1:
            raise InvalidConfigError(
                "highscore_limit", self.highscore_limit, "must be at least 1"
            )
        if not self.git_executable:
            raise InvalidConfigError("git_executable", self.git_executable, "must not be empty")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def reveal_delay_seconds(self) -> float:
        return self.reveal_delay_ms / 1000 if self.animate else 0.0

    @property
    def ledger_file(self) -> Optional[Path]:
        if self.ledger_path is None:
            return None
        return Path(self.ledger_path).expanduser()


def load_config(config_file: Optional[Path] = None, **overrides) -> PokerConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset options fall through

    Returns:
        Validated PokerConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a
            value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(PokerConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    try:
        return PokerConfig(**merged)
    except TypeError as e:
        # Wrong value type from a TOML file
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COMMIT_POKER_* environment variables.

    Supported environment variables:
        COMMIT_POKER_LEDGER_PATH: str
        COMMIT_POKER_GIT_EXECUTABLE: str
        COMMIT_POKER_REVEAL_DELAY_MS: int
        COMMIT_POKER_ANIMATE: bool (true/false/1/0)
        COMMIT_POKER_HIGHSCORE_LIMIT: int
        COMMIT_POKER_VERBOSITY: quiet/normal/verbose
        COMMIT_POKER_LOG_FILE: str
    """
    type_hints = get_type_hints(PokerConfig)

    result: dict[str, Any] = {}
    for f in fields(PokerConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[f.name] = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        type_hint = next(t for t in args if t is not type(None))

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load the ``[commit-poker]`` table of a TOML file, or its top level."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("commit-poker", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [commit-poker] must be a table")
    return dict(section)
