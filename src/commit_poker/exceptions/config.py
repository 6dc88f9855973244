"""Configuration and input exceptions."""

from typing import Any

from .base import CommitPokerError


class ConfigurationError(CommitPokerError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidHashError(CommitPokerError):
    """Raised when a string is not a non-empty hexadecimal hash."""

    def __init__(self, value: str):
        super().__init__(f"Not a hexadecimal hash: {value!r}")
        self.value = value
