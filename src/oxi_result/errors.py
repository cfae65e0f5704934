from __future__ import annotations


class UnwrapError(Exception):
    """Raised when a value is extracted from the wrong variant of a Result.

    ``cause`` always holds the offending payload. When that payload is itself an
    exception it is also chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: object) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigError(ValueError):
    """Raised when a configuration value cannot be interpreted."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {key}: {reason}")
        self.key = key
        self.value = value
