"""
Custom exception hierarchy for depgrammar.

This module defines structured exception types used across depgrammar.
All exceptions inherit from :class:`DepGrammarError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class DepGrammarError(Exception):
    """Base exception for all depgrammar errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class InvalidVersionError(DepGrammarError):
    """Raised when no version or branch grammar matches a string.

    Args:
        message: Error description, including any alias hint.
        version: The offending version literal.
        full_version: The complete string the version was taken from, when
            it differs from ``version`` (e.g. an alias expression).
    """

    __slots__ = ("version", "full_version")

    def __init__(
        self,
        message: str,
        *,
        version: Optional[str] = None,
        full_version: Optional[str] = None,
    ) -> None:
        super().__init__(message)

        self.version = version
        self.full_version = full_version


class InvalidConstraintError(DepGrammarError):
    """Raised when a constraint token matches no atom grammar.

    Args:
        message: Error description. When the failure came from a nested
            normalization attempt, its message is already appended.
        constraint: The offending constraint token.
        original_error: Normalization error that caused the failure.
    """

    __slots__ = ("constraint", "original_error")

    def __init__(
        self,
        message: str,
        *,
        constraint: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)

        self.constraint = constraint
        self.original_error = original_error


class ConfigError(DepGrammarError):
    """Raised when a configuration file is missing, unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path of the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
