"""Exceptions raised by formatkit."""

from __future__ import annotations


class UnsupportedLanguageError(ValueError):
    """Raised when a language tag has no registered handler."""

    def __init__(self, language: object) -> None:
        self.language = language
        super().__init__(f"Unsupported language: {language!r}")


class FormatSyntaxError(Exception):
    """Raised by parser-backed handlers when the input is not well-formed.

    The message is surfaced to callers as ``FormatResult.error_message``.
    """


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded."""
