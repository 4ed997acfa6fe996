"""Abstract base interface for all formatkit language handlers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from formatkit.core.errors import FormatSyntaxError
from formatkit.core.models import FormatResult, HandlerInfo, Language, ParseStrategy

logger = logging.getLogger(__name__)


class FormatHandler(ABC):
    """Base interface for all language handlers.

    Each handler turns raw source text into pretty-printed text for one
    language. Handlers hold no state, so a single instance serves every
    caller.
    """

    @property
    @abstractmethod
    def language(self) -> Language:
        """Language this handler formats."""

    @property
    @abstractmethod
    def strategy(self) -> ParseStrategy:
        """Whether validity comes from a real parser or a heuristic."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line summary for the capability matrix."""

    @abstractmethod
    def _format(self, source: str, indent: int) -> str:
        """Return the formatted text for non-blank ``source``.

        Raises:
            FormatSyntaxError: If the input is not well-formed.
        """

    def format(self, source: str, indent: int) -> FormatResult:
        """Format ``source`` and wrap the outcome in a FormatResult.

        Blank input is vacuously valid. Failures are returned as data with
        the source echoed back, never raised.
        """
        if not source.strip():
            return FormatResult(formatted_text="", is_valid=True)

        try:
            formatted = self._format(source, indent)
        except FormatSyntaxError as exc:
            logger.debug(f"{self.language.value}: invalid input: {exc}")
            return FormatResult(formatted_text=source, is_valid=False, error_message=str(exc))
        except Exception:
            logger.warning(f"{self.language.value}: handler failed", exc_info=True)
            return FormatResult(
                formatted_text=source,
                is_valid=False,
                error_message=f"{self.display_name} formatting error",
            )

        return FormatResult(formatted_text=formatted, is_valid=True)

    @property
    def display_name(self) -> str:
        if self.language == Language.TYPESCRIPT:
            return "TypeScript"
        return self.language.value.upper()

    def info(self) -> HandlerInfo:
        return HandlerInfo(
            language=self.language,
            strategy=self.strategy,
            description=self.description,
        )
