"""Core data models for formatkit."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Language(str, Enum):
    JSON = "json"
    TYPESCRIPT = "typescript"
    XML = "xml"
    CSS = "css"
    HTML = "html"


class ParseStrategy(str, Enum):
    PARSER = "parser"
    HEURISTIC = "heuristic"


class FormatResult(BaseModel):
    """Outcome of formatting one document.

    On failure ``formatted_text`` carries the caller's source unchanged,
    so a failed call never hands back partially rewritten text.
    """

    model_config = ConfigDict(frozen=True)

    formatted_text: str
    is_valid: bool
    error_message: str | None = None

    @model_validator(mode="after")
    def _check_error_matches_validity(self) -> FormatResult:
        if self.is_valid == (self.error_message is not None):
            raise ValueError("error_message must be set exactly when is_valid is false")
        return self


class ValidationResult(BaseModel):
    """Validity verdict without the formatted text."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error_message: str | None = None

    @model_validator(mode="after")
    def _check_error_matches_validity(self) -> ValidationResult:
        if self.is_valid == (self.error_message is not None):
            raise ValueError("error_message must be set exactly when is_valid is false")
        return self


class FormatRequest(BaseModel):
    """Request to format a document."""

    source: str
    language: Language = Language.JSON
    indent: int = Field(default=2, gt=0)


class HandlerInfo(BaseModel):
    """One row of the capability matrix."""

    language: Language
    strategy: ParseStrategy
    description: str
