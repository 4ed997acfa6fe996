"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel

from formatkit.core.models import Language


class FormatPayload(BaseModel):
    """Request body for formatting a document."""

    source: str
    language: Language = Language.JSON
    indent: int | str = 2


class SourcePayload(BaseModel):
    """Request body for validating or minifying a document."""

    source: str
    language: Language = Language.JSON


class MinifyResponse(BaseModel):
    minified: str


class SampleResponse(BaseModel):
    language: Language
    source: str
