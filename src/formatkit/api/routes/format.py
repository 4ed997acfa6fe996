"""Formatting API routes.

Malformed documents are not HTTP errors: they come back with
``is_valid: false`` in a 200 response.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from formatkit.api.models import FormatPayload, MinifyResponse, SampleResponse, SourcePayload
from formatkit.core.config import DEFAULT_TAB_WIDTH, resolve_indent
from formatkit.core.engine import format_code, list_handlers, minify_code, validate_code
from formatkit.core.models import FormatResult, HandlerInfo, Language, ValidationResult
from formatkit.core.samples import get_sample

router = APIRouter()


@router.post("/format", response_model=FormatResult)
async def format_document(payload: FormatPayload) -> FormatResult:
    """Pretty-print a document."""
    try:
        indent = resolve_indent(payload.indent, DEFAULT_TAB_WIDTH)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return format_code(payload.source, payload.language, indent)


@router.post("/validate", response_model=ValidationResult)
async def validate_document(payload: SourcePayload) -> ValidationResult:
    """Check a document for well-formedness."""
    return validate_code(payload.source, payload.language)


@router.post("/minify", response_model=MinifyResponse)
async def minify_document(payload: SourcePayload) -> MinifyResponse:
    """Compact a document onto one line."""
    return MinifyResponse(minified=minify_code(payload.source, payload.language))


@router.get("/languages", response_model=list[HandlerInfo])
async def get_languages() -> list[HandlerInfo]:
    """Capability matrix of the registered handlers."""
    return list_handlers()


@router.get("/samples/{language}", response_model=SampleResponse)
async def get_sample_document(language: Language) -> SampleResponse:
    """Built-in sample document for a language."""
    return SampleResponse(language=language, source=get_sample(language))
