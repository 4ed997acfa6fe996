"""Formatting engine: handler registry and language dispatch.

Every entry point is a pure function of its arguments. The registry is
built once at import time and never mutated afterwards.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from formatkit.core.errors import FormatSyntaxError, UnsupportedLanguageError
from formatkit.core.models import (
    FormatRequest,
    FormatResult,
    HandlerInfo,
    Language,
    ValidationResult,
)
from formatkit.handlers.base import FormatHandler
from formatkit.handlers.css_handler import CssHandler
from formatkit.handlers.html_handler import HtmlHandler
from formatkit.handlers.json_handler import JsonHandler, parse_json
from formatkit.handlers.typescript_handler import TypeScriptHandler
from formatkit.handlers.xml_handler import XmlHandler

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2

_HANDLERS: dict[Language, FormatHandler] = {
    handler.language: handler
    for handler in (
        JsonHandler(),
        TypeScriptHandler(),
        XmlHandler(),
        CssHandler(),
        HtmlHandler(),
    )
}

_SUFFIXES: dict[str, Language] = {
    ".json": Language.JSON,
    ".ts": Language.TYPESCRIPT,
    ".tsx": Language.TYPESCRIPT,
    ".js": Language.TYPESCRIPT,
    ".jsx": Language.TYPESCRIPT,
    ".mjs": Language.TYPESCRIPT,
    ".cjs": Language.TYPESCRIPT,
    ".xml": Language.XML,
    ".svg": Language.XML,
    ".xsd": Language.XML,
    ".xsl": Language.XML,
    ".css": Language.CSS,
    ".html": Language.HTML,
    ".htm": Language.HTML,
}

_EXTENSIONS: dict[Language, str] = {
    Language.JSON: "json",
    Language.TYPESCRIPT: "ts",
    Language.XML: "xml",
    Language.CSS: "css",
    Language.HTML: "html",
}

_WHITESPACE = re.compile(r"\s+")


def coerce_language(language: Language | str) -> Language:
    """Map a language tag to a Language, rejecting unknown tags."""
    if isinstance(language, Language):
        return language
    try:
        return Language(str(language).strip().lower())
    except ValueError:
        raise UnsupportedLanguageError(language) from None


def get_handler(language: Language | str) -> FormatHandler:
    lang = coerce_language(language)
    handler = _HANDLERS.get(lang)
    if handler is None:
        raise UnsupportedLanguageError(language)
    return handler


def list_handlers() -> list[HandlerInfo]:
    """Capability matrix: one entry per registered language."""
    return [handler.info() for handler in _HANDLERS.values()]


def format_code(
    source: str,
    language: Language | str,
    indent: int = DEFAULT_INDENT,
) -> FormatResult:
    """Format ``source`` as ``language`` with ``indent`` spaces per level.

    Raises:
        UnsupportedLanguageError: If ``language`` is not a known tag.
        ValueError: If ``indent`` is not a positive integer.
    """
    request = FormatRequest(source=source, language=coerce_language(language), indent=indent)
    return format_request(request)


def format_request(request: FormatRequest) -> FormatResult:
    handler = get_handler(request.language)
    logger.debug(
        f"Formatting {len(request.source)} chars as {request.language.value} "
        f"(indent={request.indent})"
    )
    result = handler.format(request.source, request.indent)
    if not result.is_valid:
        logger.debug(f"{request.language.value} input rejected: {result.error_message}")
    return result


def validate_code(source: str, language: Language | str) -> ValidationResult:
    """Check well-formedness only, using the default indent."""
    result = format_code(source, language, DEFAULT_INDENT)
    return ValidationResult(is_valid=result.is_valid, error_message=result.error_message)


def minify_code(source: str, language: Language | str, json_fallback: bool = True) -> str:
    """Compact ``source``.

    JSON is re-serialized without whitespace. Invalid JSON, and every other
    language, has its whitespace runs collapsed to single spaces. With
    ``json_fallback`` disabled invalid JSON is returned unchanged.
    """
    lang = coerce_language(language)
    if not source.strip():
        return ""
    if lang == Language.JSON:
        try:
            return json.dumps(parse_json(source), separators=(",", ":"), ensure_ascii=False)
        except FormatSyntaxError:
            logger.debug("Minifying invalid JSON as plain text")
            if not json_fallback:
                return source
    return _WHITESPACE.sub(" ", source).strip()


def infer_language(path: str | Path) -> Language | None:
    """Guess the language from a file name suffix."""
    return _SUFFIXES.get(Path(path).suffix.lower())


def default_filename(language: Language | str) -> str:
    """File name used when saving formatted output, e.g. ``formatted.json``."""
    return f"formatted.{_EXTENSIONS[coerce_language(language)]}"
