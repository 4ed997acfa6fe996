"""JSON handler backed by the standard JSON parser."""

from __future__ import annotations

import json
import math
from typing import Any

from formatkit.core.errors import FormatSyntaxError
from formatkit.core.models import Language, ParseStrategy
from formatkit.handlers.base import FormatHandler


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def parse_json(source: str) -> Any:
    """Parse strict JSON, raising FormatSyntaxError with position info."""
    try:
        return json.loads(source, parse_constant=_reject_constant, parse_float=_finite_float)
    except RecursionError:
        raise FormatSyntaxError("JSON nesting too deep") from None
    except ValueError as exc:  # JSONDecodeError and rejected constants
        raise FormatSyntaxError(str(exc)) from exc


class JsonHandler(FormatHandler):
    """Parses the document and re-serializes it at the requested indent."""

    @property
    def language(self) -> Language:
        return Language.JSON

    @property
    def strategy(self) -> ParseStrategy:
        return ParseStrategy.PARSER

    @property
    def description(self) -> str:
        return "Parse and re-serialize; reports parser errors with line and column."

    def _format(self, source: str, indent: int) -> str:
        data = parse_json(source)
        return json.dumps(data, indent=indent, ensure_ascii=False)
