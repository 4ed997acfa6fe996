"""Heuristic CSS formatter.

There is no grammar check: every non-blank stylesheet is reported valid.
"""

from __future__ import annotations

import re

from formatkit.core.models import Language, ParseStrategy
from formatkit.handlers.base import FormatHandler

_TOKEN = re.compile(
    r"""
    (?P<comment>/\*.*?\*/)
    |(?P<string>"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*')
    |(?P<space>\s+)
    |(?P<punct>[{};])
    |(?P<text>[^\s"'{};/]+|/)
    |(?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

# property name, then the first colon outside any function call
_PROPERTY = re.compile(r"^([^:(]+?)\s*:\s*")


def normalize_declaration(text: str) -> str:
    """``color : red`` -> ``color: red``."""
    return _PROPERTY.sub(r"\1: ", text, count=1)


class _Sheet:
    def __init__(self, indent: int) -> None:
        self.pad = " " * indent
        self.depth = 0
        self.lines: list[str] = []
        self.buffer: list[str] = []

    def emit(self, line: str) -> None:
        # blank line between a closed rule and whatever follows it
        if line != "}" and self.lines and self.lines[-1].strip() == "}":
            self.lines.append("")
        self.lines.append(self.pad * self.depth + line)

    def take_buffer(self) -> str:
        text = "".join(self.buffer).strip()
        self.buffer = []
        return text

    def flush_declaration(self, terminator: str) -> None:
        text = self.take_buffer()
        if not text:
            return
        if self.depth > 0:
            text = normalize_declaration(text)
        self.emit(text + terminator)

    def open_block(self) -> None:
        selector = self.take_buffer()
        self.emit(f"{selector} {{" if selector else "{")
        self.depth += 1

    def close_block(self) -> None:
        self.flush_declaration(";")
        self.depth = max(0, self.depth - 1)
        self.emit("}")


def format_css(source: str, indent: int) -> str:
    sheet = _Sheet(indent)

    for match in _TOKEN.finditer(source):
        kind = match.lastgroup
        text = match.group()

        if kind == "space":
            if sheet.buffer:
                sheet.buffer.append(" ")
        elif kind == "comment" and not sheet.buffer:
            sheet.emit(text)
        elif text == "{":
            sheet.open_block()
        elif text == "}":
            sheet.close_block()
        elif text == ";":
            sheet.flush_declaration(";")
        else:
            sheet.buffer.append(text)

    sheet.flush_declaration("")
    return "\n".join(sheet.lines).strip()


class CssHandler(FormatHandler):
    """Rule-per-block, declaration-per-line layout indented by block depth."""

    @property
    def language(self) -> Language:
        return Language.CSS

    @property
    def strategy(self) -> ParseStrategy:
        return ParseStrategy.HEURISTIC

    @property
    def description(self) -> str:
        return "Declaration per line, indented by block depth; no validation."

    def _format(self, source: str, indent: int) -> str:
        return format_css(source, indent)
