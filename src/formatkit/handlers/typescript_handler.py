"""Heuristic formatter for TypeScript and JavaScript-like source.

This is not a parser. A single tokenizer pass re-spaces operators and
breaks lines at braces, semicolons and commas, indenting by brace depth.
The output is not guaranteed to be valid TypeScript, and the handler
reports every input as valid.
"""

from __future__ import annotations

import re

from formatkit.core.models import Language, ParseStrategy
from formatkit.handlers.base import FormatHandler

_TOKEN = re.compile(
    r"""
    (?P<comment>//[^\n]*|/\*.*?\*/)
    |(?P<string>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'|`(?:\\.|[^`\\])*`)
    |(?P<space>\s+)
    |(?P<step>\+\+|--)
    |(?P<op>[=!]==|=>|[=+\-*/<>!]=|[=+\-*/<>!])
    |(?P<punct>[{}()\[\];,])
    |(?P<word>[^\s"'`=+\-*/<>!{}()\[\];,]+)
    |(?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_OPENERS = {")": "(", "]": "["}

# Tokens that stay on the same line as a preceding "}"
_ATTACH_AFTER_CLOSE = {";", ",", ")", "]"}
_KEYWORDS_AFTER_CLOSE = {"else", "catch", "finally", "while"}


class _Layout:
    """Accumulates output lines and the bracket stack."""

    def __init__(self, indent: int) -> None:
        self.pad = " " * indent
        self.lines: list[str] = []
        self.parts: list[str] = []
        self.line_depth = 0
        self.stack: list[str] = []
        self.pending_space = False

    @property
    def innermost(self) -> str | None:
        return self.stack[-1] if self.stack else None

    def write(self, text: str, spaced: bool = False, attach: bool = False) -> None:
        if not self.parts:
            self.line_depth = self.stack.count("{")
        elif not attach and (spaced or self.pending_space) and self.parts[-1] not in ("(", "["):
            self.parts.append(" ")
        self.parts.append(text)
        self.pending_space = False

    def newline(self) -> None:
        if self.parts:
            self.lines.append(self.pad * self.line_depth + "".join(self.parts))
            self.parts = []
        self.pending_space = False

    def close(self, closer: str) -> None:
        if closer == "}":
            while "{" in self.stack:
                if self.stack.pop() == "{":
                    break
        elif self.innermost == _OPENERS[closer]:
            self.stack.pop()


def format_typescript(source: str, indent: int) -> str:
    layout = _Layout(indent)
    after_close = False

    for match in _TOKEN.finditer(source):
        kind = match.lastgroup
        text = match.group()

        if kind == "space":
            layout.pending_space = True
            continue

        if after_close:
            after_close = False
            if text in _KEYWORDS_AFTER_CLOSE:
                layout.pending_space = True
            elif text not in _ATTACH_AFTER_CLOSE and kind != "op" and not text.startswith("."):
                layout.newline()

        if kind == "comment":
            if text.startswith("//"):
                layout.write(text.rstrip())
                layout.newline()
            else:
                layout.write(text)
        elif kind == "op":
            layout.write(text, spaced=True)
            layout.pending_space = True
        elif kind == "punct":
            if text == "{":
                layout.write(text, spaced=True)
                layout.stack.append("{")
                layout.newline()
            elif text == "}":
                layout.newline()
                layout.close("}")
                layout.write(text)
                after_close = True
            elif text in "([":
                layout.write(text)
                layout.stack.append(text)
            elif text in ")]":
                layout.close(text)
                layout.write(text, attach=True)
            elif text == ";":
                layout.write(text, attach=True)
                if layout.innermost == "(":
                    layout.pending_space = True
                else:
                    layout.newline()
            else:
                layout.write(text, attach=True)
                if layout.innermost == "{":
                    layout.newline()
                else:
                    layout.pending_space = True
        else:
            layout.write(text)

    layout.newline()
    return "\n".join(layout.lines).strip()


class TypeScriptHandler(FormatHandler):
    """Best-effort beautifier; ``is_valid`` only means no internal error."""

    @property
    def language(self) -> Language:
        return Language.TYPESCRIPT

    @property
    def strategy(self) -> ParseStrategy:
        return ParseStrategy.HEURISTIC

    @property
    def description(self) -> str:
        return "Operator spacing and brace/semicolon line breaks; no syntax check."

    def _format(self, source: str, indent: int) -> str:
        return format_typescript(source, indent)
