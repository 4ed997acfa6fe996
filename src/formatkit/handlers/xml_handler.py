"""XML handler: expat well-formedness check plus line-based re-indentation."""

from __future__ import annotations

from xml.dom import minidom
from xml.parsers.expat import ExpatError

from formatkit.core.errors import FormatSyntaxError
from formatkit.core.models import Language, ParseStrategy
from formatkit.handlers.base import FormatHandler
from formatkit.handlers.markup import indent_tag_lines, split_tags


def check_well_formed(source: str) -> None:
    """Raise FormatSyntaxError if ``source`` is not well-formed XML."""
    try:
        minidom.parseString(source)
    except ExpatError as exc:
        raise FormatSyntaxError(f"Invalid XML syntax: {exc}") from exc


class XmlHandler(FormatHandler):
    """Validates with a real XML parser; indents with the markup depth walk."""

    @property
    def language(self) -> Language:
        return Language.XML

    @property
    def strategy(self) -> ParseStrategy:
        return ParseStrategy.PARSER

    @property
    def description(self) -> str:
        return "Well-formedness checked by expat; one tag per line, indented by depth."

    def _format(self, source: str, indent: int) -> str:
        text = source.strip()
        check_well_formed(text)
        return indent_tag_lines(split_tags(text), indent)
