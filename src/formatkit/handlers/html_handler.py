"""HTML handler: tag-per-line re-indentation without validation."""

from __future__ import annotations

from formatkit.core.models import Language, ParseStrategy
from formatkit.handlers.base import FormatHandler
from formatkit.handlers.markup import indent_tag_lines, split_tags


class HtmlHandler(FormatHandler):
    """Always reports valid input.

    Void elements written without ``/>`` (``<br>``, ``<img ...>``) still
    open a nesting level.
    """

    @property
    def language(self) -> Language:
        return Language.HTML

    @property
    def strategy(self) -> ParseStrategy:
        return ParseStrategy.HEURISTIC

    @property
    def description(self) -> str:
        return "One tag per line, indented by a running depth counter; no validation."

    def _format(self, source: str, indent: int) -> str:
        return indent_tag_lines(split_tags(source), indent)
