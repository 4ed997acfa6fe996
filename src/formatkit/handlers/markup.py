"""Line-based indentation shared by the XML and HTML handlers.

This is a depth counter over one-tag-per-line text, not a tree walk.
It does not understand HTML void elements, CDATA or mixed content.
"""

from __future__ import annotations

import re

_BETWEEN_TAGS = re.compile(r">\s*<")
_TAG_NAME = re.compile(r"^<([\w:.-]+)")


def split_tags(source: str) -> list[str]:
    """Put every tag that follows another tag on its own line."""
    text = _BETWEEN_TAGS.sub(">\n<", source.strip())
    return [line.strip() for line in text.split("\n") if line.strip()]


def is_closing_tag(line: str) -> bool:
    return line.startswith("</")


def opens_element(line: str) -> bool:
    """True when ``line`` starts an element that stays open past the line."""
    if not line.startswith("<") or line.startswith(("</", "<!", "<?")):
        return False
    if line.endswith("/>"):
        return False
    match = _TAG_NAME.match(line)
    if match is None:
        return True
    # <name>John</name>, but not <p>Hi <b>x</b>
    return f"</{match.group(1)}>" not in line


def indent_tag_lines(lines: list[str], indent: int) -> str:
    """Indent one-tag-per-line markup by a running nesting depth."""
    pad = " " * indent
    depth = 0
    out: list[str] = []
    for line in lines:
        if is_closing_tag(line):
            depth = max(0, depth - 1)
        out.append(pad * depth + line)
        if opens_element(line):
            depth += 1
    return "\n".join(out)
