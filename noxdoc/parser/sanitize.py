"""Whitespace and comment-gutter cleanup helpers used by the parser stages."""

from __future__ import annotations

import re
from typing import Optional

GUTTER = "*"

_LINE_BREAK_RE = re.compile(r"[\r\n]")
_GUTTER_RE = re.compile(r"\s*\*/?\s*")
_TYPE_BRACKETS_RE = re.compile(r"[{}]")
# gutter followed by exactly the three-space indent used inside @example bodies
_EXAMPLE_GUTTER_RE = re.compile(r"\s*\*\s\s\s")


def strip_gutter(comment: str) -> str:
    """Collapse a multi-line comment chunk into a single line of prose.

    Every gutter (``*`` or the closing ``*/`` with its surrounding whitespace)
    becomes a single space, line breaks become spaces and the result is trimmed.

    >>> strip_gutter(" * foo\\n * bar\\n */")
    'foo bar'
    """
    flattened = _LINE_BREAK_RE.sub(" ", comment)
    return _GUTTER_RE.sub(" ", flattened).strip()


def format_component(component: Optional[str]) -> str:
    """Normalise an optional grammar component to a trimmed string."""
    return (component or "").strip()


def strip_type_brackets(raw_type: str) -> str:
    return _TYPE_BRACKETS_RE.sub("", raw_type)


def strip_example_gutter(line: str) -> str:
    """Remove the ``*   `` example indent wherever it occurs in the line."""
    return _EXAMPLE_GUTTER_RE.sub("", line)


def contains_gutter(line: str) -> bool:
    return GUTTER in line


__all__ = [
    "GUTTER",
    "contains_gutter",
    "format_component",
    "strip_example_gutter",
    "strip_gutter",
    "strip_type_brackets",
]
