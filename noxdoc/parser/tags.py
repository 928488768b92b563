"""Split comment text into description and tags, then interpret each tag body."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from ..logging import get_logger
from ..models import ExampleTag, GenericTag, Tag
from .sanitize import (
    contains_gutter,
    format_component,
    strip_example_gutter,
    strip_gutter,
    strip_type_brackets,
)

_LOGGER = get_logger("parser.tags")

# gutter, optional whitespace, then the "@" introducing a tag
_TAG_SPLIT_RE = re.compile(r"\s*\*\s*@")
_EXAMPLE_MARKER_RE = re.compile(r"^example\r?\n")
# tag name, optional {type}, optional name, optional "-" separator, description
_GENERIC_TAG_RE = re.compile(r"(\w+)\s*(\{[^{}]*\})?\s?([^-]+)?\s?-?\s?(.*)?")


def split_tags(comment: str) -> Tuple[str, List[str]]:
    """Return the raw description segment and the raw tag bodies in source order."""
    segments = _TAG_SPLIT_RE.split(comment)
    return segments[0], segments[1:]


def is_example_tag(body: str) -> bool:
    return _EXAMPLE_MARKER_RE.match(body) is not None


def parse_example_tag(body: str) -> ExampleTag:
    """Build an example tag, keeping the sample's own indentation and line breaks."""
    remainder = _EXAMPLE_MARKER_RE.sub("", body, count=1)
    lines = [strip_example_gutter(line) for line in remainder.splitlines()]
    if lines and contains_gutter(lines[-1]):
        # closing decoration such as " *" or " */"
        lines.pop()
    return ExampleTag(description="\n".join(lines))


def parse_generic_tag(body: str) -> Optional[GenericTag]:
    match = _GENERIC_TAG_RE.search(strip_gutter(body))
    if match is None:
        return None
    tag_name, raw_type, name, description = match.groups()
    return GenericTag(
        tag=format_component(tag_name),
        type=strip_type_brackets(format_component(raw_type)),
        name=format_component(name),
        description=format_component(description),
    )


def parse_tag(body: str) -> Optional[Tag]:
    """Interpret one raw tag body; returns ``None`` when it has no tag shape."""
    if is_example_tag(body):
        return parse_example_tag(body)
    return parse_generic_tag(body)


def parse_tags(bodies: Sequence[str]) -> List[Tag]:
    tags: List[Tag] = []
    for body in bodies:
        tag = parse_tag(body)
        if tag is None:
            _LOGGER.debug("Dropping malformed tag body %r", body)
            continue
        tags.append(tag)
    return tags


__all__ = [
    "is_example_tag",
    "parse_example_tag",
    "parse_generic_tag",
    "parse_tag",
    "parse_tags",
    "split_tags",
]
