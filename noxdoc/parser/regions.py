"""Segment file text into documented regions and split each into comment and code."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional

from .sanitize import GUTTER

# "/**" directly followed by a line break opens a documented region
_REGION_MARKER_RE = re.compile(r"/\*\*[\r\n]+")
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")


class LineKind(Enum):
    COMMENT = "comment"
    CODE = "code"
    BLANK = "blank"


@dataclass(frozen=True)
class Region:
    """Comment and code text recovered from one fragment.

    Either side is ``None`` when the fragment has no line of that kind.
    """

    comment: Optional[str]
    code: Optional[str]

    @property
    def is_documented(self) -> bool:
        return self.comment is not None and self.code is not None


def split_regions(text: str) -> List[str]:
    """Return the fragments following each doc-comment opening marker.

    Text before the first marker belongs to no region and is discarded.
    """
    fragments = _REGION_MARKER_RE.split(text)
    return fragments[1:]


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines with their own terminators; a final unterminated line is kept."""
    for match in _LINE_RE.finditer(text):
        yield match.group(0)


def classify_line(line: str) -> LineKind:
    stripped = line.lstrip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith(GUTTER):
        return LineKind.COMMENT
    return LineKind.CODE


def extract_region(fragment: str) -> Region:
    """Group a fragment's lines into comment text and code text.

    Blank lines follow the previous non-blank line; leading blank lines follow
    the first non-blank line. A fragment made only of blank lines yields
    neither comment nor code.
    """
    buckets: Dict[LineKind, List[str]] = {LineKind.COMMENT: [], LineKind.CODE: []}
    pending: List[str] = []
    current: Optional[LineKind] = None

    for line in iter_lines(fragment):
        kind = classify_line(line)
        if kind is LineKind.BLANK:
            if current is None:
                pending.append(line)
            else:
                buckets[current].append(line)
            continue
        if pending:
            buckets[kind].extend(pending)
            pending = []
        current = kind
        buckets[kind].append(line)

    comment_lines = buckets[LineKind.COMMENT]
    code_lines = buckets[LineKind.CODE]
    return Region(
        comment="".join(comment_lines) if comment_lines else None,
        code="".join(code_lines) if code_lines else None,
    )


__all__ = ["LineKind", "Region", "classify_line", "extract_region", "iter_lines", "split_regions"]
