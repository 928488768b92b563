"""File and batch driver for the doc-comment parser."""

from __future__ import annotations

import os
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Sequence, Union

from ..logging import get_logger
from ..models import DocBlock, SourceFile
from .regions import extract_region, split_regions
from .sanitize import strip_gutter
from .tags import parse_tags, split_tags

PathLike = Union[str, "os.PathLike[str]"]

_LOGGER = get_logger("parser")


class ReadError(OSError):
    """Raised when a source file cannot be read as text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path
        self.reason = reason


def parse_region(fragment: str) -> Optional[DocBlock]:
    """Parse one comment-plus-code fragment, or return ``None`` if it is not documented."""
    region = extract_region(fragment)
    if not region.is_documented:
        return None

    raw_description, tag_bodies = split_tags(region.comment)  # type: ignore[arg-type]
    return DocBlock(
        description=strip_gutter(raw_description),
        code=region.code,  # type: ignore[arg-type]
        tags=tuple(parse_tags(tag_bodies)),
    )


def parse_text(text: str) -> List[DocBlock]:
    """Return the doc blocks found in ``text`` in source order."""
    fragments = split_regions(text)
    blocks: List[DocBlock] = []
    for fragment in fragments:
        block = parse_region(fragment)
        if block is None:
            _LOGGER.debug("Skipping region without both comment and code")
            continue
        blocks.append(block)
    _LOGGER.debug("Parsed %d of %d region(s)", len(blocks), len(fragments))
    return blocks


def parse_file(path: PathLike) -> SourceFile:
    """Read ``path`` and parse its documentation.

    Raises:
        ReadError: the file is missing, unreadable or not UTF-8 text.
    """
    file_path = os.fspath(path)
    try:
        # code keeps the file's own line endings
        with open(file_path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise ReadError(file_path, f"not valid UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        raise ReadError(file_path, exc.strerror or str(exc)) from exc

    _LOGGER.debug("Read %d characters from %s", len(text), file_path)
    return SourceFile(file_path=file_path, documentation=tuple(parse_text(text)))


def parse_files(paths: Sequence[PathLike], *, max_workers: Optional[int] = None) -> List[SourceFile]:
    """Parse every path concurrently and return results in input order.

    The batch is all-or-nothing: the first failure, in input order, is raised
    and no partial results are returned. Reads already in flight are allowed
    to finish; their results are discarded.
    """
    if not paths:
        return []

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="noxdoc-parse") as executor:
        futures: List[Future[SourceFile]] = [executor.submit(parse_file, path) for path in paths]
        try:
            return [future.result() for future in futures]
        except ReadError:
            for future in futures:
                future.cancel()
            raise


__all__ = ["ReadError", "parse_file", "parse_files", "parse_region", "parse_text"]
