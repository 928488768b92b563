"""Source discovery: expand files and directories into the paths to parse."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from .logging import get_logger

_LOGGER = get_logger("discovery")

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "node_modules",
    "bower_components",
    "__pycache__",
    ".idea",
}


@dataclass(frozen=True)
class ExcludeRule:
    """Gitignore-like exclusion pattern taken from ``exclude_paths``."""

    pattern: str
    directory_only: bool
    anchored: bool

    @classmethod
    def parse(cls, raw: str) -> "ExcludeRule | None":
        pattern = raw.strip()
        if not pattern:
            return None
        directory_only = pattern.endswith("/")
        pattern = pattern.rstrip("/")
        anchored = pattern.startswith("/") or "/" in pattern
        pattern = pattern.lstrip("/")
        if not pattern:
            return None
        return cls(pattern=pattern, directory_only=directory_only, anchored=anchored)

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        if self.anchored:
            return fnmatchcase(rel_path, self.pattern)
        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def discover_sources(
    sources: Sequence[str | Path],
    *,
    root: Path,
    extensions: Sequence[str] = (".js",),
    exclude_paths: Sequence[str] = (),
) -> List[Path]:
    """Return source files in a stable order, ready for ``parse_files``.

    Sources keep the order given; files found under a directory are sorted
    by relative path. A path reached twice is only listed once.

    Raises:
        FileNotFoundError: a source does not exist.
    """
    root = root.expanduser().resolve()
    suffixes = {ext.lower() for ext in extensions}
    rules = [rule for rule in (ExcludeRule.parse(raw) for raw in exclude_paths) if rule]

    seen: set[Path] = set()
    discovered: List[Path] = []
    for source in sources:
        source_path = Path(source).expanduser()
        if not source_path.is_absolute():
            source_path = root / source_path
        source_path = source_path.resolve()
        if not source_path.exists():
            raise FileNotFoundError(f"Source path not found: {source}")

        if source_path.is_dir():
            candidates: Iterable[Path] = _walk(source_path, root, rules)
        else:
            candidates = [source_path]

        for path in candidates:
            if path.suffix.lower() not in suffixes or path in seen:
                continue
            if _is_excluded(_relative(path, root), False, rules):
                continue
            seen.add(path)
            discovered.append(path)

    _LOGGER.debug("Discovered %d source file(s)", len(discovered))
    return discovered


def _walk(directory: Path, root: Path, rules: Sequence[ExcludeRule]) -> Iterator[Path]:
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(directory):
        current = Path(dirpath)
        kept = []
        for name in dirnames:
            if name in _EXCLUDED_DIRS:
                continue
            if _is_excluded(_relative(current / name, root), True, rules):
                continue
            kept.append(name)
        dirnames[:] = kept
        found.extend(current / filename for filename in filenames)
    yield from sorted(found, key=lambda path: _relative(path, root))


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _is_excluded(rel_path: str, is_dir: bool, rules: Sequence[ExcludeRule]) -> bool:
    return any(rule.matches(rel_path, is_dir) for rule in rules)


__all__ = ["ExcludeRule", "discover_sources"]
