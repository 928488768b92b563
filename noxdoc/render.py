"""Render parse results as JSON or Markdown documents."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .logging import get_logger
from .models import SourceFile, results_to_list

_LOGGER = get_logger("render")

_TEMPLATES_DIR = Path(__file__).with_name("templates")
_OUTPUT_NAMES = {"json": "documentation.json", "markdown": "documentation.md"}


def render_json(results: Sequence[SourceFile], *, indent: Optional[int] = None) -> str:
    """Serialise results to the ``[{filePath, documentation}]`` JSON contract."""
    return json.dumps(results_to_list(list(results)), indent=indent, ensure_ascii=False)


def render_markdown(
    results: Sequence[SourceFile], *, root: Path | None = None, language: str = "js"
) -> str:
    env = _create_env()
    template = env.get_template("documentation.md.j2")
    rendered = template.render(
        sources=results_to_list(list(results)),
        root=str(root) if root is not None else None,
        language=language,
    )
    return rendered.strip() + "\n"


def render(results: Sequence[SourceFile], fmt: str, *, root: Path | None = None) -> str:
    if fmt == "json":
        return render_json(results, indent=2)
    if fmt == "markdown":
        return render_markdown(results, root=root)
    raise ValueError(f"Unsupported output format: {fmt}")


def write_output(
    results: Sequence[SourceFile], output_dir: Path, fmt: str, *, root: Path | None = None
) -> Path:
    """Write the rendered document into ``output_dir`` and return its path."""
    if fmt not in _OUTPUT_NAMES:
        raise ValueError(f"Unsupported output format: {fmt}")
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / _OUTPUT_NAMES[fmt]
    target.write_text(render(results, fmt, root=root), encoding="utf-8")
    _LOGGER.debug("Wrote %s documentation for %d file(s) to %s", fmt, len(results), target)
    return target


def _create_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["relpath"] = _relpath
    return env


def _relpath(path: str, root: Optional[str]) -> str:
    if not root:
        return path
    try:
        return Path(os.path.relpath(path, root)).as_posix()
    except ValueError:
        return path


__all__ = ["render", "render_json", "render_markdown", "write_output"]
