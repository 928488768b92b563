"""noxdoc: extract structured documentation from doc-comment blocks."""

from __future__ import annotations

from .models import DocBlock, ExampleTag, GenericTag, SourceFile, Tag
from .parser import ReadError, parse_file, parse_files, parse_text

__version__ = "0.3.0"

__all__ = [
    "DocBlock",
    "ExampleTag",
    "GenericTag",
    "ReadError",
    "SourceFile",
    "Tag",
    "parse_file",
    "parse_files",
    "parse_text",
    "__version__",
]
