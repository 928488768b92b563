"""Doc-comment parser: region segmentation, tag splitting and tag interpretation."""

from __future__ import annotations

from .core import ReadError, parse_file, parse_files, parse_region, parse_text

__all__ = ["ReadError", "parse_file", "parse_files", "parse_region", "parse_text"]
