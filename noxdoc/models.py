"""Parse result models shared across noxdoc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

EXAMPLE_TAG = "example"


@dataclass(frozen=True)
class GenericTag:
    """Annotation of the form ``@tag {type} name - description``."""

    tag: str
    type: str = ""
    name: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "tag": self.tag,
            "type": self.type,
            "name": self.name,
            "description": self.description,
        }


@dataclass(frozen=True)
class ExampleTag:
    """Multi-line ``@example`` annotation holding sample code."""

    description: str = ""
    tag: str = field(default=EXAMPLE_TAG, init=False)

    def to_dict(self) -> Dict[str, str]:
        return {"tag": self.tag, "description": self.description}


Tag = Union[GenericTag, ExampleTag]


@dataclass(frozen=True)
class DocBlock:
    """One documented region: comment description, tags and trailing code."""

    description: str
    code: str
    tags: Tuple[Tag, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "code": self.code,
            "tags": [tag.to_dict() for tag in self.tags],
        }


@dataclass(frozen=True)
class SourceFile:
    """Parsed documentation for a single source file."""

    file_path: str
    documentation: Tuple[DocBlock, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filePath": self.file_path,
            "documentation": [block.to_dict() for block in self.documentation],
        }


def results_to_list(results: List[SourceFile]) -> List[Dict[str, Any]]:
    """Return the serialisable batch structure handed to renderers."""
    return [source.to_dict() for source in results]
