"""
Data models for the structural summary of Java source files.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, List, Optional, Tuple


@dataclasses.dataclass(frozen=True)
class ClassInfo:
    """Members of a single class-like declaration, in declaration order."""

    name: str
    methods: Tuple[str, ...] = ()
    fields: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ClassInfo.name must be non-empty")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "methods": list(self.methods),
            "variables": list(self.fields),
        }


@dataclasses.dataclass(frozen=True)
class FileStructure:
    """Classes of one parsed file, in pre-order discovery order."""

    classes: Tuple[ClassInfo, ...] = ()

    def find(self, name: str) -> Optional[ClassInfo]:
        """Return the first class called ``name``, if any."""
        for info in self.classes:
            if info.name == name:
                return info
        return None

    @property
    def class_names(self) -> List[str]:
        return [c.name for c in self.classes]

    def to_dict(self) -> Dict[str, Any]:
        return {"classes": [c.to_dict() for c in self.classes]}


@dataclasses.dataclass(frozen=True)
class ClassBodySpan:
    """Byte offsets of a class body in the UTF-8 encoded source.

    ``start`` is the offset of the opening ``{`` and ``end`` is one past the
    matching ``}``, so ``end - 1`` is where the closing delimiter sits.
    """

    start: int
    end: int

    @property
    def closing_offset(self) -> int:
        return self.end - 1


@dataclasses.dataclass
class FileResult:
    """Outcome of extracting one file during a batch scan."""

    file: str
    structure: Optional[FileStructure] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        if self.structure is None:
            return {"file": self.file, "error": self.error}
        return {"file": self.file, "structure": self.structure.to_dict()}
