"""
Error kinds raised while parsing, extracting and injecting Java source.
"""

from __future__ import annotations

from typing import Optional


class StructureError(Exception):
    """Base class for all java-structure failures."""


class ParseError(StructureError):
    """Source text is not syntactically valid Java."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.message = message
        self.source = source
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        where = self.source or "<string>"
        if self.line is not None:
            where = f"{where}:{self.line}:{self.column or 0}"
        return f"{where}: {self.message}"


class ParseIncompleteError(ParseError):
    """The tree is malformed and no class declaration could be located."""


class ClassNotFoundError(StructureError):
    """The requested class is not declared in the parsed source."""

    def __init__(self, class_name: str, source: Optional[str] = None) -> None:
        self.class_name = class_name
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f'Class "{class_name}" not found{where}')


class IoError(StructureError):
    """A source file could not be read or written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
