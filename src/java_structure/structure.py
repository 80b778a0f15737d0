"""
Structural extraction: syntax tree -> classes with their methods and fields.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import List, Optional, Tuple

from tree_sitter import Node, Parser

from .errors import ParseIncompleteError
from .models import ClassInfo, FileStructure
from .parser import SyntaxTree, parse_file, parse_source
from .syntax import MethodNode, as_declaration, as_member


@dataclasses.dataclass
class _OpenClass:
    name: str
    methods: List[str] = dataclasses.field(default_factory=list)
    fields: List[str] = dataclasses.field(default_factory=list)

    def freeze(self) -> ClassInfo:
        return ClassInfo(
            name=self.name, methods=tuple(self.methods), fields=tuple(self.fields)
        )


def extract_structure(tree: SyntaxTree) -> FileStructure:
    """Walk ``tree`` depth-first and collect every class-like declaration.

    Members are assigned to the class on top of an explicit scope stack, so
    an inner class never leaks members into its outer or sibling classes.
    Anonymous class bodies push an unnamed scope: they are not listed and
    their members are dropped, as are members found outside any class.

    The walk covers every node, not just declaration members, so local and
    anonymous classes inside method bodies are reached.
    """
    source = tree.source
    found: List[_OpenClass] = []
    scopes: List[Optional[_OpenClass]] = []

    # (node, leaving) pairs; a declaration is pushed again with leaving=True
    # so its scope is popped after all of its descendants were visited.
    pending: List[Tuple[Node, bool]] = [(tree.root, False)]
    while pending:
        node, leaving = pending.pop()
        if leaving:
            scopes.pop()
            continue

        decl = as_declaration(node, source)
        if decl is not None:
            name = decl.identifier()
            scope = _OpenClass(name=name) if name else None
            if scope is not None:
                scope.fields.extend(decl.implicit_fields())
                found.append(scope)
            scopes.append(scope)
            pending.append((node, True))
        else:
            member = as_member(node, source)
            current = scopes[-1] if scopes else None
            if member is not None and current is not None:
                if isinstance(member, MethodNode):
                    current.methods.extend(member.identifiers())
                else:
                    current.fields.extend(member.identifiers())

        for ch in reversed(node.children):
            pending.append((ch, False))

    if not found and tree.has_error:
        raise ParseIncompleteError(
            "no class declaration could be located", source=tree.path
        )
    return FileStructure(classes=tuple(c.freeze() for c in found))


def extract_from_source(text: str, parser: Optional[Parser] = None) -> FileStructure:
    """Parse Java source text and extract its structure."""
    return extract_structure(parse_source(text, parser=parser))


def extract_from_file(parser: Optional[Parser], path: Path) -> FileStructure:
    """Extract the structure of a single Java file."""
    return extract_structure(parse_file(path, parser=parser))
