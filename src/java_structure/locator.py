"""
Locate the body of a named class in a parsed source file.
"""

from __future__ import annotations

from typing import Iterator, List

from .errors import ClassNotFoundError, ParseError
from .models import ClassBodySpan
from .parser import SyntaxTree, byte_to_line_col
from .syntax import DeclarationNode, as_declaration


def iter_declarations(tree: SyntaxTree, nested: bool = False) -> Iterator[DeclarationNode]:
    """Yield class-like declarations in source order.

    Only the root's direct children are visited unless ``nested`` is set, in
    which case member declarations are visited pre-order as well.
    """
    stack: List[DeclarationNode] = []
    for child in reversed(tree.root.children):
        decl = as_declaration(child, tree.source)
        if decl is not None:
            stack.append(decl)
    while stack:
        decl = stack.pop()
        yield decl
        if not nested:
            continue
        inner = [m for m in decl.members() if isinstance(m, DeclarationNode)]
        stack.extend(reversed(inner))


def locate_class_body(
    tree: SyntaxTree, class_name: str, nested: bool = False
) -> ClassBodySpan:
    """Return the exact byte span of ``class_name``'s body.

    The name must match exactly; the first declaration in source order wins.
    """
    for decl in iter_declarations(tree, nested=nested):
        if decl.identifier() != class_name:
            continue
        span = decl.body_span()
        if span is None:
            line, col = byte_to_line_col(decl.node.end_byte, tree.source)
            raise ParseError(
                f'body of "{class_name}" is not closed',
                source=tree.path,
                line=line,
                column=col,
            )
        return span
    raise ClassNotFoundError(class_name, source=tree.path)
