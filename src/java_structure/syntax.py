"""
Declaration abstraction over Tree-sitter Java nodes.

The extractor and locator only talk to DeclarationNode and MemberNode;
which Tree-sitter node kinds map onto them is decided by the tables at the
bottom of this module.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type, Union

from tree_sitter import Node

from .models import ClassBodySpan
from .parser import node_text


class DeclarationNode:
    """A class-like declaration: an identifier plus a body holding members."""

    kind = "class"

    def __init__(self, node: Node, source: bytes) -> None:
        self.node = node
        self.source = source

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.identifier()!r}>"

    def identifier(self) -> Optional[str]:
        name = self.node.child_by_field_name("name")
        if name is None:
            return None
        return node_text(self.source, name).strip() or None

    def body(self) -> Optional[Node]:
        return self.node.child_by_field_name("body")

    def body_span(self) -> Optional[ClassBodySpan]:
        """Offsets of the body's opening and closing delimiters.

        None when the body is absent or its braces were not actually in the
        source (Tree-sitter inserts zero-width missing tokens on errors).
        """
        body = self.body()
        if body is None or body.child_count < 2:
            return None
        opening, closing = body.children[0], body.children[-1]
        if opening.type != "{" or closing.type != "}":
            return None
        if opening.is_missing or closing.is_missing:
            return None
        return ClassBodySpan(start=opening.start_byte, end=closing.end_byte)

    def implicit_fields(self) -> List[str]:
        """Field names the declaration introduces outside its body."""
        return []

    def _member_nodes(self) -> List[Node]:
        body = self.body()
        return list(body.named_children) if body is not None else []

    def members(self) -> List[Union["DeclarationNode", "MemberNode"]]:
        """Direct members of the body, in source order."""
        out: List[Union[DeclarationNode, MemberNode]] = []
        for child in self._member_nodes():
            wrapped = as_declaration(child, self.source) or as_member(
                child, self.source
            )
            if wrapped is not None:
                out.append(wrapped)
        return out


class InterfaceDeclarationNode(DeclarationNode):
    kind = "interface"


class AnnotationTypeDeclarationNode(DeclarationNode):
    kind = "annotation"


class EnumDeclarationNode(DeclarationNode):
    kind = "enum"

    def _member_nodes(self) -> List[Node]:
        # Members after the constant list live in enum_body_declarations.
        out: List[Node] = []
        for child in super()._member_nodes():
            if child.type == "enum_body_declarations":
                out.extend(child.named_children)
            else:
                out.append(child)
        return out


class RecordDeclarationNode(DeclarationNode):
    kind = "record"

    def implicit_fields(self) -> List[str]:
        params = self.node.child_by_field_name("parameters")
        if params is None:
            return []
        names: List[str] = []
        for ch in params.named_children:
            if ch.type == "formal_parameter":
                name = ch.child_by_field_name("name")
                if name is not None:
                    names.append(node_text(self.source, name).strip())
        return names


class AnonymousClassNode(DeclarationNode):
    """``new T() { ... }`` or an enum constant with a body; it has no name."""

    kind = "anonymous"

    def identifier(self) -> Optional[str]:
        return None

    def body(self) -> Optional[Node]:
        body = self.node.child_by_field_name("body")
        if body is not None:
            return body
        for ch in self.node.named_children:
            if ch.type == "class_body":
                return ch
        return None


class MemberNode:
    """A method or field declaration inside a class body."""

    kind = "member"

    def __init__(self, node: Node, source: bytes) -> None:
        self.node = node
        self.source = source

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.identifiers()!r}>"

    def identifier(self) -> Optional[str]:
        names = self.identifiers()
        return names[0] if names else None

    def identifiers(self) -> List[str]:
        name = self.node.child_by_field_name("name")
        if name is None:
            return []
        return [node_text(self.source, name).strip()]

    def body(self) -> Optional[Node]:
        return self.node.child_by_field_name("body")

    def members(self) -> List[Union[DeclarationNode, "MemberNode"]]:
        return []


class MethodNode(MemberNode):
    kind = "method"


class FieldNode(MemberNode):
    """``int a, b = 1, c;`` declares one field per declarator."""

    kind = "field"

    def identifiers(self) -> List[str]:
        names: List[str] = []
        for decl in self.node.children_by_field_name("declarator"):
            name = decl.child_by_field_name("name")
            if name is not None:
                names.append(node_text(self.source, name).strip())
        return names

    def body(self) -> Optional[Node]:
        return None


DECLARATION_KINDS: Dict[str, Type[DeclarationNode]] = {
    "class_declaration": DeclarationNode,
    "interface_declaration": InterfaceDeclarationNode,
    "enum_declaration": EnumDeclarationNode,
    "record_declaration": RecordDeclarationNode,
    "annotation_type_declaration": AnnotationTypeDeclarationNode,
}

MEMBER_KINDS: Dict[str, Type[MemberNode]] = {
    "method_declaration": MethodNode,
    "annotation_type_element_declaration": MethodNode,
    "field_declaration": FieldNode,
    "constant_declaration": FieldNode,
}


def _has_class_body(node: Node) -> bool:
    if node.type == "enum_constant":
        return node.child_by_field_name("body") is not None
    if node.type == "object_creation_expression":
        return any(ch.type == "class_body" for ch in node.named_children)
    return False


def as_declaration(node: Node, source: bytes) -> Optional[DeclarationNode]:
    """Wrap ``node`` if it is a class-like declaration."""
    cls = DECLARATION_KINDS.get(node.type)
    if cls is not None:
        return cls(node, source)
    if _has_class_body(node):
        return AnonymousClassNode(node, source)
    return None


def as_member(node: Node, source: bytes) -> Optional[MemberNode]:
    """Wrap ``node`` if it is a method or field declaration."""
    cls = MEMBER_KINDS.get(node.type)
    if cls is None:
        return None
    return cls(node, source)
