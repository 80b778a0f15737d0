"""
Insert new method source into a named class.

The insertion point comes from the parser's byte offset of the class body's
closing brace. Text is never searched for braces, so braces inside string
literals, comments or nested bodies cannot be mistaken for the class end.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tree_sitter import Parser

from .locator import locate_class_body
from .parser import parse_source, read_source, write_source


def inject_method(
    source_text: str,
    class_name: str,
    new_method_source: str,
    parser: Optional[Parser] = None,
    nested: bool = False,
    path: Optional[str] = None,
) -> str:
    """Return ``source_text`` with ``new_method_source`` inserted into ``class_name``.

    The method goes on its own line right before the closing ``}`` of the
    class body; every other byte of the source is left untouched. Injecting
    the same method twice inserts it twice.

    Raises ParseError for invalid source and ClassNotFoundError when the
    class is not declared.
    """
    tree = parse_source(source_text, parser=parser, path=path)
    span = locate_class_body(tree, class_name, nested=nested)
    data = tree.source
    at = span.closing_offset
    updated = (
        data[:at]
        + b"\n"
        + new_method_source.encode("utf-8")
        + b"\n"
        + data[at:]
    )
    return updated.decode("utf-8")


def inject_method_into_file(
    path: Path,
    class_name: str,
    new_method_source: str,
    out_path: Optional[Path] = None,
    parser: Optional[Parser] = None,
    nested: bool = False,
) -> Path:
    """Inject a method into a class declared in ``path`` and write the result.

    The result is written to ``out_path`` or, when omitted, back to ``path``.
    Nothing is written unless the whole updated text was built successfully.
    """
    text = read_source(path)
    updated = inject_method(
        text,
        class_name,
        new_method_source,
        parser=parser,
        nested=nested,
        path=str(path),
    )
    target = out_path or path
    write_source(target, updated, mode_from=path)
    return target
