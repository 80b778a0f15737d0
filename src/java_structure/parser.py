"""
Tree-sitter parser adapter, source file I/O and directory walking.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from tree_sitter import Node, Parser, Tree
from tree_sitter_language_pack import get_parser

from .errors import IoError, ParseError

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".java",)


def load_java_parser() -> Parser:
    """Load and configure a Tree-sitter Java parser."""
    return get_parser("java")


class SyntaxTree:
    """A parsed source file: the Tree-sitter tree plus the exact bytes it was built from."""

    def __init__(self, tree: Tree, source: bytes, path: Optional[str] = None) -> None:
        self.tree = tree
        self.source = source
        self.path = path

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def has_error(self) -> bool:
        return self.tree.root_node.has_error

    @property
    def text(self) -> str:
        return self.source.decode("utf-8")

    def node_text(self, node: Node) -> str:
        return node_text(self.source, node)


def node_text(source_bytes: bytes, node: Node) -> str:
    """Extract text content from a Tree-sitter node."""
    return source_bytes[node.start_byte : node.end_byte].decode(
        "utf-8", errors="replace"
    )


def byte_to_line_col(byte_offset: int, source_bytes: bytes) -> Tuple[int, int]:
    """Convert byte offset to 1-based line number and 0-based character column."""
    if byte_offset > len(source_bytes):
        byte_offset = len(source_bytes)
    prefix = source_bytes[:byte_offset]
    line = prefix.count(b"\n") + 1
    line_start = prefix.rfind(b"\n") + 1
    col_chars = len(prefix[line_start:].decode("utf-8", errors="ignore"))
    return line, col_chars


def first_error_node(root: Node) -> Optional[Node]:
    """Return the first ERROR or missing node in source order, if any."""
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if not node.has_error:
            continue
        for ch in reversed(node.children):
            stack.append(ch)
    return None


def parse_source(
    text: str,
    parser: Optional[Parser] = None,
    strict: bool = True,
    path: Optional[str] = None,
) -> SyntaxTree:
    """Parse Java source text into a SyntaxTree.

    With ``strict`` set, a tree containing syntax errors raises ParseError
    pointing at the first problem instead of being returned.
    """
    parser = parser or load_java_parser()
    data = text.encode("utf-8")
    tree = SyntaxTree(parser.parse(data), data, path)
    if strict and tree.has_error:
        bad = first_error_node(tree.root) or tree.root
        line, col = byte_to_line_col(bad.start_byte, data)
        if bad.is_missing:
            message = f"missing '{bad.type}'"
        else:
            message = "syntax error"
        raise ParseError(message, source=path, line=line, column=col)
    return tree


def read_source(path: Path) -> str:
    """Read a whole source file as UTF-8 text."""
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise IoError(str(path), str(ex)) from ex


def _default_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_source(path: Path, text: str, mode_from: Optional[Path] = None) -> None:
    """Write a whole source file atomically.

    The text goes to a temporary file next to ``path`` which then replaces
    it, so readers never see a partially written file. Symlinks are written
    through. The file keeps its permission bits; a new file takes them from
    ``mode_from`` when given, else from the umask.
    """
    path = path.resolve()
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
        )
    except OSError as ex:
        raise IoError(str(path), str(ex)) from ex
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        if path.exists():
            shutil.copymode(path, tmp_name)
        elif mode_from is not None and mode_from.exists():
            shutil.copymode(mode_from, tmp_name)
        else:
            os.chmod(tmp_name, _default_mode())
        os.replace(tmp_name, path)
    except OSError as ex:
        Path(tmp_name).unlink(missing_ok=True)
        raise IoError(str(path), str(ex)) from ex


def iter_source_files(
    root_dir: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS
) -> Iterator[Path]:
    """Iterate over source files under a directory tree.

    Directory symlinks are followed without cycle detection.
    """
    suffixes = tuple(extensions)
    for dirpath, dirnames, filenames in os.walk(root_dir, followlinks=True):
        dirnames.sort()
        for name in sorted(filenames):
            if name.endswith(suffixes):
                p = Path(dirpath) / name
                if p.is_file():
                    yield p


def list_source_files(
    root_dir: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS
) -> List[Path]:
    """List source files under ``root_dir`` in discovery order."""
    return list(iter_source_files(root_dir, extensions))


def parse_file(
    path: Path, parser: Optional[Parser] = None, strict: bool = True
) -> SyntaxTree:
    """Read and parse a single source file."""
    text = read_source(path)
    return parse_source(text, parser=parser, strict=strict, path=str(path))
