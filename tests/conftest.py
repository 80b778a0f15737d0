"""Shared fixtures for the java-structure tests."""

from pathlib import Path

import pytest
from tree_sitter import Parser

from java_structure.parser import load_java_parser


@pytest.fixture(scope="session")
def java_parser() -> Parser:
    return load_java_parser()


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """A small tree: two valid files, one broken file, one non-Java file."""
    (tmp_path / "pkg").mkdir()
    (tmp_path / "A.java").write_text(
        "public class A {\n    int a, b;\n    void run() {}\n}\n", encoding="utf-8"
    )
    (tmp_path / "pkg" / "B.java").write_text(
        "class B {\n    class C { void m() {} }\n}\n", encoding="utf-8"
    )
    (tmp_path / "pkg" / "Broken.java").write_text(
        "class Broken { void x( }\n", encoding="utf-8"
    )
    (tmp_path / "pkg" / "notes.txt").write_text("class Nope {}\n", encoding="utf-8")
    return tmp_path
