"""Tests for structural extraction from Java source."""

import pytest

from java_structure.errors import ParseError, ParseIncompleteError
from java_structure.parser import parse_source
from java_structure.structure import extract_from_source, extract_structure


def test_top_level_classes_in_source_order(java_parser) -> None:
    src = "class Zeta {}\nclass Alpha {}\nclass Mid {}\n"

    structure = extract_from_source(src, java_parser)

    assert structure.class_names == ["Zeta", "Alpha", "Mid"]
    assert all(c.methods == () and c.fields == () for c in structure.classes)


def test_multi_variable_field_declaration_is_expanded(java_parser) -> None:
    src = "class Foo {\n    int a, b, c;\n    private String name = \"x\";\n}\n"

    info = extract_from_source(src, java_parser).find("Foo")

    assert info is not None
    assert info.fields == ("a", "b", "c", "name")


def test_nested_class_members_stay_with_inner_class(java_parser) -> None:
    """Members after an inner class belong to the outer class again."""
    src = """
class Outer {
    class Inner {
        int depth;
        void m() {}
    }
    void after() {}
    int z;
}
"""
    structure = extract_from_source(src, java_parser)

    assert structure.class_names == ["Outer", "Inner"]
    outer = structure.find("Outer")
    inner = structure.find("Inner")
    assert inner.methods == ("m",)
    assert inner.fields == ("depth",)
    assert outer.methods == ("after",)
    assert outer.fields == ("z",)


def test_sibling_inner_classes_do_not_share_members(java_parser) -> None:
    src = """
class Outer {
    static class First { void one() {} }
    static class Second { void two() {} }
}
"""
    structure = extract_from_source(src, java_parser)

    assert structure.class_names == ["Outer", "First", "Second"]
    assert structure.find("First").methods == ("one",)
    assert structure.find("Second").methods == ("two",)
    assert structure.find("Outer").methods == ()


def test_overloads_are_kept(java_parser) -> None:
    src = "class Calc {\n    int add(int a) { return a; }\n    int add(int a, int b) { return a + b; }\n}\n"

    info = extract_from_source(src, java_parser).find("Calc")

    assert info.methods == ("add", "add")


def test_constructors_and_locals_are_not_members(java_parser) -> None:
    src = """
class Box {
    private int size;
    Box(int size) { this.size = size; }
    int grow() { int delta = 1; return size + delta; }
}
"""
    info = extract_from_source(src, java_parser).find("Box")

    assert info.methods == ("grow",)
    assert info.fields == ("size",)


def test_interface_members(java_parser) -> None:
    src = "interface Shape {\n    int SIDES = 4;\n    double area();\n    default String label() { return \"s\"; }\n}\n"

    info = extract_from_source(src, java_parser).find("Shape")

    assert info.fields == ("SIDES",)
    assert info.methods == ("area", "label")


def test_enum_members(java_parser) -> None:
    src = """
enum Color {
    RED, GREEN;
    private int code;
    int code() { return code; }
}
"""
    info = extract_from_source(src, java_parser).find("Color")

    assert info.fields == ("code",)
    assert info.methods == ("code",)


def test_record_components_are_fields(java_parser) -> None:
    src = "record Point(int x, int y) {\n    static int ORIGIN = 0;\n    double norm() { return 0; }\n}\n"

    info = extract_from_source(src, java_parser).find("Point")

    assert info.fields == ("x", "y", "ORIGIN")
    assert info.methods == ("norm",)


def test_anonymous_class_members_do_not_leak(java_parser) -> None:
    src = """
class Task {
    void start() {
        Runnable r = new Runnable() {
            int hidden;
            public void run() {}
        };
    }
    void stop() {}
}
"""
    structure = extract_from_source(src, java_parser)

    assert structure.class_names == ["Task"]
    assert structure.find("Task").methods == ("start", "stop")
    assert structure.find("Task").fields == ()


def test_local_class_is_registered(java_parser) -> None:
    src = "class A {\n    void f() {\n        class Local { void g() {} }\n    }\n}\n"

    structure = extract_from_source(src, java_parser)

    assert structure.class_names == ["A", "Local"]
    assert structure.find("A").methods == ("f",)
    assert structure.find("Local").methods == ("g",)


def test_file_without_classes_is_empty(java_parser) -> None:
    src = "package com.example;\n\nimport java.util.List;\n// nothing here\n"

    structure = extract_from_source(src, java_parser)

    assert structure.classes == ()
    assert structure.to_dict() == {"classes": []}


def test_invalid_source_raises_parse_error(java_parser) -> None:
    with pytest.raises(ParseError) as exc:
        extract_from_source("class Foo { void x( }\n", java_parser)

    assert exc.value.line == 1


def test_malformed_tree_without_classes_is_incomplete(java_parser) -> None:
    tree = parse_source("%%% ;; garbage @@", java_parser, strict=False)

    with pytest.raises(ParseIncompleteError):
        extract_structure(tree)


def test_serialized_shape(java_parser) -> None:
    src = "class Foo {\n    int a, b;\n    void x() {}\n}\n"

    data = extract_from_source(src, java_parser).to_dict()

    assert data == {
        "classes": [{"name": "Foo", "methods": ["x"], "variables": ["a", "b"]}]
    }


def test_annotation_type_elements_are_methods(java_parser) -> None:
    src = "@interface Ann {\n    int X = 1;\n    String value();\n    int count() default 0;\n}\n"

    info = extract_from_source(src, java_parser).find("Ann")

    assert info.methods == ("value", "count")
    assert info.fields == ("X",)
