"""Tests for directory walking and batch scanning."""

from pathlib import Path

import orjson

from java_structure.extractor import run_scan, scan_file, scan_tree
from java_structure.parser import list_source_files


def _rel(root: Path, file: str) -> str:
    return Path(file).relative_to(root).as_posix()


def test_list_source_files_filters_and_orders(source_tree: Path) -> None:
    files = [p.relative_to(source_tree).as_posix() for p in list_source_files(source_tree)]

    assert files == ["A.java", "pkg/B.java", "pkg/Broken.java"]


def test_list_source_files_custom_extension(source_tree: Path) -> None:
    files = list_source_files(source_tree, extensions=(".txt",))

    assert [p.name for p in files] == ["notes.txt"]


def test_scan_tree_isolates_broken_files(source_tree: Path) -> None:
    results = scan_tree(source_tree)

    assert [_rel(source_tree, r.file) for r in results] == [
        "A.java",
        "pkg/B.java",
        "pkg/Broken.java",
    ]
    a, b, broken = results
    assert a.ok and a.structure.find("A").fields == ("a", "b")
    assert b.ok and b.structure.class_names == ["B", "C"]
    assert b.structure.find("C").methods == ("m",)
    assert not broken.ok
    assert "Broken.java" in broken.error
    assert broken.to_dict() == {"file": broken.file, "error": broken.error}


def test_scan_tree_in_parallel_keeps_order(source_tree: Path) -> None:
    sequential = scan_tree(source_tree)
    parallel = scan_tree(source_tree, jobs=2)

    assert [r.to_dict() for r in parallel] == [r.to_dict() for r in sequential]


def test_scan_file_records_missing_file(tmp_path: Path, java_parser) -> None:
    result = scan_file(tmp_path / "Gone.java", java_parser)

    assert not result.ok
    assert result.structure is None


def test_run_scan_writes_json(source_tree: Path, tmp_path: Path) -> None:
    out = tmp_path / "out.json"

    count = run_scan(source_tree, out, jsonl=False)

    records = orjson.loads(out.read_bytes())
    assert count == 2
    assert len(records) == 3
    assert records[0]["structure"] == {
        "classes": [{"name": "A", "methods": ["run"], "variables": ["a", "b"]}]
    }
    assert "error" in records[2]


def test_run_scan_writes_jsonl_to_stdout(source_tree: Path, capsys) -> None:
    count = run_scan(source_tree, None, jsonl=True)

    lines = capsys.readouterr().out.splitlines()
    assert count == 2
    assert len(lines) == 3
    assert orjson.loads(lines[1])["structure"]["classes"][0]["name"] == "B"
