"""
Batch drivers: scan a source tree and inject methods into files.
"""

from __future__ import annotations

import sys
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import orjson
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from tree_sitter import Parser

from .errors import StructureError
from .injector import inject_method, inject_method_into_file
from .models import FileResult
from .parser import DEFAULT_EXTENSIONS, list_source_files, load_java_parser, read_source
from .structure import extract_from_file

console = Console(stderr=True)


def scan_file(path: Path, parser: Optional[Parser] = None) -> FileResult:
    """Extract one file, recording a parse or I/O failure instead of raising."""
    try:
        structure = extract_from_file(parser, path)
    except StructureError as ex:
        return FileResult(file=str(path), error=str(ex))
    return FileResult(file=str(path), structure=structure)


def _scan_path(path_str: str) -> FileResult:
    # Runs in worker processes; parsers are not shared across processes.
    return scan_file(Path(path_str))


def scan_tree(
    source_root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    jobs: int = 1,
) -> List[FileResult]:
    """Extract every source file under ``source_root``, in discovery order."""
    return scan_paths(list_source_files(source_root, extensions), jobs=jobs)


def scan_paths(paths: List[Path], jobs: int = 1) -> List[FileResult]:
    """Extract the given files, isolating failures per file."""
    if jobs <= 1 or len(paths) < 2:
        parser = load_java_parser()
        return [scan_file(p, parser) for p in paths]
    with ProcessPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(_scan_path, [str(p) for p in paths]))


def _write_records(
    records: List[Dict[str, Any]], out_path: Optional[Path], jsonl: bool
) -> None:
    if out_path is None:
        if jsonl:
            for rec in records:
                sys.stdout.write(orjson.dumps(rec).decode("utf-8") + "\n")
        else:
            sys.stdout.write(
                orjson.dumps(records, option=orjson.OPT_INDENT_2).decode("utf-8")
                + "\n"
            )
    else:
        if jsonl:
            with out_path.open("w", encoding="utf-8") as f:
                for rec in records:
                    f.write(orjson.dumps(rec).decode("utf-8") + "\n")
        else:
            out_path.write_bytes(orjson.dumps(records, option=orjson.OPT_INDENT_2))


def run_scan(
    source_root: Path,
    out_path: Optional[Path],
    jsonl: bool,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    jobs: int = 1,
) -> int:
    """Scan a source tree, write one record per file, return the number parsed."""
    exts = tuple(extensions)
    paths = list_source_files(source_root, exts)
    console.print(f"[dim]Found {len(paths)} source files to process[/dim]")

    results: List[FileResult] = []
    if jobs > 1 and len(paths) > 1:
        with console.status(f"[bold green]Scanning with {jobs} workers..."):
            results = scan_paths(paths, jobs=jobs)
    else:
        parser = load_java_parser()
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Scanning source files", total=len(paths))
            for path in paths:
                results.append(scan_file(path, parser))
                progress.update(task, description=f"Scanning {path.name}")
                progress.advance(task)

    count = 0
    for res in results:
        if res.ok:
            count += 1
        else:
            console.print(f"[yellow]⚠[/yellow] Failed to parse {res.file}: {res.error}")

    _write_records([r.to_dict() for r in results], out_path, jsonl)
    return count


def run_inject(
    path: Path,
    class_name: str,
    method_source: str,
    out_path: Optional[Path] = None,
    in_place: bool = False,
    nested: bool = False,
) -> Optional[Path]:
    """Inject a method into ``class_name`` and persist or print the result.

    Returns the written path, or None when the result went to stdout.
    """
    parser = load_java_parser()
    if out_path is not None or in_place:
        return inject_method_into_file(
            path,
            class_name,
            method_source,
            out_path=out_path,
            parser=parser,
            nested=nested,
        )
    text = read_source(path)
    sys.stdout.write(
        inject_method(
            text, class_name, method_source, parser=parser, nested=nested, path=str(path)
        )
    )
    return None
