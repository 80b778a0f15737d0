"""
Command-line interface for java-structure.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from .errors import StructureError
from .extractor import run_inject, run_scan
from .parser import DEFAULT_EXTENSIONS, read_source

console = Console(stderr=True)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    p = argparse.ArgumentParser(
        prog="java-structure",
        description="Extract classes, methods and fields from Java sources, "
        "or inject a method into a class, using Tree-sitter.",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_scan = sub.add_parser("scan", help="Extract the structure of a source tree")
    p_scan.add_argument("source", type=str, help="Path to source root directory")
    p_scan.add_argument(
        "--out", type=str, default=None, help="Path to output file (JSON or JSONL)"
    )
    p_scan.add_argument(
        "--jsonl",
        action="store_true",
        help="Emit JSON lines instead of a single JSON array",
    )
    p_scan.add_argument(
        "--ext",
        action="append",
        default=None,
        help="File extension to include (repeatable, default: .java)",
    )
    p_scan.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Number of parallel worker processes (1 disables parallelism)",
    )

    p_inj = sub.add_parser("inject", help="Insert a method into a named class")
    p_inj.add_argument("file", type=str, help="Java source file to modify")
    p_inj.add_argument("class_name", type=str, help="Exact name of the target class")
    src = p_inj.add_mutually_exclusive_group(required=True)
    src.add_argument("--method", type=str, help="Method source text")
    src.add_argument(
        "--method-file", type=str, help="File holding the method source text"
    )
    p_inj.add_argument(
        "--nested",
        action="store_true",
        help="Also look for the class among nested declarations",
    )
    dest = p_inj.add_mutually_exclusive_group()
    dest.add_argument(
        "--out", type=str, default=None, help="Write the result to this path"
    )
    dest.add_argument(
        "--in-place", action="store_true", help="Overwrite the input file"
    )

    return p


def _scan(args: argparse.Namespace) -> int:
    source_root = Path(args.source).resolve()
    if not source_root.is_dir():
        console.print(f"[red]Error:[/red] Source root not found: {source_root}")
        return 2
    out_path = Path(args.out) if args.out else None
    extensions = tuple(args.ext) if args.ext else DEFAULT_EXTENSIONS

    console.print(Panel(
        f"[cyan]Extracting Java structure[/cyan]\n"
        f"Source: {source_root}\n"
        f"Extensions: {', '.join(extensions)}\n"
        f"Output: {out_path or 'stdout'}\n"
        f"Format: {'JSONL' if args.jsonl else 'JSON'}",
        title="[bold blue]java-structure - Scan[/bold blue]",
    ))

    count = run_scan(
        source_root, out_path, args.jsonl, extensions=extensions, jobs=args.jobs
    )
    console.print(f"[green]✓[/green] Extracted structure from {count} file(s)")
    return 0


def _inject(args: argparse.Namespace) -> int:
    path = Path(args.file).resolve()
    if not path.is_file():
        console.print(f"[red]Error:[/red] Source file not found: {path}")
        return 2
    out_path = Path(args.out) if args.out else None

    try:
        if args.method_file:
            method_source = read_source(Path(args.method_file))
        else:
            method_source = args.method
        written = run_inject(
            path,
            args.class_name,
            method_source,
            out_path=out_path,
            in_place=args.in_place,
            nested=args.nested,
        )
    except StructureError as ex:
        console.print(f"[red]Error:[/red] {ex}")
        return 1

    if written is not None:
        console.print(
            f"[green]✓[/green] Added method to {args.class_name}; written to {written}"
        )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    if args.cmd == "scan":
        return _scan(args)
    if args.cmd == "inject":
        return _inject(args)

    ap.print_help()
    return 2
