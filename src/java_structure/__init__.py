"""
java-structure: extract class structure from Java sources and inject methods.
"""

from .cli import build_arg_parser, main
from .errors import (
    ClassNotFoundError,
    IoError,
    ParseError,
    ParseIncompleteError,
    StructureError,
)
from .extractor import run_inject, run_scan, scan_tree
from .injector import inject_method, inject_method_into_file
from .locator import locate_class_body
from .models import ClassBodySpan, ClassInfo, FileResult, FileStructure
from .parser import list_source_files, load_java_parser, parse_source
from .structure import extract_from_file, extract_from_source, extract_structure

__all__ = [
    "ClassInfo",
    "FileStructure",
    "ClassBodySpan",
    "FileResult",
    "StructureError",
    "ParseError",
    "ParseIncompleteError",
    "ClassNotFoundError",
    "IoError",
    "load_java_parser",
    "parse_source",
    "list_source_files",
    "extract_structure",
    "extract_from_source",
    "extract_from_file",
    "locate_class_body",
    "inject_method",
    "inject_method_into_file",
    "scan_tree",
    "run_scan",
    "run_inject",
    "build_arg_parser",
    "main",
]
