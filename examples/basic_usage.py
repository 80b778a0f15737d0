#!/usr/bin/env python3
"""
Basic usage examples for java-structure.

This script demonstrates structure extraction and method injection.
"""

import sys
import tempfile
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

try:
    import java_structure as js
except ImportError:
    print("❌ Could not import java_structure")
    print("Make sure you're running from the repository root")
    sys.exit(1)


SAMPLE_JAVA = '''
package com.example;

public class Calculator {
    private int last, count;

    public int add(int a, int b) {
        return a + b;
    }

    static class History {
        String entries = "{ not a brace }";
        void clear() {}
    }
}
'''

NEW_METHOD = '''
    public int multiply(int a, int b) {
        return a * b;
    }'''


def example_extract_structure():
    """Example: Extract classes, methods and fields from source text."""
    print("📄 Example: Extracting structure")

    parser = js.load_java_parser()
    structure = js.extract_from_source(SAMPLE_JAVA, parser)
    for info in structure.classes:
        print(f"   - {info.name}: methods={list(info.methods)} fields={list(info.fields)}")


def example_inject_method():
    """Example: Add a method to a class and check it was picked up."""
    print("💉 Example: Injecting a method")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "Calculator.java"
        path.write_text(SAMPLE_JAVA, encoding="utf-8")

        js.inject_method_into_file(path, "Calculator", NEW_METHOD)
        structure = js.extract_from_file(None, path)
        print(f"   Calculator methods now: {list(structure.find('Calculator').methods)}")

        try:
            js.inject_method_into_file(path, "Missing", NEW_METHOD)
        except js.ClassNotFoundError as ex:
            print(f"   Expected failure: {ex}")


def example_scan_directory():
    """Example: Scan a Java source directory."""
    print("📁 Example: Scanning a directory")

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "Calculator.java").write_text(SAMPLE_JAVA, encoding="utf-8")
        (root / "Broken.java").write_text("class Broken {", encoding="utf-8")
        for result in js.scan_tree(root):
            status = "ok" if result.ok else f"error: {result.error}"
            print(f"   - {Path(result.file).name}: {status}")


def main():
    print("🔧 java-structure - Basic Usage Examples")
    print("=" * 50)

    example_extract_structure()
    print()

    example_inject_method()
    print()

    example_scan_directory()
    print()

    print("✅ Examples complete!")


if __name__ == "__main__":
    main()
