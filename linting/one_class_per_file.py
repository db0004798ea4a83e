#!/usr/bin/env python
"""Enforce one top-level non-dataclass class per module under src/.

Dataclasses are free: payloads, settings and events may share a module with the
one behavioural class (or protocol) they belong to.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _is_dataclass_decorator(decorator: ast.expr) -> bool:
    target: ast.expr = decorator.func if isinstance(decorator, ast.Call) else decorator
    if isinstance(target, ast.Name):
        return target.id == "dataclass"
    if isinstance(target, ast.Attribute):
        return target.attr == "dataclass"
    return False


def behavioural_classes(source: str) -> list[str]:
    try:
        tree = ast.parse(source)
    except SyntaxError:
        return []
    return [
        node.name
        for node in tree.body
        if isinstance(node, ast.ClassDef)
        and not any(_is_dataclass_decorator(decorator) for decorator in node.decorator_list)
    ]


def find_violations(root: Path = ROOT) -> list[str]:
    violations: list[str] = []
    src_dir = root / "src"
    if not src_dir.is_dir():
        return violations
    for py_file in sorted(src_dir.rglob("*.py")):
        try:
            classes = behavioural_classes(py_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            continue
        if len(classes) > 1:
            rel = py_file.relative_to(root)
            violations.append(f"  {rel}: {len(classes)} classes ({', '.join(classes)})")
    return violations


def main() -> int:
    violations = find_violations()
    if violations:
        print("One non-dataclass-class-per-file violations:", file=sys.stderr)
        for violation in violations:
            print(violation, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
