#!/usr/bin/env python
"""Enforce that ``__all__`` is assigned once and is the last top-level statement.

Modules without ``__all__`` (``src/server.py``) are skipped.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _assigns_all(node: ast.stmt) -> bool:
    if isinstance(node, ast.Assign):
        return any(isinstance(t, ast.Name) and t.id == "__all__" for t in node.targets)
    if isinstance(node, (ast.AnnAssign, ast.AugAssign)):
        return isinstance(node.target, ast.Name) and node.target.id == "__all__"
    return False


def _mutates_all(node: ast.stmt) -> bool:
    if not (isinstance(node, ast.Expr) and isinstance(node.value, ast.Call)):
        return False
    func = node.value.func
    return isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name) and func.value.id == "__all__"


def check_source(source: str) -> str | None:
    """Return a problem description, or None when the module is compliant."""
    try:
        tree = ast.parse(source)
    except SyntaxError:
        return None
    positions = [i for i, node in enumerate(tree.body) if _assigns_all(node) or _mutates_all(node)]
    if not positions:
        return None
    if len(positions) > 1:
        return f"__all__ is assigned or mutated {len(positions)} times"
    node = tree.body[positions[0]]
    if not (isinstance(node, ast.Assign) or (isinstance(node, ast.AnnAssign) and node.value is not None)):
        return "__all__ must be a plain `__all__ = [...]` assignment"
    if positions[0] != len(tree.body) - 1:
        trailing = tree.body[positions[0] + 1]
        return f"__all__ is followed by a statement at line {trailing.lineno}"
    return None


def find_violations(root: Path = ROOT) -> list[str]:
    violations: list[str] = []
    for py_file in sorted((root / "src").rglob("*.py")):
        try:
            problem = check_source(py_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            continue
        if problem is not None:
            violations.append(f"  {py_file.relative_to(root)}: {problem}")
    return violations


def main() -> int:
    violations = find_violations()
    if violations:
        print("__all__ placement violations:", file=sys.stderr)
        for violation in violations:
            print(violation, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
