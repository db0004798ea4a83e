#!/usr/bin/env python
"""Detect folders that exist only to wrap a single module or a single subfolder.

``__init__.py`` and caches do not count as children. A folder holding one module
should be that module (``src/history/log.py`` becomes ``src/history.py``).
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

CHECK_ROOTS = ("src", "tests", "linting")
IGNORE_FILES = {"__init__.py"}


def _ignored_name(name: str) -> bool:
    return name == "__pycache__" or name.startswith(".")


def _substantive_children(folder: Path) -> list[Path]:
    children: list[Path] = []
    for child in sorted(folder.iterdir()):
        if child.is_dir():
            if not _ignored_name(child.name):
                children.append(child)
        elif child.name not in IGNORE_FILES and not child.name.endswith(".pyc"):
            children.append(child)
    return children


def find_violations(root: Path = ROOT) -> list[str]:
    violations: list[str] = []
    for check_root in CHECK_ROOTS:
        base = root / check_root
        if not base.is_dir():
            continue
        # The check roots themselves may hold anything.
        for folder in sorted(p for p in base.rglob("*") if p.is_dir()):
            if any(_ignored_name(part) for part in folder.relative_to(base).parts):
                continue
            rel = folder.relative_to(root).as_posix()
            children = _substantive_children(folder)
            if not children:
                violations.append(f"  {rel}/ has no substantive children; remove the folder")
            elif len(children) == 1:
                only = children[0]
                if only.is_dir():
                    violations.append(f"  {rel}/ only wraps {only.name}/; flatten the wrapper folder")
                else:
                    violations.append(f"  {rel}/ has only {only.name}; flatten to {rel}.py")
    return violations


def main() -> int:
    violations = find_violations()
    if violations:
        print("Single-file folder violations:", file=sys.stderr)
        for violation in violations:
            print(violation, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
