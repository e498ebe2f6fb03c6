#!/usr/bin/env python3
"""Simple structural sanity check for the package layout.

Validates that every expected module lives directly under termcells/,
that each has a matching test module, and that the compiled-in width
table is well formed.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parents[1]

EXPECTED_MODULES = {
    "_cell_widths.py",
    "cache.py",
    "cells.py",
    "config.py",
    "control.py",
    "errors.py",
    "iters.py",
    "measure.py",
    "ratio.py",
    "segment.py",
    "span.py",
    "style.py",
    "wrap.py",
}


def main(root: Optional[Path] = None) -> int:
    root = ROOT if root is None else root
    errors: list[str] = []

    package_dir = root / "termcells"
    tests_dir = root / "tests"

    if not package_dir.is_dir():
        errors.append(f"package directory is missing: {package_dir}")
    else:
        present = {p.name for p in package_dir.glob("*.py")}
        missing = sorted(EXPECTED_MODULES - present)
        extra = sorted(present - EXPECTED_MODULES - {"__init__.py"})
        if missing:
            errors.append(f"modules missing: {', '.join(missing)}")
        if extra:
            errors.append(f"unexpected modules in termcells/: {', '.join(extra)}")

    if not tests_dir.is_dir():
        errors.append(f"tests directory is missing: {tests_dir}")
    else:
        for name in sorted(EXPECTED_MODULES):
            test_name = f"test_{name.lstrip('_')}"
            if not (tests_dir / test_name).exists():
                errors.append(f"no tests for {name}: expected tests/{test_name}")

    if not errors:
        sys.path.insert(0, str(root))
        try:
            from termcells.cells import check_cell_widths
            from termcells.errors import CellsError

            try:
                check_cell_widths()
            except CellsError as exc:
                errors.append(str(exc))
        finally:
            sys.path.remove(str(root))

    if errors:
        for e in errors:
            print(f"[structure] {e}")
        return 1
    print("[structure] OK: package layout matches expected shape")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
