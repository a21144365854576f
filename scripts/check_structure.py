#!/usr/bin/env python3
"""Simple structural sanity check for the project layout.

Validates that package sources live in termwrap/, that every module has a
test file, and that no stray copies of the package linger at the root.
"""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

EXPECTED_MODULES = {
    "backend.py",
    "cli.py",
    "colors.py",
    "config.py",
    "error_codes.py",
    "lines.py",
    "log.py",
    "prefix.py",
    "tokens.py",
    "truncate.py",
    "width.py",
}


def check(root: Path = ROOT) -> list[str]:
    errors: list[str] = []
    pkg_dir = root / "termwrap"
    tests_dir = root / "tests"

    for path, kind in ((root / "pyproject.toml", "pyproject.toml"), (root / "bin" / "termwrap.py", "bin/termwrap.py")):
        if not path.exists():
            errors.append(f"missing {kind}: {path}")

    if not pkg_dir.is_dir():
        errors.append(f"package directory is missing: {pkg_dir}")
        return errors
    present = {p.name for p in pkg_dir.glob("*.py")}
    missing = sorted(EXPECTED_MODULES - present)
    extra = sorted(present - EXPECTED_MODULES - {"__init__.py"})
    if missing:
        errors.append(f"modules missing: {', '.join(missing)}")
    if extra:
        errors.append(f"unexpected modules in termwrap/: {', '.join(extra)}")

    for name in sorted(EXPECTED_MODULES & present):
        test = tests_dir / f"test_{name}"
        if not test.exists():
            errors.append(f"no tests for {name}: {test}")

    # A flat copy at the root would shadow the package
    for name in sorted(EXPECTED_MODULES):
        if (root / name).exists():
            errors.append(f"unexpected module at root: {root / name}")
    return errors


def main() -> int:
    errors = check()
    if errors:
        for e in errors:
            print(f"[structure] {e}")
        return 1
    print("[structure] OK: layout matches expected shape")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
