#!/usr/bin/env python
"""Verify the modeling stack is installed.

It prints the installed version of every library the walkthrough imports,
or an error message for each one that is missing.
"""
from __future__ import annotations
import importlib
import sys

REQUIRED = ("numpy", "pandas", "sklearn", "rich")


def main() -> None:
    py_ver = f"{sys.version_info.major}.{sys.version_info.minor}"
    if sys.version_info < (3, 9):
        print(f"✗ Python {py_ver} is too old for this project")
        sys.exit(1)

    failed = False
    for name in REQUIRED:
        try:
            module = importlib.import_module(name)
            print(f"✓ {name} {module.__version__} detected under Python {py_ver}")
        except ImportError as exc:
            print(f"✗ {name} import failed: {exc}")
            failed = True
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
