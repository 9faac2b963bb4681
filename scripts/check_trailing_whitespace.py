#!/usr/bin/env python3
"""Pre-commit hook: remove trailing whitespace from the files given as arguments."""

from __future__ import annotations

import sys
from pathlib import Path

from trailtrim.scanner import process_file


def main(argv: list[str]) -> int:
    changed = False
    for arg in argv:
        path = Path(arg)
        if path.is_dir():
            continue
        try:
            result = process_file(path.parent, path.name, strict=True)
        except UnicodeDecodeError:
            continue  # skip binary files
        if result.changed:
            print(f"Trimmed trailing whitespace: {arg}")
            changed = True
    return 1 if changed else 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
