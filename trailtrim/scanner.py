"""Directory traversal and the per-file read/strip/compare/write pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from .core import DEFAULT_PATTERN
from .stripping import count_trimmed_lines, strip_trailing_whitespace

# Undecodable bytes are carried through as surrogates and written back
# unchanged; newline="" disables newline translation in both directions.
_TEXT_OPTIONS = {"encoding": "utf-8", "errors": "surrogateescape", "newline": ""}


@dataclass
class FileResult:
    """Outcome of processing one file; ``path`` is relative to the base directory."""

    path: str
    changed: bool
    lines_trimmed: int = 0
    chars_removed: int = 0

    def as_row(self) -> List[object]:
        return [self.path, self.lines_trimmed, self.chars_removed]


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _raise(error: OSError) -> None:
    raise error


def iter_matches(base, pattern: str = DEFAULT_PATTERN) -> Iterator[Path]:
    """Yield paths relative to ``base`` of files whose name matches ``pattern``.

    The tree is walked top-down with entries in sorted order. Hidden files and
    directories are skipped and symlinked directories are not followed. Errors
    from listing a directory (including ``base`` itself) are raised, not
    ignored.
    """
    base = Path(base)
    for dirpath, dirnames, filenames in os.walk(base, onerror=_raise):
        dirnames[:] = sorted(d for d in dirnames if not _is_hidden(d))
        current = Path(dirpath)
        for filename in sorted(filenames):
            if _is_hidden(filename) or not fnmatchcase(filename, pattern):
                continue
            yield (current / filename).relative_to(base)


def process_file(
    base, relative, *, write: bool = True, strict: bool = False
) -> FileResult:
    """Strip trailing whitespace from one file, rewriting it only if it changed.

    With ``write=False`` the file is only read, which lets callers find out
    whether a file would change without touching it. With ``strict=True`` a
    file that is not valid UTF-8 raises ``UnicodeDecodeError`` before anything
    is written.
    """
    path = Path(base) / relative
    options = dict(_TEXT_OPTIONS, errors="strict") if strict else _TEXT_OPTIONS
    with open(path, "r", **options) as fh:
        original = fh.read()

    stripped = strip_trailing_whitespace(original)
    result = FileResult(path=Path(relative).as_posix(), changed=stripped != original)
    if not result.changed:
        return result

    result.lines_trimmed = count_trimmed_lines(original)
    result.chars_removed = len(original) - len(stripped)
    if write:
        with open(path, "w", **_TEXT_OPTIONS) as fh:
            fh.write(stripped)
    return result


def strip_tree(
    base,
    pattern: str = DEFAULT_PATTERN,
    *,
    write: bool = True,
    echo: Optional[Callable[[str], object]] = print,
) -> List[FileResult]:
    """Process every matching file under ``base`` and return the changed ones.

    ``echo`` is called with the relative path of each changed file as soon as
    that file has been handled. The first I/O error aborts the run; files
    rewritten before it keep their new content.
    """
    changed: List[FileResult] = []
    for relative in iter_matches(base, pattern):
        result = process_file(base, relative, write=write)
        if not result.changed:
            continue
        changed.append(result)
        if echo is not None:
            echo(result.path)
    return changed
