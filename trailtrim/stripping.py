"""Pure text transformations for removing trailing horizontal whitespace."""

from __future__ import annotations

import re

from .core import TRAILING

# A run of spaces/tabs directly before a newline or the end of the text.
# "\r" is not part of the run, so CRLF lines keep whatever precedes the "\r".
TRAILING_PATTERN = re.compile(f"[{re.escape(TRAILING)}]+$", re.MULTILINE)


def strip_trailing_whitespace(text: str) -> str:
    """Return ``text`` with trailing spaces and tabs removed from every line.

    Line terminators and every other character are preserved, so the result
    only differs from the input where trailing whitespace was removed.
    """
    return TRAILING_PATTERN.sub("", text)


def count_trimmed_lines(text: str) -> int:
    """Return how many lines of ``text`` end in trailing spaces or tabs."""
    return sum(1 for _ in TRAILING_PATTERN.finditer(text))
