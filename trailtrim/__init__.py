"""
trailtrim: strip trailing spaces and tabs from source files in a directory tree.

Files are only rewritten when stripping actually changes their content, and
the path of every rewritten file is reported relative to the scanned directory.
"""

from ._version import __version__

from .main import main  # noqa: F401
from .scanner import FileResult, iter_matches, process_file, strip_tree  # noqa: F401
from .stripping import strip_trailing_whitespace  # noqa: F401

__all__ = [
    "__version__",
    "main",
    "FileResult",
    "iter_matches",
    "process_file",
    "strip_tree",
    "strip_trailing_whitespace",
]
