"""
Core constants and error types for trailtrim.

Contains the defaults shared by the CLI and the library functions, and the
validation applied to command-line input before a run starts.
"""

from pathlib import Path

# Characters treated as trailing horizontal whitespace
TRAILING = " \t"

DEFAULT_PATTERN = "*.hs"
DEFAULT_BASE_DIRECTORY = "."


def resolve_base_directory(directory=None):
    """
    Turn the optional base directory argument into a path.

    Args:
        directory (str | os.PathLike | None): Directory supplied by the caller

    Returns:
        Path: ``directory`` as a path, or the default base directory when
        ``directory`` is ``None`` or empty

    The path is not checked for existence here: a missing or unreadable
    directory surfaces as an ``OSError`` once the traversal starts.
    """
    if directory is None or str(directory) == "":
        directory = DEFAULT_BASE_DIRECTORY
    return Path(directory)


def validate_pattern(pattern):
    """
    Validate a file name glob pattern.

    Raises:
        InputValidationError: If the pattern is empty or contains a path separator
    """
    if not pattern:
        raise InputValidationError("File pattern must not be empty")
    if "/" in pattern:
        raise InputValidationError(
            f"File pattern is matched against file names only: {pattern!r}"
        )
    return pattern


class TrailtrimError(Exception):
    """Base exception class for trailtrim."""

    pass


class InputValidationError(TrailtrimError):
    """Raised when command-line input validation fails."""

    pass
