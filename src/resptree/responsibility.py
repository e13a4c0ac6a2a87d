"""Extraction of a file's one-line responsibility from its leading comment."""

import re
from typing import Tuple

from resptree.types import PathType

NO_RESPONSIBILITY = "No responsibility comment"

COMMENT_MARKERS: Tuple[str, ...] = ("//", "#")

# Everything stripped from the front of a comment line, markers and whitespace alike
_LEADING_MARKERS = re.compile(r"^[\s/#]+")


def get_responsibility(path: PathType) -> str:
    """Return the description found in the first non-blank line of a file.

    Blank lines at the top of the file are skipped. If the first non-blank line
    starts with ``//`` or ``#``, every leading whitespace, ``/`` and ``#``
    character is stripped and the remainder is returned, so ``//// note``
    yields ``note``. If that line is not a comment, or the file has no
    non-blank line, or it cannot be opened at all, the fallback
    ``"No responsibility comment"`` is returned. Reading stops at the first
    non-blank line.

    Lines that are not valid UTF-8 are skipped like blank lines, so a stray
    encoding error before the comment does not hide it.

    Args:
        path: Path of the file to inspect.

    Returns:
        The responsibility description, or the fallback string.

    Example:
        >>> import tempfile, os
        >>> with tempfile.NamedTemporaryFile("w", suffix=".py", delete=False) as f:
        ...     _ = f.write("\\n# Parses the configuration file\\nimport os\\n")
        >>> get_responsibility(f.name)
        'Parses the configuration file'
        >>> os.unlink(f.name)
        >>> get_responsibility(f.name)
        'No responsibility comment'
    """
    try:
        with open(path, "rb") as f:
            for raw_line in f:
                try:
                    line = raw_line.decode("utf-8")
                except UnicodeDecodeError:
                    continue
                stripped = line.strip()
                if not stripped:
                    continue
                if stripped.startswith(COMMENT_MARKERS):
                    return _LEADING_MARKERS.sub("", stripped)
                break
    except OSError:
        return NO_RESPONSIBILITY
    return NO_RESPONSIBILITY
