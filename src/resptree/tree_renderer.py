"""Rendering of collected directory listings as an annotated tree.

Lines are produced depth-first in pre-order, starting with the root's immediate
children. Directories are rendered by name alone; files are followed by the
responsibility found in their leading comment:

    ├── docs
    │   └── index.md - Landing page
    └── main.py - Command-line entry point

Connector glyphs come from an anytree render style. ``ContStyle`` (the default)
draws the Unicode box-drawing set shown above and ``AsciiStyle`` draws the same
layout with ``|``, ``+`` and ``-``.
"""

import sys
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO

from anytree.render import AbstractStyle, ContStyle

from resptree.responsibility import get_responsibility
from resptree.types import DirectoryChildren, PathType, RenderPrefix

RESPONSIBILITY_SEPARATOR = " - "


def format_prefix(prefix: RenderPrefix, is_last: bool, style: AbstractStyle) -> str:
    """Build the connector string placed in front of an entry's name.

    Args:
        prefix: One flag per ancestor level, True if that ancestor was the last
            of its siblings.
        is_last: Whether the entry itself is the last of its siblings.
        style: Glyph set to draw with.

    Returns:
        The connector string, four characters per ancestor plus four for the entry.

    Example:
        >>> format_prefix([False, True], True, ContStyle())
        '│       └── '
    """
    ancestors = "".join(style.empty if last else style.vertical for last in prefix)
    return ancestors + (style.end if is_last else style.cont)


def stream_tree(
    entries: DirectoryChildren,
    path: PathType,
    prefix: Optional[RenderPrefix] = None,
    style: Optional[AbstractStyle] = None,
    describe: Callable[[Path], str] = get_responsibility,
) -> Iterator[str]:
    """Generate the tree below ``path`` one line at a time.

    ``prefix`` is the stack of last-child flags for the ancestors of ``path``.
    A flag is pushed before descending into a directory and popped once that
    directory's subtree has been produced, so on return the stack is as it was
    passed in. A path without a key in ``entries`` produces no lines.

    Args:
        entries: Sorted children per directory, as produced by the collector.
        path: Directory whose subtree should be rendered.
        prefix: Last-child flags of the ancestors. Defaults to an empty stack.
        style: Glyph set. Defaults to anytree's ContStyle.
        describe: Callable returning the annotation for a file.

    Yields:
        Lines of the tree without trailing newlines.
    """
    if prefix is None:
        prefix = []
    if style is None:
        style = ContStyle()

    children = entries.get(Path(path))
    if children is None:
        return

    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        line_prefix = format_prefix(prefix, is_last, style)

        # A link to a directory is drawn as a directory; it has no key, so nothing is drawn below it
        if child.is_dir or child.path.is_dir():
            yield f"{line_prefix}{child.name}"
            prefix.append(is_last)
            try:
                yield from stream_tree(entries, child.path, prefix, style, describe)
            finally:
                prefix.pop()
        else:
            yield f"{line_prefix}{child.name}{RESPONSIBILITY_SEPARATOR}{describe(child.path)}"


def print_tree(
    entries: DirectoryChildren,
    path: PathType,
    prefix: Optional[RenderPrefix] = None,
    style: Optional[AbstractStyle] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Print the tree below ``path``, one line per entry.

    Args:
        entries: Sorted children per directory, as produced by the collector.
        path: Directory whose subtree should be printed.
        prefix: Last-child flags of the ancestors. Defaults to an empty stack.
        style: Glyph set. Defaults to anytree's ContStyle.
        file: Text stream to write to. Defaults to standard output.
    """
    out = file if file is not None else sys.stdout
    for line in stream_tree(entries, path, prefix, style):
        print(line, file=out)
