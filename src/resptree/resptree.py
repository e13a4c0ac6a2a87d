"""Annotated tree rendering for a single target directory.

This module ties the pieces together: it resolves the requested directory,
collects its subtree once and then streams the rendered lines.
"""

import os
from pathlib import Path
from typing import Iterator, Optional

from anytree.render import AbstractStyle, AsciiStyle, ContStyle

from resptree.exceptions import TargetDirectoryError
from resptree.exclusion_rules.base_rules import BaseExclusionRules
from resptree.file_system_tree.file_system_tree import FileSystemTree
from resptree.tree_renderer import stream_tree
from resptree.types import PathType


def resolve_target_directory(directory: PathType) -> Path:
    """Resolve ``directory`` to an absolute path of an existing directory.

    Symbolic links in the path are resolved, so the result is canonical.

    Args:
        directory: The path as given by the user.

    Returns:
        The canonical absolute path.

    Raises:
        TargetDirectoryError: If the path does not exist, cannot be resolved, is
            not a directory or cannot be listed.
    """
    try:
        resolved = Path(directory).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise TargetDirectoryError(str(directory), reason) from e
    if not resolved.is_dir():
        raise TargetDirectoryError(str(directory), "Not a directory")
    if not os.access(resolved, os.R_OK | os.X_OK):
        raise TargetDirectoryError(str(directory), "Permission denied")
    return resolved


class ResponsibilityTree:
    """Annotated tree of one directory.

    The subtree is collected when the object is created; streaming the tree
    afterwards only reads each file's leading lines.

    Attributes:
        directory (Path): Canonical absolute path of the rendered directory.
        style (AbstractStyle): Connector glyph set.

    Example:
        >>> tree = ResponsibilityTree("src")  # doctest: +SKIP
        >>> for line in tree.stream_tree():  # doctest: +SKIP
        ...     print(line)
        ├── cli
        │   └── main.rs - Parses flags and dispatches subcommands
        └── lib.rs - No responsibility comment

    Raises:
        TargetDirectoryError: If ``directory`` is not an accessible directory.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        ascii: bool = False,
    ) -> None:
        """Resolve the directory and collect its subtree.

        Args:
            directory: Directory to render. Can be any path-like object.
            exclusion_rules: Rules for skipping entries. Defaults to excluding
                hidden entries.
            ascii: Draw connectors with ASCII characters.
        """
        self.directory = resolve_target_directory(directory)
        self.style: AbstractStyle = AsciiStyle() if ascii else ContStyle()
        self._fs_tree = FileSystemTree(self.directory, exclusion_rules)
        self._fs_tree.get_entries()

    @property
    def file_count(self) -> int:
        return self._fs_tree.get_file_count()

    @property
    def directory_count(self) -> int:
        return self._fs_tree.get_directory_count()

    def stream_tree(self) -> Iterator[str]:
        """Yield the rendered lines, root's children first, without trailing newlines."""
        yield from stream_tree(self._fs_tree.get_entries(), self.directory, [], self.style)

    def get_tree_representation(self) -> str:
        """Get the complete rendered tree as a single string."""
        return "\n".join(self.stream_tree())
