"""Collection of a directory subtree into sorted per-directory child listings.

This module provides the FileSystemTree class, which walks a directory subtree
once, groups every discovered entry under its parent directory and sorts each
group so that directories come before files and names compare
case-insensitively.
"""

import os
from pathlib import Path
from typing import Optional

from resptree.exclusion_rules.base_rules import BaseExclusionRules
from resptree.exclusion_rules.hidden_rules import HiddenEntryExclusionRules
from resptree.file_system_tree.file_system_entry import FileSystemEntry
from resptree.types import DirectoryChildren, PathType


def collect_entries(root_path: PathType, exclusion_rules: Optional[BaseExclusionRules] = None) -> DirectoryChildren:
    """Walk the subtree below ``root_path`` and group its entries by parent.

    The root always has a key in the result, even when nothing below it survives
    the walk. Every directory that is descended into gets its own key as well,
    possibly mapped to an empty list. Entries excluded by ``exclusion_rules``
    are left out and excluded directories are not descended into. The root
    itself is never tested against the rules.

    Traversal is best-effort: directories that cannot be listed and entries that
    disappear or cannot be inspected while the walk is running are skipped
    silently. Symbolic links are listed but never followed.

    Args:
        root_path: Absolute path of an existing directory.
        exclusion_rules: Rules deciding which entries to skip. Defaults to
            excluding hidden entries.

    Returns:
        Mapping from each directory's absolute path to its sorted children.

    Example:
        >>> entries = collect_entries("/path/to/project")  # doctest: +SKIP
        >>> [entry.name for entry in entries[Path("/path/to/project")]]  # doctest: +SKIP
        ['docs', 'src', 'README.md', 'setup.cfg']
    """
    if exclusion_rules is None:
        exclusion_rules = HiddenEntryExclusionRules()

    root = Path(root_path)
    entries: DirectoryChildren = {root: []}
    pending = [root]

    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as scanner:
                dir_entries = list(scanner)
        except OSError:
            # Keep the (empty) key for the directory but skip its contents
            continue

        for dir_entry in dir_entries:
            if exclusion_rules.exclude(dir_entry.name):
                continue
            try:
                is_dir = dir_entry.is_dir(follow_symlinks=False)
            except OSError:
                continue

            entry = FileSystemEntry.from_path(directory / dir_entry.name, is_dir=is_dir)
            entries.setdefault(directory, []).append(entry)
            if is_dir:
                entries.setdefault(entry.path, [])
                pending.append(entry.path)

    for children in entries.values():
        children.sort(key=FileSystemEntry.sort_key)

    return entries


class FileSystemTree:
    """A sorted, grouped view of a directory subtree.

    The grouping is built lazily on first access and cached; call ``refresh()``
    to pick up changes made to the filesystem afterwards.

    Attributes:
        root_path (Path): The absolute path to the root directory.
        exclusion_rules (BaseExclusionRules): Rules for skipping entries.

    Example:
        >>> tree = FileSystemTree("/path/to/project")  # doctest: +SKIP
        >>> entries = tree.get_entries()  # doctest: +SKIP
        >>> tree.get_file_count()  # doctest: +SKIP
        12
    """

    def __init__(self, root_path: PathType, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory. Relative paths are made absolute.
            exclusion_rules: Rules for skipping entries. Defaults to excluding
                hidden entries.
        """
        self.root_path = Path(os.path.abspath(root_path))
        self.exclusion_rules = exclusion_rules if exclusion_rules is not None else HiddenEntryExclusionRules()
        self._entries: Optional[DirectoryChildren] = None

    def get_entries(self) -> DirectoryChildren:
        """Get the grouped children of every collected directory.

        Returns:
            Mapping from directory path to its sorted list of children.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        if self._entries is None:
            self._build()
        assert self._entries is not None
        return self._entries

    def _build(self) -> None:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")
        self._entries = collect_entries(self.root_path, self.exclusion_rules)

    def get_file_count(self) -> int:
        """Get the number of non-directory entries in the tree."""
        return sum(1 for children in self.get_entries().values() for entry in children if not entry.is_dir)

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        return len(self.get_entries()) - 1

    def refresh(self) -> None:
        """Discard the cached grouping and collect the subtree again."""
        self._entries = None
        self._build()
