"""Record type for files and directories discovered during traversal."""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class FileSystemEntry:
    """A single file or directory found while walking a directory tree.

    Entries are immutable once discovered. Symbolic links are never followed, so
    a link pointing at a directory is recorded with ``is_dir`` set to False.

    Attributes:
        path (Path): Absolute path of the entry.
        name (str): The base name of the entry.
        parent (Path): Absolute path of the directory containing the entry.
        is_dir (bool): True if the entry is a directory, False otherwise.

    Example:
        >>> entry = FileSystemEntry.from_path(Path("/project/src"), is_dir=True)
        >>> entry.name
        'src'
        >>> entry.parent.name
        'project'
    """

    path: Path
    name: str
    parent: Path
    is_dir: bool

    @classmethod
    def from_path(cls, path: Path, is_dir: bool) -> "FileSystemEntry":
        """Build an entry, deriving the name and parent from ``path``.

        Args:
            path: Absolute path of the entry.
            is_dir: Whether the entry is a directory.

        Returns:
            A new FileSystemEntry.
        """
        return cls(path=path, name=path.name, parent=path.parent, is_dir=is_dir)

    def sort_key(self) -> Tuple[bool, str, str]:
        """Ordering key placing directories first, then names case-insensitively.

        The exact name is the last component so that names differing only by
        case still order the same way on every run.
        """
        return (not self.is_dir, self.name.lower(), self.name)
