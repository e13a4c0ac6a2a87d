from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Union

if TYPE_CHECKING:
    from resptree.file_system_tree.file_system_entry import FileSystemEntry

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Absolute directory path -> its immediate children, sorted once collection completes
DirectoryChildren = Dict[Path, List["FileSystemEntry"]]

# One flag per ancestor level: True when that ancestor was the last of its siblings
RenderPrefix = List[bool]
