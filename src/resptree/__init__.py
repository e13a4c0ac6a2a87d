"""Annotated directory trees.

This package renders a directory hierarchy as a tree and annotates every file
with the one-line description found in its leading comment.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("resptree")
except PackageNotFoundError:
    __version__ = "unknown"
