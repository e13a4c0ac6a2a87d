class TargetDirectoryError(Exception):
    """
    Exception raised when the directory to render cannot be used.

    This is the only fatal error in resptree. It is raised before any traversal
    starts when the requested path does not exist, cannot be resolved, or does
    not name a directory.

    Attributes:
        path (str): The path as it was requested.
        reason (str): Why the path could not be used.

    Example:
        >>> error = TargetDirectoryError("missing", "No such file or directory")
        >>> str(error)
        'Could not access target directory: missing: No such file or directory'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the offending path and the failure reason.

        Args:
            path (str): The path as it was requested.
            reason (str): Human-readable description of the failure.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Could not access target directory: {path}: {reason}")
