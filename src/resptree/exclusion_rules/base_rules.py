from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    The tree collector consults an exclusion rule for every entry it discovers.
    An excluded file never appears in the collected tree, and an excluded
    directory is pruned: none of its descendants are visited.

    Rules are evaluated against the entry's base name only, so a rule cannot
    depend on where in the tree the entry lives.

    Example:
        >>> class NoTempFiles(BaseExclusionRules):
        ...     def exclude(self, name: str) -> bool:
        ...         return name.endswith('.tmp')
        >>> rules = NoTempFiles()
        >>> rules.exclude("build.tmp")
        True
        >>> rules.exclude("main.py")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry with the given name should be skipped.

        Args:
            name (str): The file or directory name, without any leading path.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.
        """
        pass

