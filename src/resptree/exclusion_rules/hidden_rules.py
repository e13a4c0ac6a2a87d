"""Exclusion of hidden files and directories."""

from .base_rules import BaseExclusionRules


class HiddenEntryExclusionRules(BaseExclusionRules):
    """Exclude every entry whose name starts with the hidden-file marker.

    Following the Unix convention, a leading dot marks a file or directory as
    hidden. Names such as ``.git``, ``.env`` or ``.venv`` are excluded, and so
    is everything below a hidden directory since the collector never descends
    into an excluded directory.

    Attributes:
        marker (str): The prefix identifying hidden entries.

    Example:
        >>> rules = HiddenEntryExclusionRules()
        >>> rules.exclude(".git")
        True
        >>> rules.exclude("src")
        False
        >>> rules.exclude("file.with.dots")
        False
    """

    HIDDEN_MARKER = "."

    def __init__(self, marker: str = HIDDEN_MARKER) -> None:
        if not marker:
            raise ValueError("Hidden marker must be a non-empty string")
        self.marker = marker

    def exclude(self, name: str) -> bool:
        return name.startswith(self.marker)
