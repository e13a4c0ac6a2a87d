"""Exclusion rules for pruning entries during traversal."""

from .base_rules import BaseExclusionRules
from .hidden_rules import HiddenEntryExclusionRules

__all__ = [
    "BaseExclusionRules",
    "HiddenEntryExclusionRules",
]
