"""Exclusion rules for filtering directories out of listings."""

from .base_rules import BaseExclusionRules
from .name_rules import DEFAULT_EXCLUDED_NAMES, NameExclusionRules

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_EXCLUDED_NAMES",
    "NameExclusionRules",
]
