"""Exact-name exclusion rules for skipping well-known directories."""

from typing import FrozenSet, Iterable, Optional

from .base_rules import BaseExclusionRules

# Version-control metadata, editor/IDE configuration and dependency caches
DEFAULT_EXCLUDED_NAMES: FrozenSet[str] = frozenset({".git", ".vscode", ".idea", "node_modules"})


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules matching directory names by exact equality.

    Names are literal strings compared case-sensitively against the final path
    segment. No glob or pattern semantics apply: ``"node_*"`` only matches a
    directory literally called ``node_*``.

    Attributes:
        names (FrozenSet[str]): The set of excluded names.

    Example:
        >>> rules = NameExclusionRules()
        >>> sorted(rules.names)
        ['.git', '.idea', '.vscode', 'node_modules']
        >>> rules.exclude(".git")
        True
        >>> rules.exclude(".github")
        False
        >>> rules.add_rule("build")
        >>> rules.exclude("build")
        True
    """

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        """Initialize name exclusion rules.

        Args:
            names: Literal directory names to exclude. Defaults to DEFAULT_EXCLUDED_NAMES.
                Pass an empty iterable to exclude nothing.

        Raises:
            TypeError: If names is a single string rather than an iterable of strings.
        """
        if isinstance(names, str):
            raise TypeError("names must be an iterable of strings, not a single string")
        self._names = set(DEFAULT_EXCLUDED_NAMES if names is None else names)

    @property
    def names(self) -> FrozenSet[str]:
        return frozenset(self._names)

    def exclude(self, name: str) -> bool:
        return name in self._names

    def add_rule(self, rule: str) -> None:
        """Add one more literal name to the exclusion set.

        Args:
            rule: Directory name to exclude.

        Raises:
            ValueError: If rule is empty or contains a path separator.
        """
        if not rule or "/" in rule or "\\" in rule:
            raise ValueError(f"Exclusion rule must be a single path segment, got {rule!r}")
        self._names.add(rule)

    def has_rules(self) -> bool:
        """Check if any names are configured.

        Returns:
            True if at least one name is excluded, False otherwise.
        """
        return bool(self._names)
