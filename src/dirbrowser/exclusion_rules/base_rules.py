from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for directory exclusion rules.

    The tree builder consults an exclusion rules object for every directory it
    encounters. Rules are evaluated against the immediate entry name only (the final
    path segment), never against a full path, so a rule cannot distinguish two
    directories that share a name at different locations.

    Example:
        >>> from dirbrowser.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(["node_modules"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("src")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if a directory with the given name should be skipped.

        Args:
            name (str): The final path segment of the directory.

        Returns:
            bool: True if the directory and all of its descendants should be omitted
                from the listing, False if it should be included.

        Example:
            >>> class DotDirRules(BaseExclusionRules):
            ...     def exclude(self, name: str) -> bool:
            ...         return name.startswith(".")
            >>> DotDirRules().exclude(".cache")
            True
            >>> DotDirRules().exclude("docs")
            False
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that are fixed at construction use this default implementation,
        which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
