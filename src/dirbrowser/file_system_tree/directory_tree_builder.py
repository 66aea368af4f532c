"""Depth-bounded directory tree listing with name-based exclusion rules.

This module provides the DirectoryTreeBuilder class, which walks a directory and
produces a sorted tree of FileEntry nodes. Traversal never raises for filesystem
failures: an unreadable directory yields an empty listing and an entry whose
metadata cannot be read is left out, with the reason recorded and logged.
"""

import logging
import os
import stat
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple, Union

from dirbrowser.exclusion_rules.base_rules import BaseExclusionRules
from dirbrowser.exclusion_rules.name_rules import NameExclusionRules
from dirbrowser.file_system_tree.file_entry import FileEntry
from dirbrowser.file_system_tree.scan_result import EntryResult, ScanResult
from dirbrowser.file_system_tree.skip_reason import SkipReason
from dirbrowser.types import FileType, PathType

logger = logging.getLogger(__name__)

# Directories found at a call depth below this are expanded, deeper ones are flagged
EXPANSION_THRESHOLD = 2
MAX_DEPTH = 3


def entry_sort_key(entry: FileEntry) -> Tuple[bool, str, str]:
    """Sort key placing directories first, then names in locale-style order.

    Names compare case-insensitively first; on a tie the lowercase spelling sorts
    before the uppercase one.

    Example:
        >>> names = ["b.txt", "B.txt", "a.txt"]
        >>> sorted(names, key=lambda n: (n.casefold(), n.swapcase()))
        ['a.txt', 'b.txt', 'B.txt']
    """
    return (not entry.is_dir, entry.name.casefold(), entry.name.swapcase())


class DirectoryTreeBuilder:
    """Builder for sorted, depth-bounded listings of a directory.

    Directories at call depth 0 and 1 are expanded eagerly; directories found deeper
    carry ``has_more_children`` instead of children. The ``max_depth`` argument only
    cuts off calls made beyond it, which the fixed expansion threshold never reaches
    under normal invocation.

    Exclusion Behavior:
        Exclusion rules are consulted for directories only, by entry name. An
        excluded directory and all of its descendants are omitted entirely. A file
        whose name happens to match is still listed.

    Error Handling:
        Enumeration failures and per-entry metadata failures are recorded as
        EntryResult skips and logged as warnings. They are never raised.

    Attributes:
        exclusion_rules (BaseExclusionRules): Rules deciding which directories to skip.

    Example:
        >>> builder = DirectoryTreeBuilder([".git", "node_modules"])  # doctest: +SKIP
        >>> for entry in builder.build("."):  # doctest: +SKIP
        ...     print(entry.kind.value, entry.name)
        directory src
        directory tests
        file README.md
    """

    def __init__(self, exclusion_rules: Union[BaseExclusionRules, Iterable[str], None] = None) -> None:
        """Initialize a DirectoryTreeBuilder.

        Args:
            exclusion_rules: An exclusion rules object, or an iterable of literal
                directory names to skip. Defaults to None, which excludes nothing.
        """
        if exclusion_rules is None:
            exclusion_rules = NameExclusionRules(())
        elif not isinstance(exclusion_rules, BaseExclusionRules):
            exclusion_rules = NameExclusionRules(exclusion_rules)
        self.exclusion_rules: BaseExclusionRules = exclusion_rules

    def build(self, directory_path: PathType, current_depth: int = 0, max_depth: int = MAX_DEPTH) -> List[FileEntry]:
        """Build the listing of a directory.

        Args:
            directory_path: Directory to list. Relative paths are made absolute.
            current_depth: Recursion depth of this call, 0 for a fresh listing.
            max_depth: Calls with current_depth above this return nothing.

        Returns:
            Sorted top-level entries. Empty if the directory cannot be read.
        """
        return self.scan(directory_path, current_depth, max_depth).entries

    def scan(self, directory_path: PathType, current_depth: int = 0, max_depth: int = MAX_DEPTH) -> ScanResult:
        """Build the listing of a directory and report every skipped entry.

        Args:
            directory_path: Directory to list. Relative paths are made absolute.
            current_depth: Recursion depth of this call, 0 for a fresh listing.
            max_depth: Calls with current_depth above this return nothing.

        Returns:
            A ScanResult holding the sorted entries and the skip records.
        """
        directory = os.path.abspath(os.fspath(directory_path))
        result = ScanResult()
        result.entries = self._list_directory(directory, current_depth, max_depth, result.skipped)
        logger.debug("Listed %s: %d entries, %d skipped", directory, len(result.entries), len(result.skipped))
        return result

    def _list_directory(
        self, directory: str, current_depth: int, max_depth: int, skipped: List[EntryResult]
    ) -> List[FileEntry]:
        if current_depth > max_depth:
            skipped.append(EntryResult.skipped(directory, SkipReason.DEPTH_EXCEEDED))
            return []

        try:
            names = os.listdir(directory)
        except (OSError, ValueError) as e:
            logger.warning("Could not read directory %s: %s", directory, e)
            skipped.append(EntryResult.skipped(directory, SkipReason.UNREADABLE_DIRECTORY, str(e)))
            return []

        entries: List[FileEntry] = []
        for name in names:
            outcome = self._describe_entry(directory, name, current_depth, max_depth, skipped)
            if outcome.entry is not None:
                entries.append(outcome.entry)
            else:
                skipped.append(outcome)

        entries.sort(key=entry_sort_key)
        return entries

    def _describe_entry(
        self, directory: str, name: str, current_depth: int, max_depth: int, skipped: List[EntryResult]
    ) -> EntryResult:
        """Describe one directory entry, recursing into subdirectories within the threshold."""
        full_path = os.path.join(directory, name)

        # Follows symlinks, so a dangling link fails here and is skipped
        try:
            stat_info = os.stat(full_path)
        except OSError as e:
            logger.warning("Skipping %s: %s", full_path, e)
            return EntryResult.skipped(full_path, SkipReason.STAT_FAILED, str(e))

        is_dir = stat.S_ISDIR(stat_info.st_mode)
        if is_dir and self.exclusion_rules.exclude(name):
            logger.debug("Excluding directory %s", full_path)
            return EntryResult.skipped(full_path, SkipReason.EXCLUDED)

        entry = FileEntry(
            name,
            abs_path=full_path,
            kind=FileType.DIRECTORY if is_dir else FileType.FILE,
            extension=os.path.splitext(name)[1].lower(),
            size_bytes=stat_info.st_size,
            modified_at=datetime.fromtimestamp(stat_info.st_mtime, tz=timezone.utc),
        )

        if is_dir:
            if current_depth < EXPANSION_THRESHOLD:
                entry.children = self._list_directory(full_path, current_depth + 1, max_depth, skipped)
            else:
                entry.has_more_children = True

        return EntryResult.success(entry)


def list_files(
    directory_path: PathType,
    excluded_names: Optional[Iterable[str]] = None,
    current_depth: int = 0,
    max_depth: int = MAX_DEPTH,
) -> List[FileEntry]:
    """List a directory in a single call.

    Args:
        directory_path: Directory to list.
        excluded_names: Literal directory names to skip. Defaults to None (skip nothing).
        current_depth: Recursion depth of this call, 0 for a fresh listing.
        max_depth: Calls with current_depth above this return nothing.

    Returns:
        Sorted top-level entries of the listing.
    """
    return DirectoryTreeBuilder(excluded_names).build(directory_path, current_depth, max_depth)
