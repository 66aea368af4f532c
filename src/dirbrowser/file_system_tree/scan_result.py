"""Explicit per-entry outcomes aggregated by a directory traversal."""

from typing import Iterator, List, Optional

from dirbrowser.file_system_tree.file_entry import FileEntry
from dirbrowser.file_system_tree.skip_reason import SkipReason


class EntryResult:
    """The outcome of one attempt to describe a filesystem entry.

    An attempt either produced a FileEntry or was skipped for a recorded reason.
    Exactly one of ``entry`` and ``reason`` is set.

    Attributes:
        path (str): Path of the entry that was attempted.
        entry (Optional[FileEntry]): The produced entry on success.
        reason (Optional[SkipReason]): Why the entry was skipped.
        message (str): Human-readable detail for skips, usually the OS error message.

    Example:
        >>> result = EntryResult.skipped("/r/.git", SkipReason.EXCLUDED)
        >>> result.ok
        False
        >>> result
        EntryResult(path='/r/.git', reason='excluded')
    """

    def __init__(
        self,
        path: str,
        entry: Optional[FileEntry] = None,
        reason: Optional[SkipReason] = None,
        message: str = "",
    ) -> None:
        if (entry is None) == (reason is None):
            raise ValueError("EntryResult requires exactly one of entry or reason")
        self.path = path
        self.entry = entry
        self.reason = reason
        self.message = message

    @classmethod
    def success(cls, entry: FileEntry) -> "EntryResult":
        return cls(entry.abs_path, entry=entry)

    @classmethod
    def skipped(cls, path: str, reason: SkipReason, message: str = "") -> "EntryResult":
        return cls(path, reason=reason, message=message)

    @property
    def ok(self) -> bool:
        return self.entry is not None

    def __repr__(self) -> str:
        if self.reason is None:
            return f"EntryResult(path={self.path!r}, ok=True)"
        return f"EntryResult(path={self.path!r}, reason={self.reason.value!r})"


class ScanResult:
    """Aggregated result of a traversal: the listing plus everything that was skipped.

    Skips from nested directories are collected into the same ``skipped`` list as
    skips from the top level, in traversal order.

    Attributes:
        entries (List[FileEntry]): Sorted top-level entries of the listing.
        skipped (List[EntryResult]): Every skip recorded during the traversal.
    """

    def __init__(self, entries: Optional[List[FileEntry]] = None, skipped: Optional[List[EntryResult]] = None):
        self.entries: List[FileEntry] = entries if entries is not None else []
        self.skipped: List[EntryResult] = skipped if skipped is not None else []

    def skipped_for(self, reason: SkipReason) -> Iterator[EntryResult]:
        """Iterate over the skips recorded for one reason.

        Args:
            reason: The skip reason to filter on.

        Yields:
            Each matching EntryResult in traversal order.
        """
        for result in self.skipped:
            if result.reason == reason:
                yield result

    def __len__(self) -> int:
        return len(self.entries)
