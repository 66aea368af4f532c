"""Node representation for entries in a directory listing."""

from datetime import datetime
from typing import Any, Dict, Optional

from anytree import Node

from dirbrowser.types import FileType


class FileEntry(Node):  # type: ignore
    """Node class describing a file or directory in a listing tree.

    Extends anytree.Node with the metadata the browser reports for each entry.
    Top-level entries of a listing have no parent; the listed directory itself is
    not part of the tree.

    A directory entry is in exactly one of two states: expanded, in which case its
    children (possibly none) are attached, or truncated, in which case
    ``has_more_children`` is True and nothing is attached.

    Attributes:
        name (str): The final path segment.
        abs_path (str): Absolute path to the entry at listing time.
        kind (FileType): FILE or DIRECTORY.
        extension (str): Lowercase extension including the leading dot, empty for directories.
        size_bytes (int): Size in bytes, 0 for directories.
        modified_at (datetime): Last modification time, timezone-aware UTC.
        has_more_children (bool): True for directories that were not expanded.

    Example:
        >>> from datetime import timezone
        >>> stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> folder = FileEntry("a", abs_path="/r/a", kind=FileType.DIRECTORY, modified_at=stamp)
        >>> note = FileEntry(
        ...     "x.txt", parent=folder, abs_path="/r/a/x.txt", extension=".txt", size_bytes=10, modified_at=stamp
        ... )
        >>> [child.name for child in folder.children]
        ['x.txt']
        >>> folder.to_dict()["children"][0]["size"]
        10
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileEntry"] = None,
        *,
        abs_path: str,
        kind: FileType = FileType.FILE,
        extension: str = "",
        size_bytes: int = 0,
        modified_at: datetime,
        has_more_children: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileEntry.

        Args:
            name: The final path segment.
            parent: The parent directory entry. Defaults to None.
            abs_path: Absolute path to the entry.
            kind: Whether the entry is a file or a directory. Defaults to FILE.
            extension: Lowercase extension with leading dot. Forced empty for directories.
            size_bytes: Size in bytes. Forced to 0 for directories.
            modified_at: Last modification time.
            has_more_children: Mark a directory as truncated. Ignored for files.
            **kwargs: Additional arguments passed to anytree.Node.

        Raises:
            ValueError: If size_bytes is negative.
        """
        if size_bytes < 0:
            raise ValueError(f"size_bytes cannot be negative, got {size_bytes}")
        is_dir = kind == FileType.DIRECTORY
        super().__init__(name, parent, **kwargs)
        self.abs_path = abs_path
        self.kind = kind
        self.extension = "" if is_dir else extension
        self.size_bytes = 0 if is_dir else size_bytes
        self.modified_at = modified_at
        self.has_more_children = has_more_children and is_dir

    @property
    def is_dir(self) -> bool:
        return self.kind == FileType.DIRECTORY

    def to_dict(self) -> Dict[str, Any]:
        """Convert the entry and its attached children to a JSON-safe dictionary.

        Files never carry ``children`` or ``hasMoreChildren``. Directories carry one or
        the other, never both.

        Returns:
            A dictionary using the wire field names (camelCase).
        """
        result: Dict[str, Any] = {
            "name": self.name,
            "path": self.abs_path,
            "kind": self.kind.value,
            "extension": self.extension,
            "size": self.size_bytes,
            "modifiedAt": self.modified_at.isoformat(),
        }
        if self.is_dir:
            if self.has_more_children:
                result["hasMoreChildren"] = True
            else:
                result["children"] = [child.to_dict() for child in self.children]
        return result
