"""Browser operations: list, navigate to parent, read, write and select folder.

The FileBrowser class validates the single path input of each operation, calls
into the filesystem or the DirectoryTreeBuilder, and returns plain result
objects. Failures surface as the exceptions in dirbrowser.exceptions; the API
layer maps them to status codes.
"""

import logging
import os
import platform
import stat
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from dirbrowser.config import BrowserConfig
from dirbrowser.exceptions import InvalidArgumentError, IOFailureError, PathNotFoundError
from dirbrowser.file_access import read_text_file, write_text_file
from dirbrowser.file_system_tree.directory_tree_builder import DirectoryTreeBuilder
from dirbrowser.file_system_tree.file_entry import FileEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Listing:
    """A directory listing together with the path it was taken from.

    Attributes:
        files: Sorted top-level entries.
        current_path: The listed directory.
        root: The configured default root.
    """

    files: List[FileEntry]
    current_path: str
    root: str


@dataclass(frozen=True)
class ParentListing:
    """Result of navigating one level up.

    When the filesystem root is reached, ``files`` is empty, ``current_path`` is the
    path that was given, and ``is_root`` is True.
    """

    files: List[FileEntry]
    current_path: str
    is_root: bool


@dataclass(frozen=True)
class FileContent:
    content: str
    path: str


class FileBrowser:
    """Entry point for every operation the HTTP service exposes.

    A FileBrowser holds only immutable configuration, so one instance can serve
    concurrent requests. Each listing builds a fresh tree from live filesystem state.

    Attributes:
        config (BrowserConfig): The service configuration.

    Example:
        >>> browser = FileBrowser(BrowserConfig(default_root="/srv/notes"))  # doctest: +SKIP
        >>> listing = browser.list()  # doctest: +SKIP
        >>> listing.current_path  # doctest: +SKIP
        '/srv/notes'
    """

    def __init__(self, config: Optional[BrowserConfig] = None) -> None:
        self.config = config if config is not None else BrowserConfig()

    def info(self) -> Dict[str, Any]:
        """Describe the serving environment.

        Returns:
            A mapping with the default root (``cwd``), platform, machine architecture
            and Python version.
        """
        return {
            "cwd": self.config.default_root,
            "platform": sys.platform,
            "arch": platform.machine(),
            "runtimeVersion": platform.python_version(),
        }

    def _build_tree(self, directory: str) -> List[FileEntry]:
        builder = DirectoryTreeBuilder(self.config.excluded_names)
        return builder.build(directory)

    def _resolve(self, path: Optional[str]) -> str:
        # Missing and empty paths both fall back to the default root; relative paths
        # are taken relative to it rather than to the process working directory
        if not path:
            return self.config.default_root
        return os.path.abspath(os.path.join(self.config.default_root, path))

    def list(self, path: Optional[str] = None) -> Listing:
        """List a directory.

        A directory that does not exist or cannot be read yields an empty listing
        rather than an error.

        Args:
            path: Directory to list. Defaults to the configured default root.

        Returns:
            The listing, its absolute path and the default root.
        """
        directory = self._resolve(path)
        logger.debug("Listing %s", directory)
        return Listing(files=self._build_tree(directory), current_path=directory, root=self.config.default_root)

    def navigate_to_parent(self, path: Optional[str] = None) -> ParentListing:
        """List the parent of a directory.

        Args:
            path: Directory whose parent to list. Defaults to the configured default root.

        Returns:
            The parent listing, or an empty listing flagged ``is_root`` when the given
            path has no parent.
        """
        current = self._resolve(path)
        parent = os.path.dirname(current)
        if not parent or parent == current:
            logger.debug("Already at filesystem root: %s", current)
            return ParentListing(files=[], current_path=current, is_root=True)
        return ParentListing(files=self._build_tree(parent), current_path=parent, is_root=False)

    def read_file(self, path: Optional[str]) -> FileContent:
        """Read a file's full text content.

        Args:
            path: File to read. Required.

        Returns:
            The content and the path as given.

        Raises:
            InvalidArgumentError: If path is missing or names a directory.
            PathNotFoundError: If the file does not exist.
            FileTooLargeError: If the file exceeds the configured read limit.
            IOFailureError: If the file cannot be read.
        """
        if not path:
            raise InvalidArgumentError("Path is required")
        content = read_text_file(self._resolve(path), self.config.max_read_size)
        return FileContent(content=content, path=path)

    def write_file(self, path: Optional[str], content: Any) -> None:
        """Replace a file's content in full, creating the file if needed.

        Args:
            path: File to write. Required.
            content: New text content. Required, must be a string.

        Raises:
            InvalidArgumentError: If path or content is missing or invalid.
            FileTooLargeError: If the content exceeds the configured write limit.
            IOFailureError: If the file cannot be written.
        """
        if not path:
            raise InvalidArgumentError("Path is required")
        if not isinstance(content, str):
            raise InvalidArgumentError("Content must be a string")
        written = write_text_file(self._resolve(path), content, self.config.max_write_size)
        logger.info("Wrote %d bytes to %s", written, path)

    def select_folder(self, folder_path: Optional[str]) -> Listing:
        """Validate a folder and list it as the new browsing location.

        Args:
            folder_path: Directory to select. Required.

        Returns:
            The listing, with ``current_path`` set to the absolute folder path, as
            ``list`` reports it.

        Raises:
            InvalidArgumentError: If folder_path is missing or not a directory.
            PathNotFoundError: If folder_path does not exist, including paths that run
                through a regular file.
            IOFailureError: If folder_path cannot be inspected.
        """
        if not folder_path:
            raise InvalidArgumentError("Folder path is required")
        directory = self._resolve(folder_path)
        try:
            mode = os.stat(directory).st_mode
        except (FileNotFoundError, NotADirectoryError):
            raise PathNotFoundError(folder_path)
        except OSError as e:
            raise IOFailureError(folder_path, e.strerror or str(e))
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid path {folder_path!r}: {e}")
        if not stat.S_ISDIR(mode):
            raise InvalidArgumentError(f"Path is not a directory: {folder_path}")

        logger.info("Selected folder %s", folder_path)
        return Listing(files=self._build_tree(directory), current_path=directory, root=self.config.default_root)
