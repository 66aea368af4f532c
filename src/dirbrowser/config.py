"""Runtime configuration for the browser service."""

import argparse
import os
from dataclasses import dataclass, field
from typing import FrozenSet, Union

from dirbrowser.exclusion_rules.name_rules import DEFAULT_EXCLUDED_NAMES

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3033
DEFAULT_MAX_FILE_SIZE = "10MB"


def parse_file_size(size: Union[str, int]) -> int:
    """Parse a human-readable file size to bytes.

    Args:
        size: Size string like '1GB', '500MB', '2.5K', or just '1024', or an int of bytes.

    Returns:
        Size in bytes

    Raises:
        ValueError: If size is not a valid size or is negative
        ImportError: If humanfriendly library is not available
    """
    if isinstance(size, bool):
        raise ValueError(f"Invalid size: {size!r}")
    if isinstance(size, int):
        if size < 0:
            raise ValueError("Size cannot be negative")
        return size

    try:
        from humanfriendly import parse_size
    except ImportError:
        raise ImportError("humanfriendly is required for size parsing. " "Install it with: pip install humanfriendly")

    try:
        return int(parse_size(size))
    except Exception as e:
        raise ValueError(f"Invalid size format '{size}': {e}")


@dataclass(frozen=True)
class BrowserConfig:
    """Settings shared by every request the service handles.

    The default root stands in for the process working directory: it is resolved
    once when the configuration is created and never re-read from the process.

    Attributes:
        default_root: Absolute directory used when a request omits its path.
        excluded_names: Literal directory names left out of every listing.
        max_read_size: Largest file, in bytes, that may be read.
        max_write_size: Largest content, in bytes once encoded, that may be written.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.

    Example:
        >>> config = BrowserConfig(default_root="/srv/notes", max_read_size="1KiB")
        >>> config.max_read_size
        1024
        >>> config.port
        3033
    """

    default_root: str = field(default_factory=os.getcwd)
    excluded_names: FrozenSet[str] = DEFAULT_EXCLUDED_NAMES
    max_read_size: int = parse_file_size(DEFAULT_MAX_FILE_SIZE)
    max_write_size: int = parse_file_size(DEFAULT_MAX_FILE_SIZE)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        # frozen dataclass, so normalized values go through object.__setattr__
        object.__setattr__(self, "default_root", os.path.abspath(os.fspath(self.default_root)))
        object.__setattr__(self, "excluded_names", frozenset(self.excluded_names))
        object.__setattr__(self, "max_read_size", parse_file_size(self.max_read_size))
        object.__setattr__(self, "max_write_size", parse_file_size(self.max_write_size))
        if not 0 < self.port < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {self.port}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "BrowserConfig":
        """Create a configuration from parsed command-line arguments.

        Args:
            args: Namespace produced by the dirbrowser argument parser.

        Returns:
            A validated BrowserConfig.

        Raises:
            ValueError: If a size or the port is invalid.
        """
        return cls(
            default_root=args.root if args.root is not None else os.getcwd(),
            max_read_size=args.max_read_size,
            max_write_size=args.max_write_size,
            host=args.host,
            port=args.port,
        )
