"""Command-line argument parsing for dirbrowser.

This module defines the command-line interface for dirbrowser,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path

from dirbrowser import __version__
from dirbrowser.config import DEFAULT_HOST, DEFAULT_MAX_FILE_SIZE, DEFAULT_PORT, parse_file_size

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirbrowser's options.
    """
    description = """
    dirbrowser: a local file-system browser and editor served over HTTP.

    Starts a small HTTP service that lists directories, navigates to parent
    directories, and reads and writes text files. It is meant for single-user
    use on the local machine and binds to 127.0.0.1 by default.

    Listings expand two directory levels eagerly and flag deeper directories.
    Version-control, editor and dependency-cache directories (.git, .vscode,
    .idea, node_modules) are left out of every listing.
    """

    epilog = """
    Examples:
      # Browse the current directory on http://127.0.0.1:3033
      dirbrowser

      # Browse a project on another port
      dirbrowser ~/projects/site -p 8080

      # Refuse to open files larger than 2 MiB
      dirbrowser --max-read-size 2MiB
    """

    parser = argparse.ArgumentParser(
        prog="dirbrowser",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        help="Default directory for requests that omit a path (default: current directory).",
    )
    parser.add_argument("-V", "--version", action="version", version=f"dirbrowser {__version__}")
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Interface to bind (default: {DEFAULT_HOST}).",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT}).",
    )
    parser.add_argument(
        "--max-read-size",
        metavar="SIZE",
        default=DEFAULT_MAX_FILE_SIZE,
        help=f"Largest file that may be opened, e.g. 500KB, 2MiB (default: {DEFAULT_MAX_FILE_SIZE}).",
    )
    parser.add_argument(
        "--max-write-size",
        metavar="SIZE",
        default=DEFAULT_MAX_FILE_SIZE,
        help=f"Largest content that may be saved (default: {DEFAULT_MAX_FILE_SIZE}).",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="info",
        help="Logging verbosity (default: info).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.root is not None:
        root = os.path.expanduser(str(args.root))
        if not os.path.isdir(root):
            raise ValueError(f"Root is not a directory: {args.root}")
        args.root = root

    for option in ("max_read_size", "max_write_size"):
        setattr(args, option, parse_file_size(getattr(args, option)))
