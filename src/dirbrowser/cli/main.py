"""Command-line interface for dirbrowser.

This module provides the entry point that parses options, builds the service
configuration and runs the HTTP application under uvicorn.

Exit Codes:
    0: Server stopped normally (including Ctrl+C)
    1: Invalid configuration or runtime error
    2: Command-line syntax error

Example:
    # Serve the current directory
    $ dirbrowser

    # Serve a specific directory on another port
    $ dirbrowser /path/to/project -p 8080
"""

import logging
import sys
from typing import List, Optional

import uvicorn

from dirbrowser.api.app import create_app
from dirbrowser.browser import FileBrowser
from dirbrowser.cli.argparser import create_parser, validate_args
from dirbrowser.config import BrowserConfig

logger = logging.getLogger("dirbrowser")


def configure_logging(level: str) -> None:
    """Configure root logging for the process.

    Args:
        level: Level name such as "info" or "debug".
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the dirbrowser command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].

    Exit codes:
        0: Server stopped normally
        1: Invalid configuration or runtime error
        2: Command-line syntax error
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args(argv)

    try:
        validate_args(args)
        config = BrowserConfig.from_args(args)
    except (ValueError, ImportError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    configure_logging(args.log_level)
    app = create_app(FileBrowser(config))

    logger.info("Serving on http://%s:%d", config.host, config.port)
    logger.info("Default root: %s", config.default_root)

    try:
        uvicorn.run(app, host=config.host, port=config.port, log_level=args.log_level)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
