"""Local file-system browser and editor served over HTTP.

This package provides a depth-bounded directory tree listing together with
the read, write and navigation operations a lightweight in-browser file
manager needs.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirbrowser")
except PackageNotFoundError:
    __version__ = "unknown"
