from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(str, Enum):
    """Enumeration of entry kinds reported in a directory listing.

    Symbolic links are resolved before classification, so a link to a directory
    is reported as a DIRECTORY and a link to a file as a FILE.

    Attributes:
        FILE: Regular file (or anything that is not a directory)
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
