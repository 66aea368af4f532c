"""Bounded text reads and whole-file text writes.

File content is treated as UTF-8. Reads and writes go through binary handles so
line endings are preserved byte-for-byte; undecodable bytes read from disk are
replaced with U+FFFD rather than failing the read.
"""

import os
import stat

from dirbrowser.exceptions import FileTooLargeError, InvalidArgumentError, IOFailureError, PathNotFoundError

ENCODING = "utf-8"


def read_text_file(path: str, max_size: int) -> str:
    """Read the full text content of a file, refusing files above a size limit.

    The limit is checked against the reported size first and enforced again while
    reading, so files that grow (or report no size, like character devices) cannot
    push the read past ``max_size`` bytes.

    Args:
        path: File to read.
        max_size: Largest number of bytes that may be read.

    Returns:
        The decoded file content.

    Raises:
        PathNotFoundError: If the path does not exist, including paths that run
            through a regular file.
        InvalidArgumentError: If the path is a directory or malformed.
        FileTooLargeError: If the file holds more than max_size bytes.
        IOFailureError: If the file cannot be read for any other reason.
    """
    try:
        stat_info = os.stat(path)
        # Directories report a block size, so they must be rejected before the size check
        if stat.S_ISDIR(stat_info.st_mode):
            raise IsADirectoryError(path)
        if stat_info.st_size > max_size:
            raise FileTooLargeError(path, stat_info.st_size, max_size)
        with open(path, "rb") as f:
            data = f.read(max_size + 1)
    except (FileNotFoundError, NotADirectoryError):
        # A path running through a regular file does not exist either
        raise PathNotFoundError(path)
    except IsADirectoryError:
        raise InvalidArgumentError(f"Path is a directory, not a file: {path}")
    except OSError as e:
        raise IOFailureError(path, e.strerror or str(e))
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid path {path!r}: {e}")

    if len(data) > max_size:
        raise FileTooLargeError(path, len(data), max_size)
    return data.decode(ENCODING, errors="replace")


def write_text_file(path: str, content: str, max_size: int) -> int:
    """Replace the full content of a file, creating it if needed.

    Args:
        path: File to write. Its parent directory must already exist.
        content: New text content.
        max_size: Largest number of encoded bytes that may be written.

    Returns:
        Number of bytes written.

    Raises:
        InvalidArgumentError: If content cannot be encoded or the path is a directory.
        FileTooLargeError: If the encoded content exceeds max_size bytes.
        IOFailureError: If the file cannot be written.
    """
    try:
        data = content.encode(ENCODING)
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(f"Content is not valid text: {e}")

    if len(data) > max_size:
        raise FileTooLargeError(path, len(data), max_size)

    try:
        with open(path, "wb") as f:
            f.write(data)
    except IsADirectoryError:
        raise InvalidArgumentError(f"Path is a directory, not a file: {path}")
    except OSError as e:
        raise IOFailureError(path, e.strerror or str(e))
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid path {path!r}: {e}")
    return len(data)
