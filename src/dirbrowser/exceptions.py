class DirBrowserError(Exception):
    """
    Base class for failures surfaced by the browser operations.

    Every subclass maps to exactly one HTTP status code in the API layer. The tree
    builder never raises these; it degrades to partial or empty listings instead.
    """

    pass


class PathNotFoundError(DirBrowserError):
    """
    Exception raised when a referenced path does not exist.

    Attributes:
        path (str): The path that could not be found.

    Example:
        >>> error = PathNotFoundError("/tmp/missing.txt")
        >>> str(error)
        'Path not found: /tmp/missing.txt'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the missing path.

        Args:
            path (str): The path that could not be found.
        """
        self.path = path
        super().__init__(f"Path not found: {path}")


class InvalidArgumentError(DirBrowserError):
    """
    Exception raised when a required input is missing or has the wrong kind.

    Typical causes are an absent path parameter, or a file path given where a
    directory is required (and vice versa).

    Example:
        >>> error = InvalidArgumentError("Path is required")
        >>> str(error)
        'Path is required'
    """

    pass


class IOFailureError(DirBrowserError):
    """
    Exception raised when an underlying filesystem call fails for a reason not otherwise classified.

    Permission denials, device errors and missing parent directories on write all
    end up here.

    Attributes:
        path (str): The path being accessed.
        reason (str): The message of the underlying OS error.

    Example:
        >>> error = IOFailureError("/etc/shadow", "Permission denied")
        >>> str(error)
        'I/O failure on /etc/shadow: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"I/O failure on {path}: {reason}")


class FileTooLargeError(DirBrowserError):
    """
    Exception raised when file content exceeds the configured size limit.

    Attributes:
        path (str): Path to the file being read or written.
        size (int): Size of the content in bytes.
        limit (int): Configured maximum in bytes.

    Example:
        >>> error = FileTooLargeError("/var/log/big.log", 2048, 1024)
        >>> str(error)
        'File too large: /var/log/big.log (2048 bytes, limit is 1024 bytes)'
    """

    def __init__(self, path: str, size: int, limit: int) -> None:
        """
        Initialize the exception with the offending path and sizes.

        Args:
            path (str): Path to the file being read or written.
            size (int): Size of the content in bytes.
            limit (int): Configured maximum in bytes.
        """
        self.path = path
        self.size = size
        self.limit = limit
        super().__init__(f"File too large: {path} ({size} bytes, limit is {limit} bytes)")
