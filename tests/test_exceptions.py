"""Tests for custom exceptions."""

from dirbrowser.exceptions import (
    DirBrowserError,
    FileTooLargeError,
    InvalidArgumentError,
    IOFailureError,
    PathNotFoundError,
)


class TestPathNotFoundError:
    """Test PathNotFoundError exception."""

    def test_creation(self):
        error = PathNotFoundError("/path/to/missing.txt")
        assert error.path == "/path/to/missing.txt"
        assert str(error) == "Path not found: /path/to/missing.txt"
        assert isinstance(error, DirBrowserError)


class TestInvalidArgumentError:
    def test_message(self):
        error = InvalidArgumentError("Path is required")
        assert str(error) == "Path is required"
        assert isinstance(error, DirBrowserError)


class TestIOFailureError:
    def test_attributes(self):
        error = IOFailureError("/etc/shadow", "Permission denied")
        assert error.path == "/etc/shadow"
        assert error.reason == "Permission denied"
        assert str(error) == "I/O failure on /etc/shadow: Permission denied"


class TestFileTooLargeError:
    """Test FileTooLargeError exception."""

    def test_attributes(self):
        error = FileTooLargeError("/var/log/big.log", 2048, 1024)
        assert error.path == "/var/log/big.log"
        assert error.size == 2048
        assert error.limit == 1024
        assert "2048 bytes" in str(error)
        assert "limit is 1024 bytes" in str(error)
        assert isinstance(error, DirBrowserError)
