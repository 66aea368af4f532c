"""Unit tests for the argument parser module in dirbrowser CLI."""

from pathlib import Path

import pytest

from dirbrowser import __version__
from dirbrowser.cli.argparser import create_parser, validate_args


def test_defaults():
    """Test parser defaults when no arguments are given."""
    args = create_parser().parse_args([])
    assert args.root is None
    assert args.host == "127.0.0.1"
    assert args.port == 3033
    assert args.max_read_size == "10MB"
    assert args.max_write_size == "10MB"
    assert args.log_level == "info"


def test_all_options(tmp_path):
    """Test parsing every option."""
    args = create_parser().parse_args(
        [
            str(tmp_path),
            "--host",
            "0.0.0.0",
            "-p",
            "8080",
            "--max-read-size",
            "2MiB",
            "--max-write-size",
            "500KB",
            "--log-level",
            "debug",
        ]
    )
    assert args.root == tmp_path
    assert args.host == "0.0.0.0"
    assert args.port == 8080
    assert args.max_read_size == "2MiB"
    assert args.max_write_size == "500KB"
    assert args.log_level == "debug"


def test_invalid_port_type():
    """Test that a non-numeric port is a syntax error."""
    with pytest.raises(SystemExit) as excinfo:
        create_parser().parse_args(["--port", "http"])
    assert excinfo.value.code == 2


def test_invalid_log_level():
    with pytest.raises(SystemExit) as excinfo:
        create_parser().parse_args(["--log-level", "verbose"])
    assert excinfo.value.code == 2


def test_version(capsys):
    """Test the --version flag."""
    with pytest.raises(SystemExit) as excinfo:
        create_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
    assert f"dirbrowser {__version__}" in capsys.readouterr().out


class TestValidateArgs:
    """Test validation performed after parsing."""

    def test_converts_sizes(self, tmp_path):
        args = create_parser().parse_args([str(tmp_path), "--max-read-size", "1KiB", "--max-write-size", "2KB"])
        validate_args(args)
        assert args.max_read_size == 1024
        assert args.max_write_size == 2000
        assert args.root == str(tmp_path)

    def test_root_optional(self):
        args = create_parser().parse_args([])
        validate_args(args)
        assert args.root is None

    def test_expands_user(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        args = create_parser().parse_args(["~"])
        validate_args(args)
        assert args.root == str(tmp_path)

    def test_missing_root(self, tmp_path):
        args = create_parser().parse_args([str(tmp_path / "missing")])
        with pytest.raises(ValueError, match="Root is not a directory"):
            validate_args(args)

    def test_root_is_file(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        args = create_parser().parse_args([str(target)])
        with pytest.raises(ValueError, match="Root is not a directory"):
            validate_args(args)

    def test_invalid_size(self):
        args = create_parser().parse_args(["--max-read-size", "huge"])
        with pytest.raises(ValueError, match="Invalid size format"):
            validate_args(args)

    def test_root_kept_as_path_until_validated(self, tmp_path):
        args = create_parser().parse_args([str(tmp_path)])
        assert isinstance(args.root, Path)
