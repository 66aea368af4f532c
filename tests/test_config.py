"""Unit tests for configuration and size parsing."""

import argparse
import os
from unittest.mock import patch

import pytest

from dirbrowser.config import DEFAULT_PORT, BrowserConfig, parse_file_size
from dirbrowser.exclusion_rules import DEFAULT_EXCLUDED_NAMES


class TestParseFileSize:
    """Test the parse_file_size utility function."""

    def test_parse_bytes_only(self):
        assert parse_file_size("1024") == 1024
        assert parse_file_size("0") == 0

    def test_parse_human_readable_decimal(self):
        assert parse_file_size("1KB") == 1000
        assert parse_file_size("10MB") == 10000000
        assert parse_file_size("2.5MB") == 2500000

    def test_parse_human_readable_binary(self):
        assert parse_file_size("1KiB") == 1024
        assert parse_file_size("2MiB") == 2097152

    def test_parse_int(self):
        assert parse_file_size(4096) == 4096

    def test_negative_int_rejected(self):
        with pytest.raises(ValueError, match="Size cannot be negative"):
            parse_file_size(-1)

    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="Invalid size"):
            parse_file_size(True)

    def test_parse_invalid_format(self):
        with pytest.raises(ValueError, match="Invalid size format"):
            parse_file_size("invalid")
        with pytest.raises(ValueError, match="Invalid size format"):
            parse_file_size("1XB")

    def test_humanfriendly_not_available(self):
        with patch("builtins.__import__") as mock_import:
            mock_import.side_effect = ImportError("No module named 'humanfriendly'")
            with pytest.raises(ImportError, match="humanfriendly is required"):
                parse_file_size("1GB")


class TestBrowserConfig:
    """Test the BrowserConfig dataclass."""

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = BrowserConfig()
        assert config.default_root == os.getcwd()
        assert config.excluded_names == DEFAULT_EXCLUDED_NAMES
        assert config.max_read_size == 10000000
        assert config.max_write_size == 10000000
        assert config.host == "127.0.0.1"
        assert config.port == DEFAULT_PORT == 3033

    def test_default_root_fixed_at_creation(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = BrowserConfig()
        monkeypatch.chdir(tmp_path.parent)
        assert config.default_root == str(tmp_path)

    def test_relative_root_made_absolute(self, tmp_path, monkeypatch):
        (tmp_path / "sub").mkdir()
        monkeypatch.chdir(tmp_path)
        assert BrowserConfig(default_root="sub").default_root == str(tmp_path / "sub")

    def test_sizes_accept_strings(self, tmp_path):
        config = BrowserConfig(default_root=str(tmp_path), max_read_size="1KiB", max_write_size="2KB")
        assert config.max_read_size == 1024
        assert config.max_write_size == 2000

    def test_invalid_size_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            BrowserConfig(default_root=str(tmp_path), max_read_size="lots")

    @pytest.mark.parametrize("port", [0, 70000])
    def test_invalid_port_rejected(self, tmp_path, port):
        with pytest.raises(ValueError, match="Port must be between"):
            BrowserConfig(default_root=str(tmp_path), port=port)

    def test_excluded_names_frozen(self, tmp_path):
        config = BrowserConfig(default_root=str(tmp_path), excluded_names=["build"])
        assert config.excluded_names == frozenset({"build"})

    def test_from_args(self, tmp_path):
        args = argparse.Namespace(
            root=str(tmp_path), max_read_size=2048, max_write_size=4096, host="0.0.0.0", port=8080
        )
        config = BrowserConfig.from_args(args)
        assert config.default_root == str(tmp_path)
        assert config.max_read_size == 2048
        assert config.max_write_size == 4096
        assert config.host == "0.0.0.0"
        assert config.port == 8080

    def test_from_args_without_root(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        args = argparse.Namespace(root=None, max_read_size="1MB", max_write_size="1MB", host="127.0.0.1", port=3033)
        assert BrowserConfig.from_args(args).default_root == str(tmp_path)
