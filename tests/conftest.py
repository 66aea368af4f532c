"""Test configuration and fixtures for dirbrowser."""

import pytest

from dirbrowser.browser import FileBrowser
from dirbrowser.config import BrowserConfig


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small tree: a/x.txt (10 bytes) and b.txt (5 bytes)."""
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "x.txt").write_bytes(b"0123456789")
    (tmp_path / "b.txt").write_bytes(b"hello")
    return tmp_path


@pytest.fixture
def deep_tree(tmp_path):
    """Create a chain of nested directories: l0/l1/l2/l3/leaf.txt."""
    current = tmp_path
    for level in range(4):
        current = current / f"l{level}"
        current.mkdir()
        (current / f"file{level}.txt").write_text(str(level))
    (current / "leaf.txt").write_text("leaf")
    return tmp_path


@pytest.fixture
def browser(tmp_path):
    """Create a FileBrowser rooted at the temporary directory with small size limits."""
    config = BrowserConfig(default_root=str(tmp_path), max_read_size=1024, max_write_size=1024)
    return FileBrowser(config)
