"""Shared fixtures for ansitext tests."""

import pytest


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Provide a temporary config directory."""
    config_dir = tmp_path / "config" / "ansitext"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def sample_log(tmp_path):
    """Provide a file of captured terminal output with CRLF line endings."""
    path = tmp_path / "build.log"
    path.write_bytes(b"\x1b[1;32mok\x1b[0m compiled\r\n\x1b[31merror\x1b[0m: failed\r\n")
    return path
