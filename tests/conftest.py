"""Shared fixtures for the organizer tests."""

from pathlib import Path

import pytest

from extension_organizer.utils.logger import get_logger


@pytest.fixture(autouse=True)
def fresh_logger():
    """Rebind the shared logger to the current stderr and drop any log file."""
    logger = get_logger()
    logger.configure()
    yield logger
    logger.configure()


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    path = tmp_path / "destination"
    path.mkdir()
    return path


@pytest.fixture
def make_file():
    """Write a small text file and return its path."""
    def _make_file(directory: Path, name: str, content: str = "content") -> Path:
        path = directory / name
        path.write_text(content, encoding="utf-8")
        return path
    return _make_file
