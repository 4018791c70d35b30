"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
from filediscard import set_discarder
from filediscard.core.discarder import Discarder
from filediscard.platforms import macos_variant


@pytest.fixture(autouse=True)
def reset_default_discarder() -> Iterator[None]:
    """Keep the process default Discarder from leaking between tests."""
    set_discarder(None)
    yield
    set_discarder(None)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Fake home directory inside the test's temporary directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def home_trash(home: Path) -> Path:
    """Existing macOS-style home trash."""
    trash = home / ".Trash"
    trash.mkdir()
    return trash


@pytest.fixture
def reports() -> list[str]:
    """Collects verbose output from a Discarder."""
    return []


@pytest.fixture
def discarder(home: Path, reports: list[str]) -> Discarder:
    """macOS-style Discarder rooted at the fake home."""
    return Discarder(macos_variant(), home=home, reporter=reports.append)

