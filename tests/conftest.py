"""Pytest fixtures/config for openfootball tests."""

import os
import sys
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_sessionstart(session) -> None:  # type: ignore[unused-argument]
    repo_root = os.path.dirname(os.path.dirname(__file__))
    src_path = os.path.join(repo_root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


@pytest.fixture
def sample_path() -> Path:
    """Trimmed 2018/19 Premier League file: 2 played rounds plus round 20 unplayed."""
    return FIXTURES_DIR / "pl.txt"


@pytest.fixture
def malformed_path() -> Path:
    return FIXTURES_DIR / "malformed.txt"


@pytest.fixture
def sample_season(sample_path):
    from openfootball.data.season import Season

    return Season.from_path(sample_path)
