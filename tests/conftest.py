"""
Shared test fixtures
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from lazyfestival.database import init_db, repository
from lazyfestival.lineup import Lineup, Performance, PerformanceResolver


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def db(tmp_path):
    """Fresh SQLite database per test"""
    init_db(f"sqlite:///{tmp_path / 'data' / 'test.db'}")
    yield
    repository._engine.dispose()


@pytest.fixture
def lineup():
    """Two festival days; Alpha starts 2024-07-12 20:00 UTC"""
    return Lineup.from_performances([
        Performance(name="Gamma", start=utc(2024, 7, 13, 18, 0), stage="Main"),
        Performance(name="Alpha", start=utc(2024, 7, 12, 20, 0), stage="Main"),
        Performance(name="Beta", start=utc(2024, 7, 12, 21, 30), stage="Tent"),
    ])


@pytest.fixture
def resolver(lineup):
    return PerformanceResolver(lineup)
