"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from drill.core.history import HistoryLog
from drill.core.state import DrillState, Question


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def rng():
    """Seeded random source so picks replay identically."""
    return random.Random(1234)


def make_bank(size: int) -> list[Question]:
    return [Question(prompt=f"{i} + 1", answer=str(i + 1)) for i in range(size)]


def make_state(
    bank_size: int,
    working_set,
    answers=(),
    target_time=None,
) -> DrillState:
    """
    Build a state from (question_index, duration) pairs, oldest first.
    A duration of None records a failure.
    """
    history = HistoryLog()
    for question_index, duration in answers:
        history.record(question_index, duration)
    return DrillState(
        bank=make_bank(bank_size),
        working_set=set(working_set),
        target_time=target_time,
        history=history,
    )


@pytest.fixture
def state_factory():
    """Provide make_state() to tests."""
    return make_state
