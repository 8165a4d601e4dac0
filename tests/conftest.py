"""Pytest configuration and shared fixtures."""

import os
from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

# Allow Qt widget tests to run without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from time_calculator.config import TimeCalculatorConfig
from time_calculator.models import CalculationStep, HistoryEntry, Operator
from time_calculator.orchestration import CalculationSession
from time_calculator.presenters import NullPresenter
from time_calculator.services import HistoryService, InMemoryPreferencesStore

FIXED_NOW = datetime(2025, 1, 2, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return TimeCalculatorConfig(
        history_db_path=temp_dir / "history.db",
        preferences_path=temp_dir / "preferences.json",
        default_color_tag="blue",
        history_limit=10,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def memory_preferences():
    """Provide an empty in-memory preferences store."""
    return InMemoryPreferencesStore()


class RecordingHistorySink:
    """A real HistorySink implementation that keeps every recorded entry."""

    def __init__(self):
        self.entries = []

    def record(self, entry: HistoryEntry) -> None:
        self.entries.append(entry)


@pytest.fixture
def recording_sink():
    """Provide a history sink that records entries for assertion."""
    return RecordingHistorySink()


@pytest.fixture
def fixed_clock():
    """Provide a clock that advances one minute per call from a fixed start."""
    ticks = count()

    def _clock():
        return FIXED_NOW + timedelta(minutes=next(ticks))

    return _clock


@pytest.fixture
def session(test_config, recording_sink, fixed_clock):
    """Provide a calculation session wired to a recording sink."""
    ids = count(1)
    return CalculationSession(
        test_config,
        history_sink=recording_sink,
        clock=fixed_clock,
        id_factory=lambda: f"entry-{next(ids):04d}",
    )


@pytest.fixture
def history_service(temp_dir):
    """Create a HistoryService with a temporary database."""
    service = HistoryService(temp_dir / "test_history.db")
    service.initialize()
    return service


@pytest.fixture
def make_entry():
    """Factory fixture for creating HistoryEntry instances with sensible defaults."""
    ids = count(1)

    def _make(
        result_seconds=10800,
        label="2h + 1h",
        color_tag="blue",
        created_at=FIXED_NOW,
        steps=None,
        entry_id=None,
    ):
        if steps is None:
            steps = (
                CalculationStep(7200, Operator.ADD),
                CalculationStep(3600, None),
            )
        return HistoryEntry(
            id=entry_id or f"{next(ids):032x}",
            result_seconds=result_seconds,
            label=label,
            color_tag=color_tag,
            created_at=created_at,
            last_modified=created_at,
            steps=tuple(steps),
        )

    return _make
