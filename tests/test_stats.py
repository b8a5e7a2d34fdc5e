"""Tests for session statistics."""

from datetime import date, datetime, timedelta, timezone

import pytest

from zenfocus.errors import ValidationFailed
from zenfocus.models.database import MemoryBackend
from zenfocus.models.owner import UserOwner
from zenfocus.stores.sessions import SessionStore, compute_streaks

TODAY = date(2024, 6, 15)
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
OWNER = UserOwner("11111111-1111-1111-1111-111111111111")


def test_streak_counts_back_from_today() -> None:
    days = [TODAY, TODAY - timedelta(days=1), TODAY - timedelta(days=2)]
    assert compute_streaks(days, TODAY) == (3, 3)


def test_streak_counts_back_from_yesterday() -> None:
    days = [TODAY - timedelta(days=1), TODAY - timedelta(days=2)]
    assert compute_streaks(days, TODAY) == (2, 2)


def test_broken_streak() -> None:
    days = [TODAY - timedelta(days=3), TODAY - timedelta(days=5), TODAY - timedelta(days=6)]
    assert compute_streaks(days, TODAY) == (0, 2)


def test_duplicate_days_count_once() -> None:
    assert compute_streaks([TODAY, TODAY, TODAY], TODAY) == (1, 1)


def test_no_sessions() -> None:
    assert compute_streaks([], TODAY) == (0, 0)


def _add(store: SessionStore, start: datetime, mode: str, minutes: int, completed: bool) -> None:
    session = store.create(OWNER, {
        "mode": mode,
        "plannedDuration": 25,
        "startTime": start.isoformat(),
    })
    store.update(session.id, OWNER, {
        "endTime": (start + timedelta(minutes=minutes + 1)).isoformat(),
        "actualDuration": minutes,
        "completedFully": completed,
        "pauseCount": 0,
        "totalPauseTime": 0,
    })


@pytest.fixture
def store() -> SessionStore:
    store = SessionStore(MemoryBackend())
    _add(store, NOW - timedelta(hours=2), "study", 25, True)
    _add(store, NOW - timedelta(days=1), "zen", 15, False)
    _add(store, NOW - timedelta(days=60), "deepwork", 90, True)
    return store


def test_month_stats(store: SessionStore) -> None:
    stats = store.stats(OWNER, "month", now=NOW)
    assert stats.total_sessions == 2
    assert stats.total_focus_time == 40
    assert stats.average_session_duration == 20.0
    assert stats.completion_rate == 50.0
    assert stats.mode_breakdown == {"study": 1, "deepwork": 0, "yoga": 0, "zen": 1}
    assert stats.current_streak == 2
    assert stats.longest_streak == 2


def test_all_time_stats(store: SessionStore) -> None:
    stats = store.stats(OWNER, "all", now=NOW)
    assert stats.total_sessions == 3
    assert stats.total_focus_time == 130
    assert stats.mode_breakdown["deepwork"] == 1


def test_empty_stats() -> None:
    stats = SessionStore(MemoryBackend()).stats(OWNER, "week", now=NOW)
    assert stats.total_sessions == 0
    assert stats.completion_rate == 0.0
    assert stats.average_session_duration == 0.0
    assert set(stats.mode_breakdown) == {"study", "deepwork", "yoga", "zen"}


def test_unknown_period(store: SessionStore) -> None:
    with pytest.raises(ValidationFailed, match="period"):
        store.stats(OWNER, "decade", now=NOW)
