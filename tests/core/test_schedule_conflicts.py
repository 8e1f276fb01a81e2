from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from tutormatch.core import ScheduleConflictDetector, find_conflicts, has_conflict
from tutormatch.core.schedule import parse_start_time
from tutormatch.schemas import ScheduledBlock

DAY = date(2024, 6, 10)


def build_block(**kwargs: Any) -> ScheduledBlock:
    defaults: dict[str, Any] = {
        "block_id": "B-1",
        "tutor_id": "T-300",
        "class_date": DAY,
        "start_time": "09:00",
        "duration_minutes": 60,
        "status": "scheduled",
    }
    defaults.update(kwargs)
    return ScheduledBlock(**defaults)


def test_overlapping_proposal_conflicts():
    blocks = [build_block()]

    assert has_conflict(blocks, "T-300", DAY, "09:30", 30)


def test_back_to_back_proposal_does_not_conflict():
    blocks = [build_block()]

    assert not has_conflict(blocks, "T-300", DAY, "10:00", 60)
    assert not has_conflict(blocks, "T-300", DAY, "08:00", 60)


@pytest.mark.parametrize("status", ["cancelled", "completed", "confirmed"])
def test_inactive_blocks_never_conflict(status: str):
    blocks = [build_block(status=status)]

    assert not has_conflict(blocks, "T-300", DAY, "09:00", 60)


def test_ongoing_blocks_conflict():
    assert has_conflict([build_block(status="ongoing")], "T-300", DAY, "09:15", 10)


def test_other_tutors_and_days_are_ignored():
    blocks = [
        build_block(tutor_id="T-999"),
        build_block(block_id="B-2", class_date=date(2024, 6, 11)),
    ]

    assert not has_conflict(blocks, "T-300", DAY, "09:00", 60)


def test_excluded_block_allows_moving_itself():
    blocks = [build_block(block_id="B-edit")]

    assert has_conflict(blocks, "T-300", DAY, "09:15", 60)
    assert not has_conflict(blocks, "T-300", DAY, "09:15", 60, exclude_block_id="B-edit")


def test_proposal_enclosing_existing_block_conflicts():
    blocks = [build_block(start_time="10:00", duration_minutes=15)]

    assert has_conflict(blocks, "T-300", "2024-06-10", "09:00", 180)


def test_find_conflicts_returns_all_overlaps_in_order():
    blocks = [
        build_block(block_id="B-1", start_time="09:00", duration_minutes=60),
        build_block(block_id="B-2", start_time="10:30", duration_minutes=30),
        build_block(block_id="B-3", start_time="12:00", duration_minutes=30),
    ]

    conflicts = find_conflicts(blocks, "T-300", DAY, "09:30", 90)

    assert [block.block_id for block in conflicts] == ["B-1", "B-2"]


def test_accepts_seconds_in_start_time():
    blocks = [build_block(start_time="09:00:00")]

    assert has_conflict(blocks, "T-300", DAY, "09:59:00", 5)


def test_malformed_existing_block_is_skipped():
    blocks = [build_block(start_time="nine"), build_block(block_id="B-2", start_time="13:00")]

    assert not has_conflict(blocks, "T-300", DAY, "09:00", 60)
    assert has_conflict(blocks, "T-300", DAY, "13:30", 60)


@pytest.mark.parametrize(
    ("start", "duration"),
    [("25:00", 30), ("9am", 30), ("09:00", 0), ("09:00", -15)],
)
def test_invalid_proposal_raises(start: str, duration: int):
    detector = ScheduleConflictDetector()

    with pytest.raises(ValueError):
        detector.has_conflict([build_block()], "T-300", DAY, start, duration)


def test_parse_start_time_returns_clock_time():
    clock = parse_start_time("14:05:30")

    assert (clock.hour, clock.minute, clock.second) == (14, 5, 30)
    assert parse_start_time(" 09:00 ").hour == 9


@pytest.mark.parametrize("value", ["nine", "9am", "24:61", "2024-06-10"])
def test_parse_start_time_rejects_non_times(value: str):
    with pytest.raises(ValueError):
        parse_start_time(value)
