"""Class schedule conflict detection."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

import pendulum
import structlog
from pendulum.parsing.exceptions import ParserError

from ..schemas import ScheduledBlock


class ScheduleConflictDetector:
    """Check a proposed class time against a tutor's committed blocks.

    Intervals are half-open, so a block ending at 10:00 and another starting
    at 10:00 do not conflict. Only active blocks (scheduled or ongoing) take
    part; ``exclude_block_id`` lets a block be moved without clashing with
    its own previous slot.
    """

    def __init__(self, *, timezone: str = "UTC") -> None:
        self._timezone = timezone
        self._logger = structlog.get_logger(__name__)

    def has_conflict(
        self,
        blocks: Iterable[ScheduledBlock],
        tutor_id: str,
        proposed_date: date | str,
        proposed_start: str,
        proposed_duration_minutes: int,
        exclude_block_id: str | None = None,
    ) -> bool:
        for _ in self._overlapping(
            blocks,
            tutor_id,
            proposed_date,
            proposed_start,
            proposed_duration_minutes,
            exclude_block_id,
        ):
            return True
        return False

    def find_conflicts(
        self,
        blocks: Iterable[ScheduledBlock],
        tutor_id: str,
        proposed_date: date | str,
        proposed_start: str,
        proposed_duration_minutes: int,
        exclude_block_id: str | None = None,
    ) -> list[ScheduledBlock]:
        """Return every active block overlapping the proposal, in input order."""
        return list(
            self._overlapping(
                blocks,
                tutor_id,
                proposed_date,
                proposed_start,
                proposed_duration_minutes,
                exclude_block_id,
            )
        )

    def _overlapping(
        self,
        blocks: Iterable[ScheduledBlock],
        tutor_id: str,
        proposed_date: date | str,
        proposed_start: str,
        proposed_duration_minutes: int,
        exclude_block_id: str | None,
    ):
        if proposed_duration_minutes <= 0:
            raise ValueError("proposed duration must be positive")
        day = coerce_date(proposed_date)
        start = self._anchor(day, proposed_start)
        end = start.add(minutes=proposed_duration_minutes)

        for block in blocks:
            if block.tutor_id != tutor_id or not block.is_active:
                continue
            if block.class_date != day:
                continue
            if exclude_block_id is not None and block.block_id == exclude_block_id:
                continue
            try:
                block_start = self._anchor(block.class_date, block.start_time)
            except ValueError:
                self._logger.warning(
                    "schedule.block_skipped",
                    block_id=block.block_id,
                    start_time=block.start_time,
                )
                continue
            block_end = block_start.add(minutes=block.duration_minutes)
            if start < block_end and block_start < end:
                yield block

    def _anchor(self, day: date, start_time: str) -> pendulum.DateTime:
        clock = parse_start_time(start_time)
        return pendulum.datetime(
            day.year,
            day.month,
            day.day,
            clock.hour,
            clock.minute,
            clock.second,
            tz=self._timezone,
        )


def parse_start_time(value: str) -> pendulum.Time:
    """Parse an ISO ``HH:MM`` or ``HH:MM:SS`` wall-clock time."""
    try:
        parsed = pendulum.parse(str(value).strip(), exact=True)
    except (ValueError, ParserError) as exc:
        raise ValueError(f"Invalid start time: {value!r}") from exc
    if not isinstance(parsed, pendulum.Time):
        raise ValueError(f"Invalid start time: {value!r}")
    return parsed


def coerce_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = pendulum.parse(str(value))
    if isinstance(parsed, datetime):
        return parsed.date()
    if isinstance(parsed, date):
        return parsed
    raise ValueError(f"Invalid date: {value!r}")


_default_detector = ScheduleConflictDetector()


def has_conflict(
    blocks: Iterable[ScheduledBlock],
    tutor_id: str,
    proposed_date: date | str,
    proposed_start: str,
    proposed_duration_minutes: int,
    exclude_block_id: str | None = None,
) -> bool:
    return _default_detector.has_conflict(
        blocks,
        tutor_id,
        proposed_date,
        proposed_start,
        proposed_duration_minutes,
        exclude_block_id,
    )


def find_conflicts(
    blocks: Iterable[ScheduledBlock],
    tutor_id: str,
    proposed_date: date | str,
    proposed_start: str,
    proposed_duration_minutes: int,
    exclude_block_id: str | None = None,
) -> list[ScheduledBlock]:
    return _default_detector.find_conflicts(
        blocks,
        tutor_id,
        proposed_date,
        proposed_start,
        proposed_duration_minutes,
        exclude_block_id,
    )


__all__ = [
    "ScheduleConflictDetector",
    "coerce_date",
    "find_conflicts",
    "has_conflict",
    "parse_start_time",
]
