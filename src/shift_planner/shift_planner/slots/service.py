from __future__ import annotations

from datetime import date, timedelta
from typing import List

from ..core.constants import DAYS_PER_WEEK, FIRST_SLOT_HOUR, MINUTES_PER_DAY, SLOT_COUNT
from ..core.exceptions import RangeError, ValidationError
from .model import TimeOfDay


def days_of_week(anchor: date) -> List[date]:
    """Seven consecutive dates with ``anchor`` as day zero.

    No snapping to Monday: the grid walks forward from whatever day it is given.
    """

    return [anchor + timedelta(days=i) for i in range(DAYS_PER_WEEK)]


def shift_week(anchor: date, direction: str) -> date:
    """Move the grid anchor one week back ('prev') or forward ('next')."""

    if direction == "next":
        return anchor + timedelta(days=DAYS_PER_WEEK)
    if direction == "prev":
        return anchor - timedelta(days=DAYS_PER_WEEK)
    raise ValidationError(f"Unknown week direction: {direction!r}")


def add_minutes(t: TimeOfDay, delta: int) -> TimeOfDay:
    result = t.minutes + int(delta)
    if not 0 <= result < MINUTES_PER_DAY:
        raise RangeError(f"{t} {'+' if delta >= 0 else '-'} {abs(delta)} min leaves the day")
    return TimeOfDay(result)


def minutes_between(start: TimeOfDay, end: TimeOfDay) -> int:
    """Signed delta ``end - start`` in minutes."""
    return end.minutes - start.minutes


def time_slots() -> List[TimeOfDay]:
    return [TimeOfDay.of(FIRST_SLOT_HOUR + i) for i in range(SLOT_COUNT)]
