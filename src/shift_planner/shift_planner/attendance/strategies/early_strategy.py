from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from ...slots.service import minutes_between
from ..model import ClockEvent
from .base import AttendanceStrategy, StatusDecision


class EarlyOutStrategy(AttendanceStrategy):
    """Clock-out before scheduled end (only when the start was not late)."""

    def decide(self, *, shift: Shift, event: Optional[ClockEvent]) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.EARLY_OUT,
            deviation_minutes=minutes_between(event.actual_end, shift.end),
        )
