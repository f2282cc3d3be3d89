from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from ...slots.service import minutes_between
from ..model import ClockEvent
from .base import AttendanceStrategy, StatusDecision


class LateInStrategy(AttendanceStrategy):
    """Clock-in after scheduled start (beyond tolerance)."""

    def decide(self, *, shift: Shift, event: Optional[ClockEvent]) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.LATE_IN,
            deviation_minutes=minutes_between(shift.start, event.actual_start),
        )
