from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from ..model import ClockEvent
from .base import AttendanceStrategy, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    """No check-in observed and no approved leave."""

    def decide(self, *, shift: Shift, event: Optional[ClockEvent]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT)


class TimeOffStrategy(AttendanceStrategy):
    """No check-in observed, but the day is covered by approved leave."""

    def decide(self, *, shift: Shift, event: Optional[ClockEvent]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.TIME_OFF)
