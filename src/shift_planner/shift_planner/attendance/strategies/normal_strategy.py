from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from ..model import ClockEvent
from .base import AttendanceStrategy, StatusDecision


class OnTimeStrategy(AttendanceStrategy):
    """Clocked in and out within tolerance."""

    def decide(self, *, shift: Shift, event: Optional[ClockEvent]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)


class UnknownStrategy(AttendanceStrategy):
    """Nothing to judge: unassigned shift, or on-time clock-in without a clock-out."""

    def decide(self, *, shift: Shift, event: Optional[ClockEvent]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.UNKNOWN)
