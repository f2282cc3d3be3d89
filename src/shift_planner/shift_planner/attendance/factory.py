from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..shifts.model import Shift
from ..slots.service import minutes_between
from .model import ClockEvent
from .strategies.absent_strategy import AbsentStrategy, TimeOffStrategy
from .strategies.base import AttendanceStrategy
from .strategies.early_strategy import EarlyOutStrategy
from .strategies.late_strategy import LateInStrategy
from .strategies.normal_strategy import OnTimeStrategy, UnknownStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: pick the strategy for a shift; first matching rule wins.

    Order: absent/time-off, late in, early out, on time. Late in beats early out
    when both apply.
    """

    def for_shift(
        self,
        *,
        shift: Shift,
        event: Optional[ClockEvent],
        on_leave: bool,
        tolerance_minutes: int,
    ) -> AttendanceStrategy:
        if not shift.is_assigned:
            return UnknownStrategy()

        if event is None or not event.has_observation:
            return TimeOffStrategy() if on_leave else AbsentStrategy()

        if event.actual_start is not None and minutes_between(shift.start, event.actual_start) > tolerance_minutes:
            return LateInStrategy()

        if event.actual_end is not None and minutes_between(event.actual_end, shift.end) > tolerance_minutes:
            return EarlyOutStrategy()

        if event.actual_start is not None and event.actual_end is not None:
            return OnTimeStrategy()

        return UnknownStrategy()
