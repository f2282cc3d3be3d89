from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from ..model import ClockEvent


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    deviation_minutes: int = 0


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how one attendance status is decided."""

    @abstractmethod
    def decide(self, *, shift: Shift, event: Optional[ClockEvent]) -> StatusDecision:
        raise NotImplementedError
