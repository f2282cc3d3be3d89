from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import RangeError, ValidationError

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time with minute granularity, within [00:00, 24:00).

    Stored as minutes since midnight so ordering and deltas are plain int math.
    """

    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.minutes < MINUTES_PER_DAY:
            raise RangeError(f"Time of day out of range: {self.minutes} minutes")

    @classmethod
    def of(cls, hour: int, minute: int = 0) -> "TimeOfDay":
        if not (0 <= hour < 24 and 0 <= minute < 60):
            raise RangeError(f"Time of day out of range: {hour:02d}:{minute:02d}")
        return cls(hour * 60 + minute)

    @classmethod
    def parse(cls, value: str) -> "TimeOfDay":
        """Parse 'HH:MM' (seconds, if present, are dropped)."""

        if not isinstance(value, str):
            raise ValidationError(f"Invalid time (HH:MM): {value!r}")
        m = _HHMM.match(value.strip())
        if not m:
            raise ValidationError(f"Invalid time (HH:MM): {value!r}")
        hour, minute = int(m.group(1)), int(m.group(2))
        if hour >= 24 or minute >= 60:
            raise ValidationError(f"Invalid time (HH:MM): {value!r}")
        return cls(hour * 60 + minute)

    @classmethod
    def from_time(cls, value: time) -> "TimeOfDay":
        return cls(value.hour * 60 + value.minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def to_time(self) -> time:
        return time(hour=self.hour, minute=self.minute)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
