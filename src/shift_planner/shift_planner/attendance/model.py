from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..shifts.model import Shift
from ..slots.model import TimeOfDay


def _parse_optional_time(value: Any) -> Optional[TimeOfDay]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return TimeOfDay.parse(value)


@dataclass(frozen=True)
class ClockEvent:
    """What actually happened: observed clock-in/out for one employee on one date.

    Missing start and end both mean no check-in was observed.
    """

    employee_id: str
    work_date: date
    actual_start: Optional[TimeOfDay] = None
    actual_end: Optional[TimeOfDay] = None
    note: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ClockEvent":
        """Parse a raw mapping; malformed times fail here, not during reconciliation."""

        note = raw.get("note")
        if note is not None and not isinstance(note, str):
            raise ValidationError(f"Note must be text: {note!r}")
        actual_start = _parse_optional_time(raw.get("actualStart"))
        actual_end = _parse_optional_time(raw.get("actualEnd"))
        if actual_start and actual_end and actual_end < actual_start:
            raise ValidationError(f"Clock-out {actual_end} is before clock-in {actual_start}")

        return cls(
            employee_id=require_non_empty(raw.get("employeeId"), "Employee id"),
            work_date=parse_iso_date(raw.get("date")),
            actual_start=actual_start,
            actual_end=actual_end,
            note=note,
        )

    @property
    def has_observation(self) -> bool:
        return self.actual_start is not None or self.actual_end is not None


@dataclass(frozen=True)
class AttendanceRecord:
    """Read-model: one shift reconciled with at most one clock event. Never stored."""

    shift: Shift
    status: AttendanceStatus
    actual_start: Optional[TimeOfDay] = None
    actual_end: Optional[TimeOfDay] = None
    notes: Optional[str] = None
    deviation_minutes: int = 0

    def to_dict(self) -> dict:
        row = self.shift.to_dict()
        row.update(
            {
                "actualStart": str(self.actual_start) if self.actual_start else None,
                "actualEnd": str(self.actual_end) if self.actual_end else None,
                "status": self.status.value,
                "statusLabel": self.status.label,
                "deviationMinutes": self.deviation_minutes,
                "notes": self.notes,
            }
        )
        return row
