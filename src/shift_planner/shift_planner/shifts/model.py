from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.validators import optional_id, require_non_empty
from ..core.exceptions import ValidationError
from ..slots.model import TimeOfDay
from ..slots.service import minutes_between

# Legacy placeholder some data sources still use for "no employee yet".
_UNASSIGNED_MARKERS = {"TBD"}


def parse_employee_ref(value: Any) -> Optional[str]:
    """Map a raw employee reference to an id, or None for unassigned."""

    ref = optional_id(value)
    if ref is None or ref.upper() in _UNASSIGNED_MARKERS:
        return None
    return ref


@dataclass(frozen=True)
class Shift:
    """A scheduled block of work. ``employee_id=None`` means unassigned."""

    shift_id: str
    employee_id: Optional[str]
    work_date: date
    start: TimeOfDay
    end: TimeOfDay
    department: str = ""

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValidationError(f"Shift end {self.end} must be after start {self.start}")

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Shift":
        return cls(
            shift_id=require_non_empty(raw.get("id"), "Shift id"),
            employee_id=parse_employee_ref(raw.get("employeeId")),
            work_date=parse_iso_date(raw.get("date")),
            start=TimeOfDay.parse(raw.get("startTime")),
            end=TimeOfDay.parse(raw.get("endTime")),
            department=raw.get("department") or "",
        )

    @property
    def is_assigned(self) -> bool:
        return self.employee_id is not None

    @property
    def duration_minutes(self) -> int:
        return minutes_between(self.start, self.end)

    def overlaps(self, other: "Shift") -> bool:
        """Half-open [start, end) overlap on the same date; touching shifts don't overlap."""

        if self.work_date != other.work_date:
            return False
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "employeeId": self.employee_id,
            "date": format_iso_date(self.work_date),
            "startTime": str(self.start),
            "endTime": str(self.end),
            "department": self.department,
        }


@dataclass(frozen=True)
class NewShift:
    """Input for creating a shift (the id is generated when omitted)."""

    work_date: date
    start: TimeOfDay
    end: TimeOfDay
    department: str
    employee_id: Optional[str] = None
    shift_id: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "NewShift":
        return cls(
            work_date=parse_iso_date(raw.get("date")),
            start=TimeOfDay.parse(raw.get("startTime")),
            end=TimeOfDay.parse(raw.get("endTime")),
            department=raw.get("department") or "",
            employee_id=parse_employee_ref(raw.get("employeeId")),
            shift_id=optional_id(raw.get("id")),
        )
