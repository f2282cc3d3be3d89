from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..shifts.model import parse_employee_ref
from ..slots.model import TimeOfDay


@dataclass(frozen=True)
class ReassignRequest:
    """A drop gesture: move a shift to an employee cell (or the pool), optionally at a slot."""

    target_employee_id: Optional[str]
    target_date: date
    target_start: Optional[TimeOfDay] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ReassignRequest":
        start = raw.get("targetStart")
        return cls(
            target_employee_id=parse_employee_ref(raw.get("targetEmployeeId")),
            target_date=parse_iso_date(raw.get("targetDate")),
            target_start=None if start is None or start == "" else TimeOfDay.parse(start),
        )
