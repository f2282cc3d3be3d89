from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Optional, Tuple

from ..core.enums import LeaveStatus

# (employee_id, work_date) pairs covered by approved leave.
LeaveDays = FrozenSet[Tuple[str, date]]


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    start_date: date
    end_date: date
    status: LeaveStatus
    leave_type: str = ""
    reason: Optional[str] = None
