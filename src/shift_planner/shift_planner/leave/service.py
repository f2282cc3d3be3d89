from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from ..core.enums import LeaveStatus
from .model import LeaveDays, LeaveRequest
from .repository import LeaveRepository


def approved_leave_days(requests: Iterable[LeaveRequest], *, on: Optional[date] = None) -> LeaveDays:
    """Expand APPROVED requests into the (employee_id, date) side-table.

    Pending and rejected requests never count. ``on`` narrows the result to one day.
    """

    days = set()
    for req in requests:
        if req.status != LeaveStatus.APPROVED:
            continue
        if req.end_date < req.start_date:
            continue
        if on is not None:
            if req.start_date <= on <= req.end_date:
                days.add((req.employee_id, on))
            continue
        current = req.start_date
        while current <= req.end_date:
            days.add((req.employee_id, current))
            current += timedelta(days=1)
    return frozenset(days)


class LeaveSignalService:
    """Read-only adapter supplying the reconciler's time-off side-table."""

    def __init__(self, leave: LeaveRepository):
        self._leave = leave

    def approved_for(self, work_date: date) -> LeaveDays:
        return approved_leave_days(self._leave.list_all(), on=work_date)
