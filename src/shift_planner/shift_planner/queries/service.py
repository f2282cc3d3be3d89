from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Sequence

from ..attendance.repository import ClockEventRepository
from ..attendance.service import AttendanceReconciler
from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.enums import AttendanceStatus
from ..employees.repository import EmployeeDirectory
from ..leave.service import LeaveSignalService
from ..shifts.model import Shift
from ..shifts.service import ShiftStore
from ..slots.service import days_of_week
from .model import AttendanceRow, GridRow, WeeklyGrid


class QueryService:
    """Read-only projections for the planning grid and attendance table."""

    def __init__(
        self,
        store: ShiftStore,
        reconciler: AttendanceReconciler,
        events: ClockEventRepository,
        *,
        employees: Optional[EmployeeDirectory] = None,
        leave: Optional[LeaveSignalService] = None,
    ):
        self._store = store
        self._reconciler = reconciler
        self._events = events
        self._employees = employees
        self._leave = leave

    def weekly_grid(self, anchor: date, employee_ids: Optional[Sequence[str]] = None) -> WeeklyGrid:
        days = days_of_week(anchor)
        window = set(days)
        shifts = [s for s in self._store.list_shifts() if s.is_assigned and s.work_date in window]

        if employee_ids is None:
            employee_ids = self._default_rows(shifts)

        rows: List[GridRow] = []
        for employee_id in employee_ids:
            cells: Dict[date, List[Shift]] = {d: [] for d in days}
            for s in shifts:
                if s.employee_id == employee_id:
                    cells[s.work_date].append(s)
            rows.append(GridRow(employee_id=employee_id, name=self._name_of(employee_id), cells=cells))
        return WeeklyGrid(days=days, rows=rows)

    def unassigned_pool(self) -> List[Shift]:
        return self._store.get_unassigned()

    def daily_attendance(self, work_date: date, *, status: Optional[AttendanceStatus] = None) -> List[AttendanceRow]:
        shifts = self._store.list_shifts(work_date=work_date)
        events = [e for e in self._events.list_for_date(work_date) if e.work_date == work_date]
        approved = self._leave.approved_for(work_date) if self._leave else frozenset()

        records = self._reconciler.reconcile(shifts, events, approved_leave=approved)
        return [
            AttendanceRow(employee_name=self._name_of(r.shift.employee_id), record=r)
            for r in records
            if status is None or r.status == status
        ]

    def _default_rows(self, shifts: Sequence[Shift]) -> List[str]:
        # Directory order first, then anyone holding a shift who is not listed.
        ids: List[str] = [e.employee_id for e in self._employees.list_all()] if self._employees else []
        for s in shifts:
            if s.employee_id not in ids:
                ids.append(s.employee_id)
        return ids

    def _name_of(self, employee_id: Optional[str]) -> str:
        if employee_id and self._employees:
            employee = self._employees.get_by_id(employee_id)
            if employee:
                return employee.name
        return UNKNOWN_EMPLOYEE_NAME
