from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..core.exceptions import ConflictError, NotFoundError
from ..employees.repository import EmployeeDirectory
from ..shifts.model import Shift
from ..shifts.service import ShiftStore
from ..slots.model import TimeOfDay
from ..slots.service import add_minutes
from .model import ReassignRequest

logger = logging.getLogger(__name__)


class AssignmentService:
    """Validated entry point for drag/drop moves.

    The whole check-then-commit runs under the store's write lock, so a failed
    move leaves every shift exactly as it was.
    """

    def __init__(self, store: ShiftStore, employees: Optional[EmployeeDirectory] = None):
        self._store = store
        self._employees = employees

    def reassign(
        self,
        shift_id: str,
        target_employee_id: Optional[str],
        target_date: date,
        target_start: Optional[TimeOfDay] = None,
    ) -> Shift:
        if target_employee_id is not None and self._employees is not None:
            if not self._employees.get_by_id(target_employee_id):
                raise NotFoundError(f"Employee {target_employee_id!r} does not exist")

        with self._store.write_lock():
            current = self._store.get_shift(shift_id)
            moved = self._move(current, target_employee_id, target_date, target_start)
            try:
                self._store.replace_shift(moved)
            except ConflictError as e:
                logger.warning("Rejected move of shift %s: %s", shift_id, e)
                raise

        logger.info(
            "Moved shift %s: %s %s %s-%s -> %s %s %s-%s",
            shift_id,
            current.employee_id or "pool",
            current.work_date,
            current.start,
            current.end,
            moved.employee_id or "pool",
            moved.work_date,
            moved.start,
            moved.end,
        )
        return moved

    def apply(self, shift_id: str, request: ReassignRequest) -> Shift:
        return self.reassign(shift_id, request.target_employee_id, request.target_date, request.target_start)

    @staticmethod
    def _move(
        shift: Shift,
        employee_id: Optional[str],
        work_date: date,
        start: Optional[TimeOfDay],
    ) -> Shift:
        if start is None:
            start = shift.start
        # Duration is preserved; running past midnight raises RangeError.
        end = add_minutes(start, shift.duration_minutes)
        return replace(shift, employee_id=employee_id, work_date=work_date, start=start, end=end)
