from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import date
from typing import Iterable, Iterator, List, Optional

from ..common.validators import optional_id, require_non_empty
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import NewShift, Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftStore:
    """Single source of truth for shift state.

    Every mutation passes through ``create_shift``, ``replace_shift`` or ``seed`` so the
    no-overlap rule is enforced in one place. Writers are serialised by one
    re-entrant lock; readers take the same lock to get a consistent snapshot.
    """

    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts
        self._lock = threading.RLock()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        """Hold the store lock across a multi-step check-then-commit."""

        with self._lock:
            yield

    def list_shifts(
        self,
        *,
        work_date: Optional[date] = None,
        employee_id: Optional[str] = None,
        department: Optional[str] = None,
    ) -> List[Shift]:
        with self._lock:
            rows = list(self._shifts.list_all())

        return [
            s
            for s in rows
            if (work_date is None or s.work_date == work_date)
            and (employee_id is None or s.employee_id == employee_id)
            and (department is None or s.department == department)
        ]

    def get_unassigned(self) -> List[Shift]:
        with self._lock:
            rows = list(self._shifts.list_all())
        return [s for s in rows if not s.is_assigned]

    def get_shift(self, shift_id: str) -> Shift:
        with self._lock:
            shift = self._shifts.get_by_id(shift_id)
        if not shift:
            raise NotFoundError(f"Shift {shift_id!r} does not exist")
        return shift

    def find_conflicts(self, candidate: Shift) -> List[Shift]:
        """Shifts of the same employee that overlap ``candidate`` (itself excluded)."""

        if not candidate.is_assigned:
            return []
        with self._lock:
            return [
                s
                for s in self._shifts.list_all()
                if s.shift_id != candidate.shift_id
                and s.employee_id == candidate.employee_id
                and s.overlaps(candidate)
            ]

    def create_shift(self, new: NewShift) -> Shift:
        department = require_non_empty(new.department, "Department")
        if new.end <= new.start:
            raise ValidationError(f"Shift end {new.end} must be after start {new.start}")

        with self._lock:
            shift_id = optional_id(new.shift_id) or self._fresh_id()
            if self._shifts.get_by_id(shift_id):
                raise ConflictError(f"Shift id {shift_id!r} already exists")

            shift = Shift(
                shift_id=shift_id,
                employee_id=optional_id(new.employee_id),
                work_date=new.work_date,
                start=new.start,
                end=new.end,
                department=department,
            )
            self._ensure_no_overlap(shift)
            self._shifts.add(shift)

        logger.info("Created shift %s for %s on %s %s-%s", shift.shift_id, shift.employee_id or "pool", shift.work_date, shift.start, shift.end)
        return shift

    def replace_shift(self, shift: Shift) -> Shift:
        """Commit a new value for an existing shift, or fail leaving it untouched."""

        with self._lock:
            if not self._shifts.get_by_id(shift.shift_id):
                raise NotFoundError(f"Shift {shift.shift_id!r} does not exist")
            self._ensure_no_overlap(shift)
            if not self._shifts.replace(shift):
                raise NotFoundError(f"Shift {shift.shift_id!r} does not exist")
        return shift

    def seed(self, shifts: Iterable[Shift], *, skip_existing: bool = False) -> int:
        """Bulk-load existing shifts under the same id and overlap rules as ``create_shift``.

        With ``skip_existing`` ids already stored are left as they are, so re-seeding
        a database is a no-op. Returns how many shifts were added.
        """

        added = 0
        with self._lock:
            for shift in shifts:
                if self._shifts.get_by_id(shift.shift_id):
                    if skip_existing:
                        continue
                    raise ConflictError(f"Shift id {shift.shift_id!r} already exists")
                self._ensure_no_overlap(shift)
                self._shifts.add(shift)
                added += 1

        logger.info("Seeded %d shifts", added)
        return added

    def _ensure_no_overlap(self, candidate: Shift) -> None:
        conflicts = self.find_conflicts(candidate)
        if conflicts:
            other = conflicts[0]
            raise ConflictError(
                f"Employee {candidate.employee_id} already works {other.start}-{other.end} "
                f"on {other.work_date} (shift {other.shift_id})"
            )

    def _fresh_id(self) -> str:
        n = len(self._shifts.list_all()) + 1
        while self._shifts.get_by_id(f"S{n}"):
            n += 1
        return f"S{n}"
