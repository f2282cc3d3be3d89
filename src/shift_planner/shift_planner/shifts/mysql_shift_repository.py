from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from ..slots.model import TimeOfDay
from .model import Shift
from .repository import ShiftRepository

_COLUMNS = "shift_id, employee_id, work_date, start_time, end_time, department"


def _row_to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=str(r["shift_id"]),
        employee_id=r.get("employee_id") or None,
        work_date=r["work_date"],
        start=TimeOfDay.from_time(normalize_mysql_time(r["start_time"])),
        end=TimeOfDay.from_time(normalize_mysql_time(r["end_time"])),
        department=r.get("department") or "",
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts ORDER BY seq")
            return [_row_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts WHERE shift_id=%s", (shift_id,))
            r = fetchone(cur)
            return _row_to_shift(r) if r else None

    def add(self, shift: Shift) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(shift_id, employee_id, work_date, start_time, end_time, department)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    shift.shift_id,
                    shift.employee_id,
                    shift.work_date,
                    shift.start.to_time(),
                    shift.end.to_time(),
                    shift.department,
                ),
            )

    def replace(self, shift: Shift) -> bool:
        # Single UPDATE so employee/date/times change together.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shifts
                SET employee_id=%s, work_date=%s, start_time=%s, end_time=%s, department=%s
                WHERE shift_id=%s
                """,
                (
                    shift.employee_id,
                    shift.work_date,
                    shift.start.to_time(),
                    shift.end.to_time(),
                    shift.department,
                    shift.shift_id,
                ),
            )
            return cur.rowcount > 0
