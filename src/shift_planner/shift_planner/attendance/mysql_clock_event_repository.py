from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from ..slots.model import TimeOfDay
from .model import ClockEvent
from .repository import ClockEventRepository


def _optional_time(value) -> Optional[TimeOfDay]:
    t = normalize_mysql_time(value)
    return TimeOfDay.from_time(t) if t else None


def _row_to_event(r: dict) -> ClockEvent:
    return ClockEvent(
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        actual_start=_optional_time(r.get("actual_start")),
        actual_end=_optional_time(r.get("actual_end")),
        note=r.get("note"),
    )


class MySQLClockEventRepository(ClockEventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ClockEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, actual_start, actual_end, note
                FROM clock_events
                ORDER BY event_id
                """
            )
            return [_row_to_event(r) for r in fetchall(cur)]

    def list_for_date(self, work_date: date) -> Sequence[ClockEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, actual_start, actual_end, note
                FROM clock_events
                WHERE work_date=%s
                ORDER BY event_id
                """,
                (work_date,),
            )
            return [_row_to_event(r) for r in fetchall(cur)]

    def add(self, event: ClockEvent) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO clock_events(employee_id, work_date, actual_start, actual_end, note)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    event.employee_id,
                    event.work_date,
                    event.actual_start.to_time() if event.actual_start else None,
                    event.actual_end.to_time() if event.actual_end else None,
                    event.note,
                ),
            )
