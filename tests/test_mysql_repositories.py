from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from src.shift_planner.shift_planner.attendance.mysql_clock_event_repository import MySQLClockEventRepository
from src.shift_planner.shift_planner.database.bootstrap import seed_from_fixtures
from src.shift_planner.shift_planner.database.fixtures import FixtureData
from src.shift_planner.shift_planner.database.mysql_base import normalize_mysql_time
from src.shift_planner.shift_planner.shifts.mysql_shift_repository import MySQLShiftRepository
from src.shift_planner.shift_planner.slots.model import TimeOfDay

from conftest import MON, make_shift


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []
        self.rowcount = 1

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))

    def fetchall(self):
        return self._rows

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows=()):
        self.cursor = FakeCursor(list(rows))
        self.conn = FakeConnection(self.cursor)

    def connect(self):
        return self.conn


def test_normalize_mysql_time_variants():
    assert normalize_mysql_time(None) is None
    assert normalize_mysql_time(time(8, 30)) == time(8, 30)
    assert normalize_mysql_time(timedelta(hours=17, minutes=15)) == time(17, 15)
    assert normalize_mysql_time("09:05:00") == time(9, 5)
    with pytest.raises(ValueError):
        normalize_mysql_time(timedelta(hours=25))


def test_shift_rows_map_to_domain():
    factory = FakeConnFactory(
        [
            {
                "shift_id": "S1",
                "employee_id": None,
                "work_date": MON,
                "start_time": timedelta(hours=9),
                "end_time": timedelta(hours=17),
                "department": "Ops",
            }
        ]
    )

    shifts = MySQLShiftRepository(factory).list_all()

    assert shifts == [make_shift("S1", None, MON, "09:00", "17:00", department="Ops")]
    assert "ORDER BY seq" in factory.cursor.executed[0][0]


def test_shift_replace_updates_every_field_in_one_statement():
    factory = FakeConnFactory()
    shift = make_shift("S1", "E2", date(2024, 6, 4), "10:00", "18:00")

    assert MySQLShiftRepository(factory).replace(shift) is True

    sql, params = factory.cursor.executed[0]
    assert sql.startswith("UPDATE shifts SET employee_id=%s, work_date=%s, start_time=%s, end_time=%s")
    assert params == ("E2", date(2024, 6, 4), time(10, 0), time(18, 0), "Engineering", "S1")
    assert factory.conn.committed


def test_clock_event_rows_keep_missing_times_as_none():
    factory = FakeConnFactory(
        [{"employee_id": "E1", "work_date": MON, "actual_start": "09:15:00", "actual_end": None, "note": "Bus"}]
    )

    events = MySQLClockEventRepository(factory).list_for_date(MON)

    assert events[0].actual_start == TimeOfDay.of(9, 15)
    assert events[0].actual_end is None
    assert factory.cursor.executed[0][1] == (MON,)


def test_seed_inserts_fixture_shifts_through_the_store():
    factory = FakeConnFactory()

    seed_from_fixtures(factory, FixtureData(shifts=[make_shift("S1", "E1", MON, "09:00", "17:00")]))

    inserts = [params for sql, params in factory.cursor.executed if sql.startswith("INSERT INTO shifts")]
    assert inserts == [("S1", "E1", MON, time(9, 0), time(17, 0), "Engineering")]
