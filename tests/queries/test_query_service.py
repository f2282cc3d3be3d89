from __future__ import annotations

from datetime import date

from src.shift_planner.shift_planner.attendance.in_memory_clock_event_repository import InMemoryClockEventRepository
from src.shift_planner.shift_planner.attendance.model import ClockEvent
from src.shift_planner.shift_planner.attendance.service import AttendanceReconciler
from src.shift_planner.shift_planner.core.enums import AttendanceStatus, LeaveStatus
from src.shift_planner.shift_planner.employees.in_memory_employee_directory import InMemoryEmployeeDirectory
from src.shift_planner.shift_planner.employees.model import Employee
from src.shift_planner.shift_planner.leave.in_memory_leave_repository import InMemoryLeaveRepository
from src.shift_planner.shift_planner.leave.model import LeaveRequest
from src.shift_planner.shift_planner.leave.service import LeaveSignalService
from src.shift_planner.shift_planner.queries.service import QueryService
from src.shift_planner.shift_planner.slots.model import TimeOfDay

from conftest import MON, TUE


def build(store, *, with_directory=True) -> QueryService:
    events = InMemoryClockEventRepository(
        [
            ClockEvent("E1", MON, TimeOfDay.of(9, 10), TimeOfDay.of(17), note="Bus"),
            ClockEvent("E1", TUE, TimeOfDay.of(9), TimeOfDay.of(17)),
        ]
    )
    directory = InMemoryEmployeeDirectory(
        [Employee("E1", "Alice", "Engineering"), Employee("E2", "Bob", "Sales"), Employee("E3", "Carol", "HR")]
    )
    leave = LeaveSignalService(
        InMemoryLeaveRepository([LeaveRequest("L1", "E2", MON, MON, LeaveStatus.APPROVED)])
    )
    return QueryService(
        store,
        AttendanceReconciler(),
        events,
        employees=directory if with_directory else None,
        leave=leave,
    )


def test_weekly_grid_has_directory_rows_and_seven_days(store):
    grid = build(store).weekly_grid(MON)

    assert len(grid.days) == 7
    assert [r.employee_id for r in grid.rows] == ["E1", "E2", "E3"]
    assert [s.shift_id for s in grid.cell("E1", MON)] == ["S1"]
    assert grid.cell("E3", MON) == []
    assert grid.rows[0].name == "Alice"


def test_weekly_grid_excludes_pool_and_days_outside_window(store):
    grid = build(store).weekly_grid(date(2024, 6, 4))

    assert all(s.is_assigned for row in grid.rows for shifts in row.cells.values() for s in shifts)
    assert grid.cell("E1", MON) == []


def test_weekly_grid_without_directory_uses_shift_holders(store):
    grid = build(store, with_directory=False).weekly_grid(MON)

    assert [r.employee_id for r in grid.rows] == ["E1", "E2"]
    assert grid.rows[0].name == "Unknown Employee"


def test_weekly_grid_serializes_cells_by_day(store):
    payload = build(store).weekly_grid(MON, ["E2"]).to_dict()

    assert payload["days"][0] == "2024-06-03"
    assert payload["rows"][0]["cells"]["2024-06-03"][0]["id"] == "S2"


def test_unassigned_pool(store):
    assert [s.shift_id for s in build(store).unassigned_pool()] == ["S3"]


def test_daily_attendance_uses_events_and_leave(store):
    rows = build(store).daily_attendance(MON)

    assert [(r.employee_name, r.record.status) for r in rows] == [
        ("Alice", AttendanceStatus.LATE_IN),
        ("Bob", AttendanceStatus.TIME_OFF),
    ]
    assert rows[0].to_dict()["notes"] == "Bus"
    assert rows[0].to_dict()["statusLabel"] == "Late In"


def test_daily_attendance_status_filter(store):
    rows = build(store).daily_attendance(MON, status=AttendanceStatus.TIME_OFF)

    assert [r.record.shift.shift_id for r in rows] == ["S2"]


def test_daily_attendance_pool_shift_is_unknown(store):
    rows = build(store).daily_attendance(TUE)

    assert [(r.employee_name, r.record.status) for r in rows] == [("Unknown Employee", AttendanceStatus.UNKNOWN)]
