from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .assignments.service import AssignmentService
from .attendance.factory import AttendanceStrategyFactory
from .attendance.in_memory_clock_event_repository import InMemoryClockEventRepository
from .attendance.mysql_clock_event_repository import MySQLClockEventRepository
from .attendance.repository import ClockEventRepository
from .attendance.service import AttendanceReconciler
from .core.constants import DEFAULT_TOLERANCE_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .database.fixtures import FixtureData
from .employees.in_memory_employee_directory import InMemoryEmployeeDirectory
from .leave.in_memory_leave_repository import InMemoryLeaveRepository
from .leave.service import LeaveSignalService
from .queries.service import QueryService
from .shifts.in_memory_shift_repository import InMemoryShiftRepository
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftStore


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: InMemoryEmployeeDirectory
    leave_repo: InMemoryLeaveRepository
    shifts_repo: ShiftRepository
    clock_events_repo: ClockEventRepository

    shift_store: ShiftStore
    assignment_service: AssignmentService
    reconciler: AttendanceReconciler
    leave_service: LeaveSignalService
    query_service: QueryService


def build_container(
    *,
    data: FixtureData,
    db_config: Optional[dict] = None,
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES,
) -> Container:
    """Wire one planner instance.

    With ``db_config`` shifts and clock events live in MySQL; otherwise they are
    held in memory, seeded from ``data`` through the store so overlapping fixture
    shifts fail with ``ConflictError``. Employees and leave always come from ``data``.
    """

    conn: Optional[DatabaseConnection] = None
    if db_config:
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        shifts_repo: ShiftRepository = MySQLShiftRepository(conn)
        clock_events_repo: ClockEventRepository = MySQLClockEventRepository(conn)
    else:
        shifts_repo = InMemoryShiftRepository()
        clock_events_repo = InMemoryClockEventRepository(data.clock_events)

    employees_repo = InMemoryEmployeeDirectory(data.employees)
    leave_repo = InMemoryLeaveRepository(data.leave_requests)

    shift_store = ShiftStore(shifts_repo)
    if conn is None:
        shift_store.seed(data.shifts)
    assignment_service = AssignmentService(shift_store, employees_repo)
    reconciler = AttendanceReconciler(
        strategy_factory=AttendanceStrategyFactory(),
        tolerance_minutes=tolerance_minutes,
    )
    leave_service = LeaveSignalService(leave_repo)
    query_service = QueryService(
        shift_store,
        reconciler,
        clock_events_repo,
        employees=employees_repo,
        leave=leave_service,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        leave_repo=leave_repo,
        shifts_repo=shifts_repo,
        clock_events_repo=clock_events_repo,
        shift_store=shift_store,
        assignment_service=assignment_service,
        reconciler=reconciler,
        leave_service=leave_service,
        query_service=query_service,
    )
