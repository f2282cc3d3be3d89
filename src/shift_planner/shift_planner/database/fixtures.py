"""Static JSON data source (employees, shifts, clock events, leave requests).

Each file is optional; a missing file loads as an empty list.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from ..attendance.model import ClockEvent
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..leave.model import LeaveRequest
from ..shifts.model import Shift

logger = logging.getLogger(__name__)


@dataclass
class FixtureData:
    employees: List[Employee] = field(default_factory=list)
    shifts: List[Shift] = field(default_factory=list)
    clock_events: List[ClockEvent] = field(default_factory=list)
    leave_requests: List[LeaveRequest] = field(default_factory=list)


def _read_json_list(path: Path) -> List[dict]:
    if not path.exists():
        logger.info("Fixture %s not found, using empty list", path)
        return []
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValidationError(f"{path.name} must contain a JSON list")
    return data


def _employee(raw: dict) -> Employee:
    return Employee(
        employee_id=require_non_empty(raw.get("id"), "Employee id"),
        name=require_non_empty(raw.get("name"), "Employee name"),
        department=raw.get("department") or "",
    )


def _leave_request(raw: dict) -> LeaveRequest:
    status = str(raw.get("status") or "").strip().upper()
    try:
        leave_status = LeaveStatus(status)
    except ValueError:
        raise ValidationError(f"Unknown leave status: {raw.get('status')!r}")

    return LeaveRequest(
        request_id=require_non_empty(raw.get("id"), "Leave request id"),
        employee_id=require_non_empty(raw.get("employeeId"), "Employee id"),
        start_date=parse_iso_date(raw.get("startDate")),
        end_date=parse_iso_date(raw.get("endDate")),
        status=leave_status,
        leave_type=raw.get("leaveType") or "",
        reason=raw.get("reason"),
    )


def load_fixtures(fixtures_dir: str | Path) -> FixtureData:
    root = Path(fixtures_dir)
    data = FixtureData(
        employees=[_employee(r) for r in _read_json_list(root / "employees.json")],
        shifts=[Shift.from_raw(r) for r in _read_json_list(root / "shifts.json")],
        clock_events=[ClockEvent.from_raw(r) for r in _read_json_list(root / "clock_events.json")],
        leave_requests=[_leave_request(r) for r in _read_json_list(root / "leave_requests.json")],
    )
    logger.info(
        "Loaded fixtures from %s: %d employees, %d shifts, %d clock events, %d leave requests",
        root,
        len(data.employees),
        len(data.shifts),
        len(data.clock_events),
        len(data.leave_requests),
    )
    return data
