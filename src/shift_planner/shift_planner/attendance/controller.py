from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, parse_iso_date, parse_optional_date, today_local
from ..common.http import json_body
from ..common.validators import require_non_empty
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..shifts.model import Shift
from .model import ClockEvent


def _parse_status(value: Optional[str]) -> Optional[AttendanceStatus]:
    v = (value or "").strip().upper().replace(" ", "_")
    if not v:
        return None
    try:
        return AttendanceStatus(v)
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="daily_attendance")
    def daily_attendance():
        work_date = parse_optional_date(request.args.get("date")) or today_local()
        rows = container.query_service.daily_attendance(work_date, status=_parse_status(request.args.get("status")))
        return jsonify({"success": True, "date": format_iso_date(work_date), "records": [r.to_dict() for r in rows]})

    @app.route("/api/attendance/reconcile", methods=["POST"], endpoint="reconcile_attendance")
    def reconcile_attendance():
        body = json_body()
        shifts = [Shift.from_raw(r) for r in body.get("shifts") or []]
        events = [ClockEvent.from_raw(r) for r in body.get("events") or []]
        leave = {
            (require_non_empty(r.get("employeeId"), "Employee id"), parse_iso_date(r.get("date")))
            for r in body.get("approvedLeave") or []
        }
        records = container.reconciler.reconcile(shifts, events, approved_leave=frozenset(leave))
        return jsonify({"success": True, "records": [r.to_dict() for r in records]})
