from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.http import json_body
from ..common.validators import optional_id
from ..container import Container
from .model import NewShift


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts", methods=["GET"], endpoint="list_shifts")
    def list_shifts():
        shifts = container.shift_store.list_shifts(
            work_date=parse_optional_date(request.args.get("date")),
            employee_id=optional_id(request.args.get("employee_id")),
            department=optional_id(request.args.get("department")),
        )
        return jsonify({"success": True, "shifts": [s.to_dict() for s in shifts]})

    @app.route("/api/shifts", methods=["POST"], endpoint="create_shift")
    def create_shift():
        shift = container.shift_store.create_shift(NewShift.from_raw(json_body()))
        return jsonify({"success": True, "shift": shift.to_dict()}), 201

    @app.route("/api/shifts/unassigned", methods=["GET"], endpoint="unassigned_shifts")
    def unassigned_shifts():
        shifts = container.query_service.unassigned_pool()
        return jsonify({"success": True, "shifts": [s.to_dict() for s in shifts]})
