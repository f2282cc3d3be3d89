from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .model import ReassignRequest


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts/<shift_id>/reassign", methods=["POST"], endpoint="reassign_shift")
    def reassign_shift(shift_id: str):
        # A ConflictError here is an inline rejection of the drop; the client rolls back its view.
        shift = container.assignment_service.apply(shift_id, ReassignRequest.from_raw(json_body()))
        return jsonify({"success": True, "shift": shift.to_dict()})
