from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, parse_optional_date, today_local
from ..container import Container
from ..slots.service import shift_week, time_slots


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedule/week", methods=["GET"], endpoint="weekly_schedule")
    def weekly_schedule():
        anchor = parse_optional_date(request.args.get("anchor")) or today_local()
        move = request.args.get("move")
        if move:
            anchor = shift_week(anchor, move)

        grid = container.query_service.weekly_grid(anchor)
        payload = grid.to_dict()
        payload.update(
            {
                "success": True,
                "anchor": format_iso_date(anchor),
                "slots": [str(t) for t in time_slots()],
                "unassigned": [s.to_dict() for s in container.query_service.unassigned_pool()],
            }
        )
        return jsonify(payload)
