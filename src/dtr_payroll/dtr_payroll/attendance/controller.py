from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.controller import admin_required
from ..common.datetime_utils import resolve_period
from ..container import Container
from ..core.constants import TIMESTAMP_FORMAT


def register(app: Flask, container: Container) -> None:
    @app.route("/scan/<token>", methods=["GET", "POST"], endpoint="scan")
    def scan(token: str):
        """Public endpoint hit by the scanned code: clock in or out."""
        person, result = container.attendance_service.scan_token(token)
        app.logger.info("Scan person id=%s action=%s", person.person_id, result.action.value)
        return jsonify(
            {
                "success": True,
                "action": result.action.value,
                "message": f"{result.action.label} at {result.timestamp.strftime(TIMESTAMP_FORMAT)}",
                "name": person.name,
                "role": person.role,
                "timestamp": result.timestamp.strftime(TIMESTAMP_FORMAT),
            }
        )

    @app.route("/faculty/<int:person_id>/dtr", methods=["GET"], endpoint="faculty_dtr")
    @admin_required
    def faculty_dtr(person_id: int):
        start, end = resolve_period(request.args.get("start"), request.args.get("end"), now=container.clock())
        events = container.attendance_service.get_history(person_id, start=start, end=end)
        return jsonify(
            {
                "success": True,
                "id": person_id,
                "clocked_in": container.attendance_service.is_clocked_in(person_id),
                "events": [
                    {
                        "id": ev.event_id,
                        "in_time": ev.in_time.strftime(TIMESTAMP_FORMAT),
                        "out_time": ev.out_time.strftime(TIMESTAMP_FORMAT) if ev.out_time else None,
                    }
                    for ev in events
                ],
            }
        )
