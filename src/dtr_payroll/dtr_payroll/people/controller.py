from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.controller import admin_required
from ..common.validators import require_int
from ..container import Container
from .model import Person


def _person_json(person: Person, *, scan_url: str) -> dict:
    return {
        "id": person.person_id,
        "name": person.name,
        "role": person.role,
        "rate_per_hour": f"{person.hourly_rate:.2f}",
        "active": person.active,
        "token": person.token,
        "scan_url": scan_url,
    }


def register(app: Flask, container: Container) -> None:
    service = container.person_service

    def _base_url() -> str:
        return app.config.get("PUBLIC_BASE_URL") or request.host_url

    @app.route("/", methods=["GET"], endpoint="home")
    @admin_required
    def home():
        active_only = request.args.get("active_only") in {"1", "true", "yes"}
        people = service.list_people(active_only=active_only)
        return jsonify(
            {
                "success": True,
                "today": container.clock().strftime("%Y-%m-%d"),
                "faculty": [_person_json(p, scan_url=service.scan_url(_base_url(), p)) for p in people],
            }
        )

    @app.route("/faculty/add", methods=["POST"], endpoint="faculty_add")
    @admin_required
    def faculty_add():
        data = request.get_json(silent=True) or request.form
        person = service.register(
            name=data.get("name", ""),
            role=data.get("role", ""),
            hourly_rate=data.get("rate", "0"),
        )
        app.logger.info("Registered person id=%s", person.person_id)
        return jsonify({"success": True, "faculty": _person_json(person, scan_url=service.scan_url(_base_url(), person))}), 201

    @app.route("/faculty/toggle", methods=["POST"], endpoint="faculty_toggle")
    @admin_required
    def faculty_toggle():
        person_id = require_int((request.get_json(silent=True) or request.values).get("id"), "id")
        person = service.toggle_active(person_id)
        return jsonify({"id": person.person_id, "active": person.active})

    @app.route("/faculty/delete", methods=["POST"], endpoint="faculty_delete")
    @admin_required
    def faculty_delete():
        person_id = require_int((request.get_json(silent=True) or request.values).get("id"), "id")
        service.delete(person_id)
        app.logger.info("Deleted person id=%s", person_id)
        return jsonify({"success": True, "id": person_id})
