from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.exceptions import AuthenticationError
from ..container import Container


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get("authenticated"):
            return jsonify({"success": False, "message": "Login required"}), 401
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        username = data.get("username", "")
        password = data.get("password", "")

        try:
            admin = container.auth_service.authenticate(username, password)
        except AuthenticationError as e:
            app.logger.warning("Failed admin login for %r from %s", username, request.remote_addr)
            return jsonify({"success": False, "message": str(e)}), 401

        session.clear()
        session.permanent = True
        session["authenticated"] = True
        session["admin"] = admin
        return jsonify({"success": True, "message": "Logged in"}), 200

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True, "message": "Logged out"}), 200
