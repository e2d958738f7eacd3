from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        ok = container.admin_auth_service.login(data.get("username"), data.get("password"))
        return jsonify({"success": ok})
