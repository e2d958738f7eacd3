from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import StoreError


def register(app: Flask, container: Container) -> None:
    @app.route("/reports", methods=["GET"], endpoint="reports")
    def reports():
        try:
            report = container.report_service.build_report()
        except StoreError as e:
            return jsonify({"error": str(e)}), 500
        return jsonify(report.to_dict())
