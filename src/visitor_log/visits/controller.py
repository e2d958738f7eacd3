from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..core.constants import XLSX_MIMETYPE
from ..core.exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/checkin", methods=["POST"], endpoint="checkin")
    def checkin():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            result = container.visit_service.check_in(data.get("student_number"))
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except StoreError as e:
            return jsonify({"error": str(e)}), 500
        return jsonify({"message": result.message, "student": result.student.to_dict()})

    @app.route("/visits", methods=["GET"], endpoint="list_visits")
    def list_visits():
        search = request.args.get("search", "")
        try:
            return jsonify(container.visit_service.list_visits(search))
        except StoreError as e:
            return jsonify({"error": str(e)}), 500

    @app.route("/clear_visits", methods=["POST"], endpoint="clear_visits")
    def clear_visits():
        try:
            container.visit_service.clear()
        except StoreError as e:
            return jsonify({"error": str(e)}), 500
        return jsonify({"message": "Visits cleared"})

    @app.route("/restore/visits", methods=["POST"], endpoint="restore_visits")
    def restore_visits():
        """Body: [{"student_number": ..., "visit_time": ...}, ...]"""
        visits = request.get_json(silent=True) or []
        try:
            container.visit_service.restore(visits)
        except StoreError as e:
            return jsonify({"error": str(e)}), 500
        except Exception as e:
            # Payload is not a list of objects
            logger.exception("restore failed")
            return jsonify({"error": str(e)}), 500
        return jsonify({"message": "Visits restored successfully"})

    @app.route("/export/visits", methods=["GET"], endpoint="export_visits")
    def export_visits():
        try:
            data = container.export_service.visits_workbook()
        except StoreError as e:
            return jsonify({"error": str(e)}), 500
        return send_file(
            io.BytesIO(data),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name="visits.xlsx",
        )
