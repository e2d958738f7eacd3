from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..core.constants import XLSX_MIMETYPE
from ..core.exceptions import StoreError


def register(app: Flask, container: Container) -> None:
    @app.route("/student", methods=["POST"], endpoint="add_student")
    def add_student():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            container.student_service.register(
                student_number=data.get("student_number"),
                full_name=data.get("full_name"),
                course=data.get("course"),
            )
        except StoreError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"message": "Student added"})

    @app.route("/student/<student_number>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_number: str):
        try:
            container.student_service.delete(student_number)
        except StoreError as e:
            return jsonify({"error": str(e)}), 500
        return jsonify({"message": "Student deleted"})

    @app.route("/students", methods=["GET"], endpoint="list_students")
    def list_students():
        try:
            return jsonify(container.student_service.list_students())
        except StoreError as e:
            return jsonify({"error": str(e)}), 500

    @app.route("/clear_students", methods=["POST"], endpoint="clear_students")
    def clear_students():
        try:
            container.student_service.clear()
        except StoreError as e:
            return jsonify({"error": str(e)}), 500
        return jsonify({"message": "Students cleared"})

    @app.route("/export/students", methods=["GET"], endpoint="export_students")
    def export_students():
        try:
            data = container.export_service.students_workbook()
        except StoreError as e:
            return jsonify({"error": str(e)}), 500
        return send_file(
            io.BytesIO(data),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name="students.xlsx",
        )
