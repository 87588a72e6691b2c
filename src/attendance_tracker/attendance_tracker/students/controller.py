from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..auth.gate import make_token_required
from ..common.http import json_object
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.token_service)

    @app.route("/createStudent", methods=["POST"], endpoint="create_student")
    @token_required
    def create_student():
        data = json_object()
        try:
            student = container.student_service.create(
                name=data.get("name"),
                roll_number=data.get("rollnum"),
                branch=data.get("branch"),
                year=data.get("year"),
            )
            return jsonify(student.to_dict()), 201
        except ValidationError as e:
            return str(e), 400
        except Exception as e:
            logger.exception("Creating student failed")
            return f"Error creating student: {e}", 500

    @app.route("/deleteStudent/<rollnum>", methods=["DELETE"], endpoint="delete_student")
    @token_required
    def delete_student(rollnum: str):
        try:
            container.student_service.delete(rollnum)
            return "Student deleted successfully.", 200
        except NotFoundError as e:
            return str(e), 404
        except Exception as e:
            logger.exception("Deleting student %s failed", rollnum)
            return f"Error deleting student: {e}", 500

    @app.route("/updateStudent", methods=["PUT"], endpoint="update_student")
    @token_required
    def update_student():
        data = json_object()
        try:
            student = container.student_service.update(
                roll_number=data.get("rollnum"),
                name=data.get("name"),
                branch=data.get("branch"),
                year=data.get("year"),
            )
            return jsonify(student.to_dict()), 200
        except ValidationError as e:
            return str(e), 400
        except NotFoundError as e:
            return str(e), 404
        except Exception as e:
            logger.exception("Updating student failed")
            return f"Error updating student: {e}", 500

    @app.route("/getStudentsData", methods=["GET"], endpoint="students_data")
    @token_required
    def students_data():
        try:
            return jsonify([s.to_dict() for s in container.student_service.list_all()]), 200
        except Exception as e:
            logger.exception("Fetching student data failed")
            return f"Error fetching student data: {e}", 500
