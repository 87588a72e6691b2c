from __future__ import annotations

import logging

from flask import Flask, g, jsonify, request

from ..auth.gate import make_token_required
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.token_service)

    @app.route("/addAttendance", methods=["POST"], endpoint="add_attendance")
    @token_required
    def add_attendance():
        data = request.get_json(silent=True)
        try:
            applied = container.attendance_service.submit(data)
            logger.info("%s submitted %d attendance record(s)", g.current_user.username, applied)
            return "Attendance added/updated successfully!", 200
        except ValidationError as e:
            return str(e), 400
        except Exception as e:
            logger.exception("Updating attendance failed")
            return f"Error updating attendance: {e}", 500

    @app.route("/studentAttendance", methods=["GET"], endpoint="student_attendance")
    @token_required
    def student_attendance():
        try:
            status = container.attendance_service.get_for_date(
                request.args.get("rollnum"),
                request.args.get("date"),
            )
            return jsonify({"attendance": status.value}), 200
        except ValidationError as e:
            return str(e), 400
        except Exception as e:
            logger.exception("Fetching attendance failed")
            return f"Error fetching attendance: {e}", 500
