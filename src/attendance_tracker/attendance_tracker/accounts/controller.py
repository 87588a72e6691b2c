from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_object
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = json_object()
        try:
            container.account_service.signup(data.get("username"), data.get("password"))
            return "User registered successfully.", 201
        except ValidationError as e:
            return str(e), 400
        except Exception as e:
            logger.exception("Signup failed")
            return f"Error during signup: {e}", 500

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_object()
        try:
            token = container.account_service.login(data.get("username"), data.get("password"))
            return jsonify({"message": "Login successful", "token": token}), 200
        except AuthenticationError as e:
            return str(e), 400
        except Exception as e:
            logger.exception("Login failed")
            return f"Error during login: {e}", 500
