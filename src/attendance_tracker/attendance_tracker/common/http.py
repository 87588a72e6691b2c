from __future__ import annotations

from flask import request


def json_object() -> dict:
    """Request body as a dict; anything else (missing, invalid, a list) becomes {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
