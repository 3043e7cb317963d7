from __future__ import annotations

from typing import Any, Dict

from flask import jsonify, request


def json_body() -> Dict[str, Any]:
    """Request body as a dict; anything that is not a JSON object counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def mutation_response(message: str, *, record_id: Any, affected_rows: int, status: int = 200):
    return jsonify({"message": message, "id": record_id, "affectedRows": int(affected_rows)}), status
