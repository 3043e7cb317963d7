from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, mutation_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.holiday_service

    @app.route("/feriados", methods=["GET"], endpoint="holidays_list")
    def holidays_list():
        return jsonify([h.to_dict() for h in service.list_all()])

    @app.route("/feriados/<holiday_id>", methods=["GET"], endpoint="holidays_get")
    def holidays_get(holiday_id: str):
        return jsonify(service.get(holiday_id).to_dict())

    @app.route("/feriados", methods=["POST"], endpoint="holidays_create")
    def holidays_create():
        payload = json_body()
        affected = service.create(payload)
        return mutation_response(
            "Feriado insertado con éxito", record_id=payload.get("id"), affected_rows=affected, status=201
        )
