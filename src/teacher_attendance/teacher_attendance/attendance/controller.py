from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, mutation_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/asistencias", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        return jsonify([r.to_dict() for r in service.list_all()])

    @app.route("/asistencias/<attendance_id>", methods=["GET"], endpoint="attendance_get")
    def attendance_get(attendance_id: str):
        return jsonify(service.get(attendance_id).to_dict())

    @app.route("/asistencias", methods=["POST"], endpoint="attendance_create")
    def attendance_create():
        payload = json_body()
        affected = service.create(payload)
        return mutation_response(
            "Asistencia registrada con éxito", record_id=payload.get("id"), affected_rows=affected, status=201
        )
