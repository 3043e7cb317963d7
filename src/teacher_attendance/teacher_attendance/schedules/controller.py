from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, mutation_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.schedule_service

    @app.route("/horarios", methods=["GET"], endpoint="schedules_list")
    def schedules_list():
        return jsonify([s.to_dict() for s in service.list_all()])

    @app.route("/horarios/profesor/<teacher_id>", methods=["GET"], endpoint="schedules_for_teacher")
    def schedules_for_teacher(teacher_id: str):
        return jsonify([s.to_dict() for s in service.list_for_teacher(teacher_id)])

    @app.route("/horarios/<schedule_id>", methods=["GET"], endpoint="schedules_get")
    def schedules_get(schedule_id: str):
        return jsonify(service.get(schedule_id).to_dict())

    @app.route("/horarios", methods=["POST"], endpoint="schedules_create")
    def schedules_create():
        payload = json_body()
        affected = service.create(payload)
        return mutation_response(
            "Horario insertado con éxito", record_id=payload.get("id"), affected_rows=affected, status=201
        )
