from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, mutation_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.teacher_service

    @app.route("/profesores", methods=["GET"], endpoint="teachers_list")
    def teachers_list():
        return jsonify([t.to_dict() for t in service.list_all()])

    # Static segment wins over the <teacher_id> rule below.
    @app.route("/profesores/buscar", methods=["GET"], endpoint="teachers_search")
    def teachers_search():
        return jsonify([t.to_dict() for t in service.search(request.args.get("q"))])

    @app.route("/profesores/<teacher_id>", methods=["GET"], endpoint="teachers_get")
    def teachers_get(teacher_id: str):
        return jsonify(service.get(teacher_id).to_dict())

    @app.route("/profesores", methods=["POST"], endpoint="teachers_create")
    def teachers_create():
        payload = json_body()
        affected = service.create(payload)
        return mutation_response(
            "Profesor insertado con éxito", record_id=payload.get("id"), affected_rows=affected, status=201
        )

    @app.route("/profesores/<teacher_id>", methods=["PUT"], endpoint="teachers_update")
    def teachers_update(teacher_id: str):
        affected = service.update(teacher_id, json_body())
        return mutation_response("Profesor actualizado con éxito", record_id=teacher_id, affected_rows=affected)

    @app.route("/profesores/<teacher_id>", methods=["DELETE"], endpoint="teachers_delete")
    def teachers_delete(teacher_id: str):
        affected = service.delete(teacher_id)
        return mutation_response("Profesor eliminado con éxito", record_id=teacher_id, affected_rows=affected)
