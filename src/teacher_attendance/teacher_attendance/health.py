from __future__ import annotations

from flask import Flask, jsonify

from .container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        if container.pool.ready:
            return jsonify({"status": "ok", "database": True})
        return jsonify({"status": "degraded", "database": False}), 503
