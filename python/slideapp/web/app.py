"""Flask application exposing ``POST /solve``."""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from slideapp.config import Settings
from slideapp.web.handler import handle_solve


def create_app(settings: Settings | None = None) -> Flask:
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    app.config["SOLVER_SETTINGS"] = settings

    @app.after_request
    def _allow_cors(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
        return response

    @app.route("/solve", methods=["POST", "OPTIONS"])
    def solve() -> Any:
        if request.method == "OPTIONS":
            return "", 204
        body = request.get_json(force=True, silent=True)
        payload, status = handle_solve(body, app.config["SOLVER_SETTINGS"])
        return jsonify(payload), status

    return app
