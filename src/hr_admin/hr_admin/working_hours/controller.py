from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request

from ..common.logging import get_logger
from ..core.exceptions import ValidationError
from ..container import Container

logger = get_logger("working_hours.controller")


def _error(message: str, status_code: int):
    return jsonify({"status": False, "message": message}), status_code


def register(app: Flask, container: Container) -> None:
    service = container.working_hours_service

    def json_endpoint(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return jsonify({"status": True, "data": view(*args, **kwargs)})
            except ValidationError as e:
                return _error(str(e), 400)
            except Exception:
                logger.exception("Unhandled error in %s", request.path)
                return _error("Failed to process working hours policy", 500)

        return wrapper

    def _json_body() -> dict:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("Invalid JSON body")
        return body

    @app.route("/working-hours/form", methods=["GET"], endpoint="working_hours_blank_form")
    @json_endpoint
    def working_hours_blank_form():
        return service.blank_form()

    @app.route("/working-hours/form", methods=["POST"], endpoint="working_hours_edit_form")
    @json_endpoint
    def working_hours_edit_form():
        return service.edit_form(_json_body())

    @app.route("/working-hours/payload", methods=["POST"], endpoint="working_hours_payload")
    @json_endpoint
    def working_hours_payload():
        mode = (request.args.get("mode") or "update").lower()
        if mode not in {"create", "update"}:
            raise ValidationError(f"Unknown mode: {mode}")
        return service.save_payload(_json_body(), creating=mode == "create")

    @app.route("/working-hours/preview", methods=["POST"], endpoint="working_hours_preview")
    @json_endpoint
    def working_hours_preview():
        return service.group_preview(_json_body())

    @app.route("/working-hours/view", methods=["POST"], endpoint="working_hours_view")
    @json_endpoint
    def working_hours_view():
        return service.schedule_view(_json_body())
