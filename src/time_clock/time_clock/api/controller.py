from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import ApiResponse
from ..container import Container
from ..core.constants import GET_EMPLOYEES_ACTION, PUNCH_ACTION
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error. Please try again later."


def register(app: Flask, container: Container) -> None:
    """Attach the time clock endpoints.

    GET /api?action=getEmployees lists the directory; POST /api with a JSON body
    {"action": "punch", ...} records a punch. Every answer is the JSON envelope
    from ApiResponse, sent with HTTP 200; clients branch on `success`.
    """

    def _reply(resp: ApiResponse):
        return jsonify(resp.to_dict())

    def _get_employees() -> ApiResponse:
        names = container.directory_service.list_employee_names()
        if not names:
            return ApiResponse.ok("No employees found.", employees=[])
        return ApiResponse.ok("Employees retrieved successfully.", employees=names)

    def _punch(data: dict) -> ApiResponse:
        result = container.punch_service.punch(
            data.get("employeeName"),
            data.get("dateOfBirth"),
            data.get("punchType"),
        )
        return ApiResponse.ok(result.message)

    @app.route("/api", methods=["GET"], endpoint="api_get")
    def api_get():
        action = request.args.get("action", "")
        try:
            if action == GET_EMPLOYEES_ACTION:
                return _reply(_get_employees())
            return _reply(ApiResponse.fail("Unrecognized action"))
        except DomainError as e:
            return _reply(ApiResponse.fail(str(e)))
        except Exception:
            logger.exception("GET /api failed (action=%r)", action)
            return _reply(ApiResponse.fail(SERVER_ERROR_MESSAGE))

    @app.route("/api", methods=["POST"], endpoint="api_post")
    def api_post():
        # force=True: browser clients often post JSON as text/plain to dodge CORS preflight.
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            return _reply(ApiResponse.fail("Invalid request body."))

        action = data.get("action")
        try:
            if action == PUNCH_ACTION:
                return _reply(_punch(data))
            return _reply(ApiResponse.fail("Unrecognized action"))
        except DomainError as e:
            return _reply(ApiResponse.fail(str(e)))
        except Exception:
            logger.exception("POST /api failed (action=%r)", action)
            return _reply(ApiResponse.fail(SERVER_ERROR_MESSAGE))
