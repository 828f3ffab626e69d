"""API errors rendered as {"error": "..."} bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from control.errors import DriverFailure

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body. Expected {'action': 'start'}"


class ApiError(Exception):
    """Caller-visible error with an HTTP status."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(ApiError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized: Invalid API Key"):
        super().__init__(message)


class InvalidRequest(ApiError):
    status_code = 400

    def __init__(self, message: str = INVALID_BODY_MESSAGE):
        super().__init__(message)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI):
    """Map API and driver errors to JSON error bodies."""

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(DriverFailure)
    async def handle_driver_failure(request: Request, exc: DriverFailure):
        message = f"GPIO operation error: {exc}"
        if exc.output_may_be_active:
            message += " (the pump output may have been driven)"
        return error_response(500, message)
