from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

logger = logging.getLogger(__name__)


class AppError(Exception):
    def __init__(self, code: str, message: str, http_status: int, fields: Optional[dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.fields = fields or {}
        super().__init__(message)


class NotFoundError(AppError):
    def __init__(self, message: str = "List not found"):
        super().__init__("not_found", message, status.HTTP_404_NOT_FOUND)


class BadRequestError(AppError):
    def __init__(self, message: str, fields: Optional[dict[str, Any]] = None):
        super().__init__("bad_request", message, status.HTTP_400_BAD_REQUEST, fields)


class UpstreamError(AppError):
    def __init__(self, message: str, fields: Optional[dict[str, Any]] = None):
        super().__init__("upstream_error", message, status.HTTP_502_BAD_GATEWAY, fields)


def error_response(code: str, message: str, http_status: int, fields: Optional[dict[str, Any]] = None) -> JSONResponse:
    payload: dict[str, Any] = {"success": False, "error": message, "code": code}
    if fields:
        payload.update(jsonable_encoder(fields))
    return JSONResponse(status_code=http_status, content=payload)


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
        return error_response(exc.code, exc.message, exc.http_status, exc.fields)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
        return error_response("http_error", message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(
            "validation_error",
            "Invalid request",
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            {"fields": exc.errors()},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response("internal_error", "Unexpected error", status.HTTP_500_INTERNAL_SERVER_ERROR)
