"""Exception handlers — map domain errors to JSON error bodies."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contador.domain.exceptions import ContadorError, StorageError

logger = logging.getLogger(__name__)

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}

GENERIC_ERROR = "Internal server error"


def json_response(content, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


async def contador_error_handler(request: Request, exc: ContadorError) -> JSONResponse:
    if isinstance(exc, StorageError):
        # Storage detail stays in the logs.
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return json_response({"error": GENERIC_ERROR}, status_code=500)
    return json_response({"error": exc.message}, status_code=exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return json_response({"error": GENERIC_ERROR}, status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ContadorError, contador_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
