from __future__ import annotations

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=int(status_code), headers=headers)


async def http_error_handler(_req: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


def describe_errors(errors: Sequence[Any]) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


async def validation_error_handler(_req: Request, exc: RequestValidationError) -> PlainTextResponse:
    # Malformed or mistyped request bodies are client errors, not 422s.
    return error_response(400, f"Failed to parse request body: {describe_errors(exc.errors())}")


async def unhandled_error_handler(_req: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled error: %s", type(exc).__name__)
    return error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
