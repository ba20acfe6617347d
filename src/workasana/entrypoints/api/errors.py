"""Error translation and exception handlers for the API."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workasana.core.exceptions import Conflict, InternalFailure, ValidationFailure, WorkasanaError
from workasana.entrypoints.api.wire import to_wire

logger = structlog.get_logger()


@contextmanager
def translate_errors(message: str) -> Iterator[None]:
    """Map unexpected failures inside a handler to ``InternalFailure``.

    Taxonomy errors pass through unchanged; anything else is logged and
    replaced by ``InternalFailure(message)``.

    Usage:
        with translate_errors("Error fetching tasks"):
            tasks = await repo.list(...)
    """
    try:
        yield
    except WorkasanaError:
        raise
    except Exception as e:
        logger.exception("request_failed", failure=message)
        raise InternalFailure(message) from e


def _error_body(exc: WorkasanaError) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "message": exc.message}
    if exc.detail:
        body["error"] = exc.detail
    if isinstance(exc, ValidationFailure) and exc.errors:
        body["errors"] = exc.errors
    if isinstance(exc, Conflict) and exc.data is not None:
        body["data"] = jsonable_encoder(to_wire(exc.data))
    return body


async def handle_domain_error(request: Request, exc: WorkasanaError) -> JSONResponse:
    """Render a taxonomy error with its status code."""
    if exc.status_code >= 500:
        logger.error("request_error", path=request.url.path, failure=exc.message)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 with per-field messages."""
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Validation errors", "errors": errors},
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors.

    A 404 or 405 here means no route matched the path and method; both are
    reported as 404 "Route not found".
    """
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={"success": False, "message": "Route not found"},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register the exception handlers on an application."""
    app.add_exception_handler(WorkasanaError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
