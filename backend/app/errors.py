"""
Exception handlers mapping validation, domain and storage errors to HTTP.

- Request validation      -> 400 with field-level details
- NotFoundError           -> 404
- NotAuthorizedError      -> 403
- ConflictError           -> 409 (duplicate slug/email, stale reorder version)
- SQLAlchemyError         -> 500, detail logged server-side only
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import ConflictError, NotAuthorizedError, NotFoundError, StaleVersionError

logger = logging.getLogger(__name__)

REQUEST_LOCATIONS = {"body", "path", "query", "header", "cookie"}


def _field_name(loc) -> str:
    parts = list(loc)
    if parts and parts[0] in REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(str(part) for part in parts) or "request"


def format_validation_errors(errors) -> list[dict]:
    return [
        {"field": _field_name(error.get("loc", ())), "message": error.get("msg", "Invalid value")}
        for error in errors
    ]


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "error": "Validation failed",
                "details": format_validation_errors(exc.errors()),
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotAuthorizedError)
    async def handle_not_authorized(request: Request, exc: NotAuthorizedError):
        return JSONResponse(status_code=403, content={"detail": str(exc)})

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        content = {"detail": str(exc)}
        if isinstance(exc, StaleVersionError):
            content["current_version"] = exc.current
        return JSONResponse(status_code=409, content=content)

    @app.exception_handler(SQLAlchemyError)
    async def handle_storage_error(request: Request, exc: SQLAlchemyError):
        logger.error(
            f"Storage error on {request.method} {request.url.path}: {str(exc)}",
            exc_info=exc
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
