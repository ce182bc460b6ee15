"""
Custom exception handlers for FastAPI.

Service failures travel as Result values until a route unwraps them; unwrap()
turns a failed Result into a ServiceFailure, which is mapped to a status code
here:

    VALIDATION -> 400, NOT_FOUND -> 404, STORAGE -> 500

Request IDs are logged server-side for tracing but NOT exposed to clients.
"""

from typing import TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.errors import ErrorKind, ServiceError
from core.logging import get_context_value, get_logger
from core.result import Result

logger = get_logger("backend.errors")

T = TypeVar("T")

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE: 500,
}


class ServiceFailure(Exception):
    """Raised by route handlers for a failed service Result."""

    def __init__(self, error: ServiceError):
        super().__init__(error.message)
        self.error = error

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND.get(self.error.kind, 500)


def unwrap(result: Result[T]) -> T:
    """Return the success value or raise ServiceFailure."""
    if not result.ok:
        raise ServiceFailure(result.error)
    return result.value


def _response_payload(detail: str, status_code: int) -> dict:
    return {
        "detail": detail,
        "status_code": status_code,
    }


def _field_errors(fields: dict[str, str]) -> list[dict[str, str]]:
    return [{"field": name, "error": reason} for name, reason in sorted(fields.items())]


def _location(loc: tuple) -> str:
    # ("body", "email") -> "email"; ("query", "page") -> "page"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            request_id=get_context_value("request_id", "-"),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_response_payload(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        fields = {_location(tuple(err.get("loc", ()))): err.get("msg", "invalid") for err in exc.errors()}
        logger.warning(
            "request_validation_error",
            fields=fields,
            request_id=get_context_value("request_id", "-"),
        )
        return JSONResponse(
            status_code=400,
            content={
                **_response_payload("Validation error", 400),
                "errors": _field_errors(fields),
            },
        )

    @app.exception_handler(ServiceFailure)
    async def service_failure_handler(request: Request, exc: ServiceFailure):
        error = exc.error
        status_code = exc.status_code
        request_id = get_context_value("request_id", "-")

        if error.kind is ErrorKind.STORAGE:
            logger.error(
                "storage_failure",
                error=error,
                request_id=request_id,
            )
            # Storage details stay server-side
            return JSONResponse(
                status_code=status_code,
                content=_response_payload("Internal server error", status_code),
            )

        logger.info(
            "service_failure",
            error=error,
            status_code=status_code,
            request_id=request_id,
        )
        content = _response_payload(error.message, status_code)
        if error.kind is ErrorKind.VALIDATION:
            content["errors"] = _field_errors(error.fields)
        return JSONResponse(status_code=status_code, content=content)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=get_context_value("request_id", "-"),
        )
        return JSONResponse(
            status_code=500,
            content=_response_payload("Internal server error", 500),
        )


__all__ = ["ServiceFailure", "STATUS_BY_KIND", "register_exception_handlers", "unwrap"]
