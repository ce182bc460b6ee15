"""
Structured logging for the domain registry.

Every entry carries the bound context (request_id, caller subject) and the
app name. Development renders to the console; anything else emits JSON.

Usage:
    from core.logging import get_logger
    logger = get_logger("service.account")
    logger.info("account_created", account_id="1")
"""

import logging
import os
import sys
import time
import uuid
from collections.abc import MutableMapping
from functools import lru_cache
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from .errors import ServiceError

APP_NAME = "domain_registry"


def _is_development() -> bool:
    from .config import get_settings

    return get_settings().debug or os.getenv("ENV", "development") == "development"


def _add_app_name(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> EventDict:
    event_dict["app"] = APP_NAME
    return event_dict  # type: ignore[return-value]


def _expand_service_errors(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> EventDict:
    """Render a ServiceError passed as `error=` into flat, serializable keys."""
    error = event_dict.get("error")
    if isinstance(error, ServiceError):
        event_dict["error"] = error.message
        event_dict["error_kind"] = error.kind.value
        if error.fields:
            event_dict["error_fields"] = dict(error.fields)
        if error.cause is not None:
            event_dict["error_cause"] = type(error.cause).__name__
    return event_dict  # type: ignore[return-value]


SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    _add_app_name,
    _expand_service_errors,
]


def get_processors(json_logs: bool | None = None) -> list[Processor]:
    """Shared processors plus the renderer for the environment."""
    if json_logs is None:
        json_logs = not _is_development()
    if json_logs:
        return SHARED_PROCESSORS + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return SHARED_PROCESSORS + [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


@lru_cache(maxsize=1)
def configure_logging(level: str = "INFO", json_logs: bool | None = None) -> None:
    """Configure stdlib logging and structlog. Repeated calls with the same arguments are no-ops."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=get_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)  # type: ignore[no-any-return]


# =============================================================================
# Context Management
# =============================================================================


def bind_context(**kwargs: Any) -> None:
    """Bind values included in every entry logged by the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_context_value(key: str, default: Any = None) -> Any:
    """Read a bound context value (e.g. the current request id)."""
    return structlog.contextvars.get_contextvars().get(key, default)


# =============================================================================
# ASGI Integration
# =============================================================================


class RequestLoggingMiddleware:
    """
    Logs the start and completion of every HTTP request.

    Completion is logged at info below 400, warning below 500 and error
    otherwise. The request context is cleared once the response is sent.
    """

    def __init__(self, app):
        self.app = app
        self.logger = get_logger("http")

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = time.perf_counter()
        if get_context_value("request_id") is None:
            bind_context(request_id=str(uuid.uuid4()))

        method = scope.get("method", "")
        path = scope.get("path", "")
        status_code = 500

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message.get("status", 500)
            await send(message)

        self.logger.info("request_started", method=method, path=path)
        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            if status_code >= 500:
                log = self.logger.error
            elif status_code >= 400:
                log = self.logger.warning
            else:
                log = self.logger.info
            log(
                "request_complete",
                method=method,
                path=path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            clear_context()


__all__ = [
    "APP_NAME",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "get_context_value",
    "RequestLoggingMiddleware",
]
