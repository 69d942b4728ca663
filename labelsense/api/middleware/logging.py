"""
Request logging middleware.

Structured logging for API requests with:
- Request timing
- Correlation IDs for tracing
- Method, path and client address only; request bodies are not logged
"""

import time
import uuid
import json
import logging
from typing import Optional, Callable, Set
from dataclasses import dataclass, field
from contextvars import ContextVar

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

# Context variable for request ID (accessible throughout request lifecycle)
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

logger = logging.getLogger("labelsense.api")


@dataclass
class LoggingConfig:
    """Configuration for request logging."""

    enabled: bool = True

    # Paths to exclude from logging
    excluded_paths: Set[str] = field(default_factory=lambda: {
        "/health",
        "/favicon.ico",
    })

    # Log level for successful requests
    success_log_level: int = logging.INFO

    # Log level for client errors (4xx)
    error_log_level: int = logging.WARNING

    # Slow request threshold (seconds)
    slow_request_threshold: float = 2.0

    # Header name for request ID
    request_id_header: str = "X-Request-ID"


class StructuredLogFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format for easy parsing by log aggregators.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = request_id_var.get()
        if request_id:
            log_data["request_id"] = request_id

        if hasattr(record, "request_data"):
            log_data["request"] = record.request_data
        if hasattr(record, "duration_ms"):
            log_data["duration_ms"] = record.duration_ms

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def get_request_id() -> str:
    """Get current request ID from context."""
    return request_id_var.get()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for request logging."""

    def __init__(self, app: FastAPI, config: Optional[LoggingConfig] = None):
        super().__init__(app)
        self.config = config or LoggingConfig()

    def _should_log(self, path: str) -> bool:
        return self.config.enabled and path not in self.config.excluded_paths

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(
            self.config.request_id_header,
            str(uuid.uuid4())[:8]
        )
        request_id_var.set(request_id)

        if not self._should_log(request.url.path):
            response = await call_next(request)
            response.headers[self.config.request_id_header] = request_id
            return response

        start_time = time.time()
        request_data = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
        }

        response = await call_next(request)

        duration = time.time() - start_time
        duration_ms = round(duration * 1000, 2)
        response.headers[self.config.request_id_header] = request_id

        if response.status_code >= 500:
            log_level = logging.ERROR
        elif response.status_code >= 400:
            log_level = self.config.error_log_level
        elif duration > self.config.slow_request_threshold:
            log_level = logging.WARNING
        else:
            log_level = self.config.success_log_level

        message = f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms}ms)"
        if duration > self.config.slow_request_threshold:
            message = f"[SLOW] {message}"

        logger.log(
            log_level,
            message,
            extra={"request_data": request_data, "duration_ms": duration_ms},
        )
        return response


def setup_logging(
    app: FastAPI,
    config: Optional[LoggingConfig] = None,
    structured: bool = True,
) -> None:
    """
    Configure logging middleware and formatters.

    Args:
        app: FastAPI application instance.
        config: Logging configuration.
        structured: Use JSON structured logging format.
    """
    if config is None:
        config = LoggingConfig()

    if structured:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredLogFormatter())

        api_logger = logging.getLogger("labelsense")
        if not any(isinstance(h.formatter, StructuredLogFormatter) for h in api_logger.handlers):
            api_logger.addHandler(handler)
        api_logger.setLevel(logging.INFO)

    app.add_middleware(RequestLoggingMiddleware, config=config)
