"""
Error Handling for LabelSense API

Centralized error handling:
- Structured error responses
- Logging of errors
- Exception translation
"""

import traceback
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from labelsense.exceptions import LabelSenseException


def create_error_response(
    error: str,
    code: str,
    status_code: int,
    detail: str = None,
) -> JSONResponse:
    """Create standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "code": code,
            "detail": detail,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with FastAPI app."""

    @app.exception_handler(LabelSenseException)
    async def labelsense_exception_handler(request: Request, exc: LabelSenseException):
        logger.warning(f"LabelSense error on {request.url.path}: {exc.code} - {exc.message}")
        return create_error_response(
            error=exc.message,
            code=exc.code,
            status_code=exc.status_code,
            detail=exc.detail,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {type(exc).__name__}: {exc}\n"
            f"{traceback.format_exc()}"
        )
        return create_error_response(
            error="Internal Server Error",
            code="INTERNAL_ERROR",
            status_code=500,
            detail="An unexpected error occurred",
        )
