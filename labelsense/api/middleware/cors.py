"""
CORS Configuration

Configures Cross-Origin Resource Sharing settings.
"""

from typing import Iterable, List, Optional
from dataclasses import dataclass, field, replace
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import os


@dataclass
class CORSConfig:
    """CORS configuration settings."""

    # Allowed origins
    allowed_origins: List[str] = field(default_factory=list)

    # Allow credentials (cookies, authorization headers)
    allow_credentials: bool = True

    # Scanning endpoints are read-only or POST
    allowed_methods: List[str] = field(default_factory=lambda: ["GET", "POST", "OPTIONS"])

    allowed_headers: List[str] = field(default_factory=lambda: [
        "Accept",
        "Accept-Language",
        "Content-Type",
        "Content-Language",
        "X-Request-ID",
    ])

    # Headers to expose to the browser
    expose_headers: List[str] = field(default_factory=lambda: ["X-Request-ID"])

    # Max age for preflight cache (in seconds)
    max_age: int = 3600

    # Allow all origins (development only)
    allow_all_origins: bool = False


# Environment-specific configurations
CORS_CONFIGS = {
    "development": CORSConfig(
        allowed_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_all_origins=True,
    ),
    "staging": CORSConfig(
        allowed_origins=["https://staging.labelsense.example.com"],
    ),
    "production": CORSConfig(
        allowed_origins=[
            "https://labelsense.example.com",
            "https://app.labelsense.example.com",
        ],
        max_age=7200,
    ),
}


def get_cors_config(
    environment: Optional[str] = None,
    extra_origins: Iterable[str] = (),
) -> CORSConfig:
    """
    Get CORS configuration for the environment.

    Args:
        environment: Environment name. If None, read from LABELSENSE_ENV.
        extra_origins: Origins allowed on top of the environment defaults
            (Settings.cors_allowed_origins).
    """
    if environment is None:
        environment = os.getenv("LABELSENSE_ENV", "development")

    base = CORS_CONFIGS.get(environment, CORS_CONFIGS["development"])
    origins = list(base.allowed_origins)
    for origin in extra_origins:
        if origin not in origins:
            origins.append(origin)

    return replace(base, allowed_origins=origins)


def setup_cors(app: FastAPI, config: Optional[CORSConfig] = None) -> None:
    """
    Configure CORS middleware for the FastAPI application.

    Args:
        app: FastAPI application instance.
        config: CORS configuration. If None, loads from environment.
    """
    if config is None:
        config = get_cors_config()

    if config.allow_all_origins:
        allow_origins = ["*"]
    else:
        allow_origins = config.allowed_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=config.allow_credentials if not config.allow_all_origins else False,
        allow_methods=config.allowed_methods,
        allow_headers=config.allowed_headers,
        expose_headers=config.expose_headers,
        max_age=config.max_age,
    )
