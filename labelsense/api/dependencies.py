"""
Dependency injection for FastAPI routes.

Provides injectable dependencies for:
- Configuration
- Pipeline service instances
"""

import os
from functools import lru_cache
from dataclasses import dataclass
from typing import Tuple

from fastapi import Depends

from labelsense.ocr.text_normalizer import (
    INGREDIENT_CONFIDENCE_THRESHOLD,
    FRONT_CONFIDENCE_THRESHOLD,
    LINE_TOLERANCE,
)
from labelsense.extraction.price import VND_TO_INR_RATE


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    # OCR thresholds (ingredient label vs. front of pack)
    label_confidence_threshold: float = INGREDIENT_CONFIDENCE_THRESHOLD
    front_confidence_threshold: float = FRONT_CONFIDENCE_THRESHOLD
    line_tolerance: float = LINE_TOLERANCE

    # Currency
    vnd_to_inr_rate: float = VND_TO_INR_RATE

    # Environment
    environment: str = "development"
    debug: bool = True

    # Extra CORS origins on top of the per-environment defaults
    cors_allowed_origins: Tuple[str, ...] = ()

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            label_confidence_threshold=float(
                os.getenv("LABEL_CONFIDENCE_THRESHOLD", cls.label_confidence_threshold)
            ),
            front_confidence_threshold=float(
                os.getenv("FRONT_CONFIDENCE_THRESHOLD", cls.front_confidence_threshold)
            ),
            line_tolerance=float(os.getenv("LINE_TOLERANCE", cls.line_tolerance)),
            vnd_to_inr_rate=float(os.getenv("VND_TO_INR_RATE", cls.vnd_to_inr_rate)),
            environment=os.getenv("LABELSENSE_ENV", cls.environment),
            debug=os.getenv("DEBUG", "true").lower() == "true",
            cors_allowed_origins=tuple(
                origin.strip()
                for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
                if origin.strip()
            ),
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings.from_env()


# =============================================================================
# Service Dependencies (Lazy Loading)
# =============================================================================

class ServiceContainer:
    """
    Container for lazy-loaded service instances.

    Services are built on first access from the settings.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._converter = None
        self._scan_service = None

    @property
    def converter(self):
        """Get currency converter instance."""
        if self._converter is None:
            from ..extraction.price import CurrencyConverter
            self._converter = CurrencyConverter(vnd_to_inr_rate=self.settings.vnd_to_inr_rate)
        return self._converter

    @property
    def scan_service(self):
        """Get label scan service instance."""
        if self._scan_service is None:
            from ..pipeline.scan_service import LabelScanService
            self._scan_service = LabelScanService(
                label_confidence_threshold=self.settings.label_confidence_threshold,
                front_confidence_threshold=self.settings.front_confidence_threshold,
                line_tolerance=self.settings.line_tolerance,
                converter=self.converter,
            )
        return self._scan_service


_containers = {}


def get_service_container(settings: Settings = Depends(get_settings)) -> ServiceContainer:
    """Get the service container for the given settings."""
    if settings not in _containers:
        _containers[settings] = ServiceContainer(settings)
    return _containers[settings]


def get_scan_service(container: ServiceContainer = Depends(get_service_container)):
    """Dependency to get the label scan service."""
    return container.scan_service
