"""
LabelSense - FastAPI Backend.

HTTP surface for the label scanning pipeline.
"""

from .main import app, create_app, main
from .dependencies import (
    Settings,
    get_settings,
    get_service_container,
    get_scan_service,
    ServiceContainer,
)
from .schemas import (
    FragmentIn,
    LabelScanRequest,
    LabelScanResponse,
    BarcodeScanRequest,
    BarcodeScanResponse,
    FrontScanRequest,
    FrontScanResponse,
    PriceConvertRequest,
    PriceConvertResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    # Application
    "app",
    "create_app",
    "main",
    # Dependencies
    "Settings",
    "get_settings",
    "get_service_container",
    "get_scan_service",
    "ServiceContainer",
    # Schemas
    "FragmentIn",
    "LabelScanRequest",
    "LabelScanResponse",
    "BarcodeScanRequest",
    "BarcodeScanResponse",
    "FrontScanRequest",
    "FrontScanResponse",
    "PriceConvertRequest",
    "PriceConvertResponse",
    "HealthResponse",
    "ErrorResponse",
]
