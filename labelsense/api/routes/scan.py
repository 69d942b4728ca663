"""
Scan API Routes

Endpoints for ingredient-label, barcode-only and front-of-pack scans.
Clients run OCR on device and send the recognized fragments.
"""

from fastapi import APIRouter, Depends
from loguru import logger

from labelsense.api.dependencies import get_scan_service
from labelsense.api.schemas import (
    BarcodeScanRequest,
    BarcodeScanResponse,
    ClassificationOut,
    ErrorResponse,
    FrontScanRequest,
    FrontScanResponse,
    LabelScanRequest,
    LabelScanResponse,
)
from labelsense.core.types import CALORIES_NOT_LISTED
from labelsense.pipeline.scan_service import LabelScanService


router = APIRouter(prefix="/scan", tags=["scan"])


@router.post(
    "/label",
    response_model=LabelScanResponse,
    responses={422: {"model": ErrorResponse, "description": "No text found"}},
)
async def scan_label(
    request: LabelScanRequest,
    service: LabelScanService = Depends(get_scan_service),
) -> LabelScanResponse:
    """
    Classify an ingredient label.

    Normalizes the fragments, keeps the English part of the label,
    splits it into sections and classifies the ingredients.
    """
    logger.debug(f"Label scan with {len(request.fragments)} fragments")
    result = await service.scan_label(
        [f.to_fragment() for f in request.fragments],
        barcode=request.barcode,
        confidence_threshold=request.confidence_threshold,
    )
    return LabelScanResponse.from_result(result)


@router.post("/barcode", response_model=BarcodeScanResponse)
async def scan_barcode(
    request: BarcodeScanRequest,
    service: LabelScanService = Depends(get_scan_service),
) -> BarcodeScanResponse:
    """Record a barcode-only scan; no label text means no classification."""
    classification = service.scan_barcode(request.barcode)
    return BarcodeScanResponse(
        barcode=request.barcode,
        classification=ClassificationOut.from_result(classification),
        calories=CALORIES_NOT_LISTED,
    )


@router.post(
    "/front",
    response_model=FrontScanResponse,
    responses={422: {"model": ErrorResponse, "description": "No text found"}},
)
async def scan_front(
    request: FrontScanRequest,
    service: LabelScanService = Depends(get_scan_service),
) -> FrontScanResponse:
    """Extract product name and weight from a front-of-pack capture."""
    result = await service.scan_front(
        [f.to_fragment() for f in request.fragments],
        confidence_threshold=request.confidence_threshold,
    )
    return FrontScanResponse.from_result(result)
