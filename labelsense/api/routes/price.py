"""
Price API Routes

Converts a shop price to Indian Rupee and a per-kilogram figure.
"""

from fastapi import APIRouter, Depends

from labelsense.api.dependencies import get_scan_service
from labelsense.api.schemas import PriceConvertRequest, PriceConvertResponse
from labelsense.pipeline.scan_service import LabelScanService


router = APIRouter(prefix="/price", tags=["price"])


@router.post("/convert", response_model=PriceConvertResponse)
async def convert_price(
    request: PriceConvertRequest,
    service: LabelScanService = Depends(get_scan_service),
) -> PriceConvertResponse:
    """Convert a price string; unparseable prices are reported, not rejected."""
    info = await service.convert_price(request.price, request.weight_grams)
    return PriceConvertResponse.from_info(info)
