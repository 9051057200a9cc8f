"""
Delivery price endpoint
=======================

POST /api/v1/delivery-price -- quote the delivery fee and total for a cart

Domain errors (delivery impossible, venue fetch failures) are turned into
responses by the exception handlers registered in ``deliveryfee.api.app``.
"""

from fastapi import APIRouter, Depends, Request

from deliveryfee.api.dependencies import get_delivery_price_service
from deliveryfee.api.middleware import limiter
from deliveryfee.api.schemas import (
    DeliveryPriceRequest,
    ErrorResponse,
    PriceBreakdownResponse,
)
from deliveryfee.config import settings
from deliveryfee.services.delivery_price import DeliveryPriceService

router = APIRouter(tags=["delivery"])


@router.post(
    "/delivery-price",
    response_model=PriceBreakdownResponse,
    summary="Calculate the delivery price for a venue and cart",
    responses={
        404: {"model": ErrorResponse, "description": "Venue not found."},
        422: {
            "model": ErrorResponse,
            "description": "Invalid input, or delivery not possible for the distance.",
        },
        502: {"model": ErrorResponse, "description": "Venue API returned unusable data."},
        503: {"model": ErrorResponse, "description": "Venue API unavailable."},
        500: {"model": ErrorResponse, "description": "Unexpected failure while calculating."},
    },
)
@limiter.limit(lambda: settings.rate_limit)
async def calculate_delivery_price(
    request: Request,
    body: DeliveryPriceRequest,
    service: DeliveryPriceService = Depends(get_delivery_price_service),
):
    breakdown = await service.quote(body.to_domain())
    return PriceBreakdownResponse.from_breakdown(breakdown, settings.currency_symbol)
