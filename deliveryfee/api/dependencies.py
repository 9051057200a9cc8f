"""FastAPI dependency injection helpers."""

import httpx
from fastapi import Request

from deliveryfee.config import settings
from deliveryfee.infrastructure.venue_client import VenueClient
from deliveryfee.services.delivery_price import DeliveryPriceService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the shared ``AsyncClient`` opened by the app lifespan."""
    return request.app.state.http_client


def get_delivery_price_service(request: Request) -> DeliveryPriceService:
    venue_client = VenueClient(get_http_client(request), settings.venue_api_base_url)
    return DeliveryPriceService(venue_client)
