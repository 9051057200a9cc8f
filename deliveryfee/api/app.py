"""
FastAPI application factory.

* Registers routes for delivery pricing and admin.
* Opens / closes the shared venue-API HTTP client via lifespan events.
* Maps domain errors to JSON error responses; a response carries either a
  price breakdown or an error, never both.
* Any other failure is logged and answered with a generic 500 error.
* Applies rate limiting.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from deliveryfee.api.middleware import limiter
from deliveryfee.api.routes import admin, delivery
from deliveryfee.config import settings
from deliveryfee.domain.enums import (
    INTERNAL_ERROR_MESSAGE,
    VALIDATION_ERROR_MESSAGE,
    FetchErrorKind,
)
from deliveryfee.domain.errors import DataFetchError, DeliveryImpossibleError

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

FETCH_ERROR_STATUS: dict[FetchErrorKind, int] = {
    FetchErrorKind.NOT_FOUND: 404,
    FetchErrorKind.SERVER_UNAVAILABLE: 503,
    FetchErrorKind.UNEXPECTED: 502,
    FetchErrorKind.TRANSPORT: 502,
    FetchErrorKind.INVALID_PAYLOAD: 502,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the venue-API client on startup; close it on shutdown."""
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    logger.info("Venue API client ready (base_url=%s)", settings.venue_api_base_url)
    yield
    await app.state.http_client.aclose()


# ── Exception handlers ────────────────────────────────────────────────


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "detail": VALIDATION_ERROR_MESSAGE,
            "code": "VALIDATION_ERROR",
            "errors": [
                {"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()
            ],
        },
    )


async def _delivery_impossible_handler(request: Request, exc: DeliveryImpossibleError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "code": "DELIVERY_IMPOSSIBLE"},
    )


async def _data_fetch_error_handler(request: Request, exc: DataFetchError):
    return JSONResponse(
        status_code=FETCH_ERROR_STATUS[exc.kind],
        content={"detail": exc.message, "code": exc.kind.value},
    )


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Failed to calculate the delivery price for %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": INTERNAL_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Delivery Fee Calculator API",
        description=(
            "Quotes the delivery fee, small-order surcharge and total price "
            "for a cart from a venue, using the venue's distance-tiered "
            "pricing and the straight-line distance to the user."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Error mapping
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(DeliveryImpossibleError, _delivery_impossible_handler)
    app.add_exception_handler(DataFetchError, _data_fetch_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    # Routers
    app.include_router(delivery.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
