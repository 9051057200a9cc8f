"""
Venue API client.

Fetches a venue's static data (location) and dynamic data (delivery
pricing) with two sequential GET requests on a shared ``httpx.AsyncClient``.
The dynamic request is only sent once the static one succeeded.

Every failure is surfaced as ``DataFetchError`` so callers can
short-circuit before any pricing happens.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from deliveryfee.domain.entities import Venue
from deliveryfee.domain.enums import FetchErrorKind
from deliveryfee.domain.errors import DataFetchError
from deliveryfee.infrastructure.payloads import DynamicVenuePayload, StaticVenuePayload

logger = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}


def error_kind_for_status(status_code: int) -> FetchErrorKind:
    if status_code == 404:
        return FetchErrorKind.NOT_FOUND
    if status_code >= 500:
        return FetchErrorKind.SERVER_UNAVAILABLE
    return FetchErrorKind.UNEXPECTED


class VenueClient:
    def __init__(self, http: httpx.AsyncClient, base_url: str):
        self.http = http
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"

    async def fetch_venue(self, slug: str) -> Venue:
        """Return the venue's location and pricing, or raise ``DataFetchError``."""
        static = await self._get(slug, "static", StaticVenuePayload)
        dynamic = await self._get(slug, "dynamic", DynamicVenuePayload)
        return Venue(
            slug=slug,
            coordinates=static.to_coordinate(),
            pricing=dynamic.to_pricing_config(),
        )

    async def _get(self, slug: str, part: str, model: type[BaseModel]) -> Any:
        url = f"{self.base_url}{slug}/{part}"
        try:
            resp = await self.http.get(url, headers=_HEADERS)
        except httpx.HTTPError as exc:
            logger.error("Venue %s: %s request failed: %s", slug, part, exc)
            raise DataFetchError(FetchErrorKind.TRANSPORT) from exc

        if not resp.is_success:
            kind = error_kind_for_status(resp.status_code)
            logger.warning(
                "Venue %s: %s returned HTTP %d (%s)",
                slug, part, resp.status_code, kind.value,
            )
            raise DataFetchError(kind, status_code=resp.status_code)

        try:
            return model.model_validate(resp.json())
        except ValueError as exc:
            # pydantic.ValidationError and JSONDecodeError are both ValueErrors
            kind = (
                FetchErrorKind.INVALID_PAYLOAD
                if isinstance(exc, ValidationError)
                else FetchErrorKind.TRANSPORT
            )
            logger.error("Venue %s: unreadable %s payload: %s", slug, part, exc)
            raise DataFetchError(kind, status_code=resp.status_code) from exc
