"""Domain and collaborator exceptions."""

from __future__ import annotations

from typing import Optional

from .enums import DELIVERY_IMPOSSIBLE_MESSAGE, FETCH_ERROR_MESSAGES, FetchErrorKind


class DeliveryImpossibleError(Exception):
    """Raised when the distance falls in the venue's open-ended last tier."""

    def __init__(self, distance_m: float):
        self.distance_m = distance_m
        super().__init__(DELIVERY_IMPOSSIBLE_MESSAGE)


class DataFetchError(Exception):
    """Raised by the venue client when the venue data cannot be obtained."""

    def __init__(self, kind: FetchErrorKind, status_code: Optional[int] = None):
        self.kind = kind
        self.status_code = status_code
        super().__init__(FETCH_ERROR_MESSAGES[kind])

    @property
    def message(self) -> str:
        return FETCH_ERROR_MESSAGES[self.kind]
