"""Domain enumerations and user-facing error messages."""

import enum


class FetchErrorKind(str, enum.Enum):
    NOT_FOUND = "NOT_FOUND"
    SERVER_UNAVAILABLE = "SERVER_UNAVAILABLE"
    UNEXPECTED = "UNEXPECTED"
    TRANSPORT = "TRANSPORT"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"


_FETCH_FAILED = (
    "An unexpected error occurred while fetching venue information. "
    "Please try again."
)

# Maps fetch error kind -> message shown to the user
FETCH_ERROR_MESSAGES: dict[FetchErrorKind, str] = {
    FetchErrorKind.NOT_FOUND: "Venue not found. Please check the venue slug.",
    FetchErrorKind.SERVER_UNAVAILABLE: (
        "The server is currently unavailable. Please try again later."
    ),
    FetchErrorKind.UNEXPECTED: "An unexpected error occurred. Please try again.",
    FetchErrorKind.TRANSPORT: _FETCH_FAILED,
    FetchErrorKind.INVALID_PAYLOAD: _FETCH_FAILED,
}

DELIVERY_IMPOSSIBLE_MESSAGE = "Delivery is not possible for the given distance."
VALIDATION_ERROR_MESSAGE = "Please fill in all required fields with valid values."
INTERNAL_ERROR_MESSAGE = "Failed to calculate the delivery price. Please try again."
