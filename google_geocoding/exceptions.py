"""
Google Geocoding Exceptions

This module contains custom exception classes for query construction,
transport, decoding and API status errors.
"""

import logging
from typing import Any, Dict, Optional

from .enums import StatusCode

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Base exception class for all geocoding errors, dood!

    Attributes:
        message: Human-readable error message
        code: Error code (API status or HTTP status, if available)
        response: Raw response data (if available)
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response
        logger.debug(f"{type(self).__name__}: {message} (code: {code})")

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (code: {self.code})"
        return self.message


class ConstructionError(GeocodingError, ValueError):
    """Raised when a query or value object is built from invalid input.

    Construction errors never reach the network.
    """


class CoordinateError(ConstructionError):
    """Raised when latitude or longitude is non-finite or out of range."""


class ConfigurationError(GeocodingError):
    """Raised when the configuration file holds invalid values."""


class TransportError(GeocodingError):
    """Raised when the HTTP request could not be completed.

    This includes connection failures, timeouts reported by the transport,
    and non-2xx HTTP responses.
    """


class DecodeError(GeocodingError):
    """Raised when the reply body is not valid JSON or doesn't match the reply schema."""


class ApiStatusError(GeocodingError):
    """Raised when the API replies with a non-success status.

    Attributes:
        kind: Status returned by the API
    """

    defaultMessage = "Geocoding request failed"

    def __init__(
        self,
        kind: StatusCode,
        message: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or self.defaultMessage, str(kind), response)
        self.kind = kind


class OverQueryLimitError(ApiStatusError):
    """Raised when the API key is over its quota."""

    defaultMessage = "You are over your quota"


class RequestDeniedError(ApiStatusError):
    """Raised when the request was denied, usually due to an invalid or missing API key."""

    defaultMessage = "Request denied"


class InvalidRequestError(ApiStatusError):
    """Raised when the query (address, components or latlng) is missing."""

    defaultMessage = "Query component missing"


class UnknownApiError(ApiStatusError):
    """Raised when the request could not be processed due to a server error."""

    defaultMessage = "Unknown error"


_STATUS_ERRORS = {
    StatusCode.OVER_QUERY_LIMIT: OverQueryLimitError,
    StatusCode.REQUEST_DENIED: RequestDeniedError,
    StatusCode.INVALID_REQUEST: InvalidRequestError,
    StatusCode.UNKNOWN_ERROR: UnknownApiError,
}


def parseApiStatus(
    status: StatusCode,
    errorMessage: Optional[str] = None,
    responseData: Optional[Dict[str, Any]] = None,
) -> Optional[ApiStatusError]:
    """Map a reply status to the matching exception.

    Args:
        status: Status of the decoded reply
        errorMessage: Optional message supplied by the API
        responseData: Raw reply data

    Returns:
        None for OK and ZERO_RESULTS, otherwise the exception to raise
    """
    if status.isSuccess:
        return None
    return _STATUS_ERRORS[status](status, errorMessage, responseData)
