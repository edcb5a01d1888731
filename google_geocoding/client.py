"""
Google Geocoding Async Client

This module provides the Connection class which runs one geocoding pipeline
per call: build the request URL, issue a single GET, decode the reply and
classify its status.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

import httpx

from .constants import API_BASE_URL, DEFAULT_TIMEOUT, PARAM_KEY, PARAM_LANGUAGE
from .exceptions import DecodeError, TransportError, parseApiStatus
from .languages import Language
from .models import Reply, ResponseEnvelope
from .query import (
    DegeocodeLocator,
    DegeocodeQuery,
    GeocodeLocator,
    GeocodeQuery,
    toDegeocodeQuery,
    toGeocodeQuery,
)

if TYPE_CHECKING:
    from .config import GeocodingConfig

logger = logging.getLogger(__name__)

AnyQuery = Union[GeocodeQuery, DegeocodeQuery]


class Connection:
    """Async connection to the Google Geocoding API, dood!

    A Connection holds only read-only configuration, so any number of
    pipelines may run on it concurrently. Every call issues exactly one
    request: there are no retries, no caching and no rate limiting.

    If ``httpClient`` is given it is shared by all calls and never closed by
    the Connection. Otherwise a new HTTP session is opened for each request.

    Example:
        >>> from google_geocoding import Connection
        >>>
        >>> connection = Connection(apiKey="your_api_key")
        >>>
        >>> # Forward geocoding
        >>> replies = await connection.geocode("1600 Amphitheatre Pkwy, Mountain View, CA")
        >>> for reply in replies:
        ...     print(f"{reply.formatted_address}: {reply.geometry.location}")
        >>>
        >>> # Reverse geocoding
        >>> replies = await connection.degeocode((37.42241, -122.08561))
    """

    __slots__ = (
        "apiKey",
        "baseUrl",
        "requestTimeout",
        "defaultLanguage",
        "_httpClient",
    )

    def __init__(
        self,
        apiKey: Optional[str] = None,
        baseUrl: str = API_BASE_URL,
        requestTimeout: int = DEFAULT_TIMEOUT,
        defaultLanguage: Optional[Language] = None,
        httpClient: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize Google Geocoding connection.

        Args:
            apiKey: Google Maps API key, sent as ``key`` parameter (default: None)
            baseUrl: Geocoding endpoint (default: Google JSON endpoint)
            requestTimeout: HTTP request timeout in seconds for own sessions (default: 10)
            defaultLanguage: Language for queries which don't set one (default: None)
            httpClient: Shared HTTP client to use instead of a session per request
        """
        self.apiKey = apiKey
        self.baseUrl = baseUrl
        self.requestTimeout = requestTimeout
        self.defaultLanguage = defaultLanguage
        self._httpClient = httpClient

    @classmethod
    def fromConfig(cls, config: "GeocodingConfig", httpClient: Optional[httpx.AsyncClient] = None) -> "Connection":
        """Create Connection from loaded configuration."""
        return cls(
            apiKey=config.apiKey,
            baseUrl=config.baseUrl,
            requestTimeout=config.requestTimeout,
            defaultLanguage=config.defaultLanguage,
            httpClient=httpClient,
        )

    def buildParams(self, query: AnyQuery) -> Dict[str, str]:
        """Render query parameters of a request, without the API key."""
        params = query.toParams()
        if self.defaultLanguage is not None and PARAM_LANGUAGE not in params:
            params[PARAM_LANGUAGE] = self.defaultLanguage.value
        return params

    def buildUrl(self, query: AnyQuery) -> httpx.URL:
        """Build complete request URL for the query.

        Args:
            query: Forward or reverse geocoding query

        Returns:
            Request URL with encoded query string (API key included, if set)
        """
        params = self.buildParams(query)
        if self.apiKey:
            params[PARAM_KEY] = self.apiKey
        return httpx.URL(self.baseUrl, params=params)

    async def geocode(self, locator: GeocodeLocator) -> List[Reply]:
        """Forward geocoding: get candidates for an address or components filter, dood!

        Args:
            locator: Address string, Place, component rules or GeocodeQuery

        Returns:
            Replies in server order, empty list for ZERO_RESULTS

        Raises:
            ConstructionError: If locator is invalid
            TransportError: If the request failed
            DecodeError: If the reply is malformed
            ApiStatusError: If the API replied with an error status
        """
        return await self.execute(toGeocodeQuery(locator))

    async def degeocode(self, locator: DegeocodeLocator) -> List[Reply]:
        """Reverse geocoding: get candidate addresses for a coordinate, dood!

        Args:
            locator: Coordinate, (lat, lon) pair or DegeocodeQuery

        Returns:
            Replies in server order, empty list for ZERO_RESULTS

        Raises:
            CoordinateError: If locator isn't a valid coordinate
            TransportError: If the request failed
            DecodeError: If the reply is malformed
            ApiStatusError: If the API replied with an error status
        """
        return await self.execute(toDegeocodeQuery(locator))

    async def execute(self, query: AnyQuery) -> List[Reply]:
        """Run one request pipeline for the query.

        Returns:
            Replies for OK and ZERO_RESULTS statuses

        Raises:
            TransportError: If the request failed
            DecodeError: If the reply is malformed
            ApiStatusError: If the API replied with an error status
        """
        url = self.buildUrl(query)
        logger.debug(f"Making geocoding request with params: {self.buildParams(query)}")

        data = await self._makeRequest(url)
        envelope = ResponseEnvelope.from_dict(data)

        error = parseApiStatus(envelope.status, envelope.error_message, data)
        if error is not None:
            logger.warning(f"Geocoding request failed: {error}")
            raise error

        logger.debug(f"Geocoding request successful: {envelope.status}, {len(envelope.results)} results")
        return envelope.results

    async def _makeRequest(self, url: httpx.URL) -> Dict[str, Any]:
        """Issue GET request and decode JSON body.

        Raises:
            TransportError: On network errors and non-2xx responses
            DecodeError: If the body isn't a JSON object
        """
        try:
            if self._httpClient is not None:
                response = await self._httpClient.get(url)
            else:
                async with httpx.AsyncClient(timeout=self.requestTimeout) as session:
                    response = await session.get(url)
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            statusCode = e.response.status_code
            logger.error(f"HTTP error: {statusCode}")
            raise TransportError(f"HTTP error {statusCode}", str(statusCode)) from e

        except httpx.RequestError as e:
            logger.error(f"Network error: {type(e).__name__}#{e}")
            raise TransportError(f"Network error: {type(e).__name__}#{e}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            raise DecodeError(f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(f"Expected JSON object, got {type(data).__name__}")
        return data
