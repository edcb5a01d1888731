"""
Blocking convenience functions.

Each call creates its own event loop with ``asyncio.run``, drives a single
Connection pipeline to completion and closes the loop before returning. The
functions can't be called from a running event loop, use Connection there.

Example:
    >>> from google_geocoding import geocode, degeocode
    >>> for coordinate in geocode("1600 Amphitheatre Pkwy, Mountain View, CA"):
    ...     print(coordinate)
    >>> for address in degeocode((37.42241, -122.08561)):
    ...     print(address)
"""

import asyncio
from typing import List, Optional

from .client import AnyQuery, Connection
from .constants import API_BASE_URL, DEFAULT_TIMEOUT
from .languages import Language
from .models import Coordinate, Reply
from .query import DegeocodeLocator, GeocodeLocator, toDegeocodeQuery, toGeocodeQuery


def _runPipeline(connection: Connection, query: AnyQuery) -> List[Reply]:
    """Run one Connection pipeline on a fresh event loop.

    Raises:
        RuntimeError: If called from a running event loop
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError(
            "Blocking geocoding functions can't run inside an event loop, await Connection methods instead"
        )
    return asyncio.run(connection.execute(query))


def geocode(
    locator: GeocodeLocator,
    *,
    apiKey: Optional[str] = None,
    baseUrl: str = API_BASE_URL,
    requestTimeout: int = DEFAULT_TIMEOUT,
    defaultLanguage: Optional[Language] = None,
) -> List[Coordinate]:
    """Get all the coordinates matching an address, components filter or query.

    Returns:
        Locations in server order, the first one is the best match

    Raises:
        GeocodingError: First error of the pipeline, no partial results are returned
    """
    query = toGeocodeQuery(locator)
    connection = Connection(
        apiKey=apiKey, baseUrl=baseUrl, requestTimeout=requestTimeout, defaultLanguage=defaultLanguage
    )
    replies = _runPipeline(connection, query)
    return [reply.geometry.location for reply in replies]


def degeocode(
    locator: DegeocodeLocator,
    *,
    apiKey: Optional[str] = None,
    baseUrl: str = API_BASE_URL,
    requestTimeout: int = DEFAULT_TIMEOUT,
    defaultLanguage: Optional[Language] = None,
) -> List[str]:
    """Get all the formatted addresses of a coordinate or reverse query.

    Returns:
        Formatted addresses in server order, the first one is the best match

    Raises:
        GeocodingError: First error of the pipeline, no partial results are returned
    """
    query = toDegeocodeQuery(locator)
    connection = Connection(
        apiKey=apiKey, baseUrl=baseUrl, requestTimeout=requestTimeout, defaultLanguage=defaultLanguage
    )
    replies = _runPipeline(connection, query)
    return [reply.formatted_address for reply in replies]
