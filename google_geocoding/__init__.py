"""
Google Geocoding API Client Library

This module provides a typed Python client for the Google Geocoding API with
an async Connection for full replies and blocking convenience functions.

Example usage:
    from google_geocoding import Connection, GeocodeQuery, Language, Region, geocode, degeocode

    # Blocking API: coordinates of an address, addresses of a coordinate
    for coordinate in geocode("1600 Amphitheatre Pkwy, Mountain View, CA"):
        print(coordinate)
    for address in degeocode((37.42241, -122.08561)):
        print(address)

    # Async API with full replies
    query = (
        GeocodeQuery.fromAddress("1600 Amphitheatre Pkwy, Mountain View, CA")
        .withLanguage(Language.ENGLISH)
        .withRegion(Region.UNITED_STATES)
    )
    replies = await Connection(apiKey="your_api_key").geocode(query)
    for reply in replies:
        print(f"{reply.formatted_address}: {reply.geometry.location}")
"""

from .client import Connection
from .config import GeocodingConfig, loadConfig
from .enums import AddressType, ComponentFilterKind, LocationType, StatusCode
from .exceptions import (
    ApiStatusError,
    ConfigurationError,
    ConstructionError,
    CoordinateError,
    DecodeError,
    GeocodingError,
    InvalidRequestError,
    OverQueryLimitError,
    RequestDeniedError,
    TransportError,
    UnknownApiError,
)
from .languages import Language
from .logging_utils import initLogging
from .models import AddressComponent, Coordinate, Geometry, Reply, ResponseEnvelope, Viewport
from .query import AddressPlace, ComponentFilterRule, ComponentsPlace, DegeocodeQuery, GeocodeQuery, Place
from .regions import Region
from .sync import degeocode, geocode
from .wire import ApiSet, wireLabel

__all__ = [
    "Connection",
    "geocode",
    "degeocode",
    "GeocodingConfig",
    "loadConfig",
    "initLogging",
    "Coordinate",
    "Viewport",
    "Geometry",
    "AddressComponent",
    "Reply",
    "ResponseEnvelope",
    "GeocodeQuery",
    "DegeocodeQuery",
    "Place",
    "AddressPlace",
    "ComponentsPlace",
    "ComponentFilterRule",
    "ApiSet",
    "wireLabel",
    "StatusCode",
    "LocationType",
    "AddressType",
    "ComponentFilterKind",
    "Language",
    "Region",
    "GeocodingError",
    "ConstructionError",
    "CoordinateError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ApiStatusError",
    "OverQueryLimitError",
    "RequestDeniedError",
    "InvalidRequestError",
    "UnknownApiError",
]
