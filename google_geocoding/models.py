"""
Google Geocoding API Data Models

This module defines the coordinate value object and the dataclasses decoded
from geocoding replies. Every reply model keeps unknown keys in ``api_kwargs``.
"""

import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple, Union

from .constants import COORDINATE_SEPARATOR, SET_SEPARATOR
from .enums import AddressType, LocationType, StatusCode
from .exceptions import CoordinateError, DecodeError
from .wire import ApiSet

logger = logging.getLogger(__name__)


def _require(data: Any, key: str, context: str) -> Any:
    """Get mandatory key from decoded JSON object, raising DecodeError if absent."""
    if not isinstance(data, dict):
        raise DecodeError(f"{context}: expected object, got {type(data).__name__}")
    if key not in data:
        raise DecodeError(f"{context}: missing '{key}'")
    return data[key]


def _extraKwargs(data: Dict[str, Any], known: set) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k not in known}


def _formatDegrees(value: float) -> str:
    """Render degrees in positional notation with the shortest round-trip digits (1e-05 -> 0.00001)."""
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True, slots=True)
class Coordinate:
    """
    Validated WGS-84 latitude/longitude pair in decimal degrees
    """

    latitude: float
    """Latitude, -90 to 90"""
    longitude: float
    """Longitude, -180 to 180"""

    def __post_init__(self) -> None:
        for name, value, limit in (("latitude", self.latitude, 90), ("longitude", self.longitude, 180)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise CoordinateError(f"{name} must be a number, got {type(value).__name__}")
            try:
                finite = math.isfinite(value)
            except OverflowError as e:
                raise CoordinateError(f"{name} is too large to be a float") from e
            if not finite:
                raise CoordinateError(f"{name} must be finite, got {value}")
            if not -limit <= value <= limit:
                raise CoordinateError(f"{name} {value} is out of range [-{limit}, {limit}]")

    def __str__(self) -> str:
        return f"{_formatDegrees(self.latitude)}{COORDINATE_SEPARATOR}{_formatDegrees(self.longitude)}"

    def toTuple(self) -> Tuple[float, float]:
        """Return (latitude, longitude) tuple"""
        return (self.latitude, self.longitude)

    @classmethod
    def fromAny(cls, value: Union["Coordinate", Tuple[float, float]]) -> "Coordinate":
        """Coerce a Coordinate or a (lat, lon) pair to Coordinate.

        Raises:
            CoordinateError: If value isn't a valid pair
        """
        if isinstance(value, Coordinate):
            return value
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(value[0], value[1])
        raise CoordinateError(f"Can't build coordinate from {type(value).__name__}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinate":
        """Create Coordinate from API ``{"lat": ..., "lng": ...}`` object.

        Raises:
            DecodeError: If keys are missing or values don't form a valid coordinate
        """
        lat = _require(data, "lat", "location")
        lng = _require(data, "lng", "location")
        try:
            return cls(lat, lng)
        except CoordinateError as e:
            raise DecodeError(f"Coordinates ({lat},{lng}) do not lie on WGS-84 ellipsoid: {e.message}") from e

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.latitude, "lng": self.longitude}


@dataclass(frozen=True, slots=True)
class Viewport:
    """
    Bounding box defined by its northeast and southwest corners
    """

    northeast: Coordinate
    southwest: Coordinate

    def toWire(self) -> str:
        """Encode as ``bounds`` request value: ``"<sw lat>,<sw lng>|<ne lat>,<ne lng>"``"""
        return f"{self.southwest}{SET_SEPARATOR}{self.northeast}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Viewport":
        """Create Viewport instance from API response dictionary."""
        return cls(
            northeast=Coordinate.from_dict(_require(data, "northeast", "viewport")),
            southwest=Coordinate.from_dict(_require(data, "southwest", "viewport")),
        )


@dataclass(slots=True)
class Geometry:
    """
    Position information of a reply
    """

    location: Coordinate
    """Geocoded latitude, longitude value"""
    location_type: LocationType
    """Precision of the location"""
    viewport: Viewport
    """Recommended viewport for displaying the result"""
    bounds: Optional[Viewport] = None
    """Bounding box which can fully contain the result"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Geometry":
        """Create Geometry instance from API response dictionary."""
        locationType = _require(data, "location_type", "geometry")
        try:
            parsedType = LocationType(locationType)
        except ValueError as e:
            raise DecodeError(f"Unknown location_type {locationType!r}") from e

        bounds = data.get("bounds")
        return cls(
            location=Coordinate.from_dict(_require(data, "location", "geometry")),
            location_type=parsedType,
            viewport=Viewport.from_dict(_require(data, "viewport", "geometry")),
            bounds=Viewport.from_dict(bounds) if bounds is not None else None,
            api_kwargs=_extraKwargs(data, {"location", "location_type", "viewport", "bounds"}),
        )


@dataclass(slots=True)
class AddressComponent:
    """
    One component of a separated address
    """

    long_name: str
    """Full text description or name of the component"""
    short_name: str
    """Abbreviated name, e.g. "AK" for Alaska"""
    types: ApiSet[AddressType]
    """Types of the component"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddressComponent":
        """Create AddressComponent instance from API response dictionary."""
        return cls(
            long_name=_require(data, "long_name", "address_component"),
            short_name=_require(data, "short_name", "address_component"),
            types=ApiSet.fromWire(_require(data, "types", "address_component"), AddressType),
            api_kwargs=_extraKwargs(data, {"long_name", "short_name", "types"}),
        )


@dataclass(slots=True)
class Reply:
    """
    One candidate result of a geocoding query
    """

    address_components: List[AddressComponent]
    """Separate components of the address"""
    formatted_address: str
    """Human-readable address, don't parse it programmatically"""
    geometry: Geometry
    """Position information"""
    place_id: str
    """Opaque identifier usable with other Google APIs"""
    types: ApiSet[AddressType]
    """Type of the returned result"""
    postcode_localities: Optional[List[str]] = None
    """Localities contained in a postal code, only for postal codes with several localities"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Reply":
        """Create Reply instance from API response dictionary."""
        components = _require(data, "address_components", "result")
        if not isinstance(components, list):
            raise DecodeError("result: 'address_components' must be a list")

        return cls(
            address_components=[AddressComponent.from_dict(c) for c in components],
            formatted_address=_require(data, "formatted_address", "result"),
            geometry=Geometry.from_dict(_require(data, "geometry", "result")),
            place_id=_require(data, "place_id", "result"),
            types=ApiSet.fromWire(_require(data, "types", "result"), AddressType),
            postcode_localities=data.get("postcode_localities"),
            api_kwargs=_extraKwargs(
                data,
                {"address_components", "formatted_address", "geometry", "place_id", "types", "postcode_localities"},
            ),
        )


@dataclass(slots=True)
class ResponseEnvelope:
    """
    Top-level decoded geocoding reply

    Results are decoded only for OK and ZERO_RESULTS, for other statuses the
    raw reply stays in ``api_kwargs``.
    """

    status: StatusCode
    error_message: Optional[str] = None
    results: List[Reply] = field(default_factory=list)
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponseEnvelope":
        """Create ResponseEnvelope instance from API response dictionary.

        Raises:
            DecodeError: If the reply doesn't match the reply schema
        """
        rawStatus = _require(data, "status", "reply")
        try:
            status = StatusCode(rawStatus)
        except ValueError as e:
            raise DecodeError(f"Unknown status {rawStatus!r}") from e

        errorMessage = data.get("error_message")
        if not status.isSuccess:
            return cls(
                status=status,
                error_message=errorMessage,
                api_kwargs=_extraKwargs(data, {"status", "error_message"}),
            )

        rawResults = data.get("results", [])
        if not isinstance(rawResults, list):
            raise DecodeError("reply: 'results' must be a list")
        if status == StatusCode.ZERO_RESULTS and rawResults:
            raise DecodeError(f"reply: ZERO_RESULTS with {len(rawResults)} results")

        return cls(
            status=status,
            error_message=errorMessage,
            results=[Reply.from_dict(r) for r in rawResults],
            api_kwargs=_extraKwargs(data, {"status", "error_message", "results"}),
        )
