"""
Wire enumerations of the Google Geocoding API.

Every enum value is the literal token used on the wire.
"""

from enum import StrEnum


class StatusCode(StrEnum):
    """
    Status of a geocoding reply
    """

    OK = "OK"
    """No errors occurred, at least one result was returned."""
    ZERO_RESULTS = "ZERO_RESULTS"
    """The geocode was successful but returned no results."""
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    """The quota is exceeded."""
    REQUEST_DENIED = "REQUEST_DENIED"
    """The request was denied."""
    INVALID_REQUEST = "INVALID_REQUEST"
    """The query (address, components or latlng) is missing."""
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    """Server error, the request may succeed if retried."""

    @property
    def isSuccess(self) -> bool:
        return self in (StatusCode.OK, StatusCode.ZERO_RESULTS)


class LocationType(StrEnum):
    """
    Precision of a geocoded location
    """

    ROOFTOP = "ROOFTOP"
    """Precise geocode down to street address precision."""
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    """Approximation interpolated between two precise points."""
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    """Geometric center of a polyline or polygon."""
    APPROXIMATE = "APPROXIMATE"
    """Approximate location."""


class AddressType(StrEnum):
    """
    Type of an address or of one of its components
    """

    STREET_ADDRESS = "street_address"
    ROUTE = "route"
    INTERSECTION = "intersection"
    POLITICAL = "political"
    COUNTRY = "country"
    ADMINISTRATIVE_AREA_LEVEL_1 = "administrative_area_level_1"
    ADMINISTRATIVE_AREA_LEVEL_2 = "administrative_area_level_2"
    ADMINISTRATIVE_AREA_LEVEL_3 = "administrative_area_level_3"
    ADMINISTRATIVE_AREA_LEVEL_4 = "administrative_area_level_4"
    ADMINISTRATIVE_AREA_LEVEL_5 = "administrative_area_level_5"
    COLLOQUIAL_AREA = "colloquial_area"
    LOCALITY = "locality"
    WARD = "ward"
    """Japanese locality component."""
    SUBLOCALITY = "sublocality"
    SUBLOCALITY_LEVEL_1 = "sublocality_level_1"
    SUBLOCALITY_LEVEL_2 = "sublocality_level_2"
    SUBLOCALITY_LEVEL_3 = "sublocality_level_3"
    SUBLOCALITY_LEVEL_4 = "sublocality_level_4"
    SUBLOCALITY_LEVEL_5 = "sublocality_level_5"
    NEIGHBORHOOD = "neighborhood"
    PREMISE = "premise"
    SUBPREMISE = "subpremise"
    POSTAL_CODE = "postal_code"
    NATURAL_FEATURE = "natural_feature"
    AIRPORT = "airport"
    PARK = "park"
    POINT_OF_INTEREST = "point_of_interest"
    FLOOR = "floor"
    ESTABLISHMENT = "establishment"
    PARKING = "parking"
    POST_BOX = "post_box"
    POSTAL_TOWN = "postal_town"
    ROOM = "room"
    STREET_NUMBER = "street_number"
    BUS_STATION = "bus_station"
    TRAIN_STATION = "train_station"
    TRANSIT_STATION = "transit_station"


class ComponentFilterKind(StrEnum):
    """
    Address component a filter rule applies to
    """

    POSTAL_CODE = "postal_code"
    """Matches postal_code and postal_code_prefix."""
    COUNTRY = "country"
    """Matches a country name or a two letter ISO 3166-1 country code."""
    ROUTE = "route"
    """Matches the long or short name of a route."""
    LOCALITY = "locality"
    """Matches against locality and sublocality types."""
    ADMINISTRATIVE_AREA = "administrative_area"
    """Matches all the administrative_area levels."""
