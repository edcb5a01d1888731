"""
Unit tests for Google Geocoding models

This module tests coordinate validation and decoding of replies from
dictionaries, including api_kwargs preservation and schema errors.
"""

import math

import pytest

from .enums import AddressType, LocationType, StatusCode
from .exceptions import ConstructionError, CoordinateError, DecodeError
from .models import AddressComponent, Coordinate, Geometry, Reply, ResponseEnvelope, Viewport


@pytest.fixture
def replyData():
    """Sample result object from a geocoding reply"""
    return {
        "address_components": [
            {"long_name": "1600", "short_name": "1600", "types": ["street_number"]},
            {"long_name": "Amphitheatre Parkway", "short_name": "Amphitheatre Pkwy", "types": ["route"]},
            {
                "long_name": "United States",
                "short_name": "US",
                "types": ["country", "political", "political"],
            },
        ],
        "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
        "geometry": {
            "location": {"lat": 37.4224, "lng": -122.0856},
            "location_type": "ROOFTOP",
            "viewport": {
                "northeast": {"lat": 37.4237, "lng": -122.0842},
                "southwest": {"lat": 37.421, "lng": -122.0869},
            },
        },
        "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
        "plus_code": {"compound_code": "CWC8+W5 Mountain View", "global_code": "849VCWC8+W5"},
        "types": ["street_address"],
    }


class TestCoordinate:
    """Test suite for Coordinate value object."""

    @pytest.mark.parametrize(
        "lat,lon",
        [(0, 0), (90, 180), (-90, -180), (37.42241, -122.08561), (-33.8688, 151.2093)],
    )
    def test_valid_coordinates(self, lat, lon):
        """Test coordinates within range are accepted, dood!"""
        coordinate = Coordinate(lat, lon)
        assert coordinate.latitude == lat
        assert coordinate.longitude == lon

    @pytest.mark.parametrize(
        "lat,lon",
        [
            (91, 0),
            (-90.0001, 0),
            (0, 181),
            (0, -180.5),
            (math.nan, 0),
            (0, math.inf),
            (-math.inf, 0),
        ],
    )
    def test_invalid_coordinates(self, lat, lon):
        """Test out of range and non-finite values are rejected without clamping, dood!"""
        with pytest.raises(CoordinateError):
            Coordinate(lat, lon)

    @pytest.mark.parametrize("lat,lon", [("37.4", 0), (None, 0), (True, 0)])
    def test_non_numeric_coordinates(self, lat, lon):
        """Test non-numeric values are rejected."""
        with pytest.raises(CoordinateError):
            Coordinate(lat, lon)

    def test_coordinate_error_is_construction_error(self):
        """Test CoordinateError belongs to construction errors and ValueError."""
        with pytest.raises(ConstructionError):
            Coordinate(91, 0)
        with pytest.raises(ValueError):
            Coordinate(0, 181)

    def test_to_string_keeps_precision(self):
        """Test coordinate renders as lat,lon without rounding, dood!"""
        assert str(Coordinate(37.42241, -122.08561)) == "37.42241,-122.08561"
        assert str(Coordinate(-33.868820123456, 151.2093)) == "-33.868820123456,151.2093"

    def test_to_string_small_values_are_positional(self):
        """Test values near the equator and prime meridian never use exponent notation, dood!"""
        assert str(Coordinate(0.00001, -0.00005)) == "0.00001,-0.00005"
        assert str(Coordinate(1.5e-7, 0.0001234)) == "0.00000015,0.0001234"
        assert str(Coordinate(0, 0)) == "0,0"

    def test_huge_integer_rejected(self):
        """Test integers too large for a float raise CoordinateError."""
        with pytest.raises(CoordinateError, match="too large"):
            Coordinate(10**400, 0)
        with pytest.raises(DecodeError):
            Coordinate.from_dict({"lat": 0, "lng": 10**400})

    def test_equality_is_structural(self):
        """Test equal fields mean equal coordinates."""
        assert Coordinate(37.4224, -122.0856) == Coordinate(37.4224, -122.0856)
        assert Coordinate(37.4224, -122.0856) != Coordinate(37.4224, -122.0857)
        assert hash(Coordinate(1.5, 2.5)) == hash(Coordinate(1.5, 2.5))

    def test_immutable(self):
        """Test coordinate can't be changed after construction."""
        coordinate = Coordinate(1.0, 2.0)
        with pytest.raises(AttributeError):
            coordinate.latitude = 3.0  # type: ignore

    def test_from_any(self):
        """Test coercion from tuples and coordinates."""
        coordinate = Coordinate(1.0, 2.0)
        assert Coordinate.fromAny(coordinate) is coordinate
        assert Coordinate.fromAny((1.0, 2.0)) == coordinate
        assert Coordinate.fromAny([1.0, 2.0]) == coordinate
        with pytest.raises(CoordinateError):
            Coordinate.fromAny((1.0, 2.0, 3.0))  # type: ignore
        with pytest.raises(CoordinateError):
            Coordinate.fromAny("1.0,2.0")  # type: ignore

    def test_from_dict(self):
        """Test decoding of API location object."""
        coordinate = Coordinate.from_dict({"lat": 37.4224, "lng": -122.0856})
        assert coordinate == Coordinate(37.4224, -122.0856)
        assert coordinate.to_dict() == {"lat": 37.4224, "lng": -122.0856}
        assert coordinate.toTuple() == (37.4224, -122.0856)

    def test_from_dict_invalid(self):
        """Test invalid API locations raise DecodeError, not CoordinateError."""
        with pytest.raises(DecodeError, match="WGS-84"):
            Coordinate.from_dict({"lat": 100, "lng": 0})
        with pytest.raises(DecodeError, match="lng"):
            Coordinate.from_dict({"lat": 10})


class TestViewport:
    """Test suite for Viewport."""

    def test_to_wire(self):
        """Test bounds encode southwest first, then northeast."""
        viewport = Viewport(northeast=Coordinate(34.236144, -118.500938), southwest=Coordinate(34.172684, -118.604794))
        assert viewport.toWire() == "34.172684,-118.604794|34.236144,-118.500938"

    def test_to_wire_small_values(self):
        """Test bounds near the origin are rendered positionally."""
        viewport = Viewport(northeast=Coordinate(0.00002, 0.00002), southwest=Coordinate(0.00001, 0.00001))
        assert viewport.toWire() == "0.00001,0.00001|0.00002,0.00002"

    def test_from_dict_missing_corner(self):
        """Test missing corner raises DecodeError."""
        with pytest.raises(DecodeError, match="southwest"):
            Viewport.from_dict({"northeast": {"lat": 1, "lng": 1}})


class TestReplyModels:
    """Test suite for reply dataclasses."""

    def test_reply_from_dict(self, replyData):
        """Test Reply creation from dictionary, dood!"""
        reply = Reply.from_dict(replyData)

        assert reply.formatted_address == "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA"
        assert reply.place_id == "ChIJ2eUgeAK6j4ARbn5u_wAGqWA"
        assert reply.types == {AddressType.STREET_ADDRESS}
        assert reply.postcode_localities is None
        assert reply.geometry.location == Coordinate(37.4224, -122.0856)
        assert reply.geometry.location_type == LocationType.ROOFTOP
        assert reply.geometry.viewport.northeast == Coordinate(37.4237, -122.0842)
        assert reply.geometry.bounds is None
        assert [c.long_name for c in reply.address_components] == [
            "1600",
            "Amphitheatre Parkway",
            "United States",
        ]

    def test_reply_keeps_unknown_keys(self, replyData):
        """Test keys outside the schema are kept in api_kwargs."""
        reply = Reply.from_dict(replyData)
        assert reply.api_kwargs == {"plus_code": replyData["plus_code"]}

    def test_component_types_deduplicated(self, replyData):
        """Test component types decode to a set."""
        component = AddressComponent.from_dict(replyData["address_components"][2])

        assert component.short_name == "US"
        assert len(component.types) == 2
        assert AddressType.COUNTRY in component.types
        assert AddressType.POLITICAL in component.types

    def test_postcode_localities(self, replyData):
        """Test optional postcode localities are decoded."""
        replyData["postcode_localities"] = ["Mountain View", "Los Altos"]
        reply = Reply.from_dict(replyData)
        assert reply.postcode_localities == ["Mountain View", "Los Altos"]

    def test_geometry_with_bounds(self, replyData):
        """Test optional bounds are decoded as Viewport."""
        geometryData = dict(replyData["geometry"])
        geometryData["bounds"] = geometryData["viewport"]

        geometry = Geometry.from_dict(geometryData)

        assert geometry.bounds == geometry.viewport

    def test_geometry_unknown_location_type(self, replyData):
        """Test unknown location type raises DecodeError."""
        geometryData = dict(replyData["geometry"], location_type="EXACT")
        with pytest.raises(DecodeError, match="EXACT"):
            Geometry.from_dict(geometryData)

    def test_reply_missing_key(self, replyData):
        """Test missing mandatory keys raise DecodeError."""
        del replyData["geometry"]
        with pytest.raises(DecodeError, match="geometry"):
            Reply.from_dict(replyData)

    def test_reply_not_an_object(self):
        """Test non-object results raise DecodeError."""
        with pytest.raises(DecodeError):
            Reply.from_dict(["not", "a", "result"])  # type: ignore


class TestResponseEnvelope:
    """Test suite for ResponseEnvelope decoding."""

    def test_ok_envelope(self, replyData):
        """Test OK envelope decodes its results, dood!"""
        envelope = ResponseEnvelope.from_dict({"status": "OK", "results": [replyData, replyData]})

        assert envelope.status == StatusCode.OK
        assert envelope.error_message is None
        assert len(envelope.results) == 2

    def test_zero_results_envelope(self):
        """Test ZERO_RESULTS with empty results decodes to an empty list."""
        envelope = ResponseEnvelope.from_dict({"status": "ZERO_RESULTS", "results": []})

        assert envelope.status == StatusCode.ZERO_RESULTS
        assert envelope.results == []

    def test_zero_results_with_results(self, replyData):
        """Test ZERO_RESULTS carrying results is a schema mismatch."""
        with pytest.raises(DecodeError, match="ZERO_RESULTS"):
            ResponseEnvelope.from_dict({"status": "ZERO_RESULTS", "results": [replyData]})

    def test_failure_envelope_skips_results(self):
        """Test failure envelopes don't decode results, whatever they contain."""
        data = {
            "status": "OVER_QUERY_LIMIT",
            "error_message": "You have exceeded your daily request quota for this API.",
            "results": [{"garbage": True}],
        }
        envelope = ResponseEnvelope.from_dict(data)

        assert envelope.status == StatusCode.OVER_QUERY_LIMIT
        assert envelope.error_message == "You have exceeded your daily request quota for this API."
        assert envelope.results == []
        assert envelope.api_kwargs == {"results": [{"garbage": True}]}

    def test_unknown_status(self):
        """Test unknown status raises DecodeError."""
        with pytest.raises(DecodeError, match="NOT_A_STATUS"):
            ResponseEnvelope.from_dict({"status": "NOT_A_STATUS", "results": []})

    def test_missing_status(self):
        """Test missing status raises DecodeError."""
        with pytest.raises(DecodeError, match="status"):
            ResponseEnvelope.from_dict({"results": []})

    def test_results_not_a_list(self):
        """Test non-list results raise DecodeError."""
        with pytest.raises(DecodeError, match="results"):
            ResponseEnvelope.from_dict({"status": "OK", "results": {}})
