"""
Unit tests for blocking geocode() and degeocode() functions.
"""

from unittest.mock import patch

import httpx
import pytest

from .constants import API_BASE_URL
from .exceptions import ConstructionError, DecodeError, OverQueryLimitError, TransportError
from .languages import Language
from .models import Coordinate
from .query import ComponentFilterRule, DegeocodeQuery
from .sync import degeocode, geocode

ADDRESS = "1600 Amphitheatre Pkwy, Mountain View, CA"
FORMATTED_ADDRESS = "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA"


@pytest.fixture
def okReply():
    """Canned OK reply with the best match first"""
    return {
        "status": "OK",
        "results": [
            {
                "address_components": [
                    {"long_name": "1600", "short_name": "1600", "types": ["street_number"]},
                    {"long_name": "94043", "short_name": "94043", "types": ["postal_code"]},
                ],
                "formatted_address": FORMATTED_ADDRESS,
                "geometry": {
                    "location": {"lat": 37.4224, "lng": -122.0856},
                    "location_type": "ROOFTOP",
                    "viewport": {
                        "northeast": {"lat": 37.4237, "lng": -122.0842},
                        "southwest": {"lat": 37.421, "lng": -122.0869},
                    },
                },
                "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
                "types": ["street_address"],
            },
            {
                "address_components": [],
                "formatted_address": "Mountain View, CA 94043, USA",
                "geometry": {
                    "location": {"lat": 37.4168, "lng": -122.0779},
                    "location_type": "APPROXIMATE",
                    "viewport": {
                        "northeast": {"lat": 37.4692, "lng": -122.0383},
                        "southwest": {"lat": 37.3856, "lng": -122.1178},
                    },
                },
                "place_id": "ChIJA5LATO4Jj4ARQkGGqSx_gsM",
                "types": ["postal_code"],
            },
        ],
    }


def makeResponse(statusCode=200, **kwargs) -> httpx.Response:
    return httpx.Response(statusCode, request=httpx.Request("GET", API_BASE_URL), **kwargs)


def test_geocode_address(okReply):
    """Test address geocodes to locations in server order, dood!"""
    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get.return_value = makeResponse(json=okReply)

        coordinates = geocode(ADDRESS, apiKey="test_key")

    assert coordinates == [Coordinate(37.4224, -122.0856), Coordinate(37.4168, -122.0779)]


def test_geocode_components(okReply):
    """Test components filter is accepted as locator."""
    okReply["results"] = okReply["results"][:1]

    with patch("httpx.AsyncClient") as mock_client:
        get = mock_client.return_value.__aenter__.return_value.get
        get.return_value = makeResponse(json=okReply)

        coordinates = geocode([ComponentFilterRule.postalCode("94043"), ComponentFilterRule.country("US")])

        url = get.call_args[0][0]
        assert url.params["components"] == "country:US|postal_code:94043"

    assert len(coordinates) == 1
    assert coordinates[0].latitude == 37.4224
    assert coordinates[0].longitude == -122.0856


def test_degeocode(okReply):
    """Test coordinate degeocodes to formatted addresses, best match first, dood!"""
    with patch("httpx.AsyncClient") as mock_client:
        get = mock_client.return_value.__aenter__.return_value.get
        get.return_value = makeResponse(json=okReply)

        addresses = degeocode((37.42241, -122.08561), defaultLanguage=Language.ENGLISH)

        url = get.call_args[0][0]
        assert url.params["latlng"] == "37.42241,-122.08561"
        assert url.params["language"] == "en"

    assert addresses == [FORMATTED_ADDRESS, "Mountain View, CA 94043, USA"]


def test_geocode_then_degeocode(okReply):
    """Test degeocoding the location found by geocode gives back the address, dood!"""
    okReply["results"] = okReply["results"][:1]

    with patch("httpx.AsyncClient") as mock_client:
        get = mock_client.return_value.__aenter__.return_value.get
        get.return_value = makeResponse(json=okReply)

        coordinates = geocode(ADDRESS)
        assert len(coordinates) == 1
        assert coordinates[0].latitude == 37.4224
        assert coordinates[0].longitude == -122.0856

        addresses = degeocode(coordinates[0])

        url = get.call_args[0][0]
        assert url.params["latlng"] == "37.4224,-122.0856"

    assert addresses[0] == FORMATTED_ADDRESS


@pytest.mark.asyncio
async def test_blocking_call_inside_event_loop():
    """Test blocking functions refuse to run inside an event loop without starting a request."""
    with patch("httpx.AsyncClient") as mock_client:
        with pytest.raises(RuntimeError, match="await Connection"):
            geocode(ADDRESS)
        with pytest.raises(RuntimeError, match="await Connection"):
            degeocode((1.0, 2.0))

        mock_client.assert_not_called()


def test_degeocode_query():
    """Test reverse query is accepted as locator and ZERO_RESULTS yields empty list."""
    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get.return_value = makeResponse(
            json={"status": "ZERO_RESULTS", "results": []}
        )

        assert degeocode(DegeocodeQuery(Coordinate(0.0, 0.0))) == []


def test_errors_propagate_unchanged():
    """Test pipeline errors reach the caller as is, no partial results."""
    with patch("httpx.AsyncClient") as mock_client:
        get = mock_client.return_value.__aenter__.return_value.get

        get.return_value = makeResponse(json={"status": "OVER_QUERY_LIMIT", "results": []})
        with pytest.raises(OverQueryLimitError):
            geocode(ADDRESS)

        get.return_value = makeResponse(500)
        with pytest.raises(TransportError):
            degeocode((1.0, 2.0))

        get.return_value = makeResponse(text="not json")
        with pytest.raises(DecodeError):
            geocode(ADDRESS)


def test_invalid_locator_fails_before_request():
    """Test invalid address raises ConstructionError without a request, dood!"""
    with patch("httpx.AsyncClient") as mock_client:
        with pytest.raises(ConstructionError):
            geocode("")

        mock_client.assert_not_called()
