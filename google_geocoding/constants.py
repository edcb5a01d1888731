"""
Google Geocoding API Constants

This module contains endpoint configuration and wire keys used to build requests.
"""

from typing import Final

VERSION: Final[str] = "0.1.0"

# API Configuration
API_BASE_URL: Final[str] = "https://maps.googleapis.com/maps/api/geocode/json"
DEFAULT_TIMEOUT: Final[int] = 10
API_KEY_ENV: Final[str] = "GOOGLE_GEOCODING_API_KEY"

# Separators
SET_SEPARATOR: Final[str] = "|"
RULE_SEPARATOR: Final[str] = ":"
COORDINATE_SEPARATOR: Final[str] = ","

# Request keys
PARAM_ADDRESS: Final[str] = "address"
PARAM_COMPONENTS: Final[str] = "components"
PARAM_LATLNG: Final[str] = "latlng"
PARAM_LANGUAGE: Final[str] = "language"
PARAM_REGION: Final[str] = "region"
PARAM_BOUNDS: Final[str] = "bounds"
PARAM_RESULT_TYPE: Final[str] = "result_type"
PARAM_LOCATION_TYPE: Final[str] = "location_type"
PARAM_KEY: Final[str] = "key"
