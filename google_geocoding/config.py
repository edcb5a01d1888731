"""
Configuration loading for Google Geocoding connections.

Configuration lives in a TOML file:

    [geocoding]
    api-key = "${GOOGLE_GEOCODING_API_KEY}"
    base-url = "https://maps.googleapis.com/maps/api/geocode/json"
    timeout = 10
    language = "en"

    [logging]
    level = "DEBUG"
    console = true

``${VAR}`` placeholders are replaced with environment variables. If no API
key is configured, the GOOGLE_GEOCODING_API_KEY environment variable is used.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli

from .constants import API_BASE_URL, API_KEY_ENV, DEFAULT_TIMEOUT
from .exceptions import ConfigurationError
from .languages import Language

logger = logging.getLogger(__name__)


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholder with its value, keeping unknown placeholders as is."""
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ``${VAR}`` placeholders in strings, dicts and lists."""
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


@dataclass(slots=True)
class GeocodingConfig:
    """
    Settings of a Connection plus logging configuration
    """

    apiKey: Optional[str] = None
    baseUrl: str = API_BASE_URL
    requestTimeout: int = DEFAULT_TIMEOUT
    defaultLanguage: Optional[Language] = None
    loggingConfig: Dict[str, Any] = field(default_factory=dict)
    """Logging configuration, see logging_utils.initLogging()"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeocodingConfig":
        """Create GeocodingConfig from parsed TOML document, dood!

        Raises:
            ConfigurationError: If a value has wrong type or is unknown
        """
        data = substituteEnvVars(data)
        section = data.get("geocoding", {})
        if not isinstance(section, dict):
            raise ConfigurationError("[geocoding] must be a table")

        apiKey = section.get("api-key")
        if apiKey is not None and not isinstance(apiKey, str):
            raise ConfigurationError("api-key must be a string")
        if apiKey and "${" in apiKey:
            # Placeholder of unset environment variable
            logger.warning(f"API key placeholder {apiKey} is not substituted, ignoring it")
            apiKey = None
        apiKey = apiKey or os.getenv(API_KEY_ENV) or None

        timeout = section.get("timeout", DEFAULT_TIMEOUT)
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            raise ConfigurationError(f"Invalid timeout: {timeout!r}")

        language: Optional[Language] = None
        if section.get("language") is not None:
            try:
                language = Language(section["language"])
            except ValueError as e:
                raise ConfigurationError(f"Unknown language: {section['language']!r}") from e

        loggingConfig = data.get("logging", {})
        if not isinstance(loggingConfig, dict):
            raise ConfigurationError("[logging] must be a table")

        return cls(
            apiKey=apiKey,
            baseUrl=section.get("base-url", API_BASE_URL),
            requestTimeout=timeout,
            defaultLanguage=language,
            loggingConfig=loggingConfig,
        )


def loadConfig(configPath: Union[str, Path] = "geocoding.toml") -> GeocodingConfig:
    """Load configuration from TOML file.

    Args:
        configPath: Path to the TOML file

    Raises:
        ConfigurationError: If the file is missing, isn't valid TOML or holds invalid values
    """
    configFile = Path(configPath)
    if not configFile.exists():
        raise ConfigurationError(f"Configuration file {configFile} not found")

    try:
        with open(configFile, "rb") as f:
            data = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise ConfigurationError(f"Failed to parse {configFile}: {e}") from e

    logger.info(f"Loaded config from {configFile}")
    return GeocodingConfig.from_dict(data)
