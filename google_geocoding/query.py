"""
Geocoding query models.

Queries are frozen dataclasses: every ``with*`` call returns an updated copy
and leaves the original untouched. ``toParams()`` renders the request query
string parameters, omitting every unset optional field.

Example:
    >>> query = (
    ...     GeocodeQuery.fromAddress("1600 Amphitheatre Pkwy, Mountain View, CA")
    ...     .withLanguage(Language.ENGLISH)
    ...     .withRegion(Region.UNITED_STATES)
    ... )
    >>> query.toParams()
    {'address': '1600 Amphitheatre Pkwy, Mountain View, CA', 'language': 'en', 'region': '.us'}
"""

import dataclasses
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple, Union

from .constants import (
    PARAM_ADDRESS,
    PARAM_BOUNDS,
    PARAM_COMPONENTS,
    PARAM_LANGUAGE,
    PARAM_LATLNG,
    PARAM_LOCATION_TYPE,
    PARAM_REGION,
    PARAM_RESULT_TYPE,
    RULE_SEPARATOR,
)
from .enums import AddressType, ComponentFilterKind, LocationType
from .exceptions import ConstructionError
from .languages import Language
from .models import Coordinate, Viewport
from .regions import Region
from .wire import ApiSet, wireLabel, wireText


@dataclass(frozen=True, slots=True)
class ComponentFilterRule:
    """
    One component:value pair of a components filter
    """

    kind: ComponentFilterKind
    value: str

    @classmethod
    def postalCode(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.POSTAL_CODE, value)

    @classmethod
    def country(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.COUNTRY, value)

    @classmethod
    def route(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.ROUTE, value)

    @classmethod
    def locality(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.LOCALITY, value)

    @classmethod
    def administrativeArea(cls, value: str) -> "ComponentFilterRule":
        return cls(ComponentFilterKind.ADMINISTRATIVE_AREA, value)

    def __str__(self) -> str:
        return f"{wireLabel(self)}{RULE_SEPARATOR}{self.value}"


@wireLabel.register
def _ruleLabel(rule: ComponentFilterRule) -> str:
    return wireLabel(rule.kind)


@wireText.register
def _ruleText(rule: ComponentFilterRule) -> str:
    return str(rule)


@dataclass(frozen=True, slots=True)
class AddressPlace:
    """
    Free-text street address, in the format used by the national postal service
    """

    address: str

    def __post_init__(self) -> None:
        if not isinstance(self.address, str) or not self.address.strip():
            raise ConstructionError("Address cannot be empty")

    def toParams(self) -> Dict[str, str]:
        return {PARAM_ADDRESS: self.address}


@dataclass(frozen=True, slots=True)
class ComponentsPlace:
    """
    Address broken down into component filters, fully restricting the results
    """

    components: ApiSet[ComponentFilterRule]

    def __post_init__(self) -> None:
        if not self.components:
            raise ConstructionError("Components filter cannot be empty")

    def toParams(self) -> Dict[str, str]:
        return {PARAM_COMPONENTS: self.components.toWire()}


Place = Union[AddressPlace, ComponentsPlace]


@dataclass(frozen=True, slots=True)
class GeocodeQuery:
    """
    Forward geocoding query: address or components to coordinates, dood!

    Attributes:
        place: What to geocode
        bounds: Viewport to bias results towards (doesn't restrict them)
        language: Language of the results
        region: Region to bias results towards (doesn't restrict them)
    """

    place: Place
    bounds: Optional[Viewport] = None
    language: Optional[Language] = None
    region: Optional[Region] = None

    def __post_init__(self) -> None:
        if isinstance(self.place, str):
            object.__setattr__(self, "place", AddressPlace(self.place))
        elif not isinstance(self.place, (AddressPlace, ComponentsPlace)):
            raise ConstructionError(f"Place must be an address or components filter, got {type(self.place).__name__}")

    @classmethod
    def fromAddress(cls, address: str) -> "GeocodeQuery":
        return cls(AddressPlace(address))

    @classmethod
    def fromComponents(cls, rules: Iterable[ComponentFilterRule]) -> "GeocodeQuery":
        return cls(ComponentsPlace(ApiSet(rules)))

    def withBounds(self, bounds: Viewport) -> "GeocodeQuery":
        return dataclasses.replace(self, bounds=bounds)

    def withLanguage(self, language: Language) -> "GeocodeQuery":
        return dataclasses.replace(self, language=language)

    def withRegion(self, region: Region) -> "GeocodeQuery":
        return dataclasses.replace(self, region=region)

    def toParams(self) -> Dict[str, str]:
        """Render request parameters, omitting unset optional fields."""
        params = self.place.toParams()
        if self.bounds is not None:
            params[PARAM_BOUNDS] = self.bounds.toWire()
        if self.language is not None:
            params[PARAM_LANGUAGE] = wireLabel(self.language)
        if self.region is not None:
            params[PARAM_REGION] = wireLabel(self.region)
        return params


@dataclass(frozen=True, slots=True)
class DegeocodeQuery:
    """
    Reverse geocoding query: coordinates to addresses, dood!

    ``result_type`` and ``location_type`` are post-search filters: the API
    fetches all results for the coordinate, then discards those not matching
    any of the given types. Both require an API key.
    """

    coordinate: Coordinate
    language: Optional[Language] = None
    result_type: Optional[ApiSet[AddressType]] = None
    location_type: Optional[ApiSet[LocationType]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinate", Coordinate.fromAny(self.coordinate))

    def withLanguage(self, language: Language) -> "DegeocodeQuery":
        return dataclasses.replace(self, language=language)

    def withResultTypes(self, resultTypes: Iterable[AddressType]) -> "DegeocodeQuery":
        return dataclasses.replace(self, result_type=ApiSet(resultTypes))

    def withLocationTypes(self, locationTypes: Iterable[LocationType]) -> "DegeocodeQuery":
        return dataclasses.replace(self, location_type=ApiSet(locationTypes))

    def toParams(self) -> Dict[str, str]:
        """Render request parameters, omitting unset optional fields."""
        params = {PARAM_LATLNG: str(self.coordinate)}
        if self.language is not None:
            params[PARAM_LANGUAGE] = wireLabel(self.language)
        if self.result_type:
            params[PARAM_RESULT_TYPE] = self.result_type.toWire()
        if self.location_type:
            params[PARAM_LOCATION_TYPE] = self.location_type.toWire()
        return params


GeocodeLocator = Union[GeocodeQuery, AddressPlace, ComponentsPlace, str, Iterable[ComponentFilterRule]]
DegeocodeLocator = Union[DegeocodeQuery, Coordinate, Tuple[float, float]]


def toGeocodeQuery(locator: GeocodeLocator) -> GeocodeQuery:
    """Coerce an address, a place, component rules or a query to GeocodeQuery.

    Raises:
        ConstructionError: If locator can't describe a place
    """
    if isinstance(locator, GeocodeQuery):
        return locator
    if isinstance(locator, (AddressPlace, ComponentsPlace)):
        return GeocodeQuery(locator)
    if isinstance(locator, str):
        return GeocodeQuery.fromAddress(locator)

    try:
        rules = list(locator)
    except TypeError as e:
        raise ConstructionError(f"Can't build geocode query from {type(locator).__name__}") from e
    if not all(isinstance(rule, ComponentFilterRule) for rule in rules):
        raise ConstructionError("Components filter accepts only ComponentFilterRule items")
    return GeocodeQuery.fromComponents(rules)


def toDegeocodeQuery(locator: DegeocodeLocator) -> DegeocodeQuery:
    """Coerce a coordinate, a (lat, lon) pair or a query to DegeocodeQuery.

    Raises:
        CoordinateError: If locator isn't a valid coordinate
    """
    if isinstance(locator, DegeocodeQuery):
        return locator
    return DegeocodeQuery(Coordinate.fromAny(locator))
