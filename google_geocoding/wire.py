"""
Wire encoding helpers.

This module provides the wire label extractor used by every set and rule
encoder, and ApiSet: a deduplicated set which decodes from a JSON array and
encodes as pipe-joined labels (e.g. ``result_type=country|locality``).
"""

import logging
from enum import StrEnum
from functools import singledispatch
from typing import Any, Callable, FrozenSet, Generic, Iterable, Iterator, List, TypeVar, Union

from .constants import SET_SEPARATOR
from .exceptions import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@singledispatch
def wireLabel(value: Any) -> str:
    """Get the declared wire label of a tagged value, dood!

    Only types registered with ``wireLabel.register`` have a label: every
    StrEnum case, and tagged types carrying a payload (such as
    ComponentFilterRule) which register their own mapping. The payload never
    takes part in the label.

    Raises:
        TypeError: If the type of value has no registered label
    """
    raise TypeError(f"{type(value).__name__} has no wire label")


@wireLabel.register
def _(value: StrEnum) -> str:
    return value.value


@singledispatch
def wireText(value: Any) -> str:
    """Encode one element of an ApiSet.

    Values without payload encode as their wire label. Tagged values carrying a
    payload register their own encoding built on top of their label.
    """
    return wireLabel(value)


class ApiSet(Generic[T]):
    """Immutable set of tagged values with a pipe-joined wire form, dood!

    Iteration and encoding follow the lexicographic order of wire text,
    so the encoded form is reproducible.

    Example:
        >>> types = ApiSet([AddressType.LOCALITY, AddressType.COUNTRY, AddressType.LOCALITY])
        >>> types.toWire()
        'country|locality'
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: FrozenSet[T] = frozenset(items)

    @classmethod
    def fromWire(cls, data: Union[str, List[Any]], parser: Callable[[Any], T]) -> "ApiSet[T]":
        """Decode a set from a JSON array or from pipe-joined text.

        Args:
            data: JSON array of tokens, or a string like ``"country|locality"``
            parser: Converts one token to an element (e.g. an enum class)

        Returns:
            ApiSet with duplicates collapsed

        Raises:
            DecodeError: If data is not a list or a token can't be parsed
        """
        if isinstance(data, str):
            tokens: List[Any] = [token for token in data.split(SET_SEPARATOR) if token]
        elif isinstance(data, list):
            tokens = data
        else:
            raise DecodeError(f"Expected list of tokens, got {type(data).__name__}")

        items = []
        for token in tokens:
            try:
                items.append(parser(token))
            except (ValueError, TypeError) as e:
                raise DecodeError(f"Unknown token {token!r}: {e}") from e
        return cls(items)

    def _sortedItems(self) -> List[T]:
        return sorted(self._items, key=wireText)

    def toWire(self) -> str:
        """Encode as ``|``-joined wire text of the items."""
        return SET_SEPARATOR.join(wireText(item) for item in self._sortedItems())

    def toList(self) -> List[str]:
        """Encode as a list of wire labels, as found in replies."""
        return [wireText(item) for item in self._sortedItems()]

    def __iter__(self) -> Iterator[T]:
        return iter(self._sortedItems())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ApiSet):
            return self._items == other._items
        if isinstance(other, (set, frozenset)):
            return self._items == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ApiSet({self.toWire()!r})"
