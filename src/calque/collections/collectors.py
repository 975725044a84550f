"""Collectors: reusable recipes for accumulating an iterable into a container.

A `Collector` bundles three functions:

* ``supplier`` creates a fresh mutable accumulation container,
* ``accumulator`` folds one element into that container,
* ``finisher`` converts the container into the final result.

`collect` drives a collector over any iterable. The ``to_unmodifiable_*``
collectors finish into the read-only containers from
`calque.collections.unmodifiable`, so their results carry the same
guarantees as the ``*_copy_of`` factories.

Example:
    >>> colours = collect(["red", "yellow", "red"], to_unmodifiable_set())
    >>> sorted(colours)
    ['red', 'yellow']
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any

from calque.errors import DuplicateKeyError, NullElementError

from .unmodifiable import (
    UnmodifiableList,
    UnmodifiableMap,
    UnmodifiableSet,
    list_copy_of,
    set_copy_of,
)


def _identity(container: Any) -> Any:
    return container


@dataclass(frozen=True)
class Collector[T, A, R]:
    """A mutable reduction over elements of type T, via container A, into R."""

    supplier: Callable[[], A]
    accumulator: Callable[[A, T], None]
    finisher: Callable[[A], R] = _identity  # type: ignore[assignment]


def collect[T, A, R](elements: Iterable[T], collector: Collector[T, A, R]) -> R:
    """Accumulate *elements* with *collector* and return the finished result."""
    container = collector.supplier()
    for element in elements:
        collector.accumulator(container, element)
    return collector.finisher(container)


# ============================================================================
#                           Mutable collectors
# ============================================================================


def to_list[T]() -> Collector[T, list[T], list[T]]:
    """Collect into a new (mutable) list, preserving encounter order."""
    return Collector(supplier=list, accumulator=list.append)


def to_set[T: Hashable]() -> Collector[T, set[T], set[T]]:
    """Collect into a new (mutable) set."""
    return Collector(supplier=set, accumulator=set.add)


# ============================================================================
#                         Unmodifiable collectors
# ============================================================================


def to_unmodifiable_list[T]() -> Collector[T, list[T], UnmodifiableList[T]]:
    """Collect into an `UnmodifiableList`, preserving encounter order.

    Raises (when collecting):
        NullElementError: If an element is None.
    """
    return Collector(supplier=list, accumulator=list.append, finisher=list_copy_of)


def to_unmodifiable_set[T: Hashable]() -> Collector[T, list[T], UnmodifiableSet[T]]:
    """Collect into an `UnmodifiableSet`; duplicate elements are collapsed.

    Raises (when collecting):
        NullElementError: If an element is None.
    """
    return Collector(supplier=list, accumulator=list.append, finisher=set_copy_of)


def to_unmodifiable_map[T, K: Hashable, V](
    key_mapper: Callable[[T], K],
    value_mapper: Callable[[T], V],
    merge: Callable[[V, V], V] | None = None,
) -> Collector[T, dict[K, V], UnmodifiableMap[K, V]]:
    """Collect into an `UnmodifiableMap` keyed by ``key_mapper(element)``.

    Args:
        key_mapper: Produces the key for an element.
        value_mapper: Produces the value for an element.
        merge: Combines the existing and the new value when two elements map
            to the same key. When omitted, a repeated key is an error.

    Raises (when collecting):
        NullElementError: If a mapped key or value is None.
        DuplicateKeyError: If two elements map to the same key and no merge
            function was supplied.
    """

    def accumulate(entries: dict[K, V], element: T) -> None:
        key = key_mapper(element)
        value = value_mapper(element)
        if key is None:
            raise NullElementError("key")
        if value is None:
            raise NullElementError("value")
        if key in entries:
            if merge is None:
                raise DuplicateKeyError(key, entries[key], value)
            value = merge(entries[key], value)
        entries[key] = value

    return Collector(supplier=dict, accumulator=accumulate, finisher=UnmodifiableMap)
