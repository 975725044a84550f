"""Read-only list, set and mapping types and their factories.

The containers defined here keep a private copy of their elements and disable
every structural mutator at the interface level: calling ``append``,
``add``, item assignment and friends raises `UnsupportedOperationError`
and leaves the contents untouched. The elements themselves are not frozen;
a mutable element can still be changed in place.

Factories come in two flavours:

* ``*_of`` builds a container from individually supplied elements and is
  strict: `None` elements are rejected, and `set_of` / `map_of` reject
  duplicates.
* ``*_copy_of`` builds a container from an existing collection. Later
  changes to the source collection are never reflected in the copy. Copying
  a container that is already unmodifiable returns it unchanged.

Lists preserve the iteration order of their source; sets and mappings make
no ordering promise.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from collections.abc import Set as AbstractSet
from types import MappingProxyType
from typing import Any, overload

from calque.errors import (
    DuplicateElementError,
    DuplicateKeyError,
    NullElementError,
    UnsupportedOperationError,
)

# pylint: disable=too-few-public-methods


def _unsupported(operation: str) -> Callable[..., Any]:
    """Build a method that rejects *operation* on any read-only container."""

    def method(self: object, *args: object, **kwargs: object) -> Any:
        raise UnsupportedOperationError(type(self).__name__, operation)

    method.__name__ = operation
    method.__doc__ = "Not supported; always raises UnsupportedOperationError."
    return method


def _non_null[T](elements: Iterable[T], what: str = "element") -> Iterator[T]:
    for element in elements:
        if element is None:
            raise NullElementError(what)
        yield element


def _non_null_entries[K, V](entries: Mapping[K, V]) -> Mapping[K, V]:
    for key, value in entries.items():
        if key is None:
            raise NullElementError("key")
        if value is None:
            raise NullElementError("value")
    return entries


# ============================================================================
#                               List
# ============================================================================


class UnmodifiableList[T](Sequence[T]):
    """An ordered, read-only sequence.

    Compares equal to any list, tuple or `UnmodifiableList` holding the same
    elements in the same order. Slicing returns another `UnmodifiableList`.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._elements: tuple[T, ...] = tuple(elements)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> UnmodifiableList[T]: ...
    def __getitem__(self, index: int | slice) -> T | UnmodifiableList[T]:
        if isinstance(index, slice):
            return UnmodifiableList(self._elements[index])
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._elements)

    def __contains__(self, value: object) -> bool:
        return value in self._elements

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UnmodifiableList):
            return self._elements == other._elements
        if isinstance(other, (list, tuple)):
            return self._elements == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._elements)

    def __add__(self, other: Iterable[T]) -> UnmodifiableList[T]:
        if isinstance(other, (str, bytes)) or not isinstance(other, Iterable):
            return NotImplemented
        return UnmodifiableList(self._elements + tuple(_non_null(other)))

    def __repr__(self) -> str:
        return f"UnmodifiableList({list(self._elements)!r})"

    append = _unsupported("append")
    extend = _unsupported("extend")
    insert = _unsupported("insert")
    remove = _unsupported("remove")
    pop = _unsupported("pop")
    clear = _unsupported("clear")
    sort = _unsupported("sort")
    reverse = _unsupported("reverse")
    __setitem__ = _unsupported("__setitem__")
    __delitem__ = _unsupported("__delitem__")
    __iadd__ = _unsupported("__iadd__")
    __imul__ = _unsupported("__imul__")


# ============================================================================
#                               Set
# ============================================================================


class UnmodifiableSet[T: Hashable](AbstractSet[T]):
    """A duplicate-free, read-only set with no defined iteration order.

    Set algebra (``|``, ``&``, ``-``, ``^``) returns new `UnmodifiableSet`
    instances; the in-place variants are rejected.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._elements: frozenset[T] = frozenset(elements)

    @classmethod
    def _from_iterable(cls, it: Iterable[T]) -> UnmodifiableSet[T]:
        # Set algebra builds its results through here
        return cls(_non_null(it))

    def __contains__(self, value: object) -> bool:
        return value in self._elements

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"UnmodifiableSet({set(self._elements)!r})"

    add = _unsupported("add")
    discard = _unsupported("discard")
    remove = _unsupported("remove")
    pop = _unsupported("pop")
    clear = _unsupported("clear")
    update = _unsupported("update")
    difference_update = _unsupported("difference_update")
    intersection_update = _unsupported("intersection_update")
    symmetric_difference_update = _unsupported("symmetric_difference_update")
    __ior__ = _unsupported("__ior__")
    __iand__ = _unsupported("__iand__")
    __isub__ = _unsupported("__isub__")
    __ixor__ = _unsupported("__ixor__")


# ============================================================================
#                               Map
# ============================================================================


class UnmodifiableMap[K: Hashable, V](Mapping[K, V]):
    """A read-only mapping backed by a private copy of its entries."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[K, V] | Iterable[tuple[K, V]] = ()) -> None:
        # copy to decouple from the caller's dict
        self._entries: Mapping[K, V] = MappingProxyType(dict(entries))

    def __getitem__(self, key: K) -> V:
        return self._entries[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __or__(self, other: Mapping[K, V]) -> UnmodifiableMap[K, V]:
        if not isinstance(other, Mapping):
            return NotImplemented
        return UnmodifiableMap({**self._entries, **_non_null_entries(other)})

    def __repr__(self) -> str:
        return f"UnmodifiableMap({dict(self._entries)!r})"

    pop = _unsupported("pop")
    popitem = _unsupported("popitem")
    clear = _unsupported("clear")
    update = _unsupported("update")
    setdefault = _unsupported("setdefault")
    __setitem__ = _unsupported("__setitem__")
    __delitem__ = _unsupported("__delitem__")
    __ior__ = _unsupported("__ior__")


# ============================================================================
#                               Factories
# ============================================================================


def list_of[T](*elements: T) -> UnmodifiableList[T]:
    """Return an unmodifiable list of *elements*, in argument order.

    Raises:
        NullElementError: If any element is None.
    """
    return UnmodifiableList(_non_null(elements))


def list_copy_of[T](elements: Iterable[T]) -> UnmodifiableList[T]:
    """Return an unmodifiable list holding the elements of *elements*.

    The result keeps the source's iteration order and is unaffected by later
    changes to the source.

    Raises:
        NullElementError: If any element is None.
    """
    if isinstance(elements, UnmodifiableList):
        return elements
    return UnmodifiableList(_non_null(elements))


def set_of[T: Hashable](*elements: T) -> UnmodifiableSet[T]:
    """Return an unmodifiable set of *elements*.

    Raises:
        NullElementError: If any element is None.
        DuplicateElementError: If the same element is supplied twice.
    """
    seen: set[T] = set()
    for element in _non_null(elements):
        if element in seen:
            raise DuplicateElementError(element)
        seen.add(element)
    return UnmodifiableSet(seen)


def set_copy_of[T: Hashable](elements: Iterable[T]) -> UnmodifiableSet[T]:
    """Return an unmodifiable set of the distinct elements of *elements*.

    Unlike `set_of`, duplicates in the source are silently collapsed.

    Raises:
        NullElementError: If any element is None.
    """
    if isinstance(elements, UnmodifiableSet):
        return elements
    return UnmodifiableSet(_non_null(elements))


def map_of[K: Hashable, V](*entries: tuple[K, V]) -> UnmodifiableMap[K, V]:
    """Return an unmodifiable mapping built from ``(key, value)`` pairs.

    Example:
        >>> map_of(("UK", "London"), ("Italy", "Rome"))["Italy"]
        'Rome'

    Raises:
        NullElementError: If any key or value is None.
        DuplicateKeyError: If the same key is supplied twice.
    """
    collected: dict[K, V] = {}
    for key, value in entries:
        if key is None:
            raise NullElementError("key")
        if value is None:
            raise NullElementError("value")
        if key in collected:
            raise DuplicateKeyError(key, collected[key], value)
        collected[key] = value
    return UnmodifiableMap(collected)


def map_copy_of[K: Hashable, V](entries: Mapping[K, V]) -> UnmodifiableMap[K, V]:
    """Return an unmodifiable copy of the mapping *entries*.

    Raises:
        NullElementError: If any key or value is None.
    """
    if isinstance(entries, UnmodifiableMap):
        return entries
    return UnmodifiableMap(_non_null_entries(entries))
