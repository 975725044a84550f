"""A container holding zero or one value.

`Optional` makes "maybe absent" explicit at call sites. The terminal
accessor `Optional.or_else_throw` returns the value when one is present and
raises `NoSuchElementError` otherwise; `Optional.get` is an alias kept for
readability where the caller has already checked `is_present`.

`find_first` and `find_any` search an iterable and wrap the outcome in an
`Optional`, so the absence of a match is handled by the caller rather than
signalled with None.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, cast

from calque.errors import NoSuchElementError, NullElementError


class Optional[T]:
    """Zero or one value of type T. Instances are immutable."""

    __slots__ = ("_value",)

    _value: T | None

    def __init__(self) -> None:
        raise TypeError("use Optional.of(), Optional.of_nullable() or Optional.empty()")

    @classmethod
    def _create(cls, value: T | None) -> Optional[T]:
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", value)
        return instance

    # --- Factories ---

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """Return an Optional holding *value*.

        Raises:
            NullElementError: If value is None.
        """
        if value is None:
            raise NullElementError("value")
        return cls._create(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> Optional[T]:
        """Return an Optional holding *value*, or an empty one if it is None."""
        return cls._create(value) if value is not None else cls.empty()

    @classmethod
    def empty(cls) -> Optional[T]:
        """Return an empty Optional."""
        return cast(Optional[T], _EMPTY)

    # --- Queries ---

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    # --- Terminal accessors ---

    def or_else_throw(
        self, exception_factory: Callable[[], BaseException] | None = None
    ) -> T:
        """Return the value if present, otherwise raise.

        Args:
            exception_factory: Builds the exception raised when empty. When
                omitted, `NoSuchElementError` is raised.

        Returns:
            The contained value, unchanged.

        Raises:
            NoSuchElementError: If empty and no factory was supplied.
        """
        if self._value is None:
            if exception_factory is None:
                raise NoSuchElementError()
            raise exception_factory()
        return self._value

    def get(self) -> T:
        """Alias of `or_else_throw` without a factory."""
        return self.or_else_throw()

    def or_else(self, other: T) -> T:
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return self._value if self._value is not None else supplier()

    # --- Transformations ---

    def map[U](self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """Apply *mapper* to the value if present; a None result becomes empty."""
        if self._value is None:
            return Optional.empty()
        return Optional.of_nullable(mapper(self._value))

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return self if the value is present and matches, else an empty Optional."""
        if self._value is None or predicate(self._value):
            return self
        return Optional.empty()

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        if self._value is not None:
            consumer(self._value)

    # --- Dunder ---

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        # copy and pickle would otherwise restore _value through __setattr__
        return (Optional.of_nullable, (self._value,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Optional, self._value))

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional[{self._value!r}]"


_EMPTY: Optional[Any] = Optional._create(None)  # pylint: disable=protected-access


def find_first[T](
    elements: Iterable[T], predicate: Callable[[T], bool] | None = None
) -> Optional[T]:
    """Return the first element (matching *predicate*, if given) as an Optional.

    Example:
        >>> find_first(["Adams", "Brown"], lambda s: s.startswith("B")).or_else_throw()
        'Brown'

    Raises:
        NullElementError: If the selected element is None.
    """
    for element in elements:
        if predicate is None or predicate(element):
            return Optional.of(element)
    return Optional.empty()


def find_any[T](
    elements: Iterable[T], predicate: Callable[[T], bool] | None = None
) -> Optional[T]:
    """Return some matching element as an Optional.

    Any match satisfies the contract; for a sequential iterable this is the
    first one.
    """
    return find_first(elements, predicate)
