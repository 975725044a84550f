"""Examples: creating unmodifiable collections.

The factories in `calque.collections` create read-only lists, sets and
mappings, either from individual elements (``*_of``) or as a copy of an
existing collection (``*_copy_of``). The created collections share these
properties:

- Any attempt to add, remove or replace elements raises
  `UnsupportedOperationError`. The elements themselves stay mutable if
  they are mutable objects.
- Later changes to the source collection are not reflected in a copy.
- Lists keep the iteration order of their source; the iteration order of
  sets and mappings is undefined.
"""

from calque.collections import (
    list_copy_of,
    list_of,
    map_copy_of,
    set_copy_of,
    set_of,
)
from calque.errors import DuplicateElementError, UnsupportedOperationError

from ..checks import (
    check_contains_exactly,
    check_contains_in_any_order,
    check_equal,
    check_is,
    check_not_contains,
    expect_raises,
)
from ..registry import example

GROUP = "collections"


@example(group=GROUP)
def unmodifiable_list_from_list() -> None:
    """A list copied from a mutable list keeps its order and ignores later changes."""
    colours = ["red", "yellow", "green"]

    copied_colours = list_copy_of(colours)
    check_contains_exactly(copied_colours, colours)

    colours.append("blue")
    check_not_contains(copied_colours, "blue")


@example(group=GROUP)
def unmodifiable_list_from_set() -> None:
    """A list can be copied from a set, in the set's iteration order."""
    unique_integers = {1, 2, 3}

    integer_list = list_copy_of(unique_integers)
    check_contains_exactly(integer_list, unique_integers)

    unique_integers.add(4)
    check_not_contains(integer_list, 4)


@example(group=GROUP)
def unmodifiable_set_from_list() -> None:
    """A set copied from a list with duplicates holds each value once."""
    colours = list_of("red", "yellow", "green", "red")

    unique_colours = set_copy_of(colours)
    check_contains_in_any_order(unique_colours, ["yellow", "red", "green"])


@example(group=GROUP)
def unmodifiable_list_rejects_mutation() -> None:
    """Appending to an unmodifiable list fails and leaves it unchanged."""
    colours = list_of("red", "yellow", "pink")

    with expect_raises(UnsupportedOperationError, match="append"):
        colours.append("orange")
    with expect_raises(UnsupportedOperationError):
        colours[0] = "orange"
    check_contains_exactly(colours, ["red", "yellow", "pink"])


@example(group=GROUP)
def set_of_rejects_duplicates() -> None:
    """The strict set factory refuses the same element twice."""
    with expect_raises(DuplicateElementError, match="'red'"):
        set_of("red", "yellow", "pink", "red")


@example(group=GROUP)
def unmodifiable_map_from_dict() -> None:
    """A mapping copied from a dict ignores later changes and rejects assignment."""
    capitals = {"UK": "London", "Italy": "Rome"}

    copied_capitals = map_copy_of(capitals)
    capitals["France"] = "Paris"
    check_not_contains(copied_capitals, "France")

    with expect_raises(UnsupportedOperationError):
        copied_capitals["France"] = "Paris"  # type: ignore[index]
    check_equal(dict(copied_capitals), {"UK": "London", "Italy": "Rome"})


@example(group=GROUP)
def copying_unmodifiable_list_returns_it() -> None:
    """Copying a list that is already unmodifiable returns the same instance."""
    colours = list_of("red", "yellow", "pink")

    check_is(list_copy_of(colours), colours)
