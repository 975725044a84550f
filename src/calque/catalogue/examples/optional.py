"""Examples: the Optional terminal accessor.

`Optional.or_else_throw` returns the value when one is present and raises
`NoSuchElementError` otherwise.
"""

from calque.collections import list_of
from calque.errors import NoSuchElementError
from calque.optional import find_any, find_first

from ..checks import check_equal, check_is, expect_raises
from ..registry import example

GROUP = "optional"

SURNAMES = list_of("Adams", "Brown", "Campbell")


@example(group=GROUP)
def or_else_throw_returns_present_value() -> None:
    """or_else_throw() returns the value of a present Optional unchanged."""
    first_surname = find_first(SURNAMES, lambda s: s.startswith("A")).or_else_throw()

    check_equal(first_surname, SURNAMES[0])
    check_is(first_surname, SURNAMES[0])


@example(group=GROUP)
def or_else_throw_on_empty_raises() -> None:
    """or_else_throw() on an empty Optional raises NoSuchElementError."""
    with expect_raises(NoSuchElementError, match="No value present"):
        find_any(SURNAMES, lambda s: s.startswith("Z")).or_else_throw()


@example(group=GROUP)
def or_else_throw_with_custom_exception() -> None:
    """or_else_throw(factory) raises the exception the factory builds."""
    with expect_raises(LookupError, match="no surname starting with Z"):
        find_any(SURNAMES, lambda s: s.startswith("Z")).or_else_throw(
            lambda: LookupError("no surname starting with Z")
        )
