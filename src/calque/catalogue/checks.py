"""Assertion helpers used by example cases.

Each check raises `ExampleFailure` with a message naming the actual and the
expected value.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Collection, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from .errors import ExampleFailure


def check_equal(actual: object, expected: object, what: str = "value") -> None:
    """Check that *actual* equals *expected*."""
    if actual != expected:
        raise ExampleFailure(
            f"{what}: expected {expected!r} but was {actual!r}", actual, expected
        )


def check_is(actual: object, expected: object, what: str = "value") -> None:
    """Check that *actual* is the very same object as *expected*."""
    if actual is not expected:
        raise ExampleFailure(
            f"{what}: expected the same instance as {expected!r} but was {actual!r}",
            actual,
            expected,
        )


def check_true(condition: bool, description: str) -> None:
    """Check that *condition* holds; *description* states what should be true."""
    if not condition:
        raise ExampleFailure(f"expected {description}", condition, True)


def check_contains_exactly(
    actual: Iterable[object], expected: Iterable[object]
) -> None:
    """Check that *actual* holds exactly *expected*, in the same order."""
    actual_items, expected_items = list(actual), list(expected)
    if actual_items != expected_items:
        raise ExampleFailure(
            f"expected exactly {expected_items!r} in order but was {actual_items!r}",
            actual_items,
            expected_items,
        )


def check_contains_in_any_order(
    actual: Iterable[object], expected: Iterable[object]
) -> None:
    """Check that *actual* holds exactly *expected*, in any order.

    Multiplicity counts: ``["a", "a"]`` does not match ``["a"]``.
    """
    actual_items, expected_items = list(actual), list(expected)
    if Counter(actual_items) != Counter(expected_items):
        raise ExampleFailure(
            f"expected exactly {expected_items!r} in any order but was {actual_items!r}",
            actual_items,
            expected_items,
        )


def check_not_contains(container: Collection[object], item: object) -> None:
    """Check that *item* is absent from *container*."""
    if item in container:
        raise ExampleFailure(
            f"expected {container!r} not to contain {item!r}", container, item
        )


def check_empty(container: Collection[object]) -> None:
    if len(container) != 0:
        raise ExampleFailure(f"expected an empty collection but was {container!r}")


def check_not_empty(container: Collection[object]) -> None:
    if len(container) == 0:
        raise ExampleFailure(f"expected a non-empty collection but was {container!r}")


@dataclass
class RaisedInfo:
    """Holds the exception captured by `expect_raises`."""

    value: BaseException | None = None


@contextmanager
def expect_raises(
    kind: type[BaseException], match: str | None = None
) -> Iterator[RaisedInfo]:
    """Check that the block raises an exception of type *kind*.

    Args:
        kind: Expected exception type; subclasses also match.
        match: Optional regular expression searched for in ``str(exception)``.

    Yields:
        RaisedInfo: Populated with the exception once the block exits.

    Raises:
        ExampleFailure: If nothing is raised, or the message does not match.

    Exceptions of any other type propagate unchanged, so an unexpected error
    is reported as such rather than as a failed check.
    """
    info = RaisedInfo()
    try:
        yield info
    except kind as e:
        info.value = e
        if match is not None and not re.search(match, str(e)):
            raise ExampleFailure(
                f"expected {kind.__name__} message matching {match!r} but was {str(e)!r}",
                str(e),
                match,
            ) from e
        return
    raise ExampleFailure(f"expected {kind.__name__} to be raised", None, kind)
