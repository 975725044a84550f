"""Examples: accumulating elements into unmodifiable collections.

`calque.collections.collect` runs a `Collector` over any iterable. The
``to_unmodifiable_*`` collectors finish into read-only containers, with the
same guarantees as the ``*_copy_of`` factories.
"""

from calque.collections import (
    collect,
    to_unmodifiable_list,
    to_unmodifiable_map,
    to_unmodifiable_set,
)
from calque.errors import DuplicateKeyError, UnsupportedOperationError

from ..checks import (
    check_contains_exactly,
    check_contains_in_any_order,
    check_equal,
    expect_raises,
)
from ..registry import example

GROUP = "collectors"


@example(group=GROUP)
def collect_to_unmodifiable_list() -> None:
    """Collecting into an unmodifiable list keeps encounter order."""
    colours = collect(iter(["red", "yellow", "pink"]), to_unmodifiable_list())

    check_contains_exactly(colours, ["red", "yellow", "pink"])
    with expect_raises(UnsupportedOperationError):
        colours.append("orange")


@example(group=GROUP)
def collect_to_unmodifiable_set() -> None:
    """Collecting into an unmodifiable set drops duplicates."""
    colours = collect(iter(["red", "yellow", "pink", "red"]), to_unmodifiable_set())

    check_contains_in_any_order(colours, ["red", "yellow", "pink"])
    with expect_raises(UnsupportedOperationError):
        colours.add("orange")  # type: ignore[attr-defined]


@example(group=GROUP)
def collect_to_unmodifiable_map() -> None:
    """Collecting into an unmodifiable map rejects duplicate keys unless merged."""
    words = ["apple", "avocado", "banana"]

    with expect_raises(DuplicateKeyError, match="'a'"):
        collect(words, to_unmodifiable_map(lambda w: w[0], lambda w: w))

    by_initial = collect(
        words,
        to_unmodifiable_map(lambda w: w[0], lambda w: w, merge=lambda a, b: f"{a},{b}"),
    )
    check_equal(dict(by_initial), {"a": "apple,avocado", "b": "banana"})
    with expect_raises(UnsupportedOperationError):
        by_initial["c"] = "cherry"  # type: ignore[index]
