"""Smoke example: proves the catalogue and runner are wired up."""

from ..checks import check_true
from ..registry import example


@example(group="smoke")
def catalogue_runs() -> None:
    """A trivially true check passes."""
    check_true(True, "True to be true")
