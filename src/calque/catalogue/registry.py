"""Registry of example cases.

An example case is a zero-argument function that builds some values and
checks a documented property of them, raising `ExampleFailure` when the
property does not hold. Cases are independent: they share no state and may
run in any order.

Cases are registered with the `example` decorator of an `ExampleCatalogue`.
The module-level `CATALOGUE` holds the bundled cases once `load_examples`
has imported them.

Example:
    ```py
    @example(group="optional")
    def empty_optional_is_empty():
        \"\"\"An empty Optional reports itself as empty.\"\"\"
        check_true(Optional.empty().is_empty(), "Optional.empty() is empty")
    ```
"""

from __future__ import annotations

import importlib
import inspect
from collections.abc import Callable
from dataclasses import dataclass

from .errors import DuplicateExampleError, UnknownExampleError

EXAMPLES_PACKAGE = "calque.catalogue.examples"

type CaseFunction = Callable[[], None]


@dataclass(frozen=True, slots=True)
class ExampleCase:
    """A single registered example."""

    name: str
    group: str
    summary: str
    function: CaseFunction

    def __call__(self) -> None:
        self.function()


class ExampleCatalogue:
    """An ordered collection of uniquely named example cases."""

    def __init__(self) -> None:
        self._cases: dict[str, ExampleCase] = {}

    def __len__(self) -> int:
        return len(self._cases)

    def __contains__(self, name: object) -> bool:
        return name in self._cases

    def register(self, case: ExampleCase) -> ExampleCase:
        """Add *case* to the catalogue.

        Raises:
            DuplicateExampleError: If a case with the same name exists.
        """
        if case.name in self._cases:
            raise DuplicateExampleError(case.name)
        self._cases[case.name] = case
        return case

    def example(
        self, group: str, name: str | None = None
    ) -> Callable[[CaseFunction], CaseFunction]:
        """Decorator registering a function as an example case.

        Args:
            group: Group the case belongs to (e.g. ``"collections"``).
            name: Case name; defaults to the function's name.

        The first line of the function's docstring becomes the case summary.
        The decorated function is returned unchanged.
        """

        def decorator(function: CaseFunction) -> CaseFunction:
            doc = inspect.getdoc(function) or ""
            self.register(
                ExampleCase(
                    name=name or function.__name__,
                    group=group,
                    summary=doc.splitlines()[0] if doc else "",
                    function=function,
                )
            )
            return function

        return decorator

    def get(self, name: str) -> ExampleCase:
        """Return the case called *name*.

        Raises:
            UnknownExampleError: If no such case is registered.
        """
        try:
            return self._cases[name]
        except KeyError as e:
            raise UnknownExampleError(name) from e

    def cases(
        self, group: str | None = None, keyword: str | None = None
    ) -> tuple[ExampleCase, ...]:
        """Return cases in registration order, optionally filtered.

        Args:
            group: Only cases in this group.
            keyword: Only cases whose name contains this text (case-insensitive).
        """
        selected = list(self._cases.values())
        if group is not None:
            selected = [case for case in selected if case.group == group]
        if keyword is not None:
            needle = keyword.lower()
            selected = [case for case in selected if needle in case.name.lower()]
        return tuple(selected)

    def groups(self) -> tuple[str, ...]:
        """Return group names in order of first registration."""
        return tuple(dict.fromkeys(case.group for case in self._cases.values()))


CATALOGUE = ExampleCatalogue()
example = CATALOGUE.example


def load_examples() -> ExampleCatalogue:
    """Import the bundled example modules and return the default catalogue.

    Importing registers each case with `CATALOGUE`; repeated calls are cheap
    because Python caches the imported modules.
    """
    importlib.import_module(EXAMPLES_PACKAGE)
    return CATALOGUE
