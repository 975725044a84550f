"""Global pytest fixtures and default marks for the calque test suite."""

from pathlib import Path

import pytest

from calque.config import LANGUAGE_TAG_ENV, REFERENCE_DATE_ENV

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = {"unit": "unit", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items by their top-level folder (`tests/unit/` -> `unit`, ...)."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        if (marker := DIRECTORY_MARKERS.get(top)) is None:
            continue
        if not any(m.name == marker for m in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker))


@pytest.fixture(autouse=True)
def clean_calque_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without CALQUE_* configuration leaking in from the shell."""
    monkeypatch.delenv(REFERENCE_DATE_ENV, raising=False)
    monkeypatch.delenv(LANGUAGE_TAG_ENV, raising=False)
