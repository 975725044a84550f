"""Configuration utilities for CALQUE.

This module centralizes small helpers and constants related to application
configuration. Values come from the environment; each helper falls back to a
documented default when its variable is unset.
"""

import os
from datetime import date

REFERENCE_DATE_ENV = "CALQUE_REFERENCE_DATE"  # pragma: no mutate
LANGUAGE_TAG_ENV = "CALQUE_LANGUAGE_TAG"  # pragma: no mutate

# Currency tables change over time; lookups default to a fixed day so results
# do not depend on the wall clock.
DEFAULT_REFERENCE_DATE = date(2018, 3, 20)
DEFAULT_LANGUAGE_TAG = "en-US"


class ConfigError(Exception):
    """Base class for configuration errors."""


class InvalidReferenceDateError(ConfigError):
    """Raised when CALQUE_REFERENCE_DATE is not an ISO 8601 date."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"{REFERENCE_DATE_ENV} must be an ISO 8601 date (YYYY-MM-DD), got {value!r}"
        )
        self.value = value


def get_reference_date() -> date:
    """Get the date used for date-sensitive locale lookups.

    Returns:
        The value of `CALQUE_REFERENCE_DATE` parsed as a date, or
        `DEFAULT_REFERENCE_DATE` when the variable is unset or empty.

    Raises:
        InvalidReferenceDateError: If the variable is set but malformed.
    """
    if not (value := os.environ.get(REFERENCE_DATE_ENV)):
        return DEFAULT_REFERENCE_DATE
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidReferenceDateError(value) from e


def get_default_language_tag() -> str:
    """Get the language tag used when a command is given none.

    Returns:
        The value of `CALQUE_LANGUAGE_TAG`, or `DEFAULT_LANGUAGE_TAG`.
    """
    return os.environ.get(LANGUAGE_TAG_ENV) or DEFAULT_LANGUAGE_TAG
