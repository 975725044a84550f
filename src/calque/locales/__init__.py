"""Language tags with Unicode locale extensions, and the lookups they drive."""

from .calendar import first_day_of_week, weekday_name
from .currency import Currency, currency_code_for, currency_for, format_amount
from .errors import (
    CurrencyLookupError,
    LanguageTagError,
    LocaleError,
    UnsupportedLocaleError,
)
from .language_tag import LanguageTag

__all__ = [
    "Currency",
    "CurrencyLookupError",
    "LanguageTag",
    "LanguageTagError",
    "LocaleError",
    "UnsupportedLocaleError",
    "currency_code_for",
    "currency_for",
    "first_day_of_week",
    "format_amount",
    "weekday_name",
]
