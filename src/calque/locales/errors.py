"""Errors related to language tags and locale data lookups."""

from calque.errors import CalqueError


class LocaleError(CalqueError):
    """Base class for all locale-related errors."""

    def __init__(self, tag: str, message: str | None = None) -> None:
        if message is None:
            message = f"locale error for {tag!r}"
        super().__init__(message)
        self.tag = tag


class LanguageTagError(LocaleError, ValueError):
    """Raised when a language tag (or one of its extensions) is malformed."""

    def __init__(self, tag: str, reason: str) -> None:
        super().__init__(tag, f"Invalid language tag {tag!r}: {reason}")
        self.reason = reason


class UnsupportedLocaleError(LocaleError, LookupError):
    """Raised when no locale data is available for a language tag."""

    def __init__(self, tag: str) -> None:
        super().__init__(tag, f"No locale data available for {tag!r}")


class CurrencyLookupError(LocaleError, LookupError):
    """Raised when a currency cannot be resolved for a language tag."""

    def __init__(self, tag: str, reason: str) -> None:
        super().__init__(tag, f"Cannot resolve currency for {tag!r}: {reason}")
        self.reason = reason
