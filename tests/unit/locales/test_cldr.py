"""Unit tests for mapping language tags onto Babel locales."""

import pytest

from calque.locales import LanguageTag, UnsupportedLocaleError
from calque.locales.cldr import resolve_locale, resolve_region_locale


@pytest.mark.parametrize(
    "text, language, territory",
    [
        ("de-CH", "de", "CH"),
        ("de-CH-u-cu-usd", "de", "CH"),
        ("de-CH-1901", "de", "CH"),
        ("en", "en", None),
    ],
)
def test_resolve_locale_drops_unknown_detail(text, language, territory) -> None:
    locale = resolve_locale(LanguageTag.parse(text))
    assert locale.language == language
    assert locale.territory == territory


def test_resolve_locale_unknown_language() -> None:
    with pytest.raises(UnsupportedLocaleError) as excinfo:
        resolve_locale(LanguageTag.parse("zz-ZZ"))
    assert excinfo.value.tag == "zz-ZZ"


def test_resolve_region_locale_prefers_tag_language() -> None:
    locale = resolve_region_locale(LanguageTag.parse("en-US"), "GB")
    assert (locale.language, locale.territory) == ("en", "GB")


def test_resolve_region_locale_falls_back_to_likely_language() -> None:
    locale = resolve_region_locale(LanguageTag.parse("ja"), "DE")
    assert locale.territory == "DE"
