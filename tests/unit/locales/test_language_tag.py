"""Unit tests for BCP 47 language tag parsing and Unicode extension keywords."""

import pytest

from calque.locales import LanguageTag, LanguageTagError

# ============================================================================
#                               Parsing
# ============================================================================


@pytest.mark.parametrize(
    "text, canonical",
    [
        ("en", "en"),
        ("EN-us", "en-US"),
        ("zh-hant-tw", "zh-Hant-TW"),
        ("es-419", "es-419"),
        ("sl-rozaj-biske", "sl-rozaj-biske"),
        ("de-CH-1901", "de-CH-1901"),
        ("en-US-x-Private", "en-US-x-private"),
        ("zh-yue-HK", "zh-yue-HK"),
        ("DE-ch-U-RG-GBZZZZ-CU-USD", "de-CH-u-cu-usd-rg-gbzzzz"),
        ("en-u-cu-usd-a-bbb", "en-a-bbb-u-cu-usd"),
        ("en-u-ca-true", "en-u-ca"),
        ("en-u-foobar-cu-usd", "en-u-foobar-cu-usd"),
    ],
)
def test_parse_canonicalises(text: str, canonical: str) -> None:
    """Case is normalised per subtag kind; singletons and u keywords are sorted."""
    tag = LanguageTag.parse(text)
    assert tag.to_language_tag() == canonical
    assert str(tag) == canonical


def test_parse_components() -> None:
    tag = LanguageTag.parse("zh-Hant-TW-u-cu-twd-x-foo")
    assert tag.language == "zh"
    assert tag.script == "Hant"
    assert tag.region == "TW"
    assert tag.variants == ()
    assert dict(tag.extensions) == {"u": "cu-twd"}
    assert tag.private_use == "foo"


@pytest.mark.parametrize(
    "text, reason",
    [
        ("", "empty tag"),
        ("en_US", "malformed subtag 'en_us'"),
        ("e", "invalid language subtag 'e'"),
        ("1234", "invalid language subtag '1234'"),
        ("en-US-u", "empty extension 'u'"),
        ("en-x", "empty private use sequence"),
        ("en-US-abc", "unexpected subtag 'abc'"),
        ("de-1901-1901", "duplicate variant '1901'"),
        ("en-u-cu-usd-u-rg-gbzzzz", "duplicate extension 'u'"),
        ("en-u-cu-usd-cu-eur", "duplicate unicode extension key 'cu'"),
        ("en-u-a1-usd", "invalid unicode extension key 'a1'"),
        ("en-toolongsubtag", "malformed subtag 'toolongsubtag'"),
    ],
)
def test_parse_rejects_malformed(text: str, reason: str) -> None:
    """Malformed tags raise LanguageTagError naming the tag and the reason."""
    with pytest.raises(LanguageTagError) as excinfo:
        LanguageTag.parse(text)
    assert excinfo.value.tag == text
    assert excinfo.value.reason == reason
    assert str(excinfo.value) == f"Invalid language tag {text!r}: {reason}"


def test_language_tag_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        LanguageTag.parse("")


def test_equality_and_hash_ignore_input_case() -> None:
    a = LanguageTag.parse("de-ch-u-cu-usd")
    b = LanguageTag.parse("DE-CH-U-CU-USD")
    assert a == b
    assert hash(a) == hash(b)
    assert a != LanguageTag.parse("de-CH")


# ============================================================================
#                               Unicode extension
# ============================================================================


def test_unicode_keywords_are_read_only() -> None:
    tag = LanguageTag.parse("de-CH-u-cu-usd-fw-mon")
    assert dict(tag.unicode_keywords) == {"cu": "usd", "fw": "mon"}
    with pytest.raises(TypeError):
        tag.unicode_keywords["cu"] = "eur"  # type: ignore[index]


def test_unicode_keyword_lookup() -> None:
    tag = LanguageTag.parse("en-u-foobar-ca-cu-usd")
    assert tag.unicode_keyword("CU") == "usd"
    assert tag.unicode_keyword("ca") == "true"
    assert tag.unicode_keyword("fw") is None
    assert tag.unicode_attributes == ("foobar",)


def test_tag_without_extension_has_no_keywords() -> None:
    tag = LanguageTag.parse("en-US")
    assert len(tag.unicode_keywords) == 0
    assert tag.unicode_attributes == ()


def test_with_unicode_keyword_adds_replaces_and_removes() -> None:
    tag = LanguageTag.parse("en-US")
    with_fw = tag.with_unicode_keyword("fw", "mon")
    assert with_fw.to_language_tag() == "en-US-u-fw-mon"
    replaced = with_fw.with_unicode_keyword("FW", "SUN")
    assert replaced.to_language_tag() == "en-US-u-fw-sun"
    assert replaced.with_unicode_keyword("fw", None) == tag
    assert tag.to_language_tag() == "en-US"  # original untouched


@pytest.mark.parametrize("key, value", [("c", "usd"), ("cu", "x"), ("cu", "us$")])
def test_with_unicode_keyword_validates(key: str, value: str) -> None:
    with pytest.raises(LanguageTagError):
        LanguageTag.parse("en-US").with_unicode_keyword(key, value)


@pytest.mark.parametrize(
    "text, override, effective",
    [
        ("en-US", None, "US"),
        ("en-US-u-rg-gbzzzz", "GB", "GB"),
        ("en-u-rg-ustx", "US", "US"),
        ("es-u-rg-419zzzz", "419", "419"),
    ],
)
def test_region_override(text: str, override, effective) -> None:
    tag = LanguageTag.parse(text)
    assert tag.region_override == override
    assert tag.effective_region == effective


def test_invalid_region_override() -> None:
    tag = LanguageTag.parse("en-US-u-rg-zzzzzzzz")
    with pytest.raises(LanguageTagError, match="invalid rg value 'zzzzzzzz'"):
        _ = tag.region_override


# ============================================================================
#                               Formatting
# ============================================================================


@pytest.mark.parametrize(
    "text, identifier",
    [
        ("de-CH-u-cu-usd", "de_CH"),
        ("zh-Hant-TW", "zh_Hant_TW"),
        ("de-CH-1901", "de_CH_1901"),
        ("en-x-foo", "en"),
    ],
)
def test_to_locale_identifier(text: str, identifier: str) -> None:
    assert LanguageTag.parse(text).to_locale_identifier() == identifier
