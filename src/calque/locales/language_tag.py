"""BCP 47 language tags with Unicode locale extensions.

A language tag identifies a locale, e.g. ``de-CH`` (German as used in
Switzerland). Tags may carry *extensions*, each introduced by a
single-character singleton. The Unicode consortium registered the ``u``
singleton for locale *keywords* that override one category of locale data:

* ``cu`` selects a currency (``de-CH-u-cu-usd``),
* ``rg`` overrides the region used for regional preferences
  (``en-US-u-rg-gbzzzz``),
* ``fw`` selects the first day of the week (``en-US-u-fw-mon``).

`LanguageTag.parse` accepts well-formed tags of the form::

    language[-extlang]{0,3}[-script][-region][-variant]*[-singleton-subtag+]*[-x-private+]

and normalises case (``language`` lower, ``Script`` title, ``REGION`` upper,
everything else lower). The Unicode extension is canonicalised: attributes
first, then keywords sorted by key, with ``true`` types omitted.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .errors import LanguageTagError

# pylint: disable=too-many-instance-attributes

UNICODE_SINGLETON = "u"
PRIVATE_USE_SINGLETON = "x"

_SUBTAG = re.compile(r"[a-z0-9]{1,8}")
_UNICODE_KEY = re.compile(r"[a-z0-9][a-z]")
_UNICODE_TYPE = re.compile(r"[a-z0-9]{3,8}")
_SUBDIVISION = re.compile(r"(?P<region>[a-z]{2}|[0-9]{3})[a-z0-9]{1,4}")


def _is_variant(subtag: str) -> bool:
    return 5 <= len(subtag) <= 8 or (len(subtag) == 4 and subtag[0].isdigit())


def _parse_unicode_extension(
    tag: str, value: str
) -> tuple[tuple[str, ...], dict[str, str]]:
    """Split a ``u`` extension value into attributes and keywords."""
    parts = value.split("-")
    attributes: list[str] = []
    keywords: dict[str, str] = {}
    i = 0
    while i < len(parts) and len(parts[i]) >= 3:
        attributes.append(parts[i])
        i += 1
    while i < len(parts):
        key = parts[i]
        if not _UNICODE_KEY.fullmatch(key):
            raise LanguageTagError(tag, f"invalid unicode extension key {key!r}")
        i += 1
        types: list[str] = []
        while i < len(parts) and _UNICODE_TYPE.fullmatch(parts[i]):
            types.append(parts[i])
            i += 1
        if key in keywords:
            raise LanguageTagError(tag, f"duplicate unicode extension key {key!r}")
        keywords[key] = "-".join(types) or "true"
    return tuple(attributes), keywords


def _format_unicode_extension(
    attributes: tuple[str, ...], keywords: Mapping[str, str]
) -> str:
    parts = list(attributes)
    for key in sorted(keywords):
        parts.append(key)
        if keywords[key] != "true":
            parts.append(keywords[key])
    return "-".join(parts)


@dataclass(frozen=True, slots=True)
class LanguageTag:
    """An immutable, canonicalised BCP 47 language tag."""

    language: str
    extlangs: tuple[str, ...] = ()
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()
    extensions: Mapping[str, str] = field(default_factory=dict, hash=False)
    private_use: str | None = None

    def __post_init__(self):
        # ensure extensions is an immutable mapping decoupled from the caller's dict
        object.__setattr__(self, "extensions", MappingProxyType(dict(self.extensions)))

    # --- Parsing ---

    @classmethod
    def parse(cls, text: str) -> LanguageTag:  # pylint: disable=too-many-branches
        """Parse and canonicalise a BCP 47 language tag.

        Args:
            text: A hyphen-separated language tag such as ``"de-CH-u-cu-usd"``.

        Returns:
            LanguageTag: The parsed tag.

        Raises:
            LanguageTagError: If the tag is not well-formed.
        """
        if not text:
            raise LanguageTagError(text, "empty tag")
        subtags = text.lower().split("-")
        for subtag in subtags:
            if not _SUBTAG.fullmatch(subtag):
                raise LanguageTagError(text, f"malformed subtag {subtag!r}")

        language = subtags[0]
        if not language.isalpha() or len(language) == 4 or len(language) < 2:
            raise LanguageTagError(text, f"invalid language subtag {language!r}")
        i = 1

        extlangs: list[str] = []
        if len(language) <= 3:
            while (
                i < len(subtags)
                and len(extlangs) < 3
                and len(subtags[i]) == 3
                and subtags[i].isalpha()
            ):
                extlangs.append(subtags[i])
                i += 1

        script = None
        if i < len(subtags) and len(subtags[i]) == 4 and subtags[i].isalpha():
            script = subtags[i].title()
            i += 1

        region = None
        if i < len(subtags) and (
            (len(subtags[i]) == 2 and subtags[i].isalpha())
            or (len(subtags[i]) == 3 and subtags[i].isdigit())
        ):
            region = subtags[i].upper()
            i += 1

        variants: list[str] = []
        while i < len(subtags) and _is_variant(subtags[i]):
            if subtags[i] in variants:
                raise LanguageTagError(text, f"duplicate variant {subtags[i]!r}")
            variants.append(subtags[i])
            i += 1

        extensions: dict[str, str] = {}
        while (
            i < len(subtags)
            and len(subtags[i]) == 1
            and subtags[i] != PRIVATE_USE_SINGLETON
        ):
            singleton = subtags[i]
            if singleton in extensions:
                raise LanguageTagError(text, f"duplicate extension {singleton!r}")
            i += 1
            values: list[str] = []
            while i < len(subtags) and len(subtags[i]) >= 2:
                values.append(subtags[i])
                i += 1
            if not values:
                raise LanguageTagError(text, f"empty extension {singleton!r}")
            extensions[singleton] = "-".join(values)

        private_use = None
        if i < len(subtags) and subtags[i] == PRIVATE_USE_SINGLETON:
            if i + 1 == len(subtags):
                raise LanguageTagError(text, "empty private use sequence")
            private_use = "-".join(subtags[i + 1 :])
            i = len(subtags)

        if i < len(subtags):
            raise LanguageTagError(text, f"unexpected subtag {subtags[i]!r}")

        if UNICODE_SINGLETON in extensions:
            attributes, keywords = _parse_unicode_extension(
                text, extensions[UNICODE_SINGLETON]
            )
            extensions[UNICODE_SINGLETON] = _format_unicode_extension(
                attributes, keywords
            )

        return cls(
            language=language,
            extlangs=tuple(extlangs),
            script=script,
            region=region,
            variants=tuple(variants),
            extensions=extensions,
            private_use=private_use,
        )

    # --- Unicode extension ---

    @property
    def unicode_attributes(self) -> tuple[str, ...]:
        """Attributes of the ``u`` extension, in tag order."""
        value = self.extensions.get(UNICODE_SINGLETON)
        if value is None:
            return ()
        return _parse_unicode_extension(self.to_language_tag(), value)[0]

    @property
    def unicode_keywords(self) -> Mapping[str, str]:
        """Read-only mapping of ``u`` extension keys to their types."""
        value = self.extensions.get(UNICODE_SINGLETON)
        if value is None:
            return MappingProxyType({})
        keywords = _parse_unicode_extension(self.to_language_tag(), value)[1]
        return MappingProxyType(keywords)

    def unicode_keyword(self, key: str) -> str | None:
        """Return the type of Unicode extension keyword *key*, or None."""
        return self.unicode_keywords.get(key.lower())

    def with_unicode_keyword(self, key: str, value: str | None) -> LanguageTag:
        """Return a copy with keyword *key* set to *value* (or removed if None).

        Raises:
            LanguageTagError: If the key or value is malformed.
        """
        key = key.lower()
        if not _UNICODE_KEY.fullmatch(key):
            raise LanguageTagError(
                self.to_language_tag(), f"invalid unicode extension key {key!r}"
            )
        keywords = dict(self.unicode_keywords)
        if value is None:
            keywords.pop(key, None)
        else:
            value = value.lower()
            if value != "true" and not all(
                _UNICODE_TYPE.fullmatch(part) for part in value.split("-")
            ):
                raise LanguageTagError(
                    self.to_language_tag(), f"invalid unicode extension type {value!r}"
                )
            keywords[key] = value
        extensions = dict(self.extensions)
        formatted = _format_unicode_extension(self.unicode_attributes, keywords)
        if formatted:
            extensions[UNICODE_SINGLETON] = formatted
        else:
            extensions.pop(UNICODE_SINGLETON, None)
        return replace(self, extensions=extensions)

    @property
    def region_override(self) -> str | None:
        """Region named by the ``rg`` keyword (``gbzzzz`` -> ``GB``), or None.

        Raises:
            LanguageTagError: If the ``rg`` value is not a subdivision id.
        """
        value = self.unicode_keyword("rg")
        if value is None:
            return None
        if not (match := _SUBDIVISION.fullmatch(value)):
            raise LanguageTagError(
                self.to_language_tag(), f"invalid rg value {value!r}"
            )
        return match.group("region").upper()

    @property
    def effective_region(self) -> str | None:
        """The ``rg`` override if present, otherwise the region subtag."""
        return self.region_override or self.region

    # --- Formatting ---

    def to_language_tag(self) -> str:
        """Return the canonical hyphen-separated form of this tag."""
        parts = [self.language, *self.extlangs]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        for singleton in sorted(self.extensions):
            parts.extend((singleton, self.extensions[singleton]))
        if self.private_use:
            parts.extend((PRIVATE_USE_SINGLETON, self.private_use))
        return "-".join(parts)

    def to_locale_identifier(self) -> str:
        """Return the underscore-separated identifier used by CLDR tooling.

        Extensions and private use subtags are dropped, e.g. ``de-CH-u-cu-usd``
        becomes ``de_CH``.
        """
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(variant.upper() for variant in self.variants)
        return "_".join(parts)

    def __str__(self) -> str:
        return self.to_language_tag()
