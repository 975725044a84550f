"""Unit tests for calque.config."""

from datetime import date

import pytest

from calque import config


class TestGetReferenceDate:
    """Tests for get_reference_date()."""

    @staticmethod
    def test_default_when_unset() -> None:
        assert config.get_reference_date() == date(2018, 3, 20)

    @staticmethod
    def test_empty_value_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(config.REFERENCE_DATE_ENV, "")
        assert config.get_reference_date() == config.DEFAULT_REFERENCE_DATE

    @staticmethod
    def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(config.REFERENCE_DATE_ENV, "2001-01-01")
        assert config.get_reference_date() == date(2001, 1, 1)

    @staticmethod
    def test_malformed_value_raises(monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(config.REFERENCE_DATE_ENV, "20/03/2018")
        with pytest.raises(config.InvalidReferenceDateError) as excinfo:
            config.get_reference_date()
        assert excinfo.value.value == "20/03/2018"
        assert "CALQUE_REFERENCE_DATE must be an ISO 8601 date" in str(excinfo.value)
        assert isinstance(excinfo.value, config.ConfigError)


class TestGetDefaultLanguageTag:
    """Tests for get_default_language_tag()."""

    @staticmethod
    def test_default_when_unset() -> None:
        assert config.get_default_language_tag() == "en-US"

    @staticmethod
    def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(config.LANGUAGE_TAG_ENV, "de-CH")
        assert config.get_default_language_tag() == "de-CH"
