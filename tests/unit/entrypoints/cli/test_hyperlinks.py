"""Unit tests for OSC-8 hyperlink rendering."""

import io

import pytest

from calque.entrypoints.cli.helpers import hyperlinks

URL = "https://cldr.unicode.org/"

TERMINAL_VARS = ("TERM_PROGRAM", "WT_SESSION", "VTE_VERSION", "TERM")


class FakeTTY(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.fixture(autouse=True)
def clear_terminal_env(monkeypatch):
    for name in TERMINAL_VARS:
        monkeypatch.delenv(name, raising=False)


def test_non_tty_stream_is_unsupported():
    assert hyperlinks.supports_osc8(io.StringIO()) is False


@pytest.mark.parametrize(
    "name, value",
    [
        ("TERM_PROGRAM", "vscode"),
        ("TERM_PROGRAM", "iTerm.app"),
        ("WT_SESSION", "1"),
        ("VTE_VERSION", "7200"),
        ("TERM", "alacritty"),
    ],
)
def test_known_terminals_are_supported(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    assert hyperlinks.supports_osc8(FakeTTY()) is True


def test_unknown_terminal_is_unsupported():
    assert hyperlinks.supports_osc8(FakeTTY()) is False


def test_hyperlink_falls_back_to_plain_text(monkeypatch):
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda: False)
    assert hyperlinks.hyperlink(URL) == URL
    assert hyperlinks.hyperlink(URL, "CLDR") == "CLDR"


def test_hyperlink_wraps_in_osc8(monkeypatch):
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda: True)
    assert hyperlinks.hyperlink(URL, "CLDR") == f"\x1b]8;;{URL}\x07CLDR\x1b]8;;\x07"
