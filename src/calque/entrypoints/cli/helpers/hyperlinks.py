"""OSC-8 terminal hyperlinks for calque CLI help text.

Links degrade to the plain URL when the stream is not a terminal or the
terminal is not known to render OSC-8 sequences.
"""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether *stream* renders OSC-8 hyperlinks.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: ``False`` for non-TTY streams, otherwise whether the terminal
        identifies itself as one known to support hyperlinks.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)


def hyperlink(url: str, label: str | None = None) -> str:
    """Render *url* as a clickable link, or as plain text when unsupported.

    Args:
        url: Target URL.
        label: Visible text; defaults to the URL itself.

    Returns:
        str: The OSC-8 wrapped label, or ``label``/``url`` unchanged.
    """
    text = label or url
    if not supports_osc8():
        return text
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
