"""Clipboard access for the TUI and command line, backed by pyperclip.

Packages are long Base64 strings, so both front-ends offer copying results out
and the command line can read a package straight from the clipboard.
"""

from __future__ import annotations

import pyperclip


def copy_to_clipboard(text: str) -> None:
    """Place ``text`` (a package or recovered plaintext) on the system clipboard.

    Raises:
        pyperclip.PyperclipException: If no clipboard mechanism is available.
    """
    pyperclip.copy(text)


def read_clipboard() -> str:
    """Return the current clipboard text, stripped of surrounding whitespace."""
    return (pyperclip.paste() or "").strip()
