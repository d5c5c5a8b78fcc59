"""Character encoding name as used in HTML output."""

from __future__ import annotations

_ISO = "iso"
_DEFAULT = "UTF-8"


def character_encoding(system_charset: str | None = None) -> str:
    """Return the HTML spelling of the system character table.

    No table means UTF-8; names like ``iso8859-15`` gain a dash after ``iso``.
    """
    encoding = system_charset or _DEFAULT
    if _ISO in encoding:
        first_digit = next((i for i, ch in enumerate(encoding) if ch.isdigit() and ch.isascii()), -1)
        if first_digit == len(_ISO):
            encoding = encoding[: len(_ISO)] + "-" + encoding[len(_ISO):]
    return encoding