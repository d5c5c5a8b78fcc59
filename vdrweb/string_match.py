"""Case-insensitive regular expression matching of text."""

from __future__ import annotations

import re


class StringMatch:
    """A caseless pattern that reports whether it occurs anywhere in a string.

    An empty or invalid pattern never matches anything.
    """

    __slots__ = ("pattern", "_regex")

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._regex: re.Pattern[str] | None = None
        if pattern:
            try:
                self._regex = re.compile(pattern, re.IGNORECASE)
            except re.error:
                self._regex = None

    @property
    def valid(self) -> bool:
        """True if the pattern compiled."""
        return self._regex is not None

    def matches(self, s: str) -> bool:
        """Return True if the pattern occurs somewhere in ``s``."""
        if self._regex is None:
            return False
        return self._regex.search(s) is not None

    def __repr__(self) -> str:
        return f"StringMatch({self.pattern!r})"