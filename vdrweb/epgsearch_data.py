"""Records exchanged with the EPG search service: categories, groups, blacklists, results."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from vdrweb.md5 import md5_string

_PIPE = "!^pipe^!"
_SIGNED = re.compile(r"[+-]?\d+")
_UNSIGNED = re.compile(r"\+?\d+")
_VALUE_SEPARATORS = (",", ";", "|", "~")
_UINT32_MAX = 0xFFFFFFFF


class _BadCast(ValueError):
    """A field of a text record could not be converted."""


def _to_int(text: str) -> int:
    if not _SIGNED.fullmatch(text):
        raise _BadCast(text)
    return int(text)


def _to_unsigned(text: str, limit: int | None = None) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise _BadCast(text)
    value = int(text)
    if limit is not None and value > limit:
        raise _BadCast(text)
    return value


@dataclass
class ExtEPGInfo:
    """An extended EPG category with its list of possible values."""

    id: int = -1
    name: str = ""
    menu_name: str = ""
    values: list[str] = field(default_factory=list)
    search_mode: int = 0

    @classmethod
    def from_text(cls, data: str) -> "ExtEPGInfo":
        """Parse ``id|name|menuname|v1,v2,...|searchmode``.

        Parsing stops at the first field that cannot be converted.
        """
        info = cls()
        try:
            for index, part in enumerate(data.split("|")):
                if index == 0:
                    info.id = _to_int(part)
                elif index == 1:
                    info.name = part
                elif index == 2:
                    info.menu_name = part
                elif index == 3:
                    info.values = part.split(",")
                elif index == 4:
                    info.search_mode = _to_int(part)
        except _BadCast:
            pass
        return info

    @property
    def display_name(self) -> str:
        """The name shown in menus."""
        return self.menu_name

    def selected(self, index: int, values: str) -> bool:
        """True if the value at ``index`` occurs in ``values``.

        ``values`` may be separated by commas, semicolons, pipes or tildes.
        """
        if index < 0 or index >= len(self.values):
            return False
        wanted = self.values[index].strip()
        return any(
            part.strip() == wanted
            for separator in _VALUE_SEPARATORS
            for part in values.split(separator)
        )


@dataclass
class ChannelGroup:
    """A named group of channels."""

    name: str = ""

    @classmethod
    def from_text(cls, data: str) -> "ChannelGroup":
        """Parse ``name|channel|channel...``; only the name is kept."""
        return cls(name=data.split("|", 1)[0])


@dataclass
class Blacklist:
    """A search whose results are excluded from search timers."""

    id: int = -1
    search: str = ""

    @classmethod
    def from_text(cls, data: str) -> "Blacklist":
        """Parse ``id:search:...``, unescaping colons and pipes in the search."""
        entry = cls()
        parts = data.split(":")
        try:
            entry.id = _to_int(parts[0])
            if len(parts) > 1:
                entry.search = parts[1].replace("|", ":").replace(_PIPE, "|")
        except _BadCast:
            pass
        return entry

    def __lt__(self, other: "Blacklist") -> bool:
        if not isinstance(other, Blacklist):
            return NotImplemented
        return self.search < other.search


@dataclass
class SearchResult:
    """One event found by a search."""

    search_id: int = 0
    event_id: int = 0
    title: str = ""
    short_text: str = ""
    description: str = ""
    start_time: int = 0
    stop_time: int = 0
    channel: str = ""
    timer_start_time: int = 0
    timer_stop_time: int = 0
    file: str = ""
    timer_mode: int = 0

    @classmethod
    def from_text(cls, data: str) -> "SearchResult":
        """Parse the colon separated result record.

        Parsing stops at the first field that cannot be converted.
        """
        result = cls()
        try:
            for index, part in enumerate(data.split(":")):
                if index == 0:
                    result.search_id = _to_int(part)
                elif index == 1:
                    result.event_id = _to_unsigned(part, _UINT32_MAX)
                elif index == 2:
                    result.title = part.replace("|", ":")
                elif index == 3:
                    result.short_text = part.replace("|", ":")
                elif index == 4:
                    result.description = part.replace("|", ":")
                elif index == 5:
                    result.start_time = _to_unsigned(part)
                elif index == 6:
                    result.stop_time = _to_unsigned(part)
                elif index == 7:
                    result.channel = part
                elif index == 8:
                    result.timer_start_time = _to_unsigned(part)
                elif index == 9:
                    result.timer_stop_time = _to_unsigned(part)
                elif index == 10:
                    result.file = part
                elif index == 11:
                    result.timer_mode = _to_int(part)
        except _BadCast:
            pass
        return result

    def __lt__(self, other: "SearchResult") -> bool:
        if not isinstance(other, SearchResult):
            return NotImplemented
        return self.start_time < other.start_time


class QueryStore:
    """Remembers search queries so they can be passed around by their MD5 hash."""

    def __init__(self) -> None:
        self._queries: set[str] = set()

    def add(self, query: str) -> str:
        """Store ``query`` and return its hex MD5 hash."""
        self._queries.add(query)
        return md5_string(query)

    def pop(self, md5: str) -> str:
        """Remove and return the query with this hash, or an empty string."""
        if not md5:
            return ""
        for query in sorted(self._queries):
            if md5_string(query) == md5:
                self._queries.discard(query)
                return query
        return ""

    def __len__(self) -> int:
        return len(self._queries)

    def __contains__(self, query: object) -> bool:
        return query in self._queries


def merge_results(
    left: Iterable[SearchResult], right: Iterable[SearchResult]
) -> list[SearchResult]:
    """Combine two result lists, ordered by start time."""
    return sorted([*left, *right])