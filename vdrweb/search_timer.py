"""Search timers of the EPG search service and their text form."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional

ChannelLookup = Callable[[str], Optional[str]]

DEFAULT_PRIORITY = 50
DEFAULT_LIFETIME = 99
DEFAULT_MARGIN_START = 2
DEFAULT_MARGIN_STOP = 10

_PIPE = "!^pipe^!"
_COLON = "!^colon^!"
_INTEGER = re.compile(r"[+-]?\d+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


class UseChannel(IntEnum):
    """How a search timer restricts the channels it searches."""

    NO_CHANNEL = 0
    INTERVAL = 1
    GROUP = 2
    FTA_ONLY = 3


class _BadCast(ValueError):
    """A field of the text form could not be converted."""


def _to_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise _BadCast(text)
    return int(text)


def _to_bool(text: str) -> bool:
    if text == "1":
        return True
    if text == "0":
        return False
    raise _BadCast(text)


def _int_as_bool(text: str) -> bool:
    return bool(_to_int(text))


def _to_channel_mode(text: str) -> int:
    value = _to_int(text)
    try:
        return UseChannel(value)
    except ValueError:
        return value


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _unescape(text: str) -> str:
    return text.replace("|", ":").replace(_PIPE, "|")


def _escape(text: str) -> str:
    return text.replace("|", _PIPE).replace(":", "|")


def _join_pipes(items: list[str]) -> str:
    result = ""
    for item in items:
        result += ("|" if result else "") + item
    return result


def _flag(value: bool) -> str:
    return "1" if value else "0"


@dataclass(eq=True)
class SearchTimer:
    """A search timer definition as exchanged with the EPG search service."""

    priority: int = DEFAULT_PRIORITY
    lifetime: int = DEFAULT_LIFETIME
    margin_start: int = DEFAULT_MARGIN_START
    margin_stop: int = DEFAULT_MARGIN_STOP
    id: int = field(default=-1, init=False)
    search: str = field(default="", init=False)
    use_time: bool = field(default=False, init=False)
    start_time: int = field(default=0, init=False)
    stop_time: int = field(default=0, init=False)
    use_channel: int = field(default=UseChannel.NO_CHANNEL, init=False)
    channel_min: str = field(default="", init=False)
    channel_max: str = field(default="", init=False)
    channel_text: str = field(default="", init=False)
    match_case: bool = field(default=False, init=False)
    search_mode: int = field(default=0, init=False)
    use_title: bool = field(default=True, init=False)
    use_subtitle: bool = field(default=True, init=False)
    use_description: bool = field(default=True, init=False)
    use_duration: bool = field(default=False, init=False)
    min_duration: int = field(default=0, init=False)
    max_duration: int = field(default=0, init=False)
    use_as_search_timer: int = field(default=0, init=False)
    use_day_of_week: bool = field(default=False, init=False)
    day_of_week: int = field(default=0, init=False)
    use_series_recording: bool = field(default=False, init=False)
    directory: str = field(default="", init=False)
    use_vps: bool = field(default=False, init=False)
    action: int = field(default=0, init=False)
    use_ext_epg_info: bool = field(default=False, init=False)
    ext_epg_info: list = field(default_factory=list, init=False)
    avoid_repeats: bool = field(default=False, init=False)
    allowed_repeats: int = field(default=0, init=False)
    compare_title: bool = field(default=False, init=False)
    compare_subtitle: int = field(default=0, init=False)
    compare_summary: bool = field(default=False, init=False)
    compare_categories: int = field(default=0, init=False)
    repeats_within_days: int = field(default=0, init=False)
    del_after_days: int = field(default=0, init=False)
    recordings_keep: int = field(default=0, init=False)
    switch_min_before: int = field(default=1, init=False)
    pause_on_recordings: int = field(default=0, init=False)
    blacklist_mode: int = field(default=0, init=False)
    blacklist_ids: list = field(default_factory=list, init=False)
    fuzzy_tolerance: int = field(default=1, init=False)
    use_in_favorites: bool = field(default=False, init=False)
    menu_template: int = field(default=0, init=False)
    del_mode: int = field(default=0, init=False)
    del_after_count_recs: int = field(default=0, init=False)
    del_after_days_of_first_rec: int = field(default=0, init=False)
    use_as_search_timer_from: int = field(default=0, init=False)
    use_as_search_timer_til: int = field(default=0, init=False)
    ignore_missing_epg_cats: bool = field(default=False, init=False)

    @classmethod
    def from_text(
        cls,
        data: str,
        channel_name: ChannelLookup | None = None,
        priority: int = DEFAULT_PRIORITY,
        lifetime: int = DEFAULT_LIFETIME,
        margin_start: int = DEFAULT_MARGIN_START,
        margin_stop: int = DEFAULT_MARGIN_STOP,
    ) -> "SearchTimer":
        """Parse the colon separated text form.

        ``channel_name`` maps a channel id to its name, or None if unknown.
        Parsing stops at the first field that cannot be converted; the
        remaining fields keep their defaults.
        """
        timer = cls(priority, lifetime, margin_start, margin_stop)
        lookup = channel_name or (lambda _channel_id: None)
        try:
            for part, handler in zip(data.split(":"), _PARSERS):
                handler(timer, part, lookup)
        except _BadCast:
            pass
        return timer

    def _parse_channel(self, data: str, lookup: ChannelLookup) -> None:
        if self.use_channel == UseChannel.NO_CHANNEL:
            self.channel_text = "All"
        elif self.use_channel == UseChannel.INTERVAL:
            self._parse_channel_ids(data, lookup)
        elif self.use_channel == UseChannel.GROUP:
            self.channel_text = data
        elif self.use_channel == UseChannel.FTA_ONLY:
            self.channel_text = "FTA"

    def _parse_channel_ids(self, data: str, lookup: ChannelLookup) -> None:
        parts = data.split("|")
        self.channel_min = parts[0]
        name = lookup(self.channel_min)
        if name is not None:
            self.channel_text = name
        if len(parts) < 2:
            return
        self.channel_max = parts[1]
        name = lookup(self.channel_max)
        if name is not None:
            self.channel_text += " - " + name

    def parse_blacklist(self, data: str) -> None:
        """Set the selected blacklist ids from a pipe separated list."""
        self.blacklist_ids = data.split("|")

    def blacklist_selected(self, blacklist_id: int) -> bool:
        """True if the blacklist with this id is selected."""
        return any(_leading_int(item) == blacklist_id for item in self.blacklist_ids)

    def _channel_selection(self) -> str:
        if self.use_channel == UseChannel.INTERVAL:
            if self.channel_max and self.channel_max != self.channel_min:
                return f"{self.channel_min}|{self.channel_max}"
            return self.channel_min
        if self.use_channel == UseChannel.GROUP:
            return self.channel_text
        return ""

    def to_text(self) -> str:
        """The colon separated text form understood by the search service."""
        start = stop = min_duration = max_duration = ""
        if self.use_time:
            start = f"{self.start_time:04d}"
            stop = f"{self.stop_time:04d}"
        if self.use_duration:
            min_duration = f"{self.min_duration:04d}"
            max_duration = f"{self.max_duration:04d}"
        catvalues = ""
        if self.use_ext_epg_info:
            catvalues = _join_pipes(
                [value.replace(":", _COLON).replace("|", _PIPE) for value in self.ext_epg_info]
            )
        blacklists = _join_pipes(list(self.blacklist_ids)) if self.blacklist_mode == 1 else ""
        use_channel = int(self.use_channel)
        channels = self._channel_selection() if 0 < use_channel < 3 else "0"

        fields = [
            str(self.id),
            _escape(self.search),
            _flag(self.use_time),
            start,
            stop,
            str(use_channel),
            channels,
            _flag(self.match_case),
            str(self.search_mode),
            _flag(self.use_title),
            _flag(self.use_subtitle),
            _flag(self.use_description),
            _flag(self.use_duration),
            min_duration,
            max_duration,
            str(self.use_as_search_timer),
            _flag(self.use_day_of_week),
            str(self.day_of_week),
            _flag(self.use_series_recording),
            _escape(self.directory),
            str(self.priority),
            str(self.lifetime),
            str(self.margin_start),
            str(self.margin_stop),
            _flag(self.use_vps),
            str(self.action),
            _flag(self.use_ext_epg_info),
            catvalues,
            _flag(self.avoid_repeats),
            str(self.allowed_repeats),
            _flag(self.compare_title),
            str(self.compare_subtitle),
            _flag(self.compare_summary),
            str(self.compare_categories),
            str(self.repeats_within_days),
            str(self.del_after_days),
            str(self.recordings_keep),
            str(self.switch_min_before),
            str(self.pause_on_recordings),
            str(self.blacklist_mode),
            blacklists,
            str(self.fuzzy_tolerance),
            _flag(self.use_in_favorites),
            str(self.menu_template),
            str(self.del_mode),
            str(self.del_after_count_recs),
            str(self.del_after_days_of_first_rec),
            str(int(self.use_as_search_timer_from)),
            str(int(self.use_as_search_timer_til)),
            _flag(self.ignore_missing_epg_cats),
        ]
        return ":".join(fields)

    def __lt__(self, other: "SearchTimer") -> bool:
        if not isinstance(other, SearchTimer):
            return NotImplemented
        return self.search.translate(_ASCII_LOWER) < other.search.translate(_ASCII_LOWER)


_Handler = Callable[[SearchTimer, str, ChannelLookup], None]


def _assign(attr: str, convert: Callable[[str], object]) -> _Handler:
    def handler(timer: SearchTimer, part: str, _lookup: ChannelLookup) -> None:
        setattr(timer, attr, convert(part))

    return handler


def _assign_if(flag: str, attr: str, convert: Callable[[str], object]) -> _Handler:
    def handler(timer: SearchTimer, part: str, _lookup: ChannelLookup) -> None:
        if getattr(timer, flag):
            setattr(timer, attr, convert(part))

    return handler


def _channel(timer: SearchTimer, part: str, lookup: ChannelLookup) -> None:
    timer._parse_channel(part, lookup)


def _ext_epg_info(timer: SearchTimer, part: str, _lookup: ChannelLookup) -> None:
    timer.ext_epg_info = part.split("|")


def _blacklist(timer: SearchTimer, part: str, _lookup: ChannelLookup) -> None:
    timer.parse_blacklist(part)


_PARSERS: tuple[_Handler, ...] = (
    _assign("id", _to_int),
    _assign("search", _unescape),
    _assign("use_time", _to_bool),
    _assign_if("use_time", "start_time", _to_int),
    _assign_if("use_time", "stop_time", _to_int),
    _assign("use_channel", _to_channel_mode),
    _channel,
    _assign("match_case", _int_as_bool),
    _assign("search_mode", _to_int),
    _assign("use_title", _to_bool),
    _assign("use_subtitle", _to_bool),
    _assign("use_description", _to_bool),
    _assign("use_duration", _to_bool),
    _assign_if("use_duration", "min_duration", _to_int),
    _assign_if("use_duration", "max_duration", _to_int),
    _assign("use_as_search_timer", _to_int),
    _assign("use_day_of_week", _to_bool),
    _assign("day_of_week", _to_int),
    _assign("use_series_recording", _to_bool),
    _assign("directory", _unescape),
    _assign("priority", _to_int),
    _assign("lifetime", _to_int),
    _assign("margin_start", _to_int),
    _assign("margin_stop", _to_int),
    _assign("use_vps", _to_bool),
    _assign("action", _to_int),
    _assign("use_ext_epg_info", _to_bool),
    _ext_epg_info,
    _assign("avoid_repeats", _to_bool),
    _assign("allowed_repeats", _to_int),
    _assign("compare_title", _to_bool),
    _assign("compare_subtitle", _to_int),
    _assign("compare_summary", _to_bool),
    _assign("compare_categories", _to_int),
    _assign("repeats_within_days", _to_int),
    _assign("del_after_days", _to_int),
    _assign("recordings_keep", _to_int),
    _assign("switch_min_before", _to_int),
    _assign("pause_on_recordings", _to_int),
    _assign("blacklist_mode", _to_int),
    _blacklist,
    _assign("fuzzy_tolerance", _to_int),
    _assign("use_in_favorites", _to_bool),
    _assign("menu_template", _to_int),
    _assign("del_mode", _to_int),
    _assign("del_after_count_recs", _to_int),
    _assign("del_after_days_of_first_rec", _to_int),
    _assign("use_as_search_timer_from", _to_int),
    _assign("use_as_search_timer_til", _to_int),
    _assign("ignore_missing_epg_cats", _to_bool),
)