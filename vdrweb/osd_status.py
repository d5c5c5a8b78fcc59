"""Mirror of the on-screen display, rendered as HTML for the web remote control."""

from __future__ import annotations

import time
from dataclasses import dataclass

MAX_TABS = 6

_HTML_ESCAPES = {"<": "&lt;", ">": "&gt;", "&": "&amp;", '"': "&quot;"}
_CLOCKS_PER_SEC = 1_000_000


def encode_html(html: str, stop_at_tab: bool = False) -> str:
    """Escape ``<``, ``>``, ``&`` and ``"``; optionally stop at the first tab."""
    if stop_at_tab:
        html = html.split("\t", 1)[0]
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in html)


def _div(css_class: str, content: str) -> str:
    return f'<div class="{css_class}">{content}</div>' if content else ""


@dataclass
class OsdItem:
    """One line of an OSD menu."""

    text: str = ""
    selected: bool = False


class OsdStatusMonitor:
    """Collects what the OSD shows and renders it as HTML."""

    def __init__(self) -> None:
        self.title = ""
        self.message = ""
        self.red = ""
        self.green = ""
        self.yellow = ""
        self.blue = ""
        self.text = ""
        self.selected = -1
        self.items: list[OsdItem] = []
        self.tabs = [0] * MAX_TABS
        self.last_update = 0

    def _mark_updated(self) -> None:
        self.last_update = int(time.process_time() * _CLOCKS_PER_SEC)

    # -- OSD events ------------------------------------------------------

    def osd_clear(self) -> None:
        """Forget everything the OSD showed."""
        self.title = self.message = self.text = ""
        self.red = self.green = self.yellow = self.blue = ""
        self.items = []
        self.selected = -1
        self.tabs = [0] * MAX_TABS
        self._mark_updated()

    def osd_title(self, title: str | None) -> None:
        self.title = title or ""
        self._mark_updated()

    def osd_status_message(self, message: str | None) -> None:
        self.message = message or ""
        self._mark_updated()

    def osd_help_keys(
        self, red: str | None, green: str | None, yellow: str | None, blue: str | None
    ) -> None:
        self.red = red or ""
        self.green = green or ""
        self.yellow = yellow or ""
        self.blue = blue or ""
        self._mark_updated()

    def osd_text_item(self, text: str | None, scroll: bool = False) -> None:
        self.text = text or ""
        self._mark_updated()

    def osd_item(self, text: str | None, index: int = 0) -> None:
        """Add a menu line, widening the tab columns it needs."""
        text = text or ""
        columns = text.split("\t")[:-1][:MAX_TABS]
        for col, column in enumerate(columns):
            self.tabs[col] = max(self.tabs[col], len(column) + 1)
        self.items.append(OsdItem(text))
        self._mark_updated()

    def osd_current_item(self, text: str | None) -> None:
        """Mark the line showing ``text`` as selected.

        Among equal lines the one nearest to the previous selection wins. If
        no line matches, the selected line's text has changed.
        """
        text = text or ""
        best = -1
        dist = len(self.items)
        current_item: OsdItem | None = None
        best_item: OsdItem | None = None
        for i, item in enumerate(self.items):
            if i == self.selected:
                current_item = item
            if item.text == text:
                if abs(i - self.selected) < dist:
                    best, best_item, dist = i, item, abs(i - self.selected)
                elif self.selected < 0:
                    best, best_item = i, item
                    break
                else:
                    break
        if best_item is not None:
            self.selected = best
            best_item.selected = True
            if current_item is not None and current_item is not best_item:
                current_item.selected = False
                self._mark_updated()
        elif current_item is not None:
            current_item.text = text
            self._mark_updated()

    # -- HTML rendering --------------------------------------------------

    def title_html(self) -> str:
        return _div("osdTitle", encode_html(self.title))

    def message_html(self) -> str:
        return _div("osdMessage", encode_html(self.message))

    def text_html(self) -> str:
        return _div("osdText", encode_html(self.text))

    def buttons_html(self) -> str:
        buttons = "".join(
            _div(css, encode_html(label))
            for css, label in (
                ("osdButtonRed", self.red),
                ("osdButtonGreen", self.green),
                ("osdButtonYellow", self.yellow),
                ("osdButtonBlue", self.blue),
            )
        )
        return _div("osdButtons", buttons)

    def items_html(self) -> str:
        body = "".join(
            f'<div class="osdItem{" selected" if item.selected else ""}">'
            f"{encode_html(item.text)}</div>"
            for item in self.items
        )
        return _div("osdItems", body)

    def html(self) -> str:
        """The whole OSD as one HTML fragment."""
        return (
            f'<div class="osd" data-time="{self.last_update}">'
            + self.title_html()
            + self.items_html()
            + self.text_html()
            + self.message_html()
            + self.buttons_html()
            + "</div>"
        )