"""A growable string buffer that tracks a simulated allocation size."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_DEFAULT_INITIAL_SIZE = 100
_MIN_INCREASE = 10


class LargeString:
    """An appendable string whose buffer grows in configurable steps.

    The buffer always keeps room for one terminating character, so the
    length is strictly smaller than :meth:`capacity`.
    """

    def __init__(
        self,
        name: str = "",
        initial_size: int = _DEFAULT_INITIAL_SIZE,
        increase_size: int = 0,
        debug_buffer_size: bool = False,
    ) -> None:
        self.name = name or ""
        self._debug = debug_buffer_size
        if initial_size <= 0:
            logger.error("LargeString %s: invalid initial size %d", self.name, initial_size)
            initial_size = _DEFAULT_INITIAL_SIZE
        self._increase = increase_size if increase_size > 0 else max(_MIN_INCREASE, initial_size // 2)
        self._capacity = initial_size
        self._parts: list[str] = []
        self._length = 0
        self._max_size = 0
        self._borrowed = False

    # -- buffer management -------------------------------------------------

    def _enlarge(self, increase: int = 0) -> None:
        increase = max(increase, self._increase, self._capacity // 2)
        self._capacity += increase
        if self._debug:
            logger.warning("LargeString %s: buffer enlarged to %d", self.name, self._capacity)

    def _reserve(self, length: int) -> None:
        new_end = self._length + length
        if new_end < self._capacity:
            return
        self._enlarge(new_end + 1 - self._capacity)

    def _note_max_size(self) -> None:
        self._max_size = max(self._max_size, self._length)

    def _text(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def _push(self, text: str) -> None:
        if text:
            self._reserve(len(text))
            self._parts.append(text)
            self._length += len(text)

    # -- public interface --------------------------------------------------

    def append(self, value: str | int) -> "LargeString":
        """Append a string, a character or the decimal form of an integer."""
        if isinstance(value, bool):
            raise TypeError("cannot append a bool")
        if isinstance(value, int):
            self._push(str(value))
        elif isinstance(value, str):
            self._push(value)
        else:
            raise TypeError(f"cannot append {type(value).__name__}")
        return self

    def borrow_end(self, length: int) -> int:
        """Reserve room for ``length`` characters to be supplied by :meth:`finish_borrow`.

        Returns the number of characters that may be written.
        """
        self._reserve(length)
        self._borrowed = True
        return self._capacity - self._length - 1

    def finish_borrow(self, text: str) -> "LargeString":
        """Commit text written into a borrowed end.

        Text is cut at the first NUL character. Without an open borrow this
        does nothing. Text longer than the reserved room is truncated to fit
        and ValueError is raised.
        """
        if not self._borrowed:
            return self
        self._borrowed = False
        text = text.split("\0", 1)[0]
        available = self._capacity - self._length - 1
        if len(text) > available:
            fitting = text[:available]
            self._parts.append(fitting)
            self._length += len(fitting)
            raise ValueError(
                f"LargeString {self.name}: {len(text)} characters exceed available {available}"
            )
        if text:
            self._parts.append(text)
            self._length += len(text)
        return self

    def clear(self) -> "LargeString":
        """Remove all content, keeping the buffer size."""
        self._note_max_size()
        self._parts = []
        self._length = 0
        self._borrowed = False
        return self

    def erase(self, index: int = 0) -> "LargeString":
        """Truncate the content to at most ``index`` characters."""
        self._note_max_size()
        if index < self._length:
            self._parts = [self._text()[:max(index, 0)]]
            self._length = len(self._parts[0])
        return self

    def capacity(self) -> int:
        """Current size of the buffer, including room for a terminator."""
        return self._capacity

    @property
    def max_size(self) -> int:
        """Largest length seen at a clear or erase, or now."""
        return max(self._max_size, self._length)

    def empty(self) -> bool:
        return self._length == 0

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self._text()

    def __getitem__(self, i: int) -> str:
        return self._text()[i]

    def __repr__(self) -> str:
        return f"LargeString(name={self.name!r}, length={self._length}, capacity={self._capacity})"