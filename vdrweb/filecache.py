"""A size-bounded cache of file contents that notices changed files."""

from __future__ import annotations

import logging
import os
import sys
import threading
from collections import OrderedDict

logger = logging.getLogger(__name__)

_NEVER = sys.maxsize


def _file_time(path: str) -> int:
    try:
        return int(os.stat(path).st_ctime)
    except OSError:
        return 0


class FileObject:
    """The contents of one file together with its change time."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.ctime = _NEVER
        self.data = b""

    def load(self) -> bool:
        """Read the file; return False if it cannot be read."""
        try:
            with open(self.path, "rb") as handle:
                data = handle.read()
        except OSError:
            return False
        self.ctime = _file_time(self.path)
        self.data = data
        return True

    def is_current(self) -> bool:
        """True if the file has not changed since it was loaded."""
        return self.ctime == _file_time(self.path)

    def size(self) -> int:
        return len(self.data)

    def weight(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"FileObject({self.path!r}, size={self.size()})"


class FileCache:
    """Least-recently-used cache of files, limited by total size in bytes."""

    def __init__(self, max_weight: int) -> None:
        self.max_weight = max_weight
        self._entries: OrderedDict[str, FileObject] = OrderedDict()
        self._weight = 0
        self._lock = threading.Lock()

    def _remove(self, key: str) -> None:
        entry = self._entries.pop(key)
        self._weight -= entry.weight()

    def get(self, key: str) -> FileObject | None:
        """Return the file at path ``key``, loading it if missing or stale.

        Returns None if the file cannot be read. A file heavier than the
        whole cache is returned but not kept.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                if entry.is_current():
                    self._entries.move_to_end(key)
                    return entry
                self._remove(key)

            entry = FileObject(key)
            if not entry.load():
                return None
            if entry.weight() > self.max_weight:
                logger.debug("file %s too large for cache", key)
                return entry
            while self._entries and self._weight + entry.weight() > self.max_weight:
                self._remove(next(iter(self._entries)))
            self._entries[key] = entry
            self._weight += entry.weight()
            return entry

    def count(self) -> int:
        """Number of cached files."""
        return len(self._entries)

    def weight(self) -> int:
        """Total size of cached files in bytes."""
        return self._weight

    def __contains__(self, key: object) -> bool:
        return key in self._entries


_live_cache: FileCache | None = None
_live_lock = threading.Lock()


def live_file_cache() -> FileCache:
    """The shared cache used by the web server."""
    global _live_cache
    with _live_lock:
        if _live_cache is None:
            _live_cache = FileCache(1000000)
        return _live_cache