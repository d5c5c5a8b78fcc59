"""Plugin version comparison and feature availability."""

from __future__ import annotations

import re
from dataclasses import dataclass

_FACTORS = (100000000, 1000000, 1000, 1)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class SplitVersion:
    """A dotted version number with an optional ``-suffix``."""

    __slots__ = ("version", "suffix")

    def __init__(self, version: str) -> None:
        self.suffix = ""
        number, dash, suffix = version.partition("-")
        if dash:
            self.suffix = suffix
        parts = number.split(".") if number else []
        self.version = sum(_atoi(part) * factor for part, factor in zip(parts, _FACTORS))

    def __lt__(self, other: "SplitVersion") -> bool:
        if not isinstance(other, SplitVersion):
            return NotImplemented
        if self.version == other.version:
            if not other.suffix:
                return False
            return self.suffix < other.suffix
        return self.version < other.version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SplitVersion):
            return NotImplemented
        return self.version == other.version and self.suffix == other.suffix

    def __hash__(self) -> int:
        return hash((self.version, self.suffix))

    def __repr__(self) -> str:
        return f"SplitVersion(version={self.version}, suffix={self.suffix!r})"


@dataclass(frozen=True)
class FeatureSpec:
    """A plugin name and the oldest version that is supported."""

    plugin: str
    min_version: str


EPGSEARCH = FeatureSpec("epgsearch", "0.9.25.beta6")
STREAMDEV_SERVER = FeatureSpec("streamdev-server", "?")
TVSCRAPER = FeatureSpec("tvscraper", "1.1.9")


class Features:
    """Availability of a plugin feature given the installed plugin version.

    ``version`` is the installed plugin's version, or None if it is not loaded.
    """

    def __init__(self, spec: FeatureSpec, version: str | None = None) -> None:
        self.spec = spec
        self._installed = version
        self._version = SplitVersion(self.version)
        self._min_version = SplitVersion(spec.min_version)

    @property
    def version(self) -> str:
        return self._installed if self._installed is not None else ""

    def loaded(self) -> bool:
        return self._installed is not None

    def recent(self) -> bool:
        return not (self._version < self._min_version)

    def min_version(self) -> str:
        return self.spec.min_version

    def __repr__(self) -> str:
        return f"Features({self.spec.plugin!r}, version={self._installed!r})"