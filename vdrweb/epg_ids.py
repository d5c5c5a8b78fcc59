"""DOM ids for EPG events, time helpers and EPG image lookup."""

from __future__ import annotations

import glob
import logging
import os
import time

logger = logging.getLogger(__name__)

_EVENT_PREFIX = "event_"
_ENCODE = str.maketrans(".-", "pm")
_DECODE = str.maketrans("mp", "-.")
_REC_IMAGE_TYPES = ("png", "jpg", "PNG", "JPG")


def encode_dom_id(channel_id: str, event_id: int) -> str:
    """Build an HTML-safe id from a channel id string and an event id."""
    return f"{_EVENT_PREFIX}{channel_id.translate(_ENCODE)}_{int(event_id)}"


def decode_dom_id(epgid: str) -> tuple[str, int]:
    """Split a DOM id into the channel id string and the event id."""
    head, sep, event_str = epgid.rpartition("_")
    if not sep:
        raise ValueError(f"not an EPG id: {epgid!r}")
    if not event_str.isdigit():
        raise ValueError(f"bad event id in {epgid!r}")
    channel_id = head[len(_EVENT_PREFIX):].translate(_DECODE)
    return channel_id, int(event_str)


def duration(start_time: int, end_time: int) -> int:
    """Length of an interval; zero or negative means invalid."""
    return end_time - start_time


def elapsed_time(start_time: int, end_time: int, now: int | None = None) -> int:
    """Percentage of the interval passed at ``now``, or -1 outside it."""
    length = duration(start_time, end_time)
    if length > 0:
        if now is None:
            now = int(time.time())
        if start_time <= now <= end_time:
            return 100 * (now - start_time) // length
    return -1


def _image_id(epgid: str) -> str:
    return epgid.rpartition("_")[2]


def _scan(directory: str, pattern: str) -> list[str]:
    return sorted(glob.glob(os.path.join(glob.escape(directory), pattern)))


def epg_images(epgid: str, image_dir: str) -> list[str]:
    """File names of EPG images for an event in ``image_dir``.

    Images named ``<id>_<anything>.<ext>`` are preferred; otherwise
    ``<id>.<ext>`` is used.
    """
    if not image_dir:
        return []
    image_id = glob.escape(_image_id(epgid))
    for pattern in (image_id + "_*.*", image_id + ".*"):
        found = [os.path.basename(path) for path in _scan(image_dir, pattern)]
        if found:
            return found
    return []


def rec_images(epgid: str, rec_folder: str, link_dir: str = "/tmp") -> list[str]:
    """File names of images in a recording folder.

    Each image is also linked into ``link_dir`` as ``<id>_<name>``.
    """
    if not rec_folder:
        return []
    image_id = _image_id(epgid)
    images: list[str] = []
    for ext in _REC_IMAGE_TYPES:
        for path in _scan(rec_folder, "*." + ext):
            name = os.path.basename(path)
            images.append(name)
            link = os.path.join(link_dir, f"{image_id}_{name}")
            try:
                os.symlink(path, link)
            except FileExistsError:
                pass
            except OSError as exc:
                logger.error("couldn't link %s to %s: %s", path, link, exc)
    return images