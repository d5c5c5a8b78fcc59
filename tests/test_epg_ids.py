import pytest

from vdrweb.epg_ids import (
    decode_dom_id,
    duration,
    elapsed_time,
    encode_dom_id,
    epg_images,
    rec_images,
)


def test_encode_known_value():
    assert encode_dom_id("S19.2E-1-1089-12003", 4711) == "event_S19p2Em1m1089m12003_4711"


@pytest.mark.parametrize(
    "channel, event",
    [("S19.2E-1-1089-12003", 4711), ("C-1-2-3", 0), ("T-8468-514-514", 65535)],
)
def test_round_trip(channel, event):
    encoded = encode_dom_id(channel, event)
    assert encoded.startswith("event_")
    assert encoded.endswith("_" + str(event))
    assert "." not in encoded and "-" not in encoded
    assert decode_dom_id(encoded) == (channel, event)


@pytest.mark.parametrize("bad", ["nounderscore", "event_S19p2E_abc", "event_x_"])
def test_decode_errors(bad):
    with pytest.raises(ValueError):
        decode_dom_id(bad)


def test_duration_sign():
    assert duration(100, 100) == 0
    assert duration(200, 100) < 0
    assert duration(100, 200) > 0


def test_elapsed_time():
    assert elapsed_time(0, 100, 50) == 50
    assert elapsed_time(0, 100, 0) == 0
    assert elapsed_time(0, 100, 100) == 100
    assert elapsed_time(0, 100, 101) == -1
    assert elapsed_time(10, 100, 5) == -1
    assert elapsed_time(100, 100, 100) == -1


def test_epg_images_prefers_distinct_names(tmp_path):
    for name in ("4711_1.png", "4711_0.jpg", "4711.jpg", "other.png"):
        (tmp_path / name).write_bytes(b"x")
    assert epg_images("event_S19p2E_4711", str(tmp_path)) == ["4711_0.jpg", "4711_1.png"]


def test_epg_images_falls_back_to_plain_id(tmp_path):
    (tmp_path / "4711.jpg").write_bytes(b"x")
    (tmp_path / "other.png").write_bytes(b"x")
    assert epg_images("event_S19p2E_4711", str(tmp_path)) == ["4711.jpg"]


def test_epg_images_without_dir():
    assert epg_images("event_S19p2E_4711", "") == []


def test_rec_images_lists_and_links(tmp_path):
    rec = tmp_path / "rec"
    rec.mkdir()
    links = tmp_path / "links"
    links.mkdir()
    for name in ("a.png", "b.jpg", "c.txt"):
        (rec / name).write_bytes(b"x")
    found = rec_images("event_S19p2E_4711", str(rec), str(links))
    assert set(found) == {"a.png", "b.jpg"}
    assert found[0] == "a.png"
    assert (links / "4711_a.png").is_symlink()
    assert (links / "4711_b.jpg").is_symlink()


def test_rec_images_without_folder(tmp_path):
    assert rec_images("event_S19p2E_4711", "", str(tmp_path)) == []