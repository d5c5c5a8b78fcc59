import os

from vdrweb.filecache import FileCache, FileObject, live_file_cache


def _write(path, data):
    path.write_bytes(data)
    return str(path)


def test_file_object_load_reads_contents(tmp_path):
    path = _write(tmp_path / "a.css", b"body {}")
    obj = FileObject(path)
    assert obj.load() is True
    assert obj.data == b"body {}"
    assert obj.size() == 7
    assert obj.weight() == obj.size()


def test_file_object_load_missing_file(tmp_path):
    obj = FileObject(str(tmp_path / "missing"))
    assert obj.load() is False
    assert obj.size() == 0


def test_file_object_current_until_removed(tmp_path):
    path = _write(tmp_path / "a.png", b"png")
    obj = FileObject(path)
    obj.load()
    assert obj.is_current() is True
    os.remove(path)
    assert obj.is_current() is False


def test_unloaded_object_is_not_current(tmp_path):
    path = _write(tmp_path / "a.js", b"x")
    assert FileObject(path).is_current() is False


def test_cache_returns_same_object_for_repeated_get(tmp_path):
    path = _write(tmp_path / "a.js", b"alert(1)")
    cache = FileCache(100)
    first = cache.get(path)
    assert first.data == b"alert(1)"
    assert cache.get(path) is first
    assert cache.count() == 1
    assert cache.weight() == len(b"alert(1)")


def test_cache_missing_file_returns_none(tmp_path):
    cache = FileCache(100)
    assert cache.get(str(tmp_path / "nope")) is None
    assert cache.count() == 0


def test_cache_evicts_least_recently_used(tmp_path):
    a = _write(tmp_path / "a", b"aaaaaa")
    b = _write(tmp_path / "b", b"bbbbbb")
    cache = FileCache(10)
    cache.get(a)
    cache.get(b)
    assert cache.count() == 1
    assert cache.weight() == 6
    assert b in cache
    assert a not in cache


def test_cache_keeps_recently_used_entry(tmp_path):
    a = _write(tmp_path / "a", b"aaa")
    b = _write(tmp_path / "b", b"bbb")
    c = _write(tmp_path / "c", b"ccc")
    cache = FileCache(6)
    cache.get(a)
    cache.get(b)
    cache.get(a)
    cache.get(c)
    assert a in cache
    assert c in cache
    assert b not in cache


def test_oversized_file_is_returned_but_not_cached(tmp_path):
    path = _write(tmp_path / "big", b"x" * 50)
    cache = FileCache(10)
    obj = cache.get(path)
    assert obj.size() == 50
    assert cache.count() == 0
    assert cache.weight() == 0


def test_stale_entry_is_dropped(tmp_path):
    path = _write(tmp_path / "a", b"abc")
    cache = FileCache(100)
    cache.get(path)
    os.remove(path)
    assert cache.get(path) is None
    assert cache.count() == 0
    assert cache.weight() == 0


def test_live_file_cache_is_shared():
    cache = live_file_cache()
    assert live_file_cache() is cache
    assert cache.max_weight == 1000000