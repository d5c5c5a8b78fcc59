import pytest

from vdrweb.features import EPGSEARCH, TVSCRAPER, Features, SplitVersion


def test_beta_suffix_without_dash_is_ignored():
    a = SplitVersion("0.9.25.beta6")
    b = SplitVersion("0.9.25")
    assert not (a < b)
    assert not (b < a)
    assert a.version == b.version


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ("1.1.9", "1.1.10", True),
        ("1.1.10", "1.1.9", False),
        ("1.9", "1.10", True),
        ("2.0.0", "1.99.99", False),
        ("1.2.3-rc1", "1.2.3-rc2", True),
        ("1.2.3-rc1", "1.2.3", False),
        ("1.2.3", "1.2.3-rc1", True),
        ("1.2.3", "1.2.3", False),
    ],
)
def test_ordering(left, right, expected):
    assert (SplitVersion(left) < SplitVersion(right)) is expected


def test_suffix_is_split_off():
    v = SplitVersion("1.2.3-rc1")
    assert v.suffix == "rc1"
    assert v == SplitVersion("1.2.3-rc1")


def test_unloaded_plugin():
    f = Features(EPGSEARCH, None)
    assert f.loaded() is False
    assert f.recent() is False
    assert f.version == ""


def test_recent_plugin():
    assert Features(TVSCRAPER, "1.2.0").recent() is True
    assert Features(TVSCRAPER, "1.1.9").recent() is True
    assert Features(TVSCRAPER, "1.1.8").recent() is False


def test_min_version():
    f = Features(EPGSEARCH, "2.4.1")
    assert f.min_version() == "0.9.25.beta6"
    assert f.loaded() is True
    assert f.recent() is True