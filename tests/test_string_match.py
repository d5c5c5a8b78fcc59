import pytest

from vdrweb.string_match import StringMatch


def test_empty_pattern_never_matches():
    matcher = StringMatch("")
    assert matcher.matches("") is False
    assert matcher.matches("anything") is False
    assert matcher.valid is False


def test_match_is_caseless():
    assert StringMatch("tagesschau").matches("Die TAGESSCHAU heute") is True


def test_match_is_unanchored_and_can_fail():
    matcher = StringMatch("news$")
    assert matcher.matches("evening news") is True
    assert matcher.matches("news at nine") is False


def test_invalid_pattern_matches_nothing():
    matcher = StringMatch("(")
    assert matcher.valid is False
    assert matcher.matches("(") is False


def test_unicode_caseless():
    assert StringMatch("ärger").matches("GROSSER ÄRGER") is True


@pytest.mark.parametrize(
    "pattern, subject, expected",
    [
        ("^Tatort", "tatort: Krimi", True),
        ("\\d{4}", "Film aus 1984", True),
        ("\\d{4}", "Film aus 84", False),
    ],
)
def test_various_patterns(pattern, subject, expected):
    assert StringMatch(pattern).matches(subject) is expected