import pytest

from mangen.utils import matches_pattern


@pytest.mark.parametrize(
    "filename, pattern",
    [
        ("file.txt", "*.txt"),
        ("file.txt", "file.txt"),
        ("file.txt", "f?le.txt"),
        ("file.txt", "*"),
        ("", "*"),
        ("", ""),
        ("", "***"),
        ("abc", "a*c"),
        ("abbbc", "a*b*c"),
        ("abc", "a*"),
        ("abc", "*c*"),
        ("a.tar.gz", "*.gz"),
    ],
)
def test_matches(filename, pattern):
    assert matches_pattern(filename, pattern) is True


@pytest.mark.parametrize(
    "filename, pattern",
    [
        ("file.log", "*.txt"),
        ("file.txt", "file"),
        ("a", ""),
        ("", "a"),
        ("", "?"),
        ("abc", "a?"),
        ("abc", "b*"),
        ("abcd", "a*c"),
        ("File.txt", "file.txt"),
    ],
)
def test_does_not_match(filename, pattern):
    assert matches_pattern(filename, pattern) is False


def test_none_pattern_never_matches():
    assert matches_pattern("file.txt", None) is False


def test_none_filename_never_matches():
    assert matches_pattern(None, "*") is False


def test_question_mark_needs_exactly_one_char():
    assert matches_pattern("ab", "a?") is True
    assert matches_pattern("a", "a?") is False
    assert matches_pattern("abc", "a?") is False