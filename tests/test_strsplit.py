import pytest

from utilbox import strsplit


def test_cut():
    text = "hi,inhere"
    assert strsplit.cut(text, ",") == ("hi", "inhere", True)
    assert strsplit.must_cut(text, ",") == ("hi", "inhere")
    assert strsplit.cut(text, "-") == (text, "", False)


def test_split():
    assert strsplit.split("a, , b,c", ",") == ["a", "b", "c"]
    assert strsplit.split_valid("a, , b,c", ",") == ["a", "b", "c"]
    assert strsplit.split_n("a, , b,c", ",", 3) == ["a", "b", "c"]
    assert strsplit.split_n("a, , b,c", ",", 2) == ["a", "b,c"]
    assert strsplit.split_n_valid("a, , b,c", ",", 2) == ["a", "b,c"]
    assert strsplit.split(" ", ",") == []


def test_split_trimmed():
    assert strsplit.split_trimmed("a, , b,c", ",") == ["a", "", "b", "c"]
    assert strsplit.split_n_trimmed("a, , b,c", ",", 2) == ["a", ", b,c"]


def test_split_n_trimmed_zero_parts():
    assert strsplit.split_n_trimmed("a,b", ",", 0) == []


@pytest.mark.parametrize(
    "text, pos, length, want",
    [
        ("abcDef", 0, 3, "abc"),
        ("abcDef", 2, 2, "cD"),
        ("abcDef", 2, 0, "cDef"),
        ("abcDEF", 23, 5, ""),
        ("abcDEF123", 2, -1, "cDEF12"),
        ("abcDEF123", 2, -3, "cDEF"),
    ],
)
def test_substr(text, pos, length, want):
    assert strsplit.substr(text, pos, length) == want


def test_substr_counts_characters():
    assert strsplit.substr("中文abc", 1, 2) == "文a"


def test_substr_invalid_bounds():
    with pytest.raises(IndexError):
        strsplit.substr("abc", -1, 1)
    with pytest.raises(IndexError):
        strsplit.substr("abc", 2, -3)