import pytest

from utilbox import strcheck


def test_is_alphabet():
    assert not strcheck.is_alphabet("9")
    assert not strcheck.is_alphabet("+")
    for ch in "AaZz":
        assert strcheck.is_alphabet(ch)


def test_is_alpha_num():
    assert not strcheck.is_alpha_num("+")
    for ch in "9AaZz_":
        assert strcheck.is_alpha_num(ch)


def test_is_numeric():
    assert strcheck.is_numeric("0")
    assert not strcheck.is_numeric("x")


def test_equal():
    assert strcheck.equal("a", "a")
    assert not strcheck.equal("a", "b")
    assert strcheck.equal("ABC", "abc")


def test_len():
    text = "Hello, 世界"
    assert strcheck.length("Hello, ") == 7
    assert strcheck.length(text) == 13
    assert strcheck.utf8_len(text) == 9


def test_str_pos():
    assert strcheck.str_pos("xyz", "a") == -1
    assert strcheck.str_pos("xyz", "x") == 0
    assert strcheck.str_pos("xyz", "z") == 2


def test_rune_pos():
    assert strcheck.rune_pos("xyz", "a") == -1
    assert strcheck.rune_pos("xyz", "x") == 0
    assert strcheck.rune_pos("xyz", "z") == 2
    assert strcheck.rune_pos("hi时间", "间") == 5


def test_byte_pos():
    assert strcheck.byte_pos("xyz", "a") == -1
    assert strcheck.byte_pos("xyz", "x") == 0
    assert strcheck.byte_pos("xyz", "z") == 2
    with pytest.raises(ValueError):
        strcheck.byte_pos("hi时间", "间")


@pytest.mark.parametrize(
    "give, sub, want", [("abc", "a", True), ("abc", "d", False)]
)
def test_is_start_of(give, sub, want):
    assert strcheck.has_prefix(give, sub) is want
    assert strcheck.is_start_of(give, sub) is want


def test_is_starts_of():
    assert strcheck.is_starts_of("abc", ["a", "b"])
    assert not strcheck.has_one_prefix("abc", ["x", "b"])


@pytest.mark.parametrize(
    "give, sub, want",
    [("abc", "c", True), ("abc", "d", False), ("some.json", ".json", True)],
)
def test_is_end_of(give, sub, want):
    assert strcheck.has_suffix(give, sub) is want
    assert strcheck.is_end_of(give, sub) is want


def test_is_space():
    assert strcheck.is_space(" ")
    assert strcheck.is_space("\n")
    assert strcheck.is_space_rune("\n")
    assert strcheck.is_space_rune("\t")
    assert not strcheck.is_space("a")

    assert not strcheck.is_blank(" a ")
    assert strcheck.is_not_blank(" a ")
    assert not strcheck.is_empty(" ")
    assert strcheck.is_empty("")
    assert strcheck.is_blank(" ")
    assert strcheck.is_blank("   ")
    assert not strcheck.is_not_blank("   ")

    assert not strcheck.is_blank_bytes(b" a ")
    assert strcheck.is_blank_bytes(b" ")
    assert strcheck.is_blank_bytes(b"   ")


def test_is_space_rune_unicode():
    assert strcheck.is_space_rune("\u00a0")
    assert not strcheck.is_space_rune("\x1c")


def test_is_symbol():
    assert not strcheck.is_symbol("a")
    assert strcheck.is_symbol("●")


def test_has_one_sub():
    assert not strcheck.has_one_sub("h3ab2c", ["d"])
    assert strcheck.has_one_sub("h3ab2c", ["ab"])


def test_has_all_subs():
    assert not strcheck.has_all_subs("h3ab2c", ["a", "d"])
    assert strcheck.has_all_subs("h3ab2c", ["a", "b"])


def test_valid_utf8_string():
    assert strcheck.valid_utf8_string("Hello, 世界")
    assert not strcheck.valid_utf8_string(b"\xff\xfe")
    assert not strcheck.valid_utf8_string("\ud800")