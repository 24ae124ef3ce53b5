import pytest

from utilbox import optional


def test_of_none_or_else_get():
    opt = optional.of(None)
    assert opt.or_else_get(34) == 34


def test_or_else_with_value():
    opt = optional.of("abc")
    assert opt.or_else("x") == "abc"
    assert opt.or_else_get("x") == "abc"
    assert opt.get() == "abc"


def test_get_empty_raises():
    with pytest.raises(ValueError, match="nil value"):
        optional.of(None).get()


def test_of_nillable_returns_shared_empty():
    assert optional.of_nillable(None) is optional.of_nillable(None)
    assert optional.of_nillable(3).get() == 3


def test_map():
    assert optional.of(2).map(lambda v: v * 10).get() == 20
    assert optional.of(2).map(lambda v: None).or_else("empty") == "empty"
    assert optional.of(None).map(lambda v: v * 10).or_else(-1) == -1