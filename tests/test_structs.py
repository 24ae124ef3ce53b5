import re
import threading

import pytest

from utilbox import structs


def test_aliases_add_aliases():
    as_ = structs.Aliases()
    as_.add_alias("real", "a")
    as_.add_aliases("real", ["b"])
    as_.add_alias_map({"a1": "real1"})

    assert as_.has_alias("a")
    assert as_.has_alias("b")
    assert as_.has_alias("a1")
    assert not as_.has_alias("xyz")

    assert as_.resolve_alias("a") == "real"
    assert as_.resolve_alias("b") == "real"
    assert as_.resolve_alias("a1") == "real1"
    assert as_.resolve_alias("notExist") == "notExist"
    assert as_.mapping() == {"a": "real", "b": "real", "a1": "real1"}

    with pytest.raises(ValueError) as exc:
        as_.add_alias("real3", "a")
    assert str(exc.value) == "The alias 'a' is already used by 'real'"


def test_aliases_checker():
    pattern = re.compile(r"^[a-zA-Z][\w-]*$")

    def checker(alias):
        if not pattern.match(alias):
            raise ValueError("alias must match: ^[a-zA-Z][\\w-]*$")

    as_ = structs.Aliases(checker)
    with pytest.raises(ValueError) as exc:
        as_.add_alias("real3", "a:b")
    assert str(exc.value) == "alias must match: ^[a-zA-Z][\\w-]*$"
    assert not as_.has_alias("a:b")

    as_.add_alias("real3", "ok-name")
    assert as_.resolve_alias("ok-name") == "real3"


def test_map_data_store():
    md = structs.MapDataStore()
    assert md.value("k") is None
    md.set_value("k", 1)
    assert md.value("k") == 1
    assert md.data() == {"k": 1}

    md.set_data({"x": "y"})
    assert md.value("x") == "y"
    assert md.value("k") is None

    md.clear_data()
    assert md.data() is None
    assert md.value("x") is None
    md.set_value("z", 3)
    assert md.data() == {"z": 3}


def test_map_data_store_locked_concurrent_writes():
    md = structs.MapDataStore()
    md.enable_lock()

    def worker(n):
        for i in range(50):
            md.set_value(f"{n}-{i}", i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(md.data()) == 200
    assert md.value("3-49") == 49


def test_parse_tag_value_ini():
    mp = structs.parse_tag_value_ini("f", "name=int0;shorts=i;required=true;desc=int option message;")
    assert mp == {
        "name": "int0",
        "shorts": "i",
        "required": "true",
        "desc": "int option message",
    }
    assert mp.get_bool("required")


def test_parse_tag_value_ini_keeps_extra_equals():
    assert structs.parse_tag_value_ini("f", "a=b=c") == {"a": "b=c"}


def test_parse_tag_value_ini_empty():
    assert structs.parse_tag_value_ini("f", " ; ") == {}


def test_parse_tag_value_ini_error():
    with pytest.raises(structs.TagParseError) as exc:
        structs.parse_tag_value_ini("Age", "name=x;bad")
    assert str(exc.value) == "parse tag error on field 'Age': item must match `KEY=VAL`"