from respkv.commands.setnx import Setnx
from respkv.frame import Integer
from respkv.store import Store


def test_when_key_does_not_exist():
    store = Store()
    cmd = Setnx("key1", b"1")

    assert cmd == Setnx(key="key1", value=b"1")
    assert cmd.exec(store) == Integer(1)
    assert store.get("key1") == b"1"


def test_when_key_already_exists():
    store = Store()
    store.set("key1", b"1")

    res = Setnx("key1", b"2").exec(store)

    assert res == Integer(0)
    assert store.get("key1") == b"1"


def test_second_call_does_nothing():
    store = Store()
    cmd = Setnx("key1", b"1")

    assert cmd.exec(store) == Integer(1)
    assert cmd.exec(store) == Integer(0)
    assert store.size() == 1