from respkv.commands.msetnx import Msetnx
from respkv.frame import ErrorString, Integer
from respkv.store import Store


def test_insert_one():
    store = Store()
    cmd = Msetnx([("key1", b"value1")])

    assert cmd.pairs == (("key1", b"value1"),)
    assert cmd.exec(store) == Integer(1)
    assert store.get("key1") == b"value1"


def test_insert_many():
    store = Store()
    cmd = Msetnx([("key1", b"value1"), ("key2", b"value2"), ("key3", b"value3")])

    assert cmd.exec(store) == Integer(1)
    assert store.get("key1") == b"value1"
    assert store.get("key2") == b"value2"
    assert store.get("key3") == b"value3"


def test_on_existing_keys():
    store = Store()
    store.set("key1", b"1")

    res = Msetnx([("key1", b"value1")]).exec(store)

    assert res == Integer(0)
    assert store.get("key1") == b"1"


def test_one_existing_key_blocks_all():
    store = Store()
    store.set("key2", b"old")

    res = Msetnx([("key1", b"value1"), ("key2", b"value2")]).exec(store)

    assert res == Integer(0)
    assert store.get("key1") is None
    assert store.get("key2") == b"old"


def test_no_keys():
    store = Store()
    cmd = Msetnx([])

    assert cmd.pairs == ()
    assert cmd.exec(store) == ErrorString("ERR wrong number of arguments for command")