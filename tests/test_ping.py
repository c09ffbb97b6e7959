from respkv.commands.ping import Ping
from respkv.frame import Bulk
from respkv.store import Store


def test_ping_without_payload_returns_pong():
    assert Ping().exec(Store()) == Bulk(b"PONG")


def test_ping_echoes_payload():
    assert Ping(b"hello world").exec(Store()) == Bulk(b"hello world")


def test_ping_echoes_empty_payload():
    assert Ping(b"").exec(Store()) == Bulk(b"")


def test_ping_wire_format():
    assert Ping().exec(Store()).serialize() == b"$4\r\nPONG\r\n"


def test_ping_leaves_store_untouched():
    store = Store()
    store.set("key1", b"value1")
    Ping(b"x").exec(store)
    assert store.items() == [("key1", b"value1")]