import pytest

from respkv.commands.select import Select
from respkv.frame import SimpleString
from respkv.store import Store


@pytest.mark.parametrize("index", [b"0", b"1", b"15"])
def test_select_replies_ok_and_keeps_store(index):
    store = Store()
    store.set("key1", b"value1")
    command = Select(index)

    assert command.exec(store) == SimpleString("OK")
    assert command.index == index
    assert store.get("key1") == b"value1"
    assert store.size() == 1