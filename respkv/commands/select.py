"""SELECT: switch logical database (accepted, but there is only one)."""

from dataclasses import dataclass

from respkv.frame import SimpleString
from respkv.store import Store


@dataclass(frozen=True)
class Select:
    """Select a logical database by index; the index is kept as raw bytes."""

    index: bytes

    def exec(self, store: Store) -> SimpleString:
        return SimpleString("OK")