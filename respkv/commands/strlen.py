"""STRLEN: length of the string stored at a key."""

from dataclasses import dataclass

from respkv.frame import Integer
from respkv.store import Store


@dataclass(frozen=True)
class Strlen:
    """Length in bytes of the value at ``key``; 0 when the key is missing."""

    key: str

    def exec(self, store: Store) -> Integer:
        return Integer(len(store.get(self.key) or b""))