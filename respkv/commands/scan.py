"""SCAN: iterate over the keyspace (all keys are returned in one pass)."""

from dataclasses import dataclass

from respkv.frame import Array, Bulk
from respkv.store import Store


@dataclass(frozen=True)
class Scan:
    """Return every key at once, with a next cursor of 0."""

    cursor: int

    def exec(self, store: Store) -> Array:
        keys = Array([Bulk(key.encode()) for key in store.keys()])
        return Array([Bulk(b"0"), keys])