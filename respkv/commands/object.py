"""OBJECT ENCODING: report the internal encoding of a stored value."""

from dataclasses import dataclass

from respkv.frame import Bulk, Null
from respkv.store import Store


@dataclass(frozen=True)
class Encoding:
    """Every stored value is a raw string; missing keys yield a null."""

    key: str

    def exec(self, store: Store) -> Bulk | Null:
        return Bulk(b"raw") if store.exists(self.key) else Null()