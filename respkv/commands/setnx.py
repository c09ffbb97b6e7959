"""SETNX: set a key only if it does not exist yet."""

from __future__ import annotations

from dataclasses import dataclass

from respkv.frame import Frame, Integer
from respkv.store import Store


@dataclass(frozen=True)
class Setnx:
    """Set ``key`` to ``value`` unless it already holds a value."""

    key: str
    value: bytes

    def exec(self, store: Store) -> Frame:
        with store.lock() as locked:
            if locked.get(self.key) is not None:
                return Integer(0)
            locked.set(self.key, self.value)
        return Integer(1)