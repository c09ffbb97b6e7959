"""MSETNX: set several keys at once, only if none of them exists."""

from __future__ import annotations

from respkv.commands.mset import _PairsCommand
from respkv.frame import Frame, Integer
from respkv.store import Store


class Msetnx(_PairsCommand):
    """Set every pair, or none at all if any of the keys already exists."""

    def exec(self, store: Store) -> Frame:
        error = self._missing_pairs()
        if error is not None:
            return error
        with store.lock() as locked:
            if any(locked.exists(key) for key, _ in self.pairs):
                return Integer(0)
            for key, value in self.pairs:
                locked.set(key, value)
        return Integer(1)