"""MSET: set several keys to their values at once."""

from __future__ import annotations

from dataclasses import dataclass, field

from respkv.frame import ErrorString, Frame, SimpleString
from respkv.store import Store

WRONG_NUMBER_OF_ARGUMENTS = "ERR wrong number of arguments for command"


@dataclass(frozen=True)
class _PairsCommand:
    """A command over key/value pairs that needs at least one pair."""

    pairs: tuple[tuple[str, bytes], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "pairs", tuple((key, bytes(value)) for key, value in self.pairs)
        )

    def _missing_pairs(self) -> ErrorString | None:
        """Return the error reply when no pairs were given, otherwise None."""
        if not self.pairs:
            return ErrorString(WRONG_NUMBER_OF_ARGUMENTS)
        return None


class Mset(_PairsCommand):
    """Set each key to its value, replacing existing values."""

    def exec(self, store: Store) -> Frame:
        error = self._missing_pairs()
        if error is not None:
            return error
        with store.lock() as locked:
            for key, value in self.pairs:
                locked.set(key, value)
        return SimpleString("OK")