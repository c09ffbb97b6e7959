"""SET: store a string value, with optional expiry, condition and GET."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from respkv.frame import Bulk, Frame, NullBulkString, SimpleString
from respkv.store import Store


class SetBehavior(Enum):
    """Condition under which SET writes the value."""

    NX = "NX"  # only set the key if it does not already exist
    XX = "XX"  # only set the key if it already exists


class TtlKind(Enum):
    """The expiry options SET accepts."""

    EX = "EX"
    PX = "PX"
    EXAT = "EXAT"
    PXAT = "PXAT"
    KEEPTTL = "KEEPTTL"  # retain the time to live associated with the key


@dataclass(frozen=True)
class Ttl:
    """An expiry option together with its numeric argument."""

    kind: TtlKind
    value: int = 0

    def duration(self) -> timedelta:
        """Time to live this option stands for.

        EXAT, PXAT and KEEPTTL are not resolved yet and count as one second.
        """
        if self.kind is TtlKind.EX:
            return timedelta(seconds=self.value)
        if self.kind is TtlKind.PX:
            return timedelta(milliseconds=self.value)
        return timedelta(seconds=1)


@dataclass(frozen=True)
class Set:
    """Set ``key`` to hold ``value``, overwriting whatever it held before."""

    key: str
    value: bytes
    ttl: Ttl | None = None
    behavior: SetBehavior | None = None
    get: bool = False

    def exec(self, store: Store) -> Frame:
        with store.lock() as locked:
            previous = locked.get(self.key)

            if self.behavior is SetBehavior.NX and previous is not None:
                return NullBulkString()
            if self.behavior is SetBehavior.XX and previous is None:
                return NullBulkString()

            if self.ttl is None:
                locked.set(self.key, self.value)
            else:
                locked.set_with_ttl(self.key, self.value, self.ttl.duration())

        if self.get:
            return NullBulkString() if previous is None else Bulk(previous)
        return SimpleString("OK")