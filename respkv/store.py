"""In-memory key-value store with optional per-key time to live.

Expired keys are purged whenever the store is accessed, so a key is never
observed after its deadline has passed.
"""

from __future__ import annotations

import bisect
import re
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta

NOT_AN_INTEGER = "value is not an integer or out of range"

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Value:
    """Data stored under a key, with its expiry instant on the store's clock."""

    data: bytes
    expires_at: float | None = None


def _decode(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        raise ValueError(NOT_AN_INTEGER) from None


def _parse_int(raw: bytes) -> int:
    text = _decode(raw)
    if not _INT_RE.fullmatch(text):
        raise ValueError(NOT_AN_INTEGER)
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(NOT_AN_INTEGER)
    return value


def _parse_float(raw: bytes) -> float:
    text = _decode(raw)
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(NOT_AN_INTEGER)
    return float(text)


class Store:
    """Thread-safe mapping of string keys to byte values with optional TTLs."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._keys: dict[str, Value] = {}
        self._ttls: list[tuple[float, str]] = []
        self._mutex = threading.RLock()

    @contextmanager
    def lock(self) -> Iterator[Store]:
        """Hold the store's lock for a sequence of operations."""
        with self._mutex:
            yield self

    def set(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key`` without a TTL, dropping any previous one."""
        with self._mutex:
            self.remove(key)
            self._keys[key] = Value(bytes(data))

    def set_with_ttl(self, key: str, data: bytes, ttl: float | timedelta) -> None:
        """Store ``data`` under ``key`` expiring after ``ttl`` seconds."""
        seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
        with self._mutex:
            self.remove(key)
            expires_at = self._clock() + seconds
            self._keys[key] = Value(bytes(data), expires_at)
            bisect.insort(self._ttls, (expires_at, key))

    def get(self, key: str) -> bytes | None:
        with self._mutex:
            self.remove_expired_keys()
            value = self._keys.get(key)
            return None if value is None else value.data

    def get_ttl(self, key: str) -> float | None:
        """Seconds left before ``key`` expires, or None if it has no TTL."""
        with self._mutex:
            self.remove_expired_keys()
            value = self._keys.get(key)
            if value is None or value.expires_at is None:
                return None
            return max(0.0, value.expires_at - self._clock())

    def remove(self, key: str) -> Value | None:
        with self._mutex:
            value = self._keys.pop(key, None)
            if value is not None and value.expires_at is not None:
                self._discard_ttl(value.expires_at, key)
            return value

    def remove_ttl(self, key: str) -> None:
        """Make ``key`` persistent if it currently has a TTL."""
        with self._mutex:
            self.remove_expired_keys()
            value = self._keys.get(key)
            if value is not None and value.expires_at is not None:
                self._discard_ttl(value.expires_at, key)
                self._keys[key] = Value(value.data)

    def exists(self, key: str) -> bool:
        with self._mutex:
            self.remove_expired_keys()
            return key in self._keys

    def size(self) -> int:
        with self._mutex:
            self.remove_expired_keys()
            return len(self._keys)

    def keys(self) -> list[str]:
        with self._mutex:
            self.remove_expired_keys()
            return list(self._keys)

    def items(self) -> list[tuple[str, bytes]]:
        with self._mutex:
            self.remove_expired_keys()
            return [(key, value.data) for key, value in self._keys.items()]

    def incr_by(self, key: str, increment: int | float) -> int | float:
        """Add ``increment`` to the number stored at ``key`` and return the result.

        An integer increment reads the stored value as a 64-bit integer, a float
        increment reads it as a float. A missing key counts as zero. Raises
        ValueError when the stored value cannot be read as that kind of number.
        """
        is_float = isinstance(increment, float)
        with self._mutex:
            current = self.get(key)
            if current is None:
                value: int | float = 0.0 if is_float else 0
            else:
                value = _parse_float(current) if is_float else _parse_int(current)
            value += increment
            if not is_float and not _I64_MIN <= value <= _I64_MAX:
                raise ValueError(NOT_AN_INTEGER)

            as_float = float(value)
            if as_float.is_integer():
                text = f"{as_float:.0f}"
            else:
                text = f"{as_float:.17f}"
            self.set(key, text.encode())
            return float(text) if is_float else int(text)

    def remove_expired_keys(self) -> float | None:
        """Drop every key whose deadline has passed; return the next deadline."""
        with self._mutex:
            now = self._clock()
            while self._ttls and self._ttls[0][0] <= now:
                _, key = self._ttls.pop(0)
                self._keys.pop(key, None)
            return self._ttls[0][0] if self._ttls else None

    def _discard_ttl(self, expires_at: float, key: str) -> None:
        entry = (expires_at, key)
        index = bisect.bisect_left(self._ttls, entry)
        if index < len(self._ttls) and self._ttls[index] == entry:
            del self._ttls[index]