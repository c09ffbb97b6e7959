"""PING: reply PONG, or echo the given payload."""

from dataclasses import dataclass

from respkv.frame import Bulk
from respkv.store import Store


@dataclass(frozen=True)
class Ping:
    """Returns PONG if no payload is given, otherwise a copy of the payload."""

    payload: bytes | None = None

    def exec(self, store: Store) -> Bulk:
        return Bulk(b"PONG" if self.payload is None else self.payload)