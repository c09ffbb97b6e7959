"""TTL: remaining time to live of a key, in whole seconds."""

from dataclasses import dataclass

from respkv.frame import Integer
from respkv.store import Store


@dataclass(frozen=True)
class Ttl:
    """Seconds left for ``key``; -1 if it has no expiry, -2 if it is missing."""

    key: str

    def exec(self, store: Store) -> Integer:
        with store.lock() as locked:
            remaining = locked.get_ttl(self.key)
            if remaining is None:
                return Integer(-1 if locked.exists(self.key) else -2)
        return Integer(int(remaining))