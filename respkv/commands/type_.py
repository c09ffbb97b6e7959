"""TYPE: name of the type of the value stored at a key."""

from dataclasses import dataclass

from respkv.frame import SimpleString
from respkv.store import Store


@dataclass(frozen=True)
class Type:
    """Returns ``string`` for stored keys and ``none`` for missing ones.

    Only the string type is supported.
    """

    key: str

    def exec(self, store: Store) -> SimpleString:
        return SimpleString("string" if store.exists(self.key) else "none")