"""SETRANGE: overwrite part of a stored string from an offset on."""

from __future__ import annotations

from dataclasses import dataclass

from respkv.frame import Frame, Integer
from respkv.store import Store

MAX_OFFSET = 536_870_911


class InvalidArgument(ValueError):
    """A command received an argument it cannot accept."""

    def __init__(self, command: str, argument: str) -> None:
        super().__init__(f"invalid argument '{argument}' for command '{command}'")
        self.command = command
        self.argument = argument

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidArgument):
            return NotImplemented
        return (self.command, self.argument) == (other.command, other.argument)

    def __hash__(self) -> int:
        return hash((self.command, self.argument))


@dataclass(frozen=True)
class Setrange:
    """Write ``value`` into the string at ``key`` starting at ``offset``.

    A missing key counts as an empty string; any gap before ``offset`` is
    filled with spaces. The offset must be below 2**29 - 1.
    """

    key: str
    offset: int
    value: bytes

    def __post_init__(self) -> None:
        if not 0 <= self.offset < MAX_OFFSET:
            raise InvalidArgument("SETRANGE", "offset")
        object.__setattr__(self, "value", bytes(self.value))

    def exec(self, store: Store) -> Frame:
        end = self.offset + len(self.value)
        with store.lock() as locked:
            current = locked.get(self.key) or b""
            buffer = bytearray(current)
            if len(buffer) < end:
                buffer.extend(b" " * (end - len(buffer)))
            buffer[self.offset:end] = self.value
            locked.set(self.key, bytes(buffer))
        return Integer(end)