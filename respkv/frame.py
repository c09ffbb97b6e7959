"""RESP frames: parsing from bytes and serialization back to bytes."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

CRLF = b"\r\n"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class FrameError(Exception):
    """Raised when bytes cannot be turned into a frame."""


class IncompleteFrame(FrameError):
    """Not enough data is available to parse an entire frame."""

    def __init__(self) -> None:
        super().__init__("not enough data is available to parse an entire frame")


class InvalidDataType(FrameError):
    """The first byte of a frame names no known data type."""

    def __init__(self, byte: int) -> None:
        super().__init__(f"invalid frame data type: {byte}")
        self.byte = byte


class DataType(Enum):
    """RESP data types, keyed by their leading byte."""

    SIMPLE_STRING = ord("+")
    BULK_STRING = ord("$")
    VERBATIM_STRING = ord("=")
    SIMPLE_ERROR = ord("-")
    BULK_ERROR = ord("!")
    BOOLEAN = ord("#")
    INTEGER = ord(":")
    DOUBLE = ord(",")
    BIG_NUMBER = ord("(")
    ARRAY = ord("*")
    MAP = ord("%")
    SET = ord("~")
    PUSH = ord(">")
    NULL = ord("_")

    @classmethod
    def from_byte(cls, byte: int) -> DataType:
        try:
            return cls(byte)
        except ValueError:
            raise InvalidDataType(byte) from None

    @property
    def marker(self) -> bytes:
        return bytes([self.value])


def _prefixed(data_type: DataType, count: int) -> bytes:
    return data_type.marker + str(count).encode() + CRLF


class Frame(ABC):
    """Base class of all RESP frames."""

    @abstractmethod
    def serialize(self) -> bytes:
        """Return the wire form of the frame."""

    def __bytes__(self) -> bytes:
        return self.serialize()

    @abstractmethod
    def __str__(self) -> str:
        """Return a readable form of the frame."""


class _LineFrame(Frame):
    """A frame whose whole content sits on one line after its marker."""

    data_type: ClassVar[DataType]
    value: object

    def serialize(self) -> bytes:
        return self.data_type.marker + str(self.value).encode() + CRLF

    def __str__(self) -> str:
        return chr(self.data_type.value) + str(self.value)


class _NullFrame(Frame):
    """One of the fixed null forms."""

    _wire: ClassVar[bytes]
    _display: ClassVar[str]

    def serialize(self) -> bytes:
        return self._wire

    def __str__(self) -> str:
        return self._display


@dataclass(frozen=True)
class SimpleString(_LineFrame):
    value: str
    data_type: ClassVar[DataType] = DataType.SIMPLE_STRING


@dataclass(frozen=True)
class ErrorString(_LineFrame):
    value: str
    data_type: ClassVar[DataType] = DataType.SIMPLE_ERROR


@dataclass(frozen=True)
class Integer(_LineFrame):
    value: int
    data_type: ClassVar[DataType] = DataType.INTEGER


@dataclass(frozen=True)
class Bulk(Frame):
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def serialize(self) -> bytes:
        return _prefixed(DataType.BULK_STRING, len(self.data)) + self.data + CRLF

    def __str__(self) -> str:
        return "$" + self.data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Array(Frame):
    items: tuple[Frame, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def serialize(self) -> bytes:
        body = b"".join(item.serialize() for item in self.items)
        return _prefixed(DataType.ARRAY, len(self.items)) + body

    def __str__(self) -> str:
        return f"*{len(self.items)}\r\n" + "".join(f"{item}\r\n" for item in self.items)


@dataclass(frozen=True)
class Null(_NullFrame):
    _wire: ClassVar[bytes] = DataType.NULL.marker + CRLF
    _display: ClassVar[str] = "$-1"


@dataclass(frozen=True)
class NullBulkString(_NullFrame):
    _wire: ClassVar[bytes] = _prefixed(DataType.BULK_STRING, -1)
    _display: ClassVar[str] = "$-1"


@dataclass(frozen=True)
class NullArray(_NullFrame):
    _wire: ClassVar[bytes] = _prefixed(DataType.ARRAY, -1)
    _display: ClassVar[str] = "*-1"


_TEXT_FRAMES = {
    DataType.SIMPLE_STRING: SimpleString,
    DataType.SIMPLE_ERROR: ErrorString,
}

_SUPPORTED = frozenset(
    {
        DataType.SIMPLE_STRING,
        DataType.SIMPLE_ERROR,
        DataType.INTEGER,
        DataType.BULK_STRING,
        DataType.BULK_ERROR,
        DataType.ARRAY,
        DataType.NULL,
    }
)


def _line(data: bytes, pos: int) -> tuple[bytes, int]:
    end = data.find(CRLF, pos)
    if end == -1:
        raise IncompleteFrame()
    return data[pos:end], end + len(CRLF)


def _text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        raise FrameError("protocol error; invalid frame format") from None


def _integer(raw: bytes) -> int:
    text = _text(raw)
    if not _INT_RE.fullmatch(text):
        raise FrameError(
            "invalid digit found in string" if text else "cannot parse integer from empty string"
        )
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise FrameError("number too large to fit in target type")
    return value


def _parse_items(data: bytes, pos: int, length: int) -> tuple[Frame, int]:
    if length < 0:
        raise FrameError("invalid array length")
    items = []
    for _ in range(length):
        item, pos = parse_frame(data, pos)
        items.append(item)
    return Array(items), pos


def parse_frame(data: bytes, pos: int = 0) -> tuple[Frame, int]:
    """Parse one frame from ``data`` at ``pos``; return it and the position after it."""
    if pos >= len(data):
        raise IncompleteFrame()
    data_type = DataType.from_byte(data[pos])
    if data_type not in _SUPPORTED:
        raise FrameError(f"unsupported data type: {data_type.name}")

    head, pos = _line(data, pos + 1)
    if data_type in _TEXT_FRAMES:
        return _TEXT_FRAMES[data_type](_text(head)), pos
    if data_type is DataType.INTEGER:
        return Integer(_integer(head)), pos
    if data_type is DataType.NULL:
        return Null(), pos

    # Length-prefixed types; -1 stands for null (the protocol has no null bulk error,
    # so it is read the same way).
    length = _integer(head)
    if length == -1:
        return Null(), pos
    if data_type is DataType.ARRAY:
        return _parse_items(data, pos, length)
    payload, pos = _line(data, pos)
    if data_type is DataType.BULK_STRING:
        return Bulk(payload), pos
    return ErrorString(_text(payload)), pos