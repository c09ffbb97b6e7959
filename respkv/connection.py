"""A client connection that reads RESP frames from an asyncio stream."""

from __future__ import annotations

import asyncio
import uuid
from typing import Any

from respkv.frame import Frame, IncompleteFrame, parse_frame

_READ_SIZE = 64 * 1024


class Connection:
    """Wraps a stream pair, decoding incoming bytes into frames."""

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        client_address: Any,
    ) -> None:
        self.id = uuid.uuid4()
        self.client_address = client_address
        self.reader = reader
        self.writer = writer
        self._buffer = bytearray()

    async def read_frame(self) -> Frame | None:
        """Return the next frame, or None once the peer has closed cleanly.

        Raises ConnectionError if the stream ends in the middle of a frame, and
        FrameError if the bytes are not a valid frame.
        """
        while True:
            if self._buffer:
                try:
                    frame, end = parse_frame(bytes(self._buffer))
                except IncompleteFrame:
                    pass
                else:
                    del self._buffer[:end]
                    return frame

            chunk = await self.reader.read(_READ_SIZE)
            if not chunk:
                if self._buffer:
                    raise ConnectionError("bytes remaining on stream")
                return None
            self._buffer += chunk

    async def write_frame(self, frame: Frame) -> None:
        self.writer.write(frame.serialize())
        await self.writer.drain()

    async def close(self) -> None:
        self.writer.close()
        await self.writer.wait_closed()