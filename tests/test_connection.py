import asyncio
import socket

import pytest

from respkv.connection import Connection
from respkv.frame import Array, Bulk, ErrorString, Integer, InvalidDataType, Null, SimpleString


def _set_command(key: bytes, value: bytes) -> Array:
    return Array([Bulk(b"SET"), Bulk(key), Bulk(value)])


_SINGLE_FRAMES = [
    pytest.param(b"+OK\r\n", SimpleString("OK"), id="single_string"),
    pytest.param(b"$5\r\nhello\r\n", Bulk(b"hello"), id="bulk_string"),
    pytest.param(
        b"*3\r\n$3\r\nSET\r\n$5\r\nmykey\r\n$7\r\nmyvalue\r\n",
        _set_command(b"mykey", b"myvalue"),
        id="array",
    ),
    pytest.param(b"-Error message\r\n", ErrorString("Error message"), id="simple_error"),
    pytest.param(b":1000\r\n", Integer(1000), id="integer"),
    pytest.param(b"$-1\r\n", Null(), id="null_bulk_string"),
]


async def _connect():
    left, right = socket.socketpair()
    peer_reader, peer_writer = await asyncio.open_connection(sock=left)
    reader, writer = await asyncio.open_connection(sock=right)
    return peer_reader, peer_writer, Connection(reader, writer, ("127.0.0.1", 0))


async def _send(peer_writer, data):
    peer_writer.write(data)
    await peer_writer.drain()


@pytest.mark.asyncio
@pytest.mark.parametrize("payload, expected", _SINGLE_FRAMES)
async def test_parse_single_frame(payload, expected):
    _, peer, conn = await _connect()
    await _send(peer, payload)
    assert await conn.read_frame() == expected


@pytest.mark.asyncio
async def test_parse_multiple_commands_sequentially():
    _, peer, conn = await _connect()
    exchange = [
        (b"+OK\r\n", SimpleString("OK")),
        (b"$5\r\nhello\r\n", Bulk(b"hello")),
        (
            b"*3\r\n$3\r\nSET\r\n$5\r\nmykey_1\r\n$7\r\nmyvalue_1\r\n",
            _set_command(b"mykey_1", b"myvalue_1"),
        ),
        (
            b"*3\r\n$3\r\nSET\r\n$5\r\nmykey_2\r\n$7\r\nmyvalue_2\r\n",
            _set_command(b"mykey_2", b"myvalue_2"),
        ),
        (b"-Error message\r\n", ErrorString("Error message")),
        (b":1000\r\n", Integer(1000)),
    ]
    for payload, _ in exchange:
        await _send(peer, payload)

    received = [await conn.read_frame() for _ in exchange]
    assert received == [expected for _, expected in exchange]


@pytest.mark.asyncio
async def test_parse_incomplete_frame():
    _, peer, conn = await _connect()
    parts = [b"*3\r\n$3\r\nSE", b"T\r\n$5\r\nmyke", b"y\r\n$7\r\nmyvalue\r\n"]

    async def feed():
        for part in parts:
            await _send(peer, part)
            await asyncio.sleep(0.05)

    task = asyncio.create_task(feed())
    frame = await conn.read_frame()
    await task
    assert frame == _set_command(b"mykey", b"myvalue")


@pytest.mark.asyncio
async def test_clean_close_returns_none():
    _, peer, conn = await _connect()
    await _send(peer, b":1\r\n")
    peer.close()
    assert await conn.read_frame() == Integer(1)
    assert await conn.read_frame() is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, error",
    [
        pytest.param(b"$5\r\nhel", ConnectionError, id="close_mid_frame"),
        pytest.param(b"?oops\r\n", InvalidDataType, id="invalid_data_type"),
    ],
)
async def test_bad_input_raises(payload, error):
    _, peer, conn = await _connect()
    await _send(peer, payload)
    if error is ConnectionError:
        peer.close()
    with pytest.raises(error):
        await conn.read_frame()


@pytest.mark.asyncio
async def test_write_frame_reaches_peer():
    peer_reader, _, conn = await _connect()
    frame = _set_command(b"mykey", b"myvalue")
    await conn.write_frame(frame)
    expected = frame.serialize()
    assert await peer_reader.readexactly(len(expected)) == expected


@pytest.mark.asyncio
async def test_close_ends_peer_stream():
    peer_reader, _, conn = await _connect()
    await conn.close()
    assert await peer_reader.read() == b""


@pytest.mark.asyncio
async def test_connection_ids_are_unique_v4():
    first = (await _connect())[2]
    second = (await _connect())[2]
    assert first.id.version == 4
    assert first.id != second.id
    assert first.client_address == ("127.0.0.1", 0)