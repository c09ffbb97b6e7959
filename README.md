# respkv

`respkv` is a small, readable in-memory key-value store built around the
RESP serialization protocol. It favours clarity over speed and works with
string values only.

It has no dependencies beyond the standard library. The tests use pytest
and pytest-asyncio, available through the `test` extra.

## Modules

- `respkv.frame`: the `Frame` family (`SimpleString`, `ErrorString`,
  `Integer`, `Bulk`, `Array`, `Null`, `NullBulkString`, `NullArray`), the
  `DataType` enum and `parse_frame` for decoding.
- `respkv.store`: `Store`, a thread-safe map from string keys to byte values
  with optional per-key time to live, and the `Value` record it keeps.
- `respkv.connection`: `Connection`, which reads frames from an asyncio
  stream and writes frames back.
- `respkv.commands`: one module per command. Each command is a small
  immutable object with an `exec(store)` method that returns the reply as a
  `Frame`.
- `respkv.lcs`: `lcs(a, b)`, the longest common subsequence of two strings.

## Frames

Every frame knows its wire form through `serialize()` or `bytes()`:

```python
from respkv.frame import Array, Bulk, Integer, SimpleString

bytes(SimpleString("OK"))          # b"+OK\r\n"
Integer(1000).serialize()          # b":1000\r\n"
Array([Bulk(b"hello")]).serialize()  # b"*1\r\n$5\r\nhello\r\n"
```

`parse_frame(data, pos=0)` reads one frame from `data` at `pos` and returns
the frame together with the position just after it:

```python
from respkv.frame import parse_frame

frame, end = parse_frame(b"*2\r\n:1\r\n+Hello\r\n")
# frame == Array([Integer(1), SimpleString("Hello")]), end == 16
```

Decoding rules:

- Simple strings, simple errors, integers, bulk strings, bulk errors,
  arrays and the `_` null type are understood. A bulk error decodes to an
  `ErrorString`.
- A length of `-1` on a bulk string, bulk error or array decodes to `Null`.
- Input that stops before a frame is complete raises `IncompleteFrame`; a
  first byte that is no RESP type raises `InvalidDataType`. Other malformed
  input, including the RESP3 types that are recognised but not decoded
  (booleans, doubles, big numbers, verbatim strings, maps, sets, pushes),
  raises `FrameError`, the base of both.

## Store

```python
from respkv.store import Store

store = Store()
store.set("greeting", b"hello")
store.get("greeting")            # b"hello"
store.set_with_ttl("session", b"x", 10)   # seconds, or a timedelta
store.get_ttl("session")         # seconds remaining, as a float

store.incr_by("counter", 5)      # 5, stored as b"5"
store.incr_by("ratio", 1.5)      # 1.5
```

- Expired keys are dropped whenever the store is read, so a key is never
  seen after its deadline. `remove_expired_keys()` does this on demand and
  returns the next deadline, or `None`.
- `incr_by` reads the stored value as a 64-bit integer for an `int`
  increment and as a float for a `float` increment; a missing key counts as
  zero. A value that cannot be read, or an integer result outside the
  64-bit range, raises `ValueError("value is not an integer or out of
  range")`.
- `remove_ttl(key)` makes a key persistent. `set` always clears any earlier
  expiry.
- `with store.lock() as locked:` holds the store's lock across several
  operations.
- The clock is injectable: `Store(clock=...)` takes any callable that
  returns seconds, which makes expiry easy to test.

## Commands

```python
from respkv.commands.set_ import Set, SetBehavior, Ttl, TtlKind
from respkv.commands.strlen import Strlen
from respkv.store import Store

store = Store()
Set("key1", b"hello", ttl=Ttl(TtlKind.EX, 100)).exec(store)  # SimpleString("OK")
Strlen("key1").exec(store)                                  # Integer(5)
Set("key1", b"x", behavior=SetBehavior.NX).exec(store)      # NullBulkString()
```

| Class | Module | Reply |
| --- | --- | --- |
| `Ping(payload=None)` | `commands.ping` | `Bulk(b"PONG")`, or the payload echoed |
| `Select(index)` | `commands.select` | always `SimpleString("OK")` |
| `Scan(cursor)` | `commands.scan` | `Array([Bulk(b"0"), Array(all keys)])` |
| `Encoding(key)` | `commands.object` | `Bulk(b"raw")`, or `Null()` for a missing key |
| `Set(key, value, ttl, behavior, get)` | `commands.set_` | see below |
| `Setnx(key, value)` | `commands.setnx` | `Integer(1)` if written, `Integer(0)` if the key existed |
| `Setrange(key, offset, value)` | `commands.setrange` | `Integer(offset + len(value))` |
| `Mset(pairs)` | `commands.mset` | `SimpleString("OK")` |
| `Msetnx(pairs)` | `commands.msetnx` | `Integer(1)` if all were written, `Integer(0)` if any key existed |
| `Strlen(key)` | `commands.strlen` | length of the value, `0` for a missing key |
| `Ttl(key)` | `commands.ttl` | whole seconds left, `-1` without expiry, `-2` for a missing key |
| `Type(key)` | `commands.type_` | `SimpleString("string")` or `SimpleString("none")` |

Details:

- `Set` with `SetBehavior.NX` writes only when the key is missing,
  `SetBehavior.XX` only when it exists; otherwise it replies
  `NullBulkString()`. With `get=True` it replies with the previous value,
  or `NullBulkString()` if there was none.
- `Ttl(TtlKind.EX, n)` expires after `n` seconds and `Ttl(TtlKind.PX, n)`
  after `n` milliseconds. `EXAT`, `PXAT` and `KEEPTTL` are accepted but
  not resolved yet: each counts as one second.
- The TTL option class in `commands.set_` and the TTL command in
  `commands.ttl` are both named `Ttl`; import them from their modules.
- `Mset` and `Msetnx` take a sequence of `(key, value)` pairs. With no
  pairs they reply `ErrorString("ERR wrong number of arguments for
  command")`.
- `Setrange` treats a missing key as an empty string and pads any gap
  before the offset with spaces. An offset below 0 or of 536870911 and
  above raises `InvalidArgument` when the command is built.

## Connections

`Connection(reader, writer, client_address)` wraps an asyncio stream pair
and gets a random `id`. `await read_frame()` buffers incoming bytes until a
whole frame has arrived and returns it, or `None` once the peer has closed
cleanly; a stream that ends in the middle of a frame raises
`ConnectionError`. `await write_frame(frame)` sends a frame and
`await close()` closes the writer.

```python
import asyncio
from respkv.connection import Connection

async def read_one(host, port):
    reader, writer = await asyncio.open_connection(host, port)
    conn = Connection(reader, writer, (host, port))
    try:
        return await conn.read_frame()
    finally:
        await conn.close()
```

## Longest common subsequence

```python
from respkv.lcs import lcs

lcs("abcdgh", "aedfhr")   # "adh"
lcs("aggtab", "gxtxayb")  # "gtab"
```

## What it does not do

- There is no server: nothing listens on a port, accepts clients or runs a
  request loop. `Connection` only reads and writes frames on a stream you
  open yourself.
- There is no dispatcher that turns an incoming `Array` frame into a
  command object; commands are built directly from Python values.
- Only the commands listed above exist. There are no GET, DEL, EXISTS,
  INCR/DECR, APPEND, GETRANGE, KEYS or MGET commands, although `Store`
  offers the reads, removals and increments they would need.
- Data lives in memory only and is lost when the process ends. There is a
  single keyspace; `Select` accepts any index and changes nothing.