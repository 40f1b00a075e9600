# bytepipe

`bytepipe` gives you a bounded, in-memory byte stream. One side writes and the other side reads. The stream never holds more than a fixed number of unread bytes, so a fast writer cannot outrun a slow reader. Use it to model flow-controlled transports, such as the send and receive buffers of a reliable protocol.

## Installation

```
pip install bytepipe
```

To run the tests:

```
pip install "bytepipe[test]"
pytest
```

## Usage

Everything lives in the `bytepipe.stream` module.

```python
from bytepipe.stream import ByteStream, read

stream = ByteStream(capacity=8)
writer = stream.writer()
reader = stream.reader()

writer.push(b"hello, world")  # only b"hello, w" fits
writer.available_capacity()   # 0
writer.bytes_pushed()         # 8

reader.peek()                 # b"hello, w"
reader.pop(7)
reader.bytes_buffered()       # 1

writer.push(b"orld")
writer.close()

read(reader, 100)             # b"world"
reader.is_finished()          # True
```

### ByteStream

- `ByteStream(capacity)` creates an empty stream. A negative capacity raises `ValueError`.
- `capacity` is the maximum number of unread bytes the stream holds.
- `writer()` and `reader()` return the two views of the stream. Each call returns the same object.

### Writer

- `push(data)` adds as much of `data` as the free capacity allows. Bytes that do not fit are dropped.
- `close()` marks the end of the stream.
- `is_closed()`, `available_capacity()` and `bytes_pushed()` report the writer's state. `bytes_pushed()` counts only the bytes that were accepted.

### Reader

- `peek()` returns a copy of the buffered bytes without consuming them.
- `pop(length)` consumes `length` bytes. A negative length, or one larger than `bytes_buffered()`, raises `ValueError`.
- `is_finished()` is true once the stream is closed and every byte has been read.
- `bytes_buffered()` and `bytes_popped()` report the reader's state.

### Errors

Call `set_error()` on the stream, the reader or the writer to flag the stream as failed. `has_error()` reports the flag on all three views. The flag is informational only: it does not stop pushes or pops.

### Helper

`read(reader, max_len)` peeks and pops up to `max_len` bytes and returns them as `bytes`.

## What it does not do

`bytepipe` is a single-threaded, in-memory buffer. It does no I/O, has no network transport or sockets, does not block or wait for data, and provides no locking for use across threads.