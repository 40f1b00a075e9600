"""A bounded in-memory byte stream with separate reader and writer views."""

from __future__ import annotations


class ByteStream:
    """A flow-controlled byte pipe of fixed capacity.

    Bytes written through :meth:`writer` are buffered until they are
    consumed through :meth:`reader`. At most ``capacity`` bytes are held
    at any time; excess data offered to the writer is dropped.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._buffer = bytearray()
        self._error = False
        self._closed = False
        self._pushed = 0
        self._popped = 0
        self._reader = Reader(self)
        self._writer = Writer(self)

    def reader(self) -> Reader:
        """Return the reading side of the stream."""
        return self._reader

    def writer(self) -> Writer:
        """Return the writing side of the stream."""
        return self._writer

    def set_error(self) -> None:
        """Signal that the stream suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        """Whether the stream has suffered an error."""
        return self._error

    @property
    def capacity(self) -> int:
        return self._capacity


class Writer:
    """The writing side of a :class:`ByteStream`."""

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def push(self, data: bytes) -> None:
        """Push as much of ``data`` as the available capacity allows."""
        stream = self._stream
        accepted = bytes(data[: self.available_capacity()])
        stream._buffer += accepted
        stream._pushed += len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._stream._closed = True

    def is_closed(self) -> bool:
        """Whether the stream has been closed."""
        return self._stream._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self._stream._capacity - len(self._stream._buffer)

    def bytes_pushed(self) -> int:
        """Total number of bytes ever pushed."""
        return self._stream._pushed

    def set_error(self) -> None:
        """Signal that the underlying stream suffered an error."""
        self._stream.set_error()

    def has_error(self) -> bool:
        """Whether the underlying stream has suffered an error."""
        return self._stream.has_error()


class Reader:
    """The reading side of a :class:`ByteStream`."""

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    def peek(self) -> bytes:
        """Return the buffered bytes without consuming them."""
        return bytes(self._stream._buffer)

    def pop(self, length: int) -> None:
        """Remove ``length`` bytes from the front of the buffer."""
        stream = self._stream
        if length < 0:
            raise ValueError("cannot pop a negative number of bytes")
        if length > len(stream._buffer):
            raise ValueError(
                f"cannot pop {length} bytes; only {len(stream._buffer)} buffered"
            )
        del stream._buffer[:length]
        stream._popped += length

    def is_finished(self) -> bool:
        """Whether the stream is closed and fully consumed."""
        return self._stream._closed and not self._stream._buffer

    def bytes_buffered(self) -> int:
        """Number of bytes pushed but not yet popped."""
        return len(self._stream._buffer)

    def bytes_popped(self) -> int:
        """Total number of bytes ever popped."""
        return self._stream._popped

    def set_error(self) -> None:
        """Signal that the underlying stream suffered an error."""
        self._stream.set_error()

    def has_error(self) -> bool:
        """Whether the underlying stream has suffered an error."""
        return self._stream.has_error()


def read(reader: Reader, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``reader``."""
    out = bytearray()
    while reader.bytes_buffered() and len(out) < max_len:
        view = reader.peek()
        if not view:
            raise RuntimeError("Reader.peek() returned no data")
        chunk = view[: max_len - len(out)]
        out += chunk
        reader.pop(len(chunk))
    return bytes(out)