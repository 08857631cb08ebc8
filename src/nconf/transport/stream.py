"""Transports over plain byte streams: file-like reader/writer pairs
(pipes, subprocesses, in-memory buffers) and connected sockets.
"""

from __future__ import annotations

from .base import BasicTransport


class StreamTransport(BasicTransport):
    """Frame messages over a *reader* and a *writer*.

    The *reader* must provide ``read(size)``; ``read1(size)`` is used
    instead when available, so a buffered pipe returns whatever is ready
    rather than blocking for a full chunk. The *writer* must provide
    ``write(data)``, and is flushed after each message if it can be.
    """

    def __init__(self, reader, writer, chunked: bool = False):
        BasicTransport.__init__(self, chunked)
        self.reader = reader
        self.writer = writer

    def _read(self, size: int) -> bytes:
        read = getattr(self.reader, "read1", None)
        if read is None:
            read = self.reader.read
        return read(size)

    def _write(self, data: bytes) -> None:
        self.writer.write(data)

        flush = getattr(self.writer, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        self.writer.close()
        if self.reader is not self.writer:
            self.reader.close()


class SocketTransport(BasicTransport):
    """Frame messages over a connected socket."""

    def __init__(self, sock, chunked: bool = False):
        BasicTransport.__init__(self, chunked)
        self.socket = sock

    def _read(self, size: int) -> bytes:
        return self.socket.recv(size)

    def _write(self, data: bytes) -> None:
        self.socket.sendall(data)

    def close(self) -> None:
        self.socket.close()
