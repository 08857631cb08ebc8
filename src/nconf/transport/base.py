"""Transport interface and end-of-message framing.

This is the (small) contract that transport implementations follow, plus
:class:`BasicTransport`, which implements framing over two primitive
read/write hooks so each concrete transport only supplies those.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union

from .. import config
from ..protocol import codec
from ..protocol.fields import DELIMITER, FRAMING_1_0, FRAMING_1_1
from ..protocol.message import HelloMessage


logger = logging.getLogger(__name__)


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


class SubsystemError(TransportConnectionError):
    """The remote end refused to start the requested subsystem."""


class TransportReadError(TransportError):
    """The underlying stream failed while reading."""


class TransportWriteError(TransportError):
    """The underlying stream failed while writing."""


class DelimiterNotFound(TransportError):
    """The stream ended before the expected delimiter or pattern appeared."""


class Transport(ABC):
    """Minimal contract for a NETCONF transport."""

    @abstractmethod
    def send(self, data: Union[bytes, str]) -> None:
        """Send one framed message."""

    @abstractmethod
    def receive(self) -> bytes:
        """Receive the next framed message, without its delimiter."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying stream."""

    @abstractmethod
    def send_hello(self, hello: HelloMessage) -> None:
        """Send the local hello."""

    @abstractmethod
    def receive_hello(self) -> HelloMessage:
        """Receive the remote hello."""


class BasicTransport(Transport):
    """End-of-message framing over a raw byte stream.

    Subclasses implement :meth:`_read`, :meth:`_write` and :meth:`close`.
    :meth:`_read` returns up to *size* bytes, and an empty byte string at
    end-of-stream; failures are reported by raising :class:`OSError`.

    Bytes read past the end of a match are kept and consumed first by the
    next call, so back-to-back messages delivered in one read are framed
    correctly.
    """

    read_size = config.read_size

    def __init__(self, chunked: bool = False):
        framing = FRAMING_1_1 if chunked else FRAMING_1_0
        if framing != FRAMING_1_0:
            # Reserved for NETCONF 1.1 chunked framing.
            raise NotImplementedError("chunked framing is not supported")

        self.framing = framing
        self._buffer = b""

    @abstractmethod
    def _read(self, size: int) -> bytes:
        """Read up to *size* bytes from the stream."""

    @abstractmethod
    def _write(self, data: bytes) -> None:
        """Write all of *data* to the stream."""

    def wait_for(self, pattern: Union[bytes, re.Pattern]) -> Tuple[bytes, Tuple[Optional[bytes], ...]]:
        """Read until *pattern* appears in the stream.

        *pattern* is either an exact byte sequence, or a compiled bytes
        regular expression. Returns the bytes preceding the match, and the
        regular expression's capture groups (an empty tuple for an exact
        match). The matched bytes themselves are consumed. The search runs
        over everything accumulated so far, not each read in isolation.
        """

        exact = isinstance(pattern, (bytes, bytearray))
        if exact and not pattern:
            raise ValueError("cannot wait for an empty byte sequence")

        buffer = bytearray(self._buffer)
        self._buffer = b""
        start = 0

        while True:
            if exact:
                index = buffer.find(pattern, start)
                if index > -1:
                    self._buffer = bytes(buffer[index + len(pattern):])
                    return bytes(buffer[:index]), ()

                # Only the tail can hold the start of a split delimiter.
                start = max(0, len(buffer) - len(pattern) + 1)
            else:
                match = pattern.search(buffer)
                if match is not None:
                    self._buffer = bytes(buffer[match.end():])
                    groups = tuple(None if group is None else bytes(group) for group in match.groups())
                    return bytes(buffer[:match.start()]), groups

            try:
                chunk = self._read(self.read_size)
            except EOFError:
                chunk = b""
            except (OSError, ValueError) as e:
                # ValueError: the stream was already closed.
                self._buffer = bytes(buffer)
                raise TransportReadError(f"read failed: {e}") from e

            if not chunk:
                self._buffer = bytes(buffer)
                raise DelimiterNotFound(f"stream ended before {_describe(pattern)} ({len(buffer)} bytes read)")

            buffer.extend(chunk)

    def wait_for_bytes(self, sequence: bytes) -> bytes:
        data, _groups = self.wait_for(sequence)
        return data

    def wait_for_string(self, text: str) -> str:
        data = self.wait_for_bytes(text.encode("utf-8"))
        return data.decode("utf-8", errors="replace")

    def wait_for_regex(self, regex: Union[str, bytes, re.Pattern]) -> Tuple[bytes, Tuple[Optional[bytes], ...]]:
        if isinstance(regex, str):
            regex = regex.encode("utf-8")
        if isinstance(regex, bytes):
            regex = re.compile(regex)
        return self.wait_for(regex)

    def send(self, data: Union[bytes, str]) -> None:
        """Write *data* followed by the end-of-message delimiter and a newline."""

        if isinstance(data, str):
            data = data.encode("utf-8")

        logger.debug("send %d bytes: %r", len(data), data)

        try:
            self._write(data + DELIMITER + b"\n")
        except (OSError, ValueError) as e:
            raise TransportWriteError(f"write failed: {e}") from e

    def receive(self) -> bytes:
        data = self.wait_for_bytes(DELIMITER)
        logger.debug("received %d bytes: %r", len(data), data)
        return data

    def send_hello(self, hello: HelloMessage) -> None:
        self.send(codec.encode_hello(hello))

    def receive_hello(self) -> HelloMessage:
        return codec.decode_hello(self.receive())


def _describe(pattern) -> str:
    if isinstance(pattern, (bytes, bytearray)):
        return repr(bytes(pattern))
    return f"/{pattern.pattern!r}/"
