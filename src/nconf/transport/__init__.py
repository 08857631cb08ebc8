"""Transport layer implementations."""

from .base import (
    Transport,
    BasicTransport,
    TransportError,
    TransportConnectionError,
    TransportReadError,
    TransportWriteError,
    DelimiterNotFound,
    SubsystemError,
)
from .stream import StreamTransport, SocketTransport
from .ssh import SSHTransport

from . import ssh
