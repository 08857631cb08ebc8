"""Protocol-level exceptions.

:class:`RPCError` lives in :mod:`nconf.protocol.message`, since it is
both a parsed reply record and the exception raised for it.
"""


class ProtocolError(Exception):
    """Base class for all protocol-layer errors."""


class HandshakeError(ProtocolError):
    """A hello message was missing or malformed."""


class CodecError(ProtocolError):
    """A message could not be encoded or decoded."""


class SessionClosedError(ProtocolError):
    """The session was used after it was closed."""
