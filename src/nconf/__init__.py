""" Python implementation of a NETCONF client. This includes the
    end-of-message framing over a byte stream, the hello handshake,
    request/reply execution with rpc-error classification, and a small
    facade for fetching device configuration over SSH.
"""

# Utility components.

from . import json
from . import config

# Layers, from the bottom up.

from . import protocol
from . import transport
from . import session

# Primary public-facing interfaces.

from . import client
connect = client.connect

from .client import Client
from .session import Session
from .protocol import RPCError, RPCReply, HelloMessage, ProtocolError, HandshakeError, CodecError
from .transport import TransportError

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
