from . import fields
from . import errors
from . import message
from . import methods
from . import codec

from .errors import ProtocolError, HandshakeError, CodecError, SessionClosedError
from .message import HelloMessage, RPCMessage, RPCReply, RPCError, message_id
from .methods import Method


"""
NETCONF Protocol Layer
======================

This package defines the transport-agnostic side of NETCONF: the messages
exchanged over a session, the XML codec that maps them to the bytes inside
one frame, and the constructors for canned operations.

The protocol layer MUST NOT depend on any transport implementation
(SSH, sockets, pipes).

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Client Facade (client.py)
    Named operations
    - get_config()
    - get()
    - lock() / unlock()

    │
    ▼
Session (session.py)
    Hello handshake, request/reply execution,
    rpc-error severity classification

    │
    ▼
Codec (protocol/codec.py)
    HelloMessage / RPCMessage / RPCReply <-> XML bytes

    │
    ▼
Message Model (protocol/message.py)
    - HelloMessage
    - RPCMessage
    - RPCReply
    - RPCError

    │
    ▼
Field Vocabulary (protocol/fields.py)
    Canonical element names, capabilities, delimiter

---------------------------------------------------------------------

Below the Protocol Layer
------------------------

Transport Layer (transport/)
    Moves bytes and finds message boundaries
    - end-of-message framing (]]>]]>)
    - SSH subsystem channels, sockets, pipes

---------------------------------------------------------------------

Design Principles
-----------------

1. Transport Agnostic
   Messages are encoded identically regardless of the byte stream.

2. One request at a time
   Replies are expected in the order requests were sent; the
   message-id is informational.

3. Layer Isolation
   Dependencies only flow downward:
       Client -> Session -> Transport -> Protocol
   Never upward.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
