""" Class representations of the NETCONF messages exchanged over a
    session: the hello exchanged once in each direction, the outgoing
    rpc envelope, and the parsed rpc-reply with any rpc-error records.
"""

import os

from . import fields
from .errors import ProtocolError


def message_id():
    """ Return a new correlation identifier for an outgoing request. The
        identifier is sixteen random bytes laid out as a version 4 UUID,
        rendered as lowercase hyphenated hex. It only tags a request; no
        registry of issued identifiers is kept.
    """

    raw = bytearray(os.urandom(16))
    raw[6] = (raw[6] & 0x0f) | 0x40
    raw[8] = (raw[8] & 0x3f) | 0x80

    hexed = raw.hex()
    return '%s-%s-%s-%s-%s' % (hexed[0:8], hexed[8:12], hexed[12:16], hexed[16:20], hexed[20:32])



class HelloMessage:
    """ The :class:`HelloMessage` is exchanged exactly once in each
        direction when a session is established. The *capabilities* are
        an ordered sequence of capability URIs; the *session_id* is only
        present in the hello sent by the server, which owns the session.
    """

    def __init__(self, capabilities=(), session_id=None):

        self.capabilities = list(capabilities)
        self.session_id = session_id


    def __eq__(self, other):
        if not isinstance(other, HelloMessage):
            return NotImplemented

        return self.capabilities == other.capabilities and self.session_id == other.session_id


    def __repr__(self):
        return 'HelloMessage(%r, session_id=%r)' % (self.capabilities, self.session_id)


# end of class HelloMessage



class RPCMessage:
    """ One outgoing request: an ordered sequence of pre-rendered method
        bodies, and the *id* that will be put on the wire as the
        message-id attribute. The *id* is generated when it is not
        provided, which is the normal case.

        The method bodies are not parsed or validated; the caller is
        responsible for handing over well-formed fragments.
    """

    def __init__(self, methods, id=None):

        if id is None:
            id = message_id()

        self.id = id
        self.methods = tuple(methods)


    def __repr__(self):
        return 'RPCMessage(%r, id=%r)' % (self.methods, self.id)


# end of class RPCMessage



class RPCError(ProtocolError):
    """ A single error or warning reported by the remote end within an
        rpc-reply. The same class is raised by :func:`nconf.Session.exec`
        when the reported error is treated as a failure; in that case the
        full :class:`RPCReply` is attached as the *reply* attribute, so
        any additional errors remain accessible.

        Only a *severity* of exactly 'error' is fatal; anything else,
        typically 'warning', is not.

        :ivar info: The inner XML of the rpc-error element, verbatim.
    """

    def __init__(self, type=None, tag=None, severity=None, path=None, message=None, info=None):

        self.type = type
        self.tag = tag
        self.severity = severity
        self.path = path
        self.message = message
        self.info = info

        self.reply = None

        ProtocolError.__init__(self, str(self))


    def __str__(self):
        return "netconf rpc [%s] '%s'" % (self.severity, self.message)


    def __repr__(self):
        return 'RPCError(type=%r, tag=%r, severity=%r, message=%r)' % (self.type, self.tag, self.severity, self.message)


    @property
    def is_error(self):
        return self.severity == fields.SEVERITY_ERROR


# end of class RPCError



class RPCReply:
    """ A parsed rpc-reply. The *data* is the inner content of the reply
        element exactly as it appeared on the wire, left for the caller
        to interpret according to the operation that was requested; the
        *raw* text is the complete reply, retained for diagnostics.

        :ivar errors: A list of :class:`RPCError` instances, in the order
                      they appeared in the reply.
        :ivar ok: True if the reply contained an <ok/> element.
        :ivar message_id: The message-id echoed by the remote end, if any.
    """

    def __init__(self, errors=None, data='', raw='', ok=False, message_id=None):

        if errors is None:
            errors = list()

        self.errors = errors
        self.data = data
        self.raw = raw
        self.ok = ok
        self.message_id = message_id


    def __repr__(self):
        return 'RPCReply(message_id=%r, ok=%r, errors=%r)' % (self.message_id, self.ok, self.errors)


# end of class RPCReply


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
