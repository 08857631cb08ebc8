""" The :class:`Session` performs the hello handshake over a transport,
    and executes requests one at a time, pairing each request with the
    next reply received.
"""

import logging

from .protocol import codec
from .protocol import fields
from .protocol.errors import HandshakeError, SessionClosedError
from .protocol.message import HelloMessage, RPCMessage


logger = logging.getLogger(__name__)


class Session:
    """ A NETCONF session bound to a single *transport* for its lifetime.
        Sessions are normally created with :func:`Session.open`, which
        performs the handshake; the constructor is available for callers
        that have performed the handshake some other way.

        Only one request can be outstanding at a time; concurrent callers
        must serialize access externally.

        :ivar id: The session identifier assigned by the server.
        :ivar capabilities: The capabilities advertised by the server.
        :ivar strict: If True, warning-severity rpc-errors are failures.
    """

    def __init__(self, transport, id=None, capabilities=(), strict=False):

        self.transport = transport
        self.id = id
        self.capabilities = list(capabilities)
        self.strict = strict
        self.closed = False


    def __enter__(self):
        return self


    def __exit__(self, exc_type, exc_value, traceback):
        if self.closed == False:
            self.close()


    def __repr__(self):
        return 'Session(id=%r, capabilities=%d, strict=%r)' % (self.id, len(self.capabilities), self.strict)


    @classmethod
    def open(cls, transport, capabilities=None, strict=False):
        """ Perform the hello handshake over *transport* and return a new
            :class:`Session`. The server always speaks first; its hello is
            received before the local hello, advertising *capabilities*,
            is sent. The transport is not closed if the handshake fails.
        """

        if capabilities is None:
            capabilities = fields.DEFAULT_CAPABILITIES

        remote = transport.receive_hello()

        if remote.session_id is None:
            logger.warning('server hello did not include a session-id')

        logger.debug('server capabilities: %r', remote.capabilities)

        local = HelloMessage(capabilities)
        transport.send_hello(local)

        session = cls(transport, remote.session_id, remote.capabilities, strict)
        logger.info('NETCONF session %s established', session.id)
        return session


    def has_capability(self, capability):
        return capability in self.capabilities


    def exec(self, *methods):
        """ Send one request containing the supplied *methods*, and return
            the parsed :class:`nconf.protocol.RPCReply`. If the reply
            carries an rpc-error with severity 'error', or any rpc-error at
            all when this session is *strict*, the first such error is
            raised, with the full reply attached as its *reply* attribute.
        """

        if self.closed:
            raise SessionClosedError('session %s is closed' % (self.id))

        if len(methods) == 0:
            raise ValueError('at least one RPC method is required')

        request = RPCMessage(methods)
        self.transport.send(codec.encode_rpc(request))

        response = self.transport.receive()
        reply = codec.decode_reply(response)

        if reply.message_id is not None and reply.message_id != request.id:
            logger.warning('reply message-id %s does not match request %s', reply.message_id, request.id)

        error = self._failure(reply)

        if error is not None:
            error.reply = reply
            raise error

        return reply


    def _failure(self, reply):
        """ Return the first rpc-error in *reply* that should be treated
            as a failure, or None. Ignored warnings are logged.
        """

        for error in reply.errors:
            if error.is_error or self.strict:
                return error

        for error in reply.errors:
            logger.warning('ignoring %s', str(error))

        return None


    def close(self):
        """ Close the bound transport. The session cannot be used again.
        """

        self.closed = True
        self.transport.close()
        logger.info('NETCONF session %s closed', self.id)


# end of class Session


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
