""" Implementation of the :class:`Client` facade, and the top-level
    :func:`connect` method. This is intended to be the principal entry
    point for users fetching configuration from a device.
"""

import logging

from . import config
from .protocol import fields
from .protocol import methods
from .session import Session
from .transport import ssh


logger = logging.getLogger(__name__)


class Client:
    """ Named NETCONF operations bound to a :class:`Session`. Most callers
        will use :func:`Client.connect` with an authenticated paramiko
        client, or the top-level :func:`connect` method; any session, over
        any transport, can be wrapped directly.
    """

    def __init__(self, session):

        self.session = session


    def __enter__(self):
        return self


    def __exit__(self, exc_type, exc_value, traceback):
        if self.session.closed == False:
            self.close()


    def __repr__(self):
        return 'Client(%r)' % (self.session)


    @classmethod
    def connect(cls, ssh_client, subsystem=config.subsystem, strict=False):
        """ Open a channel running the netconf *subsystem* on the
            authenticated *ssh_client*, and perform the handshake over it.
            The returned :class:`Client` owns the SSH connection.
        """

        channel = ssh.open_subsystem(ssh_client, subsystem)
        transport = ssh.SSHTransport(channel, ssh_client)

        session = Session.open(transport, strict=strict)
        return cls(session)


    def get_config(self, datastore=fields.RUNNING):
        """ Return the contents of the named *datastore* as bytes; this is
            the inner content of the rpc-reply, typically a <data> element.
        """

        reply = self.session.exec(methods.get_config(datastore))
        return reply.data.encode('utf-8')


    def get(self, filter=None):
        """ Return operational and configuration data as bytes, optionally
            restricted by a subtree *filter*.
        """

        reply = self.session.exec(methods.get(filter))
        return reply.data.encode('utf-8')


    def lock(self, target=fields.RUNNING):
        return self.session.exec(methods.lock(target))


    def unlock(self, target=fields.RUNNING):
        return self.session.exec(methods.unlock(target))


    def close(self):
        self.session.close()


# end of class Client



def connect(host, port=None, username=None, password=None, key_filename=None, strict=False, timeout=None):
    """ Dial *host* over SSH, start the netconf subsystem, and return a
        connected :class:`Client`. If anything after authentication fails,
        the SSH connection is closed before the error is raised.
    """

    ssh_client = ssh.connect(host, port, username, password, key_filename, timeout)

    try:
        return Client.connect(ssh_client, strict=strict)
    except BaseException:
        ssh_client.close()
        raise


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
