""" Constructors for the canned NETCONF operations. Each returns a
    :class:`Method` wrapping a pre-rendered XML fragment, suitable for
    passing to :func:`nconf.Session.exec`. Extending the operation set
    means adding another constructor here.
"""

import re


_name = re.compile(r'^[A-Za-z_][A-Za-z0-9_.-]*$')


class Method:
    """ An RPC method body. The *body* is a fragment of XML that will be
        placed verbatim inside the rpc envelope; it is not re-parsed.
    """

    def __init__(self, body):

        if isinstance(body, bytes):
            body = body.decode('utf-8')

        self.body = body


    def __eq__(self, other):
        if not isinstance(other, Method):
            return NotImplemented
        return self.body == other.body


    def __repr__(self):
        return 'Method(%r)' % (self.body)


    def render(self):
        return self.body


# end of class Method



def _datastore(name):
    """ Confirm the datastore *name* can be used as an element name.
    """

    if not isinstance(name, str) or _name.match(name) is None:
        raise ValueError('invalid datastore name: ' + repr(name))

    return name


def lock(target):
    return Method('<lock><target><%s/></target></lock>' % (_datastore(target)))


def unlock(target):
    return Method('<unlock><target><%s/></target></unlock>' % (_datastore(target)))


def get_config(source):
    return Method('<get-config><source><%s/></source></get-config>' % (_datastore(source)))


def get(filter=None):
    """ The *filter*, if provided, is the inner content of a subtree
        filter, and is included verbatim.
    """

    if filter is None or filter == '':
        return Method('<get/>')

    if isinstance(filter, bytes):
        filter = filter.decode('utf-8')

    return Method('<get><filter type="subtree">%s</filter></get>' % (filter))


def close_session():
    return Method('<close-session/>')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
