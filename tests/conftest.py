import io
import pytest

import nconf


DEVICE_HELLO = b"""<!-- user bbennett, class j-super-user -->
<hello>
  <capabilities>
    <capability>urn:ietf:params:xml:ns:netconf:base:1.0</capability>
    <capability>urn:ietf:params:xml:ns:netconf:capability:candidate:1.0</capability>
    <capability>urn:ietf:params:xml:ns:netconf:capability:confirmed-commit:1.0</capability>
    <capability>urn:ietf:params:xml:ns:netconf:capability:validate:1.0</capability>
    <capability>urn:ietf:params:xml:ns:netconf:capability:url:1.0?protocol=http,ftp,file</capability>
    <capability>http://xml.juniper.net/netconf/junos/1.0</capability>
    <capability>http://xml.juniper.net/dmi/system/1.0</capability>
  </capabilities>
  <session-id>19313</session-id>
</hello>
]]>]]>"""


class ChunkedReader:
    """ Deliver scripted *data* in reads of at most *size* bytes, so that
        tests control exactly where read boundaries fall.
    """

    def __init__(self, data, size=4096):
        self.data = data
        self.size = size
        self.position = 0
        self.reads = 0
        self.closed = False

    def read(self, size):
        size = min(size, self.size)
        chunk = self.data[self.position:self.position + size]
        self.position += len(chunk)
        self.reads += 1
        return chunk

    def close(self):
        self.closed = True


class Writer(io.BytesIO):
    """ An in-memory writer that remembers its contents after close().
    """

    def close(self):
        self.contents = self.getvalue()
        io.BytesIO.close(self)

    @property
    def sent(self):
        if self.closed:
            return self.contents
        return self.getvalue()


class BrokenStream:

    def read(self, size):
        raise ConnectionResetError('connection reset by peer')

    def write(self, data):
        raise BrokenPipeError('broken pipe')

    def close(self):
        pass


@pytest.fixture
def device_hello():
    return DEVICE_HELLO


@pytest.fixture
def scripted():
    """ Return a factory building a :class:`StreamTransport` over scripted
        input; the factory returns the transport, the reader and the writer.
    """

    def make(data, size=4096):
        reader = ChunkedReader(data, size)
        writer = Writer()
        transport = nconf.transport.StreamTransport(reader, writer)
        return transport, reader, writer

    return make


@pytest.fixture
def broken():
    stream = BrokenStream()
    return nconf.transport.StreamTransport(stream, stream)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv('NCONF_HOME', str(tmp_path))
    monkeypatch.delenv('NCONF_PORT', raising=False)
    return tmp_path


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
