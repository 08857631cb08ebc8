import pytest

from nconf.protocol import codec, fields, methods
from nconf.protocol.errors import CodecError, HandshakeError
from nconf.protocol.message import HelloMessage, RPCMessage


ERROR_REPLY = b"""<rpc-reply message-id="101">
  <rpc-error>
    <error-type>application</error-type>
    <error-tag>invalid-value</error-tag>
    <error-severity>error</error-severity>
    <error-path>/configuration/system</error-path>
    <error-message>
      syntax error
    </error-message>
    <error-info><bad-element>sytem</bad-element></error-info>
  </rpc-error>
  <rpc-error>
    <error-type>protocol</error-type>
    <error-tag>operation-failed</error-tag>
    <error-severity>warning</error-severity>
    <error-message>statement ignored</error-message>
  </rpc-error>
</rpc-reply>"""


def test_hello_round_trip():

    for hello in (HelloMessage([fields.BASE_1_0]),
                  HelloMessage([fields.BASE_1_0, fields.BASE_1_1, 'urn:x?a=1&b=2'], 19313),
                  HelloMessage([], 7)):

        encoded = codec.encode_hello(hello)
        assert isinstance(encoded, bytes)
        assert codec.decode_hello(encoded) == hello


def test_encode_hello():

    encoded = codec.encode_hello(HelloMessage([fields.BASE_1_0]))

    assert encoded == b'<hello><capabilities><capability>urn:ietf:params:netconf:base:1.0</capability></capabilities></hello>'
    assert b'session-id' not in encoded


def test_decode_device_hello(device_hello):

    frame = device_hello.split(fields.DELIMITER)[0]
    hello = codec.decode_hello(frame)

    assert hello.session_id == 19313
    assert len(hello.capabilities) == 7
    assert hello.capabilities[0] == 'urn:ietf:params:xml:ns:netconf:base:1.0'
    assert hello.capabilities[-1] == 'http://xml.juniper.net/dmi/system/1.0'


def test_decode_namespaced_hello():

    frame = b"""<?xml version="1.0" encoding="UTF-8"?>
<nc:hello xmlns:nc="urn:ietf:params:xml:ns:netconf:base:1.0">
  <nc:capabilities>
    <nc:capability>urn:ietf:params:netconf:base:1.0</nc:capability>
    <nc:capability>urn:ietf:params:netconf:base:1.1</nc:capability>
  </nc:capabilities>
  <nc:session-id>4</nc:session-id>
</nc:hello>"""

    hello = codec.decode_hello(frame)
    assert hello == HelloMessage([fields.BASE_1_0, fields.BASE_1_1], 4)

    # The newline following a previous delimiter is ignored.
    assert codec.decode_hello(b'\n' + frame) == hello


def test_decode_bad_hello():

    for frame in (b'', b'   \n', b'<hello><capabilities>', b'<rpc-reply/>', b'<hello><session-id>abc</session-id></hello>'):
        with pytest.raises(HandshakeError):
            codec.decode_hello(frame)


def test_encode_rpc():

    message = RPCMessage([methods.lock('candidate'), '<get/>', b'<close-session/>'], id='101')
    encoded = codec.encode_rpc(message)

    expected = b'<rpc message-id="101"><lock><target><candidate/></target></lock><get/><close-session/></rpc>'
    assert encoded == expected


def test_encode_rpc_generated_id():

    message = RPCMessage([methods.get_config('running')])
    encoded = codec.encode_rpc(message)

    assert encoded.startswith(b'<rpc message-id="' + message.id.encode() + b'">')
    assert encoded.endswith(b'</rpc>')


def test_encode_rpc_invalid_method():

    for bad in (42, None, b'\xff\xfe'):
        with pytest.raises(CodecError):
            codec.encode_rpc(RPCMessage([bad], id='1'))


def test_decode_reply():

    reply = codec.decode_reply(b'<rpc-reply><data>X</data></rpc-reply>')

    assert reply.errors == []
    assert reply.data == '<data>X</data>'
    assert reply.raw == '<rpc-reply><data>X</data></rpc-reply>'
    assert reply.ok == False
    assert reply.message_id is None


def test_decode_reply_verbatim():

    inner = '\n  <data xmlns="urn:x"><a  b="1" >text &amp; more</a><!-- note --></data>\n'
    raw = '\n<rpc-reply xmlns="urn:ietf:params:xml:ns:netconf:base:1.0" message-id="7">' + inner + '</rpc-reply>'

    reply = codec.decode_reply(raw.encode())

    assert reply.data == inner
    assert reply.message_id == '7'


def test_decode_reply_ok():

    reply = codec.decode_reply(b'<nc:rpc-reply xmlns:nc="urn:ietf:params:xml:ns:netconf:base:1.0" message-id="5"><nc:ok/></nc:rpc-reply>')

    assert reply.ok == True
    assert reply.errors == []
    assert reply.data == '<nc:ok/>'
    assert reply.message_id == '5'


def test_decode_reply_empty():

    reply = codec.decode_reply(b'<rpc-reply message-id="5"/>')

    assert reply.data == ''
    assert reply.errors == []


def test_decode_reply_errors():

    reply = codec.decode_reply(ERROR_REPLY)

    assert reply.message_id == '101'
    assert len(reply.errors) == 2

    first, second = reply.errors

    assert first.type == 'application'
    assert first.tag == 'invalid-value'
    assert first.severity == 'error'
    assert first.path == '/configuration/system'
    assert first.message == 'syntax error'
    assert '<error-info><bad-element>sytem</bad-element></error-info>' in first.info
    assert '<error-tag>invalid-value</error-tag>' in first.info

    assert second.severity == 'warning'
    assert second.message == 'statement ignored'
    assert second.path is None

    # The payload still carries everything inside the reply.
    assert '<rpc-error>' in reply.data


def test_decode_reply_commented():

    reply = codec.decode_reply(b'<!-- see <rpc-reply> below -->\n<rpc-reply><data>X</data></rpc-reply>')
    assert reply.data == '<data>X</data>'

    raw = b'<?xml version="1.0"?>\n<!-- <rpc-reply> -->\n<?junos <rpc-reply>?>\n<rpc-reply message-id="9"><data><!-- kept --></data></rpc-reply>\n<!-- </rpc-reply> trailer -->\n'
    reply = codec.decode_reply(raw)

    assert reply.data == '<data><!-- kept --></data>'
    assert reply.message_id == '9'


def test_encode_hello_invalid_capability():

    with pytest.raises(CodecError):
        codec.encode_hello(HelloMessage(['urn:\x01bad']))


def test_decode_bad_reply():

    for frame in (b'', b'<rpc-reply>', b'<hello/>', b'\xff<rpc-reply/>'):
        with pytest.raises(CodecError):
            codec.decode_reply(frame)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
