"""XML codec for protocol messages.

Maps :class:`HelloMessage`, :class:`RPCMessage` and :class:`RPCReply`
to and from the bytes carried inside one frame. Framing itself belongs to
the transport.
"""

from __future__ import annotations

import re
from typing import Iterable, Union
from xml.sax.saxutils import quoteattr

from lxml import etree

from . import fields
from .errors import CodecError, HandshakeError
from .message import HelloMessage, RPCError, RPCMessage, RPCReply


_parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=False)

_reply_open = re.compile(r"""<(?:[\w.-]+:)?rpc-reply\b(?:[^>"']|"[^"]*"|'[^']*')*>""")
_reply_close = re.compile(r"</(?:[\w.-]+:)?rpc-reply\s*>")

# Comments, processing instructions and a doctype may surround the root element.
_prolog = re.compile(r"\s*(?:<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^>]*>)", re.S)
_epilog = re.compile(r"(?:<\?(?:(?!<\?).)*?\?>|<!--(?:(?!<!--).)*?-->)\s*\Z", re.S)


def _local(element) -> str:
    # Comments and processing instructions have non-string tags.
    if not isinstance(element.tag, str):
        return ""
    return etree.QName(element).localname


def _children(element, name: str):
    return [child for child in element if _local(child) == name]


def _text(element) -> str:
    return (element.text or "").strip()


def _inner(element) -> str:
    parts = [element.text or ""]
    for child in element:
        parts.append(etree.tostring(child, encoding="unicode"))
    return "".join(parts)


def _parse(data: Union[bytes, str], error=CodecError):
    if isinstance(data, str):
        data = data.encode("utf-8")

    # A frame following a previous delimiter starts with its newline.
    data = data.lstrip()
    if not data:
        raise error("empty message")

    try:
        return etree.fromstring(data, _parser)
    except etree.XMLSyntaxError as e:
        raise error(f"malformed XML: {e}") from e


def encode_hello(hello: HelloMessage) -> bytes:
    root = etree.Element(fields.HELLO)
    capabilities = etree.SubElement(root, fields.CAPABILITIES)

    try:
        for capability in hello.capabilities:
            etree.SubElement(capabilities, fields.CAPABILITY).text = str(capability)

        if hello.session_id is not None:
            etree.SubElement(root, fields.SESSION_ID).text = str(hello.session_id)
    except ValueError as e:
        raise CodecError(f"cannot encode hello: {e}") from e

    return etree.tostring(root)


def decode_hello(data: Union[bytes, str]) -> HelloMessage:
    root = _parse(data, HandshakeError)

    if _local(root) != fields.HELLO:
        raise HandshakeError(f"expected <hello>, received <{_local(root)}>")

    capabilities = []
    for block in _children(root, fields.CAPABILITIES):
        for capability in _children(block, fields.CAPABILITY):
            capabilities.append(_text(capability))

    session_id = None
    found = _children(root, fields.SESSION_ID)
    if found:
        text = _text(found[0])
        try:
            session_id = int(text)
        except ValueError:
            raise HandshakeError(f"invalid session-id: {text!r}") from None

    return HelloMessage(capabilities, session_id)


def _render(method) -> str:
    if isinstance(method, str):
        return method
    if isinstance(method, bytes):
        try:
            return method.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CodecError(f"method body is not UTF-8: {e}") from e

    render = getattr(method, "render", None)
    if render is None:
        raise CodecError(f"cannot encode RPC method: {method!r}")
    return render()


def encode_methods(methods: Iterable) -> str:
    return "".join(_render(method) for method in methods)


def encode_rpc(message: RPCMessage) -> bytes:
    body = encode_methods(message.methods)
    text = f"<{fields.RPC} {fields.MESSAGE_ID}={quoteattr(str(message.id))}>{body}</{fields.RPC}>"
    return text.encode("utf-8")


def _reply_data(raw: str, root) -> str:
    """Return the inner content of the rpc-reply element as it appeared on the wire."""

    start = 0
    while True:
        skipped = _prolog.match(raw, start)
        if skipped is None:
            break
        start = skipped.end()

    end = len(raw)
    while True:
        skipped = _epilog.search(raw, start, end)
        if skipped is None:
            break
        end = skipped.start()

    opening = _reply_open.search(raw, start, end)
    if opening is not None and opening.group(0).endswith("/>"):
        return ""

    closing = None
    for closing in _reply_close.finditer(raw, start, end):
        pass

    if opening is None or closing is None or closing.start() < opening.end():
        return _inner(root)

    return raw[opening.end():closing.start()]


def decode_error(element) -> RPCError:
    values = {}
    for name in (fields.ERROR_TYPE, fields.ERROR_TAG, fields.ERROR_SEVERITY, fields.ERROR_PATH, fields.ERROR_MESSAGE):
        found = _children(element, name)
        values[name] = _text(found[0]) if found else None

    return RPCError(
        type=values[fields.ERROR_TYPE],
        tag=values[fields.ERROR_TAG],
        severity=values[fields.ERROR_SEVERITY],
        path=values[fields.ERROR_PATH],
        message=values[fields.ERROR_MESSAGE],
        info=_inner(element),
    )


def decode_reply(data: Union[bytes, str]) -> RPCReply:
    if isinstance(data, bytes):
        try:
            raw = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CodecError(f"reply is not UTF-8: {e}") from e
    else:
        raw = data

    root = _parse(raw)

    if _local(root) != fields.RPC_REPLY:
        raise CodecError(f"expected <rpc-reply>, received <{_local(root)}>")

    errors = [decode_error(child) for child in _children(root, fields.RPC_ERROR)]
    ok = bool(_children(root, fields.OK))

    return RPCReply(
        errors=errors,
        data=_reply_data(raw, root),
        raw=raw,
        ok=ok,
        message_id=root.get(fields.MESSAGE_ID),
    )
