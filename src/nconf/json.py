''' Select the most capable available library for :func:`loads` and
    :func:`dumps`. Host profiles are small, but the same wrapper is used
    everywhere JSON is read or written.
'''

# msgspec is preferred, then orjson; both are optional. The standard
# library is the last resort.

msgspec = None
orjson = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json as stdlib
    backend = 'json'
elif msgspec is not None:
    backend = 'msgspec'
else:
    backend = 'orjson'


# All backends are normalized so that dumps() returns bytes, and loads()
# raises ValueError on malformed input.

if backend == 'msgspec':
    _encoder = msgspec.json.Encoder()
    _decoder = msgspec.json.Decoder()

    dumps = _encoder.encode

    def loads(data):
        try:
            return _decoder.decode(data)
        except msgspec.DecodeError as e:
            raise ValueError(str(e)) from e

elif backend == 'orjson':
    dumps = orjson.dumps
    loads = orjson.loads

else:
    def dumps(thing):
        return stdlib.dumps(thing).encode()

    loads = stdlib.loads


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
