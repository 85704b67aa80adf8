"""
Bindings for meshtastic/paxcount.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import UINT32, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/paxcount.proto',
    messages=[
        message('Paxcount', [
            field(1, 'wifi', UINT32),
            field(2, 'ble', UINT32),
            field(3, 'uptime', UINT32),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
