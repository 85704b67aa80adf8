"""
Bindings for meshtastic/xmodem.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import BYTES, UINT32, enum, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/xmodem.proto',
    messages=[
        message('XModem', [
            field(1, 'control', enum='meshtastic.XModem.Control'),
            field(2, 'seq', UINT32),
            field(3, 'crc16', UINT32),
            field(4, 'buffer', BYTES),
        ], enums=[
            enum('Control', [
                ('NUL', 0), ('SOH', 1), ('STX', 2), ('EOT', 4), ('ACK', 6),
                ('NAK', 21), ('CAN', 24), ('CTRLZ', 26),
            ]),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
