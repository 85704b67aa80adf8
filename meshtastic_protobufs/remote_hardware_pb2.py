"""
Bindings for meshtastic/remote_hardware.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import UINT64, enum, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/remote_hardware.proto',
    messages=[
        message('HardwareMessage', [
            field(1, 'type', enum='meshtastic.HardwareMessage.Type'),
            field(2, 'gpio_mask', UINT64),
            field(3, 'gpio_value', UINT64),
        ], enums=[
            enum('Type', [
                ('UNSET', 0), ('WRITE_GPIOS', 1), ('WATCH_GPIOS', 2), ('GPIOS_CHANGED', 3),
                ('READ_GPIOS', 4), ('READ_GPIOS_REPLY', 5),
            ]),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
