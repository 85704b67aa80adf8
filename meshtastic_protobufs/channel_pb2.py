"""
Bindings for meshtastic/channel.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import BOOL, BYTES, FIXED32, INT32, STRING, UINT32, enum, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/channel.proto',
    messages=[
        message('ChannelSettings', [
            field(1, 'channel_num', UINT32, deprecated=True),
            field(2, 'psk', BYTES),
            field(3, 'name', STRING),
            field(4, 'id', FIXED32),
            field(5, 'uplink_enabled', BOOL),
            field(6, 'downlink_enabled', BOOL),
            field(7, 'module_settings', message='meshtastic.ModuleSettings'),
        ]),
        message('ModuleSettings', [
            field(1, 'position_precision', UINT32),
            field(2, 'is_client_muted', BOOL),
        ]),
        message('Channel', [
            field(1, 'index', INT32),
            field(2, 'settings', message='meshtastic.ChannelSettings'),
            field(3, 'role', enum='meshtastic.Channel.Role'),
        ], enums=[
            enum('Role', [('DISABLED', 0), ('PRIMARY', 1), ('SECONDARY', 2)]),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
