"""
Bindings for meshtastic/clientonly.proto.
"""

from google.protobuf.internal import builder as _builder

from . import localonly_pb2  # noqa: F401
from ._schema import STRING, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/clientonly.proto',
    dependencies=['meshtastic/localonly.proto'],
    messages=[
        message('DeviceProfile', [
            field(1, 'long_name', STRING, optional=True),
            field(2, 'short_name', STRING, optional=True),
            field(3, 'channel_url', STRING, optional=True),
            field(4, 'config', message='meshtastic.LocalConfig'),
            field(5, 'module_config', message='meshtastic.LocalModuleConfig'),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
