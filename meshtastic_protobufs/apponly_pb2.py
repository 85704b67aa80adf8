"""
Bindings for meshtastic/apponly.proto.

ChannelSet is what a Meshtastic channel URL encodes.
"""

from google.protobuf.internal import builder as _builder

from . import channel_pb2, config_pb2  # noqa: F401
from ._schema import field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/apponly.proto',
    dependencies=['meshtastic/channel.proto', 'meshtastic/config.proto'],
    messages=[
        message('ChannelSet', [
            field(1, 'settings', message='meshtastic.ChannelSettings', repeated=True),
            field(2, 'lora_config', message='meshtastic.Config.LoRaConfig'),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
