"""
Bindings for meshtastic/mqtt.proto.

ServiceEnvelope is what gateways publish on the MQTT broker: the packet as
heard on the mesh plus the channel and gateway it was heard on.
"""

from google.protobuf.internal import builder as _builder

from . import config_pb2, mesh_pb2  # noqa: F401
from ._schema import BOOL, INT32, SFIXED32, STRING, UINT32, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/mqtt.proto',
    dependencies=['meshtastic/config.proto', 'meshtastic/mesh.proto'],
    messages=[
        message('ServiceEnvelope', [
            field(1, 'packet', message='meshtastic.MeshPacket'),
            field(2, 'channel_id', STRING),
            field(3, 'gateway_id', STRING),
        ]),
        message('MapReport', [
            field(1, 'long_name', STRING),
            field(2, 'short_name', STRING),
            field(3, 'role', enum='meshtastic.Config.DeviceConfig.Role'),
            field(4, 'hw_model', enum='meshtastic.HardwareModel'),
            field(5, 'firmware_version', STRING),
            field(6, 'region', enum='meshtastic.Config.LoRaConfig.RegionCode'),
            field(7, 'modem_preset', enum='meshtastic.Config.LoRaConfig.ModemPreset'),
            field(8, 'has_default_channel', BOOL),
            field(9, 'latitude_i', SFIXED32),
            field(10, 'longitude_i', SFIXED32),
            field(11, 'altitude', INT32),
            field(12, 'position_precision', UINT32),
            field(13, 'num_online_local_nodes', UINT32),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
