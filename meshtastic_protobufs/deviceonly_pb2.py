"""
Bindings for meshtastic/deviceonly.proto.

These messages describe what the firmware persists to flash. Clients rarely
see them on the air but they appear in device backups.
"""

from google.protobuf.internal import builder as _builder

from . import channel_pb2, config_pb2, localonly_pb2, mesh_pb2, telemetry_pb2  # noqa: F401
from ._schema import (
    BOOL, BYTES, FIXED32, FLOAT, INT32, SFIXED32, STRING, UINT32,
    enum, field, message, proto_file, register,
)

DESCRIPTOR = register(proto_file(
    'meshtastic/deviceonly.proto',
    dependencies=[
        'meshtastic/channel.proto',
        'meshtastic/localonly.proto',
        'meshtastic/mesh.proto',
        'meshtastic/telemetry.proto',
        'meshtastic/config.proto',
    ],
    messages=[
        message('PositionLite', [
            field(1, 'latitude_i', SFIXED32),
            field(2, 'longitude_i', SFIXED32),
            field(3, 'altitude', INT32),
            field(4, 'time', FIXED32),
            field(5, 'location_source', enum='meshtastic.Position.LocSource'),
        ]),
        message('NodeInfoLite', [
            field(1, 'num', UINT32),
            field(2, 'user', message='meshtastic.User'),
            field(3, 'position', message='meshtastic.PositionLite'),
            field(4, 'snr', FLOAT),
            field(5, 'last_heard', FIXED32),
            field(6, 'device_metrics', message='meshtastic.DeviceMetrics'),
            field(7, 'channel', UINT32),
            field(8, 'via_mqtt', BOOL),
            field(9, 'hops_away', UINT32),
            field(10, 'is_favorite', BOOL),
        ]),
        message('DeviceState', [
            field(2, 'my_node', message='meshtastic.MyNodeInfo'),
            field(3, 'owner', message='meshtastic.User'),
            field(5, 'receive_queue', message='meshtastic.MeshPacket', repeated=True),
            field(8, 'version', UINT32),
            field(7, 'rx_text_message', message='meshtastic.MeshPacket'),
            field(9, 'no_save', BOOL, deprecated=True),
            field(11, 'did_gps_reset', BOOL),
            field(12, 'rx_waypoint', message='meshtastic.MeshPacket'),
            field(13, 'node_remote_hardware_pins', message='meshtastic.NodeRemoteHardwarePin', repeated=True),
            field(14, 'node_db_lite', message='meshtastic.NodeInfoLite', repeated=True),
        ]),
        message('ChannelFile', [
            field(1, 'channels', message='meshtastic.Channel', repeated=True),
            field(2, 'version', UINT32),
        ]),
        message('OEMStore', [
            field(1, 'oem_icon_width', UINT32),
            field(2, 'oem_icon_height', UINT32),
            field(3, 'oem_icon_bits', BYTES),
            field(4, 'oem_font', enum='meshtastic.ScreenFonts'),
            field(5, 'oem_text', STRING),
            field(6, 'oem_aes_key', BYTES),
            field(7, 'oem_local_config', message='meshtastic.LocalConfig'),
            field(8, 'oem_local_module_config', message='meshtastic.LocalModuleConfig'),
        ]),
    ],
    enums=[
        enum('ScreenFonts', [('FONT_SMALL', 0), ('FONT_MEDIUM', 1), ('FONT_LARGE', 2)]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
