"""
Bindings for meshtastic/admin.proto.

AdminMessage is the payload of ADMIN_APP packets. Its payload_variant oneof
carries exactly one request, response or command.
"""

from google.protobuf.internal import builder as _builder

from . import channel_pb2, config_pb2, connection_status_pb2, mesh_pb2, module_config_pb2  # noqa: F401
from ._schema import BOOL, FLOAT, INT32, STRING, UINT32, enum, field, message, proto_file, register

_V = 'payload_variant'


def _msg(number, name, type_name):
    return field(number, name, message=f'meshtastic.{type_name}', oneof=_V)


DESCRIPTOR = register(proto_file(
    'meshtastic/admin.proto',
    dependencies=[
        'meshtastic/channel.proto',
        'meshtastic/config.proto',
        'meshtastic/connection_status.proto',
        'meshtastic/mesh.proto',
        'meshtastic/module_config.proto',
    ],
    messages=[
        message('AdminMessage', [
            field(1, 'get_channel_request', UINT32, oneof=_V),
            _msg(2, 'get_channel_response', 'Channel'),
            field(3, 'get_owner_request', BOOL, oneof=_V),
            _msg(4, 'get_owner_response', 'User'),
            field(5, 'get_config_request', enum='meshtastic.AdminMessage.ConfigType', oneof=_V),
            _msg(6, 'get_config_response', 'Config'),
            field(7, 'get_module_config_request', enum='meshtastic.AdminMessage.ModuleConfigType', oneof=_V),
            _msg(8, 'get_module_config_response', 'ModuleConfig'),
            field(10, 'get_canned_message_module_messages_request', BOOL, oneof=_V),
            field(11, 'get_canned_message_module_messages_response', STRING, oneof=_V),
            field(12, 'get_device_metadata_request', BOOL, oneof=_V),
            _msg(13, 'get_device_metadata_response', 'DeviceMetadata'),
            field(14, 'get_ringtone_request', BOOL, oneof=_V),
            field(15, 'get_ringtone_response', STRING, oneof=_V),
            field(16, 'get_device_connection_status_request', BOOL, oneof=_V),
            _msg(17, 'get_device_connection_status_response', 'DeviceConnectionStatus'),
            _msg(18, 'set_ham_mode', 'HamParameters'),
            field(19, 'get_node_remote_hardware_pins_request', BOOL, oneof=_V),
            _msg(20, 'get_node_remote_hardware_pins_response', 'NodeRemoteHardwarePinsResponse'),
            field(21, 'enter_dfu_mode_request', BOOL, oneof=_V),
            field(22, 'delete_file_request', STRING, oneof=_V),
            field(23, 'set_scale', UINT32, oneof=_V),
            _msg(32, 'set_owner', 'User'),
            _msg(33, 'set_channel', 'Channel'),
            _msg(34, 'set_config', 'Config'),
            _msg(35, 'set_module_config', 'ModuleConfig'),
            field(36, 'set_canned_message_module_messages', STRING, oneof=_V),
            field(37, 'set_ringtone_message', STRING, oneof=_V),
            field(38, 'remove_by_nodenum', UINT32, oneof=_V),
            field(39, 'set_favorite_node', UINT32, oneof=_V),
            field(40, 'remove_favorite_node', UINT32, oneof=_V),
            _msg(41, 'set_fixed_position', 'Position'),
            field(42, 'remove_fixed_position', BOOL, oneof=_V),
            field(64, 'begin_edit_settings', BOOL, oneof=_V),
            field(65, 'commit_edit_settings', BOOL, oneof=_V),
            field(94, 'factory_reset_device', INT32, oneof=_V),
            field(95, 'reboot_ota_seconds', INT32, oneof=_V),
            field(96, 'exit_simulator', BOOL, oneof=_V),
            field(97, 'reboot_seconds', INT32, oneof=_V),
            field(98, 'shutdown_seconds', INT32, oneof=_V),
            field(99, 'factory_reset_config', INT32, oneof=_V),
            field(100, 'nodedb_reset', INT32, oneof=_V),
        ], enums=[
            enum('ConfigType', [
                ('DEVICE_CONFIG', 0), ('POSITION_CONFIG', 1), ('POWER_CONFIG', 2),
                ('NETWORK_CONFIG', 3), ('DISPLAY_CONFIG', 4), ('LORA_CONFIG', 5),
                ('BLUETOOTH_CONFIG', 6),
            ]),
            enum('ModuleConfigType', [
                ('MQTT_CONFIG', 0), ('SERIAL_CONFIG', 1), ('EXTNOTIF_CONFIG', 2),
                ('STOREFORWARD_CONFIG', 3), ('RANGETEST_CONFIG', 4), ('TELEMETRY_CONFIG', 5),
                ('CANNEDMSG_CONFIG', 6), ('AUDIO_CONFIG', 7), ('REMOTEHARDWARE_CONFIG', 8),
                ('NEIGHBORINFO_CONFIG', 9), ('AMBIENTLIGHTING_CONFIG', 10),
                ('DETECTIONSENSOR_CONFIG', 11), ('PAXCOUNTER_CONFIG', 12),
            ]),
        ]),
        message('HamParameters', [
            field(1, 'call_sign', STRING),
            field(2, 'tx_power', INT32),
            field(3, 'frequency', FLOAT),
            field(4, 'short_name', STRING),
        ]),
        message('NodeRemoteHardwarePinsResponse', [
            field(1, 'node_remote_hardware_pins', message='meshtastic.NodeRemoteHardwarePin', repeated=True),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
