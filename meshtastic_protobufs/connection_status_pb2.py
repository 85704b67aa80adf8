"""
Bindings for meshtastic/connection_status.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import BOOL, FIXED32, INT32, STRING, UINT32, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/connection_status.proto',
    messages=[
        message('DeviceConnectionStatus', [
            field(1, 'wifi', message='meshtastic.WifiConnectionStatus'),
            field(2, 'ethernet', message='meshtastic.EthernetConnectionStatus'),
            field(3, 'bluetooth', message='meshtastic.BluetoothConnectionStatus'),
            field(4, 'serial', message='meshtastic.SerialConnectionStatus'),
        ]),
        message('WifiConnectionStatus', [
            field(1, 'status', message='meshtastic.NetworkConnectionStatus'),
            field(2, 'ssid', STRING),
            field(3, 'rssi', INT32),
        ]),
        message('EthernetConnectionStatus', [
            field(1, 'status', message='meshtastic.NetworkConnectionStatus'),
        ]),
        message('NetworkConnectionStatus', [
            field(1, 'ip_address', FIXED32),
            field(2, 'is_connected', BOOL),
            field(3, 'is_mqtt_connected', BOOL),
            field(4, 'is_syslog_connected', BOOL),
        ]),
        message('BluetoothConnectionStatus', [
            field(1, 'pin', UINT32),
            field(2, 'rssi', INT32),
            field(3, 'is_connected', BOOL),
        ]),
        message('SerialConnectionStatus', [
            field(1, 'baud', UINT32),
            field(2, 'is_connected', BOOL),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
