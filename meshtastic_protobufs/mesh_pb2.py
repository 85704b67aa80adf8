"""
Bindings for meshtastic/mesh.proto.

The core of the protocol: MeshPacket and its Data payload, the FromRadio /
ToRadio envelopes exchanged with a device over its client API, and the node
database records (NodeInfo, User, Position).
"""

from google.protobuf.internal import builder as _builder

from . import channel_pb2, config_pb2, module_config_pb2, portnums_pb2, telemetry_pb2, xmodem_pb2  # noqa: F401
from ._schema import (
    BOOL, BYTES, FIXED32, FLOAT, INT32, SFIXED32, SINT32, STRING, UINT32,
    enum, field, message, proto_file, register,
)

_position = message('Position', [
    field(1, 'latitude_i', SFIXED32),
    field(2, 'longitude_i', SFIXED32),
    field(3, 'altitude', INT32),
    field(4, 'time', FIXED32),
    field(5, 'location_source', enum='meshtastic.Position.LocSource'),
    field(6, 'altitude_source', enum='meshtastic.Position.AltSource'),
    field(7, 'timestamp', FIXED32),
    field(8, 'timestamp_millis_adjust', INT32),
    field(9, 'altitude_hae', SINT32),
    field(10, 'altitude_geoidal_separation', SINT32),
    field(11, 'PDOP', UINT32),
    field(12, 'HDOP', UINT32),
    field(13, 'VDOP', UINT32),
    field(14, 'gps_accuracy', UINT32),
    field(15, 'ground_speed', UINT32),
    field(16, 'ground_track', UINT32),
    field(17, 'fix_quality', UINT32),
    field(18, 'fix_type', UINT32),
    field(19, 'sats_in_view', UINT32),
    field(20, 'sensor_id', UINT32),
    field(21, 'next_update', UINT32),
    field(22, 'seq_number', UINT32),
    field(23, 'precision_bits', UINT32),
], enums=[
    enum('LocSource', [('LOC_UNSET', 0), ('LOC_MANUAL', 1), ('LOC_INTERNAL', 2), ('LOC_EXTERNAL', 3)]),
    enum('AltSource', [
        ('ALT_UNSET', 0), ('ALT_MANUAL', 1), ('ALT_INTERNAL', 2), ('ALT_EXTERNAL', 3), ('ALT_BAROMETRIC', 4),
    ]),
])

_user = message('User', [
    field(1, 'id', STRING),
    field(2, 'long_name', STRING),
    field(3, 'short_name', STRING),
    field(4, 'macaddr', BYTES, deprecated=True),
    field(5, 'hw_model', enum='meshtastic.HardwareModel'),
    field(6, 'is_licensed', BOOL),
    field(7, 'role', enum='meshtastic.Config.DeviceConfig.Role'),
])

_routing = message('Routing', [
    field(1, 'route_request', message='meshtastic.RouteDiscovery', oneof='variant'),
    field(2, 'route_reply', message='meshtastic.RouteDiscovery', oneof='variant'),
    field(3, 'error_reason', enum='meshtastic.Routing.Error', oneof='variant'),
], enums=[
    enum('Error', [
        ('NONE', 0), ('NO_ROUTE', 1), ('GOT_NAK', 2), ('TIMEOUT', 3), ('NO_INTERFACE', 4),
        ('MAX_RETRANSMIT', 5), ('NO_CHANNEL', 6), ('TOO_LARGE', 7), ('NO_RESPONSE', 8),
        ('DUTY_CYCLE_LIMIT', 9), ('BAD_REQUEST', 32), ('NOT_AUTHORIZED', 33),
    ]),
])

_data = message('Data', [
    field(1, 'portnum', enum='meshtastic.PortNum'),
    field(2, 'payload', BYTES),
    field(3, 'want_response', BOOL),
    field(4, 'dest', FIXED32),
    field(5, 'source', FIXED32),
    field(6, 'request_id', FIXED32),
    field(7, 'reply_id', FIXED32),
    field(8, 'emoji', FIXED32),
])

_waypoint = message('Waypoint', [
    field(1, 'id', UINT32),
    field(2, 'latitude_i', SFIXED32),
    field(3, 'longitude_i', SFIXED32),
    field(4, 'expire', UINT32),
    field(5, 'locked_to', UINT32),
    field(6, 'name', STRING),
    field(7, 'description', STRING),
    field(8, 'icon', FIXED32),
])

_mqtt_proxy = message('MqttClientProxyMessage', [
    field(1, 'topic', STRING),
    field(2, 'data', BYTES, oneof='payload_variant'),
    field(3, 'text', STRING, oneof='payload_variant'),
    field(4, 'retained', BOOL),
])

_mesh_packet = message('MeshPacket', [
    field(1, 'from', FIXED32),
    field(2, 'to', FIXED32),
    field(3, 'channel', UINT32),
    field(4, 'decoded', message='meshtastic.Data', oneof='payload_variant'),
    field(5, 'encrypted', BYTES, oneof='payload_variant'),
    field(6, 'id', FIXED32),
    field(7, 'rx_time', FIXED32),
    field(8, 'rx_snr', FLOAT),
    field(9, 'hop_limit', UINT32),
    field(10, 'want_ack', BOOL),
    field(11, 'priority', enum='meshtastic.MeshPacket.Priority'),
    field(12, 'rx_rssi', INT32),
    field(13, 'delayed', enum='meshtastic.MeshPacket.Delayed', deprecated=True),
    field(14, 'via_mqtt', BOOL),
    field(15, 'hop_start', UINT32),
], enums=[
    enum('Priority', [
        ('UNSET', 0), ('MIN', 1), ('BACKGROUND', 10), ('DEFAULT', 64),
        ('RELIABLE', 70), ('ACK', 120), ('MAX', 127),
    ]),
    enum('Delayed', [('NO_DELAY', 0), ('DELAYED_BROADCAST', 1), ('DELAYED_DIRECT', 2)]),
])

_node_info = message('NodeInfo', [
    field(1, 'num', UINT32),
    field(2, 'user', message='meshtastic.User'),
    field(3, 'position', message='meshtastic.Position'),
    field(4, 'snr', FLOAT),
    field(5, 'last_heard', FIXED32),
    field(6, 'device_metrics', message='meshtastic.DeviceMetrics'),
    field(7, 'channel', UINT32),
    field(8, 'via_mqtt', BOOL),
    field(9, 'hops_away', UINT32),
    field(10, 'is_favorite', BOOL),
])

_my_node_info = message('MyNodeInfo', [
    field(1, 'my_node_num', UINT32),
    field(8, 'reboot_count', UINT32),
    field(11, 'min_app_version', UINT32),
])

_log_record = message('LogRecord', [
    field(1, 'message', STRING),
    field(2, 'time', FIXED32),
    field(3, 'source', STRING),
    field(4, 'level', enum='meshtastic.LogRecord.Level'),
], enums=[
    enum('Level', [
        ('UNSET', 0), ('CRITICAL', 50), ('ERROR', 40), ('WARNING', 30),
        ('INFO', 20), ('DEBUG', 10), ('TRACE', 5),
    ]),
])

_queue_status = message('QueueStatus', [
    field(1, 'res', INT32),
    field(2, 'free', UINT32),
    field(3, 'maxlen', UINT32),
    field(4, 'mesh_packet_id', UINT32),
])

_from_radio = message('FromRadio', [
    field(1, 'id', UINT32),
    field(2, 'packet', message='meshtastic.MeshPacket', oneof='payload_variant'),
    field(3, 'my_info', message='meshtastic.MyNodeInfo', oneof='payload_variant'),
    field(4, 'node_info', message='meshtastic.NodeInfo', oneof='payload_variant'),
    field(5, 'config', message='meshtastic.Config', oneof='payload_variant'),
    field(6, 'log_record', message='meshtastic.LogRecord', oneof='payload_variant'),
    field(7, 'config_complete_id', UINT32, oneof='payload_variant'),
    field(8, 'rebooted', BOOL, oneof='payload_variant'),
    field(9, 'moduleConfig', message='meshtastic.ModuleConfig', oneof='payload_variant'),
    field(10, 'channel', message='meshtastic.Channel', oneof='payload_variant'),
    field(11, 'queueStatus', message='meshtastic.QueueStatus', oneof='payload_variant'),
    field(12, 'xmodemPacket', message='meshtastic.XModem', oneof='payload_variant'),
    field(13, 'metadata', message='meshtastic.DeviceMetadata', oneof='payload_variant'),
    field(14, 'mqttClientProxyMessage', message='meshtastic.MqttClientProxyMessage', oneof='payload_variant'),
    field(15, 'fileInfo', message='meshtastic.FileInfo', oneof='payload_variant'),
])

_file_info = message('FileInfo', [
    field(1, 'file_name', STRING),
    field(2, 'size_bytes', UINT32),
])

_to_radio = message('ToRadio', [
    field(1, 'packet', message='meshtastic.MeshPacket', oneof='payload_variant'),
    field(3, 'want_config_id', UINT32, oneof='payload_variant'),
    field(4, 'disconnect', BOOL, oneof='payload_variant'),
    field(5, 'xmodemPacket', message='meshtastic.XModem', oneof='payload_variant'),
    field(6, 'mqttClientProxyMessage', message='meshtastic.MqttClientProxyMessage', oneof='payload_variant'),
    field(7, 'heartbeat', message='meshtastic.Heartbeat', oneof='payload_variant'),
])

_neighbor_info = message('NeighborInfo', [
    field(1, 'node_id', UINT32),
    field(2, 'last_sent_by_id', UINT32),
    field(3, 'node_broadcast_interval_secs', UINT32),
    field(4, 'neighbors', message='meshtastic.Neighbor', repeated=True),
])

_neighbor = message('Neighbor', [
    field(1, 'node_id', UINT32),
    field(2, 'snr', FLOAT),
    field(3, 'last_rx_time', FIXED32),
    field(4, 'node_broadcast_interval_secs', UINT32),
])

_device_metadata = message('DeviceMetadata', [
    field(1, 'firmware_version', STRING),
    field(2, 'device_state_version', UINT32),
    field(3, 'canShutdown', BOOL),
    field(4, 'hasWifi', BOOL),
    field(5, 'hasBluetooth', BOOL),
    field(6, 'hasEthernet', BOOL),
    field(7, 'role', enum='meshtastic.Config.DeviceConfig.Role'),
    field(8, 'position_flags', UINT32),
    field(9, 'hw_model', enum='meshtastic.HardwareModel'),
    field(10, 'hasRemoteHardware', BOOL),
])

_chunked_payload = message('ChunkedPayload', [
    field(1, 'payload_id', UINT32),
    field(2, 'chunk_count', UINT32),
    field(3, 'chunk_index', UINT32),
    field(4, 'payload_chunk', BYTES),
])

_chunked_payload_response = message('ChunkedPayloadResponse', [
    field(1, 'payload_id', UINT32),
    field(2, 'request_transfer', BOOL, oneof='payload_variant'),
    field(3, 'accept_transfer', BOOL, oneof='payload_variant'),
    field(4, 'resend_chunks', message='meshtastic.resend_chunks', oneof='payload_variant'),
])

DESCRIPTOR = register(proto_file(
    'meshtastic/mesh.proto',
    dependencies=[
        'meshtastic/channel.proto',
        'meshtastic/config.proto',
        'meshtastic/module_config.proto',
        'meshtastic/portnums.proto',
        'meshtastic/telemetry.proto',
        'meshtastic/xmodem.proto',
    ],
    messages=[
        _position,
        _user,
        message('RouteDiscovery', [field(1, 'route', FIXED32, repeated=True)]),
        _routing,
        _data,
        _waypoint,
        _mqtt_proxy,
        _mesh_packet,
        _node_info,
        _my_node_info,
        _log_record,
        _queue_status,
        _from_radio,
        _file_info,
        _to_radio,
        message('Compressed', [
            field(1, 'portnum', enum='meshtastic.PortNum'),
            field(2, 'data', BYTES),
        ]),
        _neighbor_info,
        _neighbor,
        _device_metadata,
        message('Heartbeat'),
        message('NodeRemoteHardwarePin', [
            field(1, 'node_num', UINT32),
            field(2, 'pin', message='meshtastic.RemoteHardwarePin'),
        ]),
        _chunked_payload,
        message('resend_chunks', [field(1, 'chunks', UINT32, repeated=True)]),
        _chunked_payload_response,
    ],
    enums=[
        enum('HardwareModel', [
            ('UNSET', 0), ('TLORA_V2', 1), ('TLORA_V1', 2), ('TLORA_V2_1_1P6', 3),
            ('TBEAM', 4), ('HELTEC_V2_0', 5), ('TBEAM_V0P7', 6), ('T_ECHO', 7),
            ('TLORA_V1_1P3', 8), ('RAK4631', 9), ('HELTEC_V2_1', 10), ('HELTEC_V1', 11),
            ('LILYGO_TBEAM_S3_CORE', 12), ('RAK11200', 13), ('NANO_G1', 14), ('TLORA_V2_1_1P8', 15),
            ('TLORA_T3_S3', 16), ('NANO_G1_EXPLORER', 17), ('NANO_G2_ULTRA', 18), ('LORA_TYPE', 19),
            ('WIPHONE', 20), ('WIO_WM1110', 21), ('RAK2560', 22), ('HELTEC_HRU_3601', 23),
            ('STATION_G1', 25), ('RAK11310', 26), ('SENSELORA_RP2040', 27), ('SENSELORA_S3', 28),
            ('CANARYONE', 29), ('RP2040_LORA', 30), ('STATION_G2', 31), ('LORA_RELAY_V1', 32),
            ('NRF52840DK', 33), ('PPR', 34), ('GENIEBLOCKS', 35), ('NRF52_UNKNOWN', 36),
            ('PORTDUINO', 37), ('ANDROID_SIM', 38), ('DIY_V1', 39), ('NRF52840_PCA10059', 40),
            ('DR_DEV', 41), ('M5STACK', 42), ('HELTEC_V3', 43), ('HELTEC_WSL_V3', 44),
            ('BETAFPV_2400_TX', 45), ('BETAFPV_900_NANO_TX', 46), ('RPI_PICO', 47),
            ('HELTEC_WIRELESS_TRACKER', 48), ('HELTEC_WIRELESS_PAPER', 49), ('T_DECK', 50),
            ('T_WATCH_S3', 51), ('PICOMPUTER_S3', 52), ('HELTEC_HT62', 53), ('EBYTE_ESP32_S3', 54),
            ('ESP32_S3_PICO', 55), ('CHATTER_2', 56), ('HELTEC_WIRELESS_PAPER_V1_0', 57),
            ('HELTEC_WIRELESS_TRACKER_V1_0', 58), ('UNPHONE', 59), ('TD_LORAC', 60),
            ('CDEBYTE_EORA_S3', 61), ('TWC_MESH_V4', 62), ('NRF52_PROMICRO_DIY', 63),
            ('RADIOMASTER_900_BANDIT_NANO', 64), ('HELTEC_CAPSULE_SENSOR_V3', 65),
            ('HELTEC_VISION_MASTER_T190', 66), ('HELTEC_VISION_MASTER_E213', 67),
            ('HELTEC_VISION_MASTER_E290', 68), ('HELTEC_MESH_NODE_T114', 69),
            ('SENSECAP_INDICATOR', 70), ('TRACKER_T1000_E', 71), ('RAK3172', 72), ('WIO_E5', 73),
            ('RADIOMASTER_900_BANDIT', 74), ('PRIVATE_HW', 255),
        ]),
        enum('Constants', [('ZERO', 0), ('DATA_PAYLOAD_LEN', 237)]),
        enum('CriticalErrorCode', [
            ('NONE', 0), ('TX_WATCHDOG', 1), ('SLEEP_ENTER_WAIT', 2), ('NO_RADIO', 3),
            ('UNSPECIFIED', 4), ('UBLOX_UNIT_FAILED', 5), ('NO_AXP192', 6),
            ('INVALID_RADIO_SETTING', 7), ('TRANSMIT_FAILED', 8), ('BROWNOUT', 9),
            ('SX1262_FAILURE', 10), ('RADIO_SPI_BUG', 11), ('FLASH_CORRUPTION_RECOVERABLE', 12),
            ('FLASH_CORRUPTION_UNRECOVERABLE', 13),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
