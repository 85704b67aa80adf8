"""
Bindings for meshtastic/module_config.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import BOOL, INT32, STRING, UINT32, enum, field, message, proto_file, register

_PFX = 'meshtastic.ModuleConfig.'

_mqtt = message('MQTTConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'address', STRING),
    field(3, 'username', STRING),
    field(4, 'password', STRING),
    field(5, 'encryption_enabled', BOOL),
    field(6, 'json_enabled', BOOL),
    field(7, 'tls_enabled', BOOL),
    field(8, 'root', STRING),
    field(9, 'proxy_to_client_enabled', BOOL),
    field(10, 'map_reporting_enabled', BOOL),
    field(11, 'map_report_settings', message=_PFX + 'MapReportSettings'),
])

_map_report_settings = message('MapReportSettings', [
    field(1, 'publish_interval_secs', UINT32),
    field(2, 'position_precision', UINT32),
])

_remote_hardware = message('RemoteHardwareConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'allow_undefined_pin_access', BOOL),
    field(3, 'available_pins', message='meshtastic.RemoteHardwarePin', repeated=True),
])

_neighbor_info = message('NeighborInfoConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'update_interval', UINT32),
])

_detection_sensor = message('DetectionSensorConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'minimum_broadcast_secs', UINT32),
    field(3, 'state_broadcast_secs', UINT32),
    field(4, 'send_bell', BOOL),
    field(5, 'name', STRING),
    field(6, 'monitor_pin', UINT32),
    field(7, 'detection_triggered_high', BOOL),
    field(8, 'use_pullup', BOOL),
])

_audio = message('AudioConfig', [
    field(1, 'codec2_enabled', BOOL),
    field(2, 'ptt_pin', UINT32),
    field(3, 'bitrate', enum=_PFX + 'AudioConfig.Audio_Baud'),
    field(4, 'i2s_ws', UINT32),
    field(5, 'i2s_sd', UINT32),
    field(6, 'i2s_din', UINT32),
    field(7, 'i2s_sck', UINT32),
], enums=[
    enum('Audio_Baud', [
        ('CODEC2_DEFAULT', 0), ('CODEC2_3200', 1), ('CODEC2_2400', 2), ('CODEC2_1600', 3),
        ('CODEC2_1400', 4), ('CODEC2_1300', 5), ('CODEC2_1200', 6), ('CODEC2_700', 7),
        ('CODEC2_700B', 8),
    ]),
])

_paxcounter = message('PaxcounterConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'paxcounter_update_interval', UINT32),
    field(3, 'wifi_threshold', INT32),
    field(4, 'ble_threshold', INT32),
])

_serial = message('SerialConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'echo', BOOL),
    field(3, 'rxd', UINT32),
    field(4, 'txd', UINT32),
    field(5, 'baud', enum=_PFX + 'SerialConfig.Serial_Baud'),
    field(6, 'timeout', UINT32),
    field(7, 'mode', enum=_PFX + 'SerialConfig.Serial_Mode'),
    field(8, 'override_console_serial_port', BOOL),
], enums=[
    enum('Serial_Baud', [
        ('BAUD_DEFAULT', 0), ('BAUD_110', 1), ('BAUD_300', 2), ('BAUD_600', 3),
        ('BAUD_1200', 4), ('BAUD_2400', 5), ('BAUD_4800', 6), ('BAUD_9600', 7),
        ('BAUD_19200', 8), ('BAUD_38400', 9), ('BAUD_57600', 10), ('BAUD_115200', 11),
        ('BAUD_230400', 12), ('BAUD_460800', 13), ('BAUD_576000', 14), ('BAUD_921600', 15),
    ]),
    enum('Serial_Mode', [
        ('DEFAULT', 0), ('SIMPLE', 1), ('PROTO', 2), ('TEXTMSG', 3), ('NMEA', 4),
        ('CALTOPO', 5), ('WS85', 6),
    ]),
])

# Field order follows the declaration order of the .proto file, not tag order
_external_notification = message('ExternalNotificationConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'output_ms', UINT32),
    field(3, 'output', UINT32),
    field(8, 'output_vibra', UINT32),
    field(9, 'output_buzzer', UINT32),
    field(4, 'active', BOOL),
    field(5, 'alert_message', BOOL),
    field(10, 'alert_message_vibra', BOOL),
    field(11, 'alert_message_buzzer', BOOL),
    field(6, 'alert_bell', BOOL),
    field(12, 'alert_bell_vibra', BOOL),
    field(13, 'alert_bell_buzzer', BOOL),
    field(7, 'use_pwm', BOOL),
    field(14, 'nag_timeout', UINT32),
    field(15, 'use_i2s_as_buzzer', BOOL),
])

_store_forward = message('StoreForwardConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'heartbeat', BOOL),
    field(3, 'records', UINT32),
    field(4, 'history_return_max', UINT32),
    field(5, 'history_return_window', UINT32),
    field(6, 'is_server', BOOL),
])

_range_test = message('RangeTestConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'sender', UINT32),
    field(3, 'save', BOOL),
])

_telemetry = message('TelemetryConfig', [
    field(1, 'device_update_interval', UINT32),
    field(2, 'environment_update_interval', UINT32),
    field(3, 'environment_measurement_enabled', BOOL),
    field(4, 'environment_screen_enabled', BOOL),
    field(5, 'environment_display_fahrenheit', BOOL),
    field(6, 'air_quality_enabled', BOOL),
    field(7, 'air_quality_interval', UINT32),
    field(8, 'power_measurement_enabled', BOOL),
    field(9, 'power_update_interval', UINT32),
    field(10, 'power_screen_enabled', BOOL),
])

_input_event = _PFX + 'CannedMessageConfig.InputEventChar'

_canned_message = message('CannedMessageConfig', [
    field(1, 'rotary1_enabled', BOOL),
    field(2, 'inputbroker_pin_a', UINT32),
    field(3, 'inputbroker_pin_b', UINT32),
    field(4, 'inputbroker_pin_press', UINT32),
    field(5, 'inputbroker_event_cw', enum=_input_event),
    field(6, 'inputbroker_event_ccw', enum=_input_event),
    field(7, 'inputbroker_event_press', enum=_input_event),
    field(8, 'updown1_enabled', BOOL),
    field(9, 'enabled', BOOL),
    field(10, 'allow_input_source', STRING),
    field(11, 'send_bell', BOOL),
], enums=[
    enum('InputEventChar', [
        ('NONE', 0), ('UP', 17), ('DOWN', 18), ('LEFT', 19), ('RIGHT', 20),
        ('SELECT', 10), ('BACK', 27), ('CANCEL', 24),
    ]),
])

_ambient_lighting = message('AmbientLightingConfig', [
    field(1, 'led_state', BOOL),
    field(2, 'current', UINT32),
    field(3, 'red', UINT32),
    field(4, 'green', UINT32),
    field(5, 'blue', UINT32),
])


def _variant(number, name, type_name):
    return field(number, name, message=_PFX + type_name, oneof='payload_variant')


DESCRIPTOR = register(proto_file(
    'meshtastic/module_config.proto',
    messages=[
        message('ModuleConfig', [
            _variant(1, 'mqtt', 'MQTTConfig'),
            _variant(2, 'serial', 'SerialConfig'),
            _variant(3, 'external_notification', 'ExternalNotificationConfig'),
            _variant(4, 'store_forward', 'StoreForwardConfig'),
            _variant(5, 'range_test', 'RangeTestConfig'),
            _variant(6, 'telemetry', 'TelemetryConfig'),
            _variant(7, 'canned_message', 'CannedMessageConfig'),
            _variant(8, 'audio', 'AudioConfig'),
            _variant(9, 'remote_hardware', 'RemoteHardwareConfig'),
            _variant(10, 'neighbor_info', 'NeighborInfoConfig'),
            _variant(11, 'ambient_lighting', 'AmbientLightingConfig'),
            _variant(12, 'detection_sensor', 'DetectionSensorConfig'),
            _variant(13, 'paxcounter', 'PaxcounterConfig'),
        ], nested=[
            _mqtt, _map_report_settings, _remote_hardware, _neighbor_info, _detection_sensor,
            _audio, _paxcounter, _serial, _external_notification, _store_forward,
            _range_test, _telemetry, _canned_message, _ambient_lighting,
        ]),
        message('RemoteHardwarePin', [
            field(1, 'gpio_pin', UINT32),
            field(2, 'name', STRING),
            field(3, 'type', enum='meshtastic.RemoteHardwarePinType'),
        ]),
    ],
    enums=[
        enum('RemoteHardwarePinType', [('UNKNOWN', 0), ('DIGITAL_READ', 1), ('DIGITAL_WRITE', 2)]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
