"""
Bindings for meshtastic/config.proto.

Config wraps one section of the radio configuration in its payload_variant
oneof; each section is a nested message (Config.DeviceConfig, Config.LoRaConfig, ...).
"""

from google.protobuf.internal import builder as _builder

from ._schema import BOOL, FIXED32, FLOAT, INT32, STRING, UINT32, UINT64, enum, field, message, proto_file, register

_device = message('DeviceConfig', [
    field(1, 'role', enum='meshtastic.Config.DeviceConfig.Role'),
    field(2, 'serial_enabled', BOOL),
    field(3, 'debug_log_enabled', BOOL),
    field(4, 'button_gpio', UINT32),
    field(5, 'buzzer_gpio', UINT32),
    field(6, 'rebroadcast_mode', enum='meshtastic.Config.DeviceConfig.RebroadcastMode'),
    field(7, 'node_info_broadcast_secs', UINT32),
    field(8, 'double_tap_as_button_press', BOOL),
    field(9, 'is_managed', BOOL),
    field(10, 'disable_triple_click', BOOL),
    field(11, 'tzdef', STRING),
    field(12, 'led_heartbeat_disabled', BOOL),
], enums=[
    enum('Role', [
        ('CLIENT', 0), ('CLIENT_MUTE', 1), ('ROUTER', 2), ('ROUTER_CLIENT', 3),
        ('REPEATER', 4), ('TRACKER', 5), ('SENSOR', 6), ('TAK', 7),
        ('CLIENT_HIDDEN', 8), ('LOST_AND_FOUND', 9), ('TAK_TRACKER', 10),
    ]),
    enum('RebroadcastMode', [
        ('ALL', 0), ('ALL_SKIP_DECODING', 1), ('LOCAL_ONLY', 2), ('KNOWN_ONLY', 3),
    ]),
])

_position = message('PositionConfig', [
    field(1, 'position_broadcast_secs', UINT32),
    field(2, 'position_broadcast_smart_enabled', BOOL),
    field(3, 'fixed_position', BOOL),
    field(4, 'gps_enabled', BOOL, deprecated=True),
    field(5, 'gps_update_interval', UINT32),
    field(6, 'gps_attempt_time', UINT32, deprecated=True),
    field(7, 'position_flags', UINT32),
    field(8, 'rx_gpio', UINT32),
    field(9, 'tx_gpio', UINT32),
    field(10, 'broadcast_smart_minimum_distance', UINT32),
    field(11, 'broadcast_smart_minimum_interval_secs', UINT32),
    field(12, 'gps_en_gpio', UINT32),
    field(13, 'gps_mode', enum='meshtastic.Config.PositionConfig.GpsMode'),
], enums=[
    enum('PositionFlags', [
        ('UNSET', 0), ('ALTITUDE', 1), ('ALTITUDE_MSL', 2), ('GEOIDAL_SEPARATION', 4),
        ('DOP', 8), ('HVDOP', 16), ('SATINVIEW', 32), ('SEQ_NO', 64),
        ('TIMESTAMP', 128), ('HEADING', 256), ('SPEED', 512),
    ]),
    enum('GpsMode', [('DISABLED', 0), ('ENABLED', 1), ('NOT_PRESENT', 2)]),
])

_power = message('PowerConfig', [
    field(1, 'is_power_saving', BOOL),
    field(2, 'on_battery_shutdown_after_secs', UINT32),
    field(3, 'adc_multiplier_override', FLOAT),
    field(4, 'wait_bluetooth_secs', UINT32),
    field(6, 'sds_secs', UINT32),
    field(7, 'ls_secs', UINT32),
    field(8, 'min_wake_secs', UINT32),
    field(9, 'device_battery_ina_address', UINT32),
    field(32, 'powermon_enables', UINT64),
])

_network = message('NetworkConfig', [
    field(1, 'wifi_enabled', BOOL),
    field(3, 'wifi_ssid', STRING),
    field(4, 'wifi_psk', STRING),
    field(5, 'ntp_server', STRING),
    field(6, 'eth_enabled', BOOL),
    field(7, 'address_mode', enum='meshtastic.Config.NetworkConfig.AddressMode'),
    field(8, 'ipv4_config', message='meshtastic.Config.NetworkConfig.IpV4Config'),
    field(9, 'rsyslog_server', STRING),
], nested=[
    message('IpV4Config', [
        field(1, 'ip', FIXED32),
        field(2, 'gateway', FIXED32),
        field(3, 'subnet', FIXED32),
        field(4, 'dns', FIXED32),
    ]),
], enums=[
    enum('AddressMode', [('DHCP', 0), ('STATIC', 1)]),
])

_display = message('DisplayConfig', [
    field(1, 'screen_on_secs', UINT32),
    field(2, 'gps_format', enum='meshtastic.Config.DisplayConfig.GpsCoordinateFormat'),
    field(3, 'auto_screen_carousel_secs', UINT32),
    field(4, 'compass_north_top', BOOL),
    field(5, 'flip_screen', BOOL),
    field(6, 'units', enum='meshtastic.Config.DisplayConfig.DisplayUnits'),
    field(7, 'oled', enum='meshtastic.Config.DisplayConfig.OledType'),
    field(8, 'displaymode', enum='meshtastic.Config.DisplayConfig.DisplayMode'),
    field(9, 'heading_bold', BOOL),
    field(10, 'wake_on_tap_or_motion', BOOL),
    field(11, 'compass_orientation', enum='meshtastic.Config.DisplayConfig.CompassOrientation'),
], enums=[
    enum('GpsCoordinateFormat', [
        ('DEC', 0), ('DMS', 1), ('UTM', 2), ('MGRS', 3), ('OLC', 4), ('OSGR', 5),
    ]),
    enum('DisplayUnits', [('METRIC', 0), ('IMPERIAL', 1)]),
    enum('OledType', [
        ('OLED_AUTO', 0), ('OLED_SSD1306', 1), ('OLED_SH1106', 2), ('OLED_SH1107', 3),
    ]),
    enum('DisplayMode', [('DEFAULT', 0), ('TWOCOLOR', 1), ('INVERTED', 2), ('COLOR', 3)]),
    enum('CompassOrientation', [
        ('DEGREES_0', 0), ('DEGREES_90', 1), ('DEGREES_180', 2), ('DEGREES_270', 3),
        ('DEGREES_0_INVERTED', 4), ('DEGREES_90_INVERTED', 5),
        ('DEGREES_180_INVERTED', 6), ('DEGREES_270_INVERTED', 7),
    ]),
])

_lora = message('LoRaConfig', [
    field(1, 'use_preset', BOOL),
    field(2, 'modem_preset', enum='meshtastic.Config.LoRaConfig.ModemPreset'),
    field(3, 'bandwidth', UINT32),
    field(4, 'spread_factor', UINT32),
    field(5, 'coding_rate', UINT32),
    field(6, 'frequency_offset', FLOAT),
    field(7, 'region', enum='meshtastic.Config.LoRaConfig.RegionCode'),
    field(8, 'hop_limit', UINT32),
    field(9, 'tx_enabled', BOOL),
    field(10, 'tx_power', INT32),
    field(11, 'channel_num', UINT32),
    field(12, 'override_duty_cycle', BOOL),
    field(13, 'sx126x_rx_boosted_gain', BOOL),
    field(14, 'override_frequency', FLOAT),
    field(15, 'pa_fan_disabled', BOOL),
    field(103, 'ignore_incoming', UINT32, repeated=True),
    field(104, 'ignore_mqtt', BOOL),
], enums=[
    enum('RegionCode', [
        ('UNSET', 0), ('US', 1), ('EU_433', 2), ('EU_868', 3), ('CN', 4), ('JP', 5),
        ('ANZ', 6), ('KR', 7), ('TW', 8), ('RU', 9), ('IN', 10), ('NZ_865', 11),
        ('TH', 12), ('LORA_24', 13), ('UA_433', 14), ('UA_868', 15), ('MY_433', 16),
        ('MY_919', 17), ('SG_923', 18),
    ]),
    enum('ModemPreset', [
        ('LONG_FAST', 0), ('LONG_SLOW', 1), ('VERY_LONG_SLOW', 2), ('MEDIUM_SLOW', 3),
        ('MEDIUM_FAST', 4), ('SHORT_SLOW', 5), ('SHORT_FAST', 6), ('LONG_MODERATE', 7),
    ]),
])

_bluetooth = message('BluetoothConfig', [
    field(1, 'enabled', BOOL),
    field(2, 'mode', enum='meshtastic.Config.BluetoothConfig.PairingMode'),
    field(3, 'fixed_pin', UINT32),
    field(4, 'device_logging_enabled', BOOL),
], enums=[
    enum('PairingMode', [('RANDOM_PIN', 0), ('FIXED_PIN', 1), ('NO_PIN', 2)]),
])

DESCRIPTOR = register(proto_file(
    'meshtastic/config.proto',
    messages=[
        message('Config', [
            field(1, 'device', message='meshtastic.Config.DeviceConfig', oneof='payload_variant'),
            field(2, 'position', message='meshtastic.Config.PositionConfig', oneof='payload_variant'),
            field(3, 'power', message='meshtastic.Config.PowerConfig', oneof='payload_variant'),
            field(4, 'network', message='meshtastic.Config.NetworkConfig', oneof='payload_variant'),
            field(5, 'display', message='meshtastic.Config.DisplayConfig', oneof='payload_variant'),
            field(6, 'lora', message='meshtastic.Config.LoRaConfig', oneof='payload_variant'),
            field(7, 'bluetooth', message='meshtastic.Config.BluetoothConfig', oneof='payload_variant'),
        ], nested=[_device, _position, _power, _network, _display, _lora, _bluetooth]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
