"""
Bindings for meshtastic/localonly.proto.

LocalConfig and LocalModuleConfig hold every configuration section at once,
as stored on the device, rather than one section per Config message.
"""

from google.protobuf.internal import builder as _builder

from . import config_pb2, module_config_pb2  # noqa: F401
from ._schema import UINT32, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/localonly.proto',
    dependencies=['meshtastic/config.proto', 'meshtastic/module_config.proto'],
    messages=[
        message('LocalConfig', [
            field(1, 'device', message='meshtastic.Config.DeviceConfig'),
            field(2, 'position', message='meshtastic.Config.PositionConfig'),
            field(3, 'power', message='meshtastic.Config.PowerConfig'),
            field(4, 'network', message='meshtastic.Config.NetworkConfig'),
            field(5, 'display', message='meshtastic.Config.DisplayConfig'),
            field(6, 'lora', message='meshtastic.Config.LoRaConfig'),
            field(7, 'bluetooth', message='meshtastic.Config.BluetoothConfig'),
            field(8, 'version', UINT32),
        ]),
        message('LocalModuleConfig', [
            field(1, 'mqtt', message='meshtastic.ModuleConfig.MQTTConfig'),
            field(2, 'serial', message='meshtastic.ModuleConfig.SerialConfig'),
            field(3, 'external_notification', message='meshtastic.ModuleConfig.ExternalNotificationConfig'),
            field(4, 'store_forward', message='meshtastic.ModuleConfig.StoreForwardConfig'),
            field(5, 'range_test', message='meshtastic.ModuleConfig.RangeTestConfig'),
            field(6, 'telemetry', message='meshtastic.ModuleConfig.TelemetryConfig'),
            field(7, 'canned_message', message='meshtastic.ModuleConfig.CannedMessageConfig'),
            field(9, 'audio', message='meshtastic.ModuleConfig.AudioConfig'),
            field(10, 'remote_hardware', message='meshtastic.ModuleConfig.RemoteHardwareConfig'),
            field(11, 'neighbor_info', message='meshtastic.ModuleConfig.NeighborInfoConfig'),
            field(12, 'ambient_lighting', message='meshtastic.ModuleConfig.AmbientLightingConfig'),
            field(13, 'detection_sensor', message='meshtastic.ModuleConfig.DetectionSensorConfig'),
            field(14, 'paxcounter', message='meshtastic.ModuleConfig.PaxcounterConfig'),
            field(8, 'version', UINT32),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
