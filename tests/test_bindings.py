import pytest

from meshtastic_protobufs import (
    admin_pb2, apponly_pb2, atak_pb2, channel_pb2, clientonly_pb2, config_pb2, deviceonly_pb2,
    localonly_pb2, mesh_pb2, module_config_pb2, mqtt_pb2, nanopb_pb2, portnums_pb2, telemetry_pb2,
)


def test_meshpacket_header_is_fixed32():
    packet = mesh_pb2.MeshPacket(to=2, id=3)
    setattr(packet, 'from', 1)
    assert packet.SerializeToString() == (
        b'\x0d\x01\x00\x00\x00'
        b'\x15\x02\x00\x00\x00'
        b'\x35\x03\x00\x00\x00'
    )


def test_position_latitude_is_sfixed32():
    position = mesh_pb2.Position(latitude_i=-1)
    assert position.SerializeToString() == b'\x0d\xff\xff\xff\xff'


def test_position_altitude_hae_is_zigzag():
    position = mesh_pb2.Position(altitude_hae=-1)
    assert position.SerializeToString() == b'\x48\x01'


def test_lora_ignore_incoming_is_packed():
    lora = config_pb2.Config.LoRaConfig(ignore_incoming=[1, 2])
    assert lora.SerializeToString() == b'\xba\x06\x02\x01\x02'


def test_power_config_powermon_enables_is_uint64():
    power = config_pb2.Config.PowerConfig(powermon_enables=1 << 40)
    assert config_pb2.Config.PowerConfig.FromString(power.SerializeToString()).powermon_enables == 1 << 40


def test_enum_values_exposed_on_module():
    assert portnums_pb2.TEXT_MESSAGE_APP == 1
    assert portnums_pb2.PortNum.Value('MAP_REPORT_APP') == 73
    assert mesh_pb2.MeshPacket.Priority.Name(70) == 'RELIABLE'
    assert config_pb2.Config.LoRaConfig.ModemPreset.Name(0) == 'LONG_FAST'


def test_oneof_groups():
    from_radio = mesh_pb2.FromRadio(id=7)
    assert from_radio.WhichOneof('payload_variant') is None
    from_radio.config_complete_id = 42
    assert from_radio.WhichOneof('payload_variant') == 'config_complete_id'
    from_radio.rebooted = True
    assert from_radio.WhichOneof('payload_variant') == 'rebooted'
    assert not from_radio.HasField('config_complete_id')


def test_proto3_optional_tracks_presence():
    chat = atak_pb2.GeoChat(message='hi')
    assert not chat.HasField('to')
    chat.to = ''
    assert chat.HasField('to')
    assert atak_pb2.GeoChat.FromString(chat.SerializeToString()).HasField('to')


def test_device_profile_optional_fields():
    profile = clientonly_pb2.DeviceProfile(long_name='Base')
    assert profile.HasField('long_name')
    assert not profile.HasField('short_name')
    assert not profile.HasField('channel_url')


def test_deprecated_fields_marked():
    field = mesh_pb2.User.DESCRIPTOR.fields_by_name['macaddr']
    assert field.GetOptions().deprecated
    assert not mesh_pb2.User.DESCRIPTOR.fields_by_name['id'].GetOptions().deprecated


def test_nanopb_proto2_defaults():
    options = nanopb_pb2.NanoPBOptions()
    assert options.long_names is True
    assert options.callback_datatype == 'pb_callback_t'
    assert not options.HasField('long_names')
    assert nanopb_pb2.DESCRIPTOR.package == ''


def test_cross_file_references():
    envelope = mqtt_pb2.ServiceEnvelope(channel_id='LongFast')
    envelope.packet.decoded.portnum = portnums_pb2.POSITION_APP
    assert envelope.packet.decoded.portnum == portnums_pb2.POSITION_APP

    channel_set = apponly_pb2.ChannelSet()
    channel_set.settings.add(name='LongFast', psk=b'\x01')
    channel_set.lora_config.region = config_pb2.Config.LoRaConfig.RegionCode.Value('EU_868')
    decoded = apponly_pb2.ChannelSet.FromString(channel_set.SerializeToString())
    assert decoded.settings[0].name == 'LongFast'
    assert decoded == channel_set


def test_admin_message_variants():
    admin = admin_pb2.AdminMessage()
    admin.set_owner.long_name = 'Owner'
    assert admin.WhichOneof('payload_variant') == 'set_owner'
    admin.set_channel.settings.name = 'Admin'
    assert admin.WhichOneof('payload_variant') == 'set_channel'
    assert isinstance(admin.set_channel, channel_pb2.Channel)


def test_module_config_naming():
    module = module_config_pb2.ModuleConfig()
    module.mqtt.enabled = True
    assert module.WhichOneof('payload_variant') == 'mqtt'
    assert isinstance(module.mqtt, module_config_pb2.ModuleConfig.MQTTConfig)


def test_unknown_fields_survive_round_trip():
    user = mesh_pb2.User(id='!da548c90')
    # field 999, varint 1
    data = user.SerializeToString() + b'\xb8\x3e\x01'
    parsed = mesh_pb2.User.FromString(data)
    assert parsed.id == '!da548c90'
    assert parsed.SerializeToString() == data


def test_telemetry_variant():
    telemetry = telemetry_pb2.Telemetry()
    telemetry.environment_metrics.temperature = 21.5
    assert telemetry.WhichOneof('variant') == 'environment_metrics'


@pytest.mark.parametrize('module', [admin_pb2, apponly_pb2, atak_pb2, mesh_pb2, mqtt_pb2, nanopb_pb2])
def test_modules_expose_file_descriptor(module):
    assert module.DESCRIPTOR.name.endswith('.proto')
    assert module.DESCRIPTOR.message_types_by_name


@pytest.mark.parametrize('message_class, numbers', [
    (module_config_pb2.ModuleConfig.ExternalNotificationConfig,
     [1, 2, 3, 8, 9, 4, 5, 10, 11, 6, 12, 13, 7, 14, 15]),
    (localonly_pb2.LocalModuleConfig, [1, 2, 3, 4, 5, 6, 7, 9, 10, 11, 12, 13, 14, 8]),
    (deviceonly_pb2.DeviceState, [2, 3, 5, 8, 7, 9, 11, 12, 13, 14]),
])
def test_fields_keep_declaration_order(message_class, numbers):
    assert [f.number for f in message_class.DESCRIPTOR.fields] == numbers
    assert [f.index for f in message_class.DESCRIPTOR.fields] == list(range(len(numbers)))
