import pytest

from meshtastic_protobufs import mesh_pb2, portnums_pb2, telemetry_pb2
from meshtastic_protobufs.exceptions import DecodeError
from meshtastic_protobufs.parsers import MessageParser


@pytest.fixture
def parser(cipher):
    return MessageParser(cipher)


def test_parse_packet_info(packet_factory):
    packet = packet_factory(want_ack=True, via_mqtt=True, channel=8, rx_snr=5.5, rx_rssi=-90,
                            priority=mesh_pb2.MeshPacket.RELIABLE)
    info = MessageParser.parse_packet_info(packet)

    assert info.from_node == 0xda548c90
    assert info.from_node_hex == '!da548c90'
    assert info.to_node_hex == '!ffffffff'
    assert info.packet_id_hex == '0x1234abcd'
    assert info.hops_away == 1
    assert info.channel == 8
    assert info.via_mqtt and info.want_ack
    assert info.priority == 'RELIABLE'
    assert info.rx_rssi == -90


def test_hops_away_without_hop_start(packet_factory):
    packet = packet_factory()
    packet.hop_start = 0
    assert MessageParser.parse_packet_info(packet).hops_away == 0


def test_parse_plain_text_packet(parser, packet_factory, text_data):
    result = parser.parse_mesh_packet(packet_factory(data=text_data))

    assert not result.encrypted
    assert not result.decrypted
    assert result.portnum == portnums_pb2.TEXT_MESSAGE_APP
    assert result.portnum_name == 'TEXT_MESSAGE_APP'
    assert result.content == text_data.payload.decode()
    assert result.payload == text_data.payload


def test_parse_telemetry_packet(parser, packet_factory, telemetry_data):
    result = parser.parse_mesh_packet(packet_factory(data=telemetry_data))

    assert isinstance(result.content, telemetry_pb2.Telemetry)
    assert result.content.device_metrics.battery_level == 87


def test_parse_encrypted_packet(parser, encrypted_packet, text_data):
    result = parser.parse_mesh_packet(encrypted_packet)

    assert result.encrypted
    assert result.decrypted
    assert result.portnum_name == 'TEXT_MESSAGE_APP'
    assert result.content == text_data.payload.decode()


def test_encrypted_packet_without_cipher(encrypted_packet):
    result = MessageParser().parse_mesh_packet(encrypted_packet)

    assert result.encrypted
    assert not result.decrypted
    assert not result.has_payload
    assert result.content == encrypted_packet.encrypted
    assert result.portnum_name == 'UNKNOWN'


def test_undecodable_payload_kept_as_bytes(parser, packet_factory):
    data = mesh_pb2.Data(portnum=portnums_pb2.POSITION_APP, payload=b'\x0a\x05ab')
    result = parser.parse_mesh_packet(packet_factory(data=data))

    assert result.portnum_name == 'POSITION_APP'
    assert result.content == b'\x0a\x05ab'


def test_packet_without_payload(parser, packet_factory):
    result = parser.parse_mesh_packet(packet_factory())
    assert result.content is None
    assert not result.has_payload


def test_parse_envelope(parser, packet_factory, text_data, envelope_factory):
    data = envelope_factory(packet_factory(data=text_data))
    result = parser.parse_envelope(data, topic='msh/EU_868/2/e/LongFast/!a1b2c3d4')

    assert result.topic == 'msh/EU_868/2/e/LongFast/!a1b2c3d4'
    assert result.channel_id == 'LongFast'
    assert result.gateway_id == '!a1b2c3d4'
    assert result.content.startswith('hello mesh')


def test_parse_envelope_invalid(parser):
    with pytest.raises(DecodeError):
        parser.parse_envelope(b'\x0a\x50short')


def test_parse_envelope_without_packet(parser):
    with pytest.raises(DecodeError, match='no packet'):
        parser.parse_envelope(b'\x12\x08LongFast')


def test_parse_from_radio_packet(parser, packet_factory, text_data):
    from_radio = mesh_pb2.FromRadio(id=1)
    from_radio.packet.CopyFrom(packet_factory(data=text_data))

    variant, value = parser.parse_from_radio(from_radio.SerializeToString())

    assert variant == 'packet'
    assert value.portnum_name == 'TEXT_MESSAGE_APP'


def test_parse_from_radio_other_variants(parser):
    from_radio = mesh_pb2.FromRadio(config_complete_id=1234)
    assert parser.parse_from_radio(from_radio.SerializeToString()) == ('config_complete_id', 1234)

    from_radio = mesh_pb2.FromRadio()
    from_radio.my_info.my_node_num = 0xda548c90
    variant, value = parser.parse_from_radio(from_radio.SerializeToString())
    assert variant == 'my_info'
    assert value.my_node_num == 0xda548c90

    assert parser.parse_from_radio(b'') == (None, None)


def test_parse_to_radio(parser):
    to_radio = mesh_pb2.ToRadio(want_config_id=99)
    assert parser.parse_to_radio(to_radio.SerializeToString()) == ('want_config_id', 99)


def test_parse_to_radio_invalid(parser):
    with pytest.raises(DecodeError):
        parser.parse_to_radio(b'\xff')
