from meshtastic_protobufs import config_pb2, mesh_pb2, portnums_pb2
from meshtastic_protobufs.protobuf_dump import FieldDump, dump_message, format_protobuf_dump, render_dump


def descriptions(entries):
    return [entry.description for entry in entries]


def test_string_field():
    entries = format_protobuf_dump(mesh_pb2.User.DESCRIPTOR, b'\x0a\x04!abc')

    assert entries == [
        FieldDump(0, 0, b'\x0a', 'field 1 (id) [LEN]'),
        FieldDump(1, 1, b'\x04', 'length = 4'),
        FieldDump(1, 2, b'!abc', 'string = "!abc"'),
    ]


def test_enum_names():
    entries = format_protobuf_dump(mesh_pb2.Data.DESCRIPTOR, b'\x08\x01')
    assert entries[1].description == 'value = TEXT_MESSAGE_APP (1)'

    entries = format_protobuf_dump(mesh_pb2.Data.DESCRIPTOR, b'\x08\xc8\x01')
    assert entries[1].description == 'value = unknown enum value (200)'


def test_zigzag_and_fixed():
    position = mesh_pb2.Position(latitude_i=-5, altitude_hae=-1, time=7)
    result = descriptions(dump_message(position))

    assert 'value = -5 (sfixed32)' in result
    assert 'value = 7 (fixed32)' in result
    assert 'value = -1 (zigzag)' in result


def test_negative_int32_is_signed():
    entries = dump_message(mesh_pb2.Position(altitude=-10))
    assert entries[1].description == 'value = -10'


def test_float_and_bool():
    packet = mesh_pb2.MeshPacket(rx_snr=6.25, want_ack=True)
    result = descriptions(dump_message(packet))
    assert 'value = 6.25 (float)' in result
    assert 'value = True (bool)' in result


def test_nested_message_recurses_with_offsets():
    packet = mesh_pb2.MeshPacket()
    packet.decoded.portnum = portnums_pb2.TEXT_MESSAGE_APP
    entries = dump_message(packet)

    # 22 02 08 01
    assert entries[0].description == 'field 4 (decoded) [LEN]'
    assert entries[2].description == 'message Data (2 bytes)'
    assert entries[3] == FieldDump(2, 2, b'\x08', 'field 1 (portnum) [VARINT]')
    assert entries[4] == FieldDump(3, 3, b'\x01', 'value = TEXT_MESSAGE_APP (1)')


def test_packed_repeated():
    lora = config_pb2.Config.LoRaConfig(ignore_incoming=[1, 300])
    result = descriptions(dump_message(lora))
    assert 'packed 3 bytes' in result
    assert result[-2:] == ['value = 1', 'value = 300']


def test_packed_fixed32_route():
    route = mesh_pb2.RouteDiscovery(route=[0xda548c90, 2])
    entries = dump_message(route)
    result = descriptions(entries)

    assert result[0] == 'field 1 (route) [LEN]'
    assert 'packed 8 bytes' in result
    assert result[-2:] == ['value = 3662974096 (fixed32)', 'value = 2 (fixed32)']
    assert entries[-1].offset == 6


def test_unknown_field_without_descriptor():
    entries = format_protobuf_dump(None, b'\x08\x05')
    assert descriptions(entries) == ['field 1 (unknown_1) [VARINT]', 'value = 5']

    entries = format_protobuf_dump(mesh_pb2.User.DESCRIPTOR, b'\xb8\x3e\x01')
    assert entries[0].description == 'field 999 (unknown_999) [VARINT]'


def test_truncated_length_reports_error():
    entries = format_protobuf_dump(mesh_pb2.User.DESCRIPTOR, b'\x0a\x05ab')
    result = descriptions(entries)

    assert 'length = 5' in result
    assert any(d.startswith('error: length 5 runs past end') for d in result)
    assert result[-1] == '3 trailing byte(s) not parsed'
    assert entries[-1].data == b'\x05ab'


def test_truncated_varint_reports_error():
    entries = format_protobuf_dump(mesh_pb2.Data.DESCRIPTOR, b'\x08\x80')
    result = descriptions(entries)
    assert result[1] == 'error: unexpected end of buffer in varint'
    assert result[-1] == '1 trailing byte(s) not parsed'


def test_truncated_key():
    entries = format_protobuf_dump(mesh_pb2.Data.DESCRIPTOR, b'\x80')
    assert entries[0].description.startswith('error reading key')
    assert entries[-1].description == '1 trailing byte(s) not parsed'


def test_empty_input():
    assert format_protobuf_dump(mesh_pb2.Data.DESCRIPTOR, b'') == []


def test_render_dump():
    entries = format_protobuf_dump(mesh_pb2.User.DESCRIPTOR, b'\x0a\x04!abc')
    lines = render_dump(entries).splitlines()

    assert len(lines) == 3
    assert lines[0].startswith('0000  0a ')
    assert lines[0].endswith(' field 1 (id) [LEN]')
    assert lines[2].startswith('0002  21 61 62 63 ')
    assert lines[2].endswith('    string = "!abc"')


def test_render_dump_truncates_long_values():
    entries = [FieldDump(0, 0, bytes(20), 'bytes (20)')]
    line = render_dump(entries, max_bytes=4)
    assert line.startswith('0000  00 00 00 00 ..')
