from meshtastic_protobufs import mesh_pb2, portnums_pb2
from meshtastic_protobufs.formatters import MessageFormatter
from meshtastic_protobufs.models import Statistics
from meshtastic_protobufs.parsers import MessageParser


def test_format_text_packet(cipher, packet_factory, envelope_factory):
    data = mesh_pb2.Data(portnum=portnums_pb2.TEXT_MESSAGE_APP, payload=b'hello\nworld')
    packet = MessageParser(cipher).parse_envelope(envelope_factory(packet_factory(data=data)), topic='msh/test')

    out = MessageFormatter().format_packet(packet)

    assert 'Topic: msh/test' in out
    assert 'From: !da548c90 → To: !ffffffff (broadcast)' in out
    assert 'Gateway: !a1b2c3d4, Channel: LongFast' in out
    assert 'Hops: 1 away (limit=2, start=3)' in out
    assert 'Packet ID: 0x1234abcd' in out
    assert '💬 TEXT_MESSAGE_APP' in out
    assert '   hello\n   world' in out


def test_format_message_packet(packet_factory):
    position = mesh_pb2.Position(latitude_i=525200000, altitude=34)
    data = mesh_pb2.Data(portnum=portnums_pb2.POSITION_APP, payload=position.SerializeToString())
    packet = MessageParser().parse_mesh_packet(packet_factory(data=data))

    out = MessageFormatter().format_packet(packet)

    assert '📨 POSITION_APP (meshtastic.Position)' in out
    assert '   latitude_i: 525200000' in out
    assert '   altitude: 34' in out
    assert 'Wire dump' not in out


def test_format_wire_dump(packet_factory):
    position = mesh_pb2.Position(altitude=34)
    data = mesh_pb2.Data(portnum=portnums_pb2.POSITION_APP, payload=position.SerializeToString())
    packet = MessageParser().parse_mesh_packet(packet_factory(data=data))

    out = MessageFormatter(wire_dump=True).format_packet(packet)

    assert 'Wire dump (2 bytes):' in out
    assert 'field 3 (altitude) [VARINT]' in out


def test_format_undecrypted_packet(encrypted_packet):
    packet = MessageParser().parse_mesh_packet(encrypted_packet)
    out = MessageFormatter().format_packet(packet)

    assert f'🔒 ENCRYPTED (unable to decrypt) ({len(encrypted_packet.encrypted)} bytes)' in out
    assert '00000000: ' in out


def test_format_opaque_payload(packet_factory):
    data = mesh_pb2.Data(portnum=portnums_pb2.PRIVATE_APP, payload=b'\x01\x02')
    packet = MessageParser().parse_mesh_packet(packet_factory(data=data))

    out = MessageFormatter(hex_width=8).format_packet(packet)

    assert '📦 PRIVATE_APP (2 bytes)' in out
    assert '00000000: 0102' in out


def test_format_fields_nested():
    lines = MessageFormatter.format_fields({
        'name': 'x',
        'inner': {'a': 1},
        'items': [{'b': 2}, {'b': 3}],
        'numbers': [1, 2],
    })
    assert lines == [
        'name: x',
        'inner:',
        '   a: 1',
        'items: [2]',
        '   [0]',
        '      b: 2',
        '   [1]',
        '      b: 3',
        'numbers: 1, 2',
    ]


def test_format_statistics():
    stats = Statistics(total_messages=4, parse_errors=1, successful_decrypts=2)
    stats.increment_portnum('TEXT_MESSAGE_APP')
    stats.increment_portnum('TEXT_MESSAGE_APP')
    stats.increment_portnum('POSITION_APP')

    out = MessageFormatter.format_statistics(stats)

    assert 'Total messages:       4' in out
    assert 'Parse errors:         1' in out
    lines = out.splitlines()
    text_line = next(line for line in lines if 'TEXT_MESSAGE_APP' in line)
    position_line = next(line for line in lines if 'POSITION_APP' in line)
    assert lines.index(text_line) < lines.index(position_line)
    assert text_line.rstrip().endswith('50%')
