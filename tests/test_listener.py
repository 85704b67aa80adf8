from unittest.mock import MagicMock, patch

import pytest

from meshtastic_protobufs.config import ServerConfig
from meshtastic_protobufs.exceptions import ConnectionError
from meshtastic_protobufs.formatters import MessageFormatter
from meshtastic_protobufs.listener import EnvelopeListener
from meshtastic_protobufs.message_filter import MessageFilter
from meshtastic_protobufs.parsers import MessageParser


@pytest.fixture
def output():
    return MagicMock()


@pytest.fixture
def listener(cipher, output):
    return EnvelopeListener(ServerConfig(root_topic='msh/EU_868'), MessageParser(cipher),
                            MessageFormatter(), output=output)


def test_handle_encrypted_envelope(listener, output, encrypted_packet, envelope_factory):
    packet = listener.handle_message('msh/EU_868/2/e/LongFast/!a1b2c3d4', envelope_factory(encrypted_packet))

    assert packet is not None
    assert packet.decrypted
    assert listener.stats.total_messages == 1
    assert listener.stats.successful_decrypts == 1
    assert listener.stats.portnum_counts == {'TEXT_MESSAGE_APP': 1}
    output.assert_called_once()
    assert 'TEXT_MESSAGE_APP' in output.call_args[0][0]


def test_failed_decrypt_counted(output, encrypted_packet, envelope_factory):
    from meshtastic_protobufs.crypto import PacketCipher
    listener = EnvelopeListener(ServerConfig(), MessageParser(PacketCipher({'other': bytes(range(16))})),
                                MessageFormatter(), output=output)

    packet = listener.handle_message('msh/2/e/x/!a', envelope_factory(encrypted_packet))

    assert not packet.decrypted
    assert listener.stats.failed_decrypts == 1
    assert listener.stats.portnum_counts == {}
    output.assert_called_once()


def test_parse_error_is_counted_not_raised(listener, output):
    assert listener.handle_message('msh/2/e/x/!a', b'\x0a\x50short') is None
    assert listener.stats.parse_errors == 1
    output.assert_not_called()


def test_wire_dumped_traceroute(output, packet_factory, envelope_factory):
    from meshtastic_protobufs import mesh_pb2, portnums_pb2
    route = mesh_pb2.RouteDiscovery(route=[3, 4])
    data = mesh_pb2.Data(portnum=portnums_pb2.TRACEROUTE_APP, payload=route.SerializeToString())
    listener = EnvelopeListener(ServerConfig(), MessageParser(), MessageFormatter(wire_dump=True), output=output)

    packet = listener.handle_message('msh/2/e/x/!a', envelope_factory(packet_factory(data)))

    assert packet.portnum_name == 'TRACEROUTE_APP'
    assert listener.stats.parse_errors == 0
    text = output.call_args[0][0]
    assert 'Wire dump (10 bytes):' in text
    assert 'value = 4 (fixed32)' in text


def test_display_error_is_counted_not_raised(listener, output, encrypted_packet, envelope_factory):
    listener.formatter = MagicMock()
    listener.formatter.format_packet.side_effect = RuntimeError('boom')

    assert listener.handle_message('msh/2/e/x/!a', envelope_factory(encrypted_packet)) is None
    assert listener.stats.parse_errors == 1
    output.assert_not_called()


def test_json_and_stat_topics_skipped(listener, output):
    assert listener.handle_message('msh/2/json/LongFast/!a', b'{"from": 1}') is None
    assert listener.handle_message('msh/2/stat/!a1b2c3d4', b'online') is None
    assert listener.stats.total_messages == 2
    assert listener.stats.parse_errors == 0
    output.assert_not_called()


def test_filtered_packets_not_printed(cipher, output, encrypted_packet, envelope_factory):
    listener = EnvelopeListener(ServerConfig(), MessageParser(cipher), MessageFormatter(),
                                MessageFilter({'include': {'position'}, 'exclude': set()}), output=output)

    assert listener.handle_message('msh/2/e/x/!a', envelope_factory(encrypted_packet)) is None
    assert listener.stats.filtered == 1
    assert listener.stats.portnum_counts == {'TEXT_MESSAGE_APP': 1}
    output.assert_not_called()


def test_on_message_delegates(listener, encrypted_packet, envelope_factory):
    msg = MagicMock(topic='msh/2/e/LongFast/!a', payload=envelope_factory(encrypted_packet))
    listener.on_message(None, None, msg)
    assert listener.stats.successful_decrypts == 1


def test_on_connect_subscribes(listener):
    client = MagicMock()
    listener.on_connect(client, None, None, MagicMock(is_failure=False))

    assert listener.connected
    client.subscribe.assert_called_once_with('msh/EU_868/#', qos=1)


def test_on_connect_refused(listener):
    client = MagicMock()
    listener.on_connect(client, None, None, MagicMock(is_failure=True))

    assert not listener.connected
    client.subscribe.assert_not_called()


def test_on_disconnect(listener):
    listener.connected = True
    listener.on_disconnect(None, None, None, 0)
    assert not listener.connected


@patch('meshtastic_protobufs.listener.mqtt.Client')
def test_connect(mock_client_class, listener):
    client = mock_client_class.return_value
    client.loop_start.side_effect = lambda: listener.on_connect(client, None, None, MagicMock(is_failure=False))

    with listener:
        listener.connect(timeout=1)
        assert listener.connected
        client.username_pw_set.assert_called_once_with('meshdev', 'large4cats')
        client.connect.assert_called_once_with('mqtt.meshtastic.org', 1883, 60)
        client_id = mock_client_class.call_args.kwargs['client_id']
        assert client_id.startswith('!') and len(client_id) == 9

    client.loop_stop.assert_called()
    client.disconnect.assert_called_once()
    assert listener.client is None


@patch('meshtastic_protobufs.listener.mqtt.Client')
def test_connect_unreachable(mock_client_class, listener):
    mock_client_class.return_value.connect.side_effect = OSError('refused')
    with pytest.raises(ConnectionError, match='refused'):
        listener.connect(timeout=0.1)


@patch('meshtastic_protobufs.listener.mqtt.Client')
def test_connect_timeout(mock_client_class, listener):
    with pytest.raises(ConnectionError, match='No connection'):
        listener.connect(timeout=0.2)
    mock_client_class.return_value.loop_stop.assert_called_once()


def test_format_stats(listener):
    assert 'STATISTICS SUMMARY' in listener.format_stats()
