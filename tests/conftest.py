import json

import pytest

from meshtastic_protobufs import mesh_pb2, mqtt_pb2, portnums_pb2, telemetry_pb2
from meshtastic_protobufs.crypto import PacketCipher

# tests/conftest.py

FROM_NODE = 0xda548c90
PACKET_ID = 0x1234abcd


@pytest.fixture
def cipher():
    """PacketCipher with only the default channel key."""
    return PacketCipher()


@pytest.fixture
def text_data():
    """Data payload of a text message."""
    return mesh_pb2.Data(portnum=portnums_pb2.TEXT_MESSAGE_APP, payload=b"hello mesh " * 20)


@pytest.fixture
def telemetry_data():
    """Data payload carrying device telemetry."""
    telemetry = telemetry_pb2.Telemetry(time=1700000000)
    telemetry.device_metrics.battery_level = 87
    telemetry.device_metrics.voltage = 4.0
    return mesh_pb2.Data(portnum=portnums_pb2.TELEMETRY_APP, payload=telemetry.SerializeToString())


def make_packet(data=None, encrypted=None, **kwargs):
    packet = mesh_pb2.MeshPacket(to=0xFFFFFFFF, id=PACKET_ID, hop_limit=2, hop_start=3, **kwargs)
    setattr(packet, 'from', FROM_NODE)
    if data is not None:
        packet.decoded.CopyFrom(data)
    if encrypted is not None:
        packet.encrypted = encrypted
    return packet


@pytest.fixture
def packet_factory():
    """Build MeshPackets from FROM_NODE to broadcast."""
    return make_packet


@pytest.fixture
def encrypted_packet(cipher, text_data):
    """Text message encrypted with the default key."""
    ciphertext = cipher.encrypt(text_data.SerializeToString(), PACKET_ID, FROM_NODE)
    return make_packet(encrypted=ciphertext)


@pytest.fixture
def envelope_factory():
    """Serialize a MeshPacket into a ServiceEnvelope."""
    def _make(packet, channel_id="LongFast", gateway_id="!a1b2c3d4") -> bytes:
        envelope = mqtt_pb2.ServiceEnvelope(channel_id=channel_id, gateway_id=gateway_id)
        envelope.packet.CopyFrom(packet)
        return envelope.SerializeToString()
    return _make


@pytest.fixture
def config_file(tmp_path):
    """Write a configuration file and return its path."""
    def _write(data) -> str:
        path = tmp_path / "mesh_decode.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return str(path)
    return _write
