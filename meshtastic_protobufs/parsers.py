"""
Parsers turning Meshtastic wire messages into DecodedPacket models.
"""

from typing import Optional

from google.protobuf.message import Message

from . import mesh_pb2, mqtt_pb2
from .codec import decode
from .crypto import PacketCipher
from .exceptions import DecodeError
from .logging_config import get_logger
from .models import DecodedPacket, PacketInfo
from .registry import decode_payload, portnum_name
from .utils import format_node_id

logger = get_logger('parsers')


def _priority_name(value: int) -> str:
    try:
        return mesh_pb2.MeshPacket.Priority.Name(value)
    except ValueError:
        return str(value)


class MessageParser:
    """Parser for MeshPackets, ServiceEnvelopes and radio stream messages."""

    def __init__(self, cipher: Optional[PacketCipher] = None):
        """
        Initialize MessageParser.

        Args:
            cipher: PacketCipher used for encrypted packets; None leaves them encrypted
        """
        self.cipher = cipher

    @staticmethod
    def parse_packet_info(packet: mesh_pb2.MeshPacket) -> PacketInfo:
        """Extract packet metadata into PacketInfo dataclass."""
        from_node = getattr(packet, 'from')
        to_node = packet.to
        hop_limit = packet.hop_limit
        hop_start = packet.hop_start

        return PacketInfo(
            from_node=from_node,
            from_node_hex=format_node_id(from_node),
            to_node=to_node,
            to_node_hex=format_node_id(to_node),
            packet_id=packet.id,
            packet_id_hex=f"0x{packet.id:08x}",
            channel=packet.channel,
            hop_limit=hop_limit,
            hop_start=hop_start,
            hops_away=hop_start - hop_limit if hop_start > 0 else 0,
            via_mqtt=packet.via_mqtt,
            want_ack=packet.want_ack,
            priority=_priority_name(packet.priority),
            rx_time=packet.rx_time,
            rx_snr=packet.rx_snr,
            rx_rssi=packet.rx_rssi,
        )

    def parse_mesh_packet(self, packet: mesh_pb2.MeshPacket) -> DecodedPacket:
        """
        Decrypt (when possible) and decode the payload of a MeshPacket.

        A payload that does not parse as its port's message type is kept as
        bytes in ``content`` and logged; it does not fail the packet.
        """
        packet_info = self.parse_packet_info(packet)
        variant = packet.WhichOneof('payload_variant')
        result = DecodedPacket(packet_info=packet_info, encrypted=variant == 'encrypted')

        data = None
        if variant == 'decoded':
            data = packet.decoded
        elif variant == 'encrypted':
            if self.cipher is not None:
                data = self.cipher.decrypt_packet(packet)
                result.decrypted = data is not None
            if data is None:
                result.content = bytes(packet.encrypted)
                return result

        if data is None:
            return result

        result.portnum = data.portnum
        result.portnum_name = portnum_name(data.portnum)
        result.payload = bytes(data.payload)
        try:
            result.content = decode_payload(data.portnum, data.payload)
        except DecodeError as e:
            logger.warning(f"Packet {packet_info.packet_id_hex} ({result.portnum_name}): {e}")
            result.content = result.payload
        return result

    def parse_envelope(self, data: bytes, topic: Optional[str] = None) -> DecodedPacket:
        """
        Parse a ServiceEnvelope as published on MQTT.

        Args:
            data: Serialized ServiceEnvelope
            topic: MQTT topic the envelope arrived on

        Raises:
            DecodeError: If the bytes are not a ServiceEnvelope or carry no packet
        """
        envelope = decode(mqtt_pb2.ServiceEnvelope, data)
        if not envelope.HasField('packet'):
            raise DecodeError("ServiceEnvelope carries no packet")

        result = self.parse_mesh_packet(envelope.packet)
        result.topic = topic
        result.channel_id = envelope.channel_id
        result.gateway_id = envelope.gateway_id
        return result

    @staticmethod
    def _variant(message: Message, group: str) -> tuple[Optional[str], Optional[object]]:
        variant = message.WhichOneof(group)
        if variant is None:
            return None, None
        return variant, getattr(message, variant)

    def parse_from_radio(self, data: bytes) -> tuple[Optional[str], Optional[object]]:
        """
        Parse a FromRadio message from a device stream.

        Returns:
            (variant name, value); a ``packet`` variant is returned as DecodedPacket

        Raises:
            DecodeError: If the bytes are not a FromRadio message
        """
        variant, value = self._variant(decode(mesh_pb2.FromRadio, data), 'payload_variant')
        if variant == 'packet':
            value = self.parse_mesh_packet(value)
        return variant, value

    def parse_to_radio(self, data: bytes) -> tuple[Optional[str], Optional[object]]:
        """Parse a ToRadio message, see parse_from_radio()."""
        variant, value = self._variant(decode(mesh_pb2.ToRadio, data), 'payload_variant')
        if variant == 'packet':
            value = self.parse_mesh_packet(value)
        return variant, value
