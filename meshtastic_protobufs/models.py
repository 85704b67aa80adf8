"""
Data models for decoded Meshtastic packets.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from google.protobuf.message import Message


@dataclass
class PacketInfo:
    """Header of a MeshPacket."""
    from_node: int
    from_node_hex: str
    to_node: int
    to_node_hex: str
    packet_id: int
    packet_id_hex: str
    channel: int
    hop_limit: int
    hop_start: int
    hops_away: int
    via_mqtt: bool
    want_ack: bool
    priority: str = "UNSET"
    rx_time: int = 0
    rx_snr: float = 0.0
    rx_rssi: int = 0


@dataclass
class DecodedPacket:
    """
    A MeshPacket after decryption and payload decoding.

    Envelope fields are empty when the packet did not arrive in a
    ServiceEnvelope. ``content`` is a message for protobuf ports, text for
    text ports and the raw payload otherwise (or when it failed to decode).
    """
    packet_info: PacketInfo
    encrypted: bool
    decrypted: bool = False
    portnum: int = 0
    portnum_name: str = "UNKNOWN"
    content: Optional[Union[Message, str, bytes]] = None
    payload: Optional[bytes] = None
    topic: Optional[str] = None
    channel_id: str = ""
    gateway_id: str = ""

    @property
    def has_payload(self) -> bool:
        """True when a Data payload is available (plaintext or decrypted)."""
        return self.payload is not None


@dataclass
class Statistics:
    """Listener statistics."""
    total_messages: int = 0
    successful_decrypts: int = 0
    failed_decrypts: int = 0
    parse_errors: int = 0
    filtered: int = 0
    portnum_counts: dict[str, int] = field(default_factory=dict)

    def increment_portnum(self, portnum_name: str):
        """Increment counter for a specific portnum."""
        self.portnum_counts[portnum_name] = self.portnum_counts.get(portnum_name, 0) + 1

    def get_sorted_portnums(self) -> list[tuple[str, int]]:
        """Get portnum counts sorted by frequency."""
        return sorted(self.portnum_counts.items(), key=lambda x: x[1], reverse=True)
