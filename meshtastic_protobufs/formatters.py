"""
Console formatters for decoded Meshtastic packets.
"""

from datetime import datetime
from typing import Any

from google.protobuf.message import Message

from .codec import to_dict
from .hex_dump import hex_dump
from .models import DecodedPacket, PacketInfo, Statistics
from .protobuf_dump import format_protobuf_dump, render_dump
from .utils import BROADCAST_NUM


class MessageFormatter:
    """Formatter for console output of decoded packets."""

    # Message formatting width
    SEPARATOR_WIDTH = 68

    def __init__(self, wire_dump: bool = False, hex_width: int = 16, hex_dump_colored: bool = False,
                 include_defaults: bool = False):
        """
        Initialize MessageFormatter.

        Args:
            wire_dump: Append an annotated wire dump of protobuf payloads
            hex_width: Bytes per line in hex dumps
            hex_dump_colored: Use colored output in hex dumps
            include_defaults: List fields that hold their default value
        """
        self.wire_dump = wire_dump
        self.hex_width = hex_width
        self.hex_dump_colored = hex_dump_colored
        self.include_defaults = include_defaults

    def format_packet(self, packet: DecodedPacket) -> str:
        """
        Format a decoded packet for console output.

        Args:
            packet: DecodedPacket to format

        Returns:
            Formatted string for console output
        """
        lines = ["=" * self.SEPARATOR_WIDTH]
        lines.append(f"Received at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        if packet.topic:
            lines.append(f"Topic: {packet.topic}")
        lines.extend(self._format_header(packet.packet_info))
        if packet.gateway_id or packet.channel_id:
            lines.append(f"Gateway: {packet.gateway_id}, Channel: {packet.channel_id}")
        lines.append("─" * self.SEPARATOR_WIDTH)

        lines.append(self._format_content(packet))

        if self.wire_dump and isinstance(packet.content, Message) and packet.payload:
            lines.append("─" * self.SEPARATOR_WIDTH)
            lines.append(f"Wire dump ({len(packet.payload)} bytes):")
            lines.append(render_dump(format_protobuf_dump(packet.content.DESCRIPTOR, packet.payload)))

        lines.append("=" * self.SEPARATOR_WIDTH)
        return "\n".join(lines)

    @staticmethod
    def _format_header(info: PacketInfo) -> list[str]:
        to_display = info.to_node_hex
        if info.to_node == BROADCAST_NUM:
            to_display += " (broadcast)"

        lines = [f"From: {info.from_node_hex} → To: {to_display}"]
        if info.hops_away > 0:
            lines.append(f"Hops: {info.hops_away} away (limit={info.hop_limit}, start={info.hop_start})")
        if info.via_mqtt:
            lines.append("Via: MQTT")
        if info.want_ack:
            lines.append("Want ACK: Yes")
        if info.rx_snr or info.rx_rssi:
            lines.append(f"Signal: SNR {info.rx_snr:.2f} dB, RSSI {info.rx_rssi} dBm")
        lines.append(f"Packet ID: {info.packet_id_hex}")
        return lines

    def _format_content(self, packet: DecodedPacket) -> str:
        """Format packet content based on its type."""
        content = packet.content
        match content:
            case str():
                return self._format_text(packet.portnum_name, content)
            case Message():
                return self._format_message(packet.portnum_name, content)
            case bytes() if packet.encrypted and not packet.decrypted:
                return self._format_bytes("🔒 ENCRYPTED (unable to decrypt)", content)
            case bytes():
                return self._format_bytes(f"📦 {packet.portnum_name}", content)
            case _:
                return "Unable to decode message"

    @staticmethod
    def _format_text(portnum_name: str, text: str) -> str:
        lines = [f"💬 {portnum_name}"]
        lines.extend(f"   {line}" for line in text.splitlines() or [""])
        return "\n".join(lines)

    def _format_message(self, portnum_name: str, message: Message) -> str:
        lines = [f"📨 {portnum_name} ({message.DESCRIPTOR.full_name})"]
        fields = to_dict(message, include_defaults=self.include_defaults)
        if not fields:
            lines.append("   (empty)")
        lines.extend(self.format_fields(fields, indent=1))
        return "\n".join(lines)

    def _format_bytes(self, title: str, data: bytes) -> str:
        lines = [f"{title} ({len(data)} bytes)"]
        if data:
            lines.append(hex_dump(data, width=self.hex_width, use_color=self.hex_dump_colored))
        return "\n".join(lines)

    @classmethod
    def format_fields(cls, fields: dict[str, Any], indent: int = 0) -> list[str]:
        """
        Render a to_dict() result as indented ``key: value`` lines.

        Nested messages open an indented block, lists of messages number
        their items.
        """
        pad = "   " * indent
        lines = []
        for key, value in fields.items():
            if isinstance(value, dict):
                lines.append(f"{pad}{key}:")
                lines.extend(cls.format_fields(value, indent + 1))
            elif isinstance(value, list) and any(isinstance(v, dict) for v in value):
                lines.append(f"{pad}{key}: [{len(value)}]")
                for i, item in enumerate(value):
                    lines.append(f"{pad}   [{i}]")
                    lines.extend(cls.format_fields(item, indent + 2))
            elif isinstance(value, list):
                lines.append(f"{pad}{key}: {', '.join(str(v) for v in value)}")
            else:
                lines.append(f"{pad}{key}: {value}")
        return lines

    @staticmethod
    def format_statistics(stats: Statistics) -> str:
        """Format statistics summary."""
        lines = []
        lines.append("=" * MessageFormatter.SEPARATOR_WIDTH)
        lines.append("STATISTICS SUMMARY")
        lines.append("=" * MessageFormatter.SEPARATOR_WIDTH)
        lines.append(f"Total messages:       {stats.total_messages}")
        lines.append(f"Parse errors:         {stats.parse_errors}")
        lines.append(f"Filtered:             {stats.filtered}")
        lines.append(f"Successful decrypts:  {stats.successful_decrypts}")
        lines.append(f"Failed decrypts:      {stats.failed_decrypts}")

        if stats.portnum_counts:
            lines.append("")
            lines.append("Messages by PortNum:")

            max_count = max(count for _, count in stats.get_sorted_portnums())
            name_width = 20
            count_width = 5
            percent_width = 4
            bar_width = MessageFormatter.SEPARATOR_WIDTH - name_width - count_width - percent_width - 5

            for portnum_name, count in stats.get_sorted_portnums():
                display_name = portnum_name[:name_width]
                percentage = (count / stats.total_messages * 100) if stats.total_messages > 0 else 0
                bar_len = int((count / max_count) * bar_width) if max_count > 0 else 0
                bar = '▓' * bar_len

                lines.append(f"  {display_name:20s} {count:5d} {bar:<{bar_width}s} {percentage:3.0f}%")

        lines.append("=" * MessageFormatter.SEPARATOR_WIDTH)
        return "\n".join(lines)
