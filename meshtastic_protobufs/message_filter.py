"""
Message filtering by packet type for the MQTT listener.
"""

from typing import Optional

from .models import DecodedPacket


class MessageFilter:
    """Handles message filtering based on type."""

    # Mapping from user-friendly filter names to portnum names
    PORTNUM_MAP = {
        'text': 'TEXT_MESSAGE_APP',
        'position': 'POSITION_APP',
        'nodeinfo': 'NODEINFO_APP',
        'telemetry': 'TELEMETRY_APP',
        'routing': 'ROUTING_APP',
        'admin': 'ADMIN_APP',
        'waypoint': 'WAYPOINT_APP',
        'detection': 'DETECTION_SENSOR_APP',
        'paxcounter': 'PAXCOUNTER_APP',
        'storeforward': 'STORE_FORWARD_APP',
        'rangetest': 'RANGE_TEST_APP',
        'traceroute': 'TRACEROUTE_APP',
        'neighbor': 'NEIGHBORINFO_APP',
        'atak': 'ATAK_PLUGIN',
        'map': 'MAP_REPORT_APP',
    }

    # Matches packets that stayed encrypted
    ENCRYPTED = 'encrypted'

    def __init__(self, filter_types: Optional[dict] = None):
        """
        Initialize MessageFilter.

        Args:
            filter_types: Dict with 'include' and 'exclude' sets (None = show all)

        Raises:
            ValueError: If a filter name is not known
        """
        self.filter_types = filter_types
        if filter_types:
            for name in filter_types.get('include', set()) | filter_types.get('exclude', set()):
                if name != self.ENCRYPTED and name not in self.PORTNUM_MAP:
                    raise ValueError(f"Unknown message type filter: '{name}'")

    @classmethod
    def choices(cls) -> list[str]:
        """Names accepted as filter types."""
        return sorted(cls.PORTNUM_MAP) + [cls.ENCRYPTED]

    def should_filter_encrypted(self) -> bool:
        """
        Check if encrypted messages should be filtered.

        Returns:
            True if encrypted messages should be filtered out
        """
        if not self.filter_types:
            return False

        include = self.filter_types.get('include', set())
        exclude = self.filter_types.get('exclude', set())

        if include and self.ENCRYPTED not in include:
            return True
        if self.ENCRYPTED in exclude:
            return True

        return False

    def should_filter_portnum(self, portnum_name: str) -> bool:
        """
        Check if a portnum should be filtered.

        Args:
            portnum_name: Portnum name (e.g., 'TEXT_MESSAGE_APP')

        Returns:
            True if this portnum should be filtered out
        """
        if not self.filter_types:
            return False

        include = self.filter_types.get('include', set())
        exclude = self.filter_types.get('exclude', set())

        if include:
            allowed_portnums = {self.PORTNUM_MAP[ft] for ft in include if ft in self.PORTNUM_MAP}
            return portnum_name not in allowed_portnums

        if exclude:
            excluded_portnums = {self.PORTNUM_MAP[ft] for ft in exclude if ft in self.PORTNUM_MAP}
            return portnum_name in excluded_portnums

        return False

    def should_filter(self, packet: DecodedPacket) -> bool:
        """True if the packet should not be shown."""
        if packet.encrypted and not packet.decrypted:
            return self.should_filter_encrypted()
        return self.should_filter_portnum(packet.portnum_name)
