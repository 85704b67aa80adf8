"""
Node-id and payload helpers.

Meshtastic node numbers are uint32. Clients show them as ``!`` followed by
eight lower-case hex digits; ``0xFFFFFFFF`` addresses every node.
"""

from .exceptions import NodeIdError

BROADCAST_NUM = 0xFFFFFFFF
BROADCAST_ID = '!ffffffff'


class NodeIdParser:
    """Parser for Meshtastic node IDs with validation."""

    MAX_STRING_LENGTH = 16
    MAX_HEX_LENGTH = 8
    UINT32_MAX = 0xFFFFFFFF

    SPECIAL_IDS = {
        '^all': BROADCAST_NUM,
    }

    @classmethod
    def parse(cls, node_id: str | int) -> int:
        """
        Parse and validate a node ID.

        Accepted forms: ``!da548c90``, ``@da548c90``, ``0xda548c90``,
        decimal ``3663007888`` and ``^all``.

        Args:
            node_id: Node ID as string or int

        Returns:
            Node number (uint32)

        Raises:
            NodeIdError: If the node ID is malformed or out of range
        """
        # bool is an int subclass but never a node number
        if isinstance(node_id, bool) or not isinstance(node_id, (str, int)):
            raise NodeIdError(f"Invalid node_id type: {type(node_id).__name__}")

        if isinstance(node_id, int):
            return cls._validate_range(node_id)

        node_id = node_id.strip()
        if len(node_id) > cls.MAX_STRING_LENGTH:
            raise NodeIdError(
                f"Node ID string too long: '{node_id}' ({len(node_id)} chars, max {cls.MAX_STRING_LENGTH})"
            )

        if node_id[:1] in ('!', '@'):
            return cls._parse_hex(node_id, node_id[1:])
        if node_id[:2].lower() == '0x':
            return cls._parse_hex(node_id, node_id[2:])
        if node_id.startswith('^'):
            return cls._parse_special(node_id)
        return cls._parse_decimal(node_id)

    @classmethod
    def _parse_hex(cls, node_id: str, hex_part: str) -> int:
        if not hex_part:
            raise NodeIdError(f"Empty node ID after prefix: '{node_id}'")

        if len(hex_part) > cls.MAX_HEX_LENGTH:
            raise NodeIdError(
                f"Node ID hex value too long: '{node_id}' ({len(hex_part)} chars, max {cls.MAX_HEX_LENGTH})"
            )

        if not all(c in '0123456789abcdefABCDEF' for c in hex_part):
            raise NodeIdError(f"Invalid hex characters in node ID: '{node_id}'")

        return int(hex_part, 16)

    @classmethod
    def _parse_special(cls, node_id: str) -> int:
        try:
            return cls.SPECIAL_IDS[node_id.lower()]
        except KeyError:
            valid = ', '.join(cls.SPECIAL_IDS)
            raise NodeIdError(f"Unknown special node ID: '{node_id}'. Valid special IDs: {valid}") from None

    @classmethod
    def _parse_decimal(cls, node_id: str) -> int:
        if not node_id.isdigit():
            raise NodeIdError(f"Invalid decimal node ID: '{node_id}'")
        return cls._validate_range(int(node_id))

    @classmethod
    def _validate_range(cls, node_num: int) -> int:
        if node_num < 0 or node_num > cls.UINT32_MAX:
            raise NodeIdError(
                f"Node ID out of range: {node_num} "
                f"(valid range: 0 to 4294967295 / 0xFFFFFFFF)"
            )
        return node_num


class PayloadDetector:
    """Detector for different payload types."""

    @staticmethod
    def is_json(payload: bytes) -> bool:
        """
        Check if payload is JSON by examining first non-whitespace character.

        Gateways with JSON output enabled publish alongside the protobuf topics.
        """
        stripped = payload.lstrip(b' \t\r\n')
        return stripped[:1] in (b'{', b'[')


def format_node_id(node_num: int) -> str:
    """
    Format a node number as ``!xxxxxxxx``.

    Raises:
        NodeIdError: If node_num is not a uint32
    """
    return f"!{NodeIdParser._validate_range(node_num):08x}"


def parse_node_id(node_id: str | int) -> int:
    """Parse a node ID; see NodeIdParser.parse()."""
    return NodeIdParser.parse(node_id)


def is_broadcast(node_num: int) -> bool:
    """True for the broadcast address."""
    return node_num == BROADCAST_NUM
