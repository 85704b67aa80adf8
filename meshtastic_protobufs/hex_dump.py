"""
xxd-style hex/ASCII dump utility.
"""


class HexDumper:
    """xxd-style hex/ASCII dumper with optional colors."""

    GRAY = '\033[90m'
    GREEN = '\033[1m\033[92m'
    YELLOW = '\033[1m\033[93m'
    CYAN = '\033[1m\033[96m'
    RESET = '\033[0m'

    def __init__(self, width: int = 16, use_color: bool = False):
        """
        Initialize HexDumper.

        Args:
            width: Number of bytes per line
            use_color: Colour alphanumerics, punctuation and control bytes differently
        """
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        self.width = width
        self.use_color = use_color

    def dump(self, data: bytes) -> str:
        """Return the dump of data, one line per width bytes."""
        # xxd groups bytes in pairs: 4 hex digits per pair plus a separating space
        pairs = (self.width + 1) // 2
        hex_width = self.width * 2 + pairs - 1

        lines = []
        for offset in range(0, len(data), self.width):
            chunk = data[offset:offset + self.width]
            groups = [
                ''.join(self._paint(b, f'{b:02x}') for b in chunk[j:j + 2])
                for j in range(0, len(chunk), 2)
            ]
            visible = len(chunk) * 2 + len(groups) - 1
            hex_part = ' '.join(groups) + ' ' * (hex_width - visible)
            ascii_part = ''.join(self._paint(b, chr(b) if 32 <= b < 127 else '.') for b in chunk)
            lines.append(f'{offset:08x}: {hex_part}  {ascii_part}')
        return '\n'.join(lines)

    def _paint(self, byte: int, text: str) -> str:
        if not self.use_color:
            return text
        if 32 <= byte < 127:
            color = self.GREEN if chr(byte).isalnum() else self.YELLOW
        elif byte < 32 or byte == 0x7F:
            color = self.CYAN
        else:
            color = self.GRAY
        return f'{color}{text}{self.RESET}'


def hex_dump(data: bytes, width: int = 16, use_color: bool = False) -> str:
    """Shortcut for HexDumper(width, use_color).dump(data)."""
    return HexDumper(width=width, use_color=use_color).dump(data)
