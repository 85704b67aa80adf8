"""
AES-CTR encryption of MeshPacket payloads.

An encrypted MeshPacket carries a serialized Data message encrypted with the
channel PSK. The CTR nonce is built from the packet id and the sender.
"""

import base64
import binascii
from typing import Mapping, Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from google.protobuf.message import DecodeError as ProtobufDecodeError

from . import mesh_pb2
from .exceptions import ConfigError, DecryptionError
from .logging_config import get_logger

logger = get_logger('crypto')

# Well-known key of the default channel, PSK index 1 ("AQ==")
DEFAULT_PSK = bytes([
    0xd4, 0xf1, 0xbb, 0x3a, 0x20, 0x29, 0x07, 0x59,
    0xf0, 0xbc, 0xff, 0xab, 0xcf, 0x4e, 0x69, 0x01
])


def expand_psk(psk: bytes) -> Optional[bytes]:
    """
    Turn a channel PSK as stored in ChannelSettings into an AES key.

    Args:
        psk: Raw PSK bytes

    Returns:
        16 or 32 byte key, or None when the channel is unencrypted

    Raises:
        DecryptionError: If the PSK is longer than 32 bytes
    """
    if not psk:
        return None

    if len(psk) == 1:
        index = psk[0]
        if index == 0:
            return None
        # Simple PSKs: the default key with its last byte bumped
        return DEFAULT_PSK[:-1] + bytes([(DEFAULT_PSK[-1] + index - 1) & 0xFF])

    if len(psk) in (16, 32):
        return bytes(psk)
    if len(psk) < 16:
        return bytes(psk).ljust(16, b'\x00')
    if len(psk) < 32:
        return bytes(psk).ljust(32, b'\x00')
    raise DecryptionError(f"PSK too long: {len(psk)} bytes (max 32)")


def build_nonce(packet_id: int, from_node: int) -> bytes:
    """
    Build the 16-byte AES-CTR nonce.

    Layout: packet_id (8 bytes LE) + from_node (4 bytes LE) + 4 zero bytes.
    """
    return (packet_id.to_bytes(8, byteorder='little')
            + from_node.to_bytes(4, byteorder='little')
            + b'\x00' * 4)


def _aes_ctr(key: bytes, nonce: bytes, data: bytes) -> bytes:
    # CTR is symmetric, the same transform encrypts and decrypts
    transform = Cipher(algorithms.AES(key), modes.CTR(nonce)).encryptor()
    return transform.update(data) + transform.finalize()


class PacketCipher:
    """Encrypts and decrypts MeshPacket payloads with a set of channel keys."""

    def __init__(self, keys: Optional[Mapping[str, bytes]] = None):
        """
        Initialize PacketCipher.

        Args:
            keys: Channel name -> PSK, tried in this order when decrypting.
                  PSKs are expanded with expand_psk(); unencrypted channels are dropped.
                  Defaults to the default channel key.
        """
        self.keys: dict[str, bytes] = {}
        for name, psk in (keys or {'default': DEFAULT_PSK}).items():
            key = expand_psk(psk)
            if key is None:
                logger.debug(f"Channel '{name}' is unencrypted, not used for decryption")
                continue
            self.keys[name] = key

    def encrypt(self, data: bytes, packet_id: int, from_node: int, key: Optional[bytes] = None) -> bytes:
        """
        Encrypt a serialized Data message.

        Args:
            data: Serialized mesh_pb2.Data
            packet_id: MeshPacket.id
            from_node: MeshPacket.from
            key: AES key (expanded); defaults to the first configured key

        Returns:
            Ciphertext, same length as data

        Raises:
            DecryptionError: If no key is available
        """
        if key is None:
            if not self.keys:
                raise DecryptionError("No channel key configured")
            key = next(iter(self.keys.values()))
        return _aes_ctr(key, build_nonce(packet_id, from_node), data)

    def decrypt(self, ciphertext: bytes, packet_id: int, from_node: int, key: bytes) -> bytes:
        """Decrypt raw payload bytes with one key."""
        return _aes_ctr(key, build_nonce(packet_id, from_node), ciphertext)

    def decrypt_packet(self, packet) -> Optional[mesh_pb2.Data]:
        """
        Decrypt the encrypted payload of a MeshPacket.

        Every configured key is tried in order. A key is accepted when the
        plaintext parses as Data with a non-zero portnum.

        Args:
            packet: mesh_pb2.MeshPacket with payload_variant 'encrypted'

        Returns:
            Decrypted Data, or None if no key works

        Raises:
            DecryptionError: If the packet has no encrypted payload
        """
        if packet.WhichOneof('payload_variant') != 'encrypted':
            raise DecryptionError("Packet has no encrypted payload")

        ciphertext = bytes(packet.encrypted)
        from_node = getattr(packet, 'from')
        for name, key in self.keys.items():
            data = self._try_key(ciphertext, packet.id, from_node, name, key)
            if data is not None:
                logger.debug(f"Decrypted packet {packet.id:#010x} with '{name}' key")
                return data

        logger.debug(f"Packet {packet.id:#010x}: none of {len(self.keys)} keys worked")
        return None

    def _try_key(self, ciphertext: bytes, packet_id: int, from_node: int,
                 name: str, key: bytes) -> Optional[mesh_pb2.Data]:
        plaintext = self.decrypt(ciphertext, packet_id, from_node, key)
        data = mesh_pb2.Data()
        try:
            data.ParseFromString(plaintext)
        except ProtobufDecodeError as e:
            logger.debug(f"Key '{name}' failed: {e}")
            return None
        if data.portnum == 0:
            logger.debug(f"Key '{name}' failed: plaintext has no portnum")
            return None
        return data


def load_channel_keys(channels: Optional[dict]) -> dict[str, bytes]:
    """
    Load channel PSKs from configuration.

    Supports both formats:
    - {"LongFast": {"psk": "AQ=="}}
    - {"0": {"name": "LongFast", "psk": "AQ=="}}

    PSKs are returned as configured (base64-decoded). PacketCipher expands them.

    Args:
        channels: Dictionary of channel configurations

    Returns:
        Dictionary mapping channel names to PSK bytes, the default key if empty

    Raises:
        ConfigError: If a PSK is not valid base64
    """
    keys = {}
    for key, channel_config in (channels or {}).items():
        if not isinstance(channel_config, dict) or not channel_config.get('psk'):
            continue

        try:
            psk = base64.b64decode(channel_config['psk'], validate=True)
        except (binascii.Error, ValueError) as e:
            raise ConfigError(f"Channel '{key}': invalid base64 PSK") from e

        name = channel_config['name'] if key.isdigit() and 'name' in channel_config else key
        keys[name] = psk
        logger.debug(f"Loaded channel '{name}' ({len(psk)}-byte PSK)")

    if not keys:
        keys['default'] = DEFAULT_PSK
    return keys
