import base64

import pytest
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from meshtastic_protobufs import mesh_pb2, portnums_pb2
from meshtastic_protobufs.crypto import DEFAULT_PSK, PacketCipher, build_nonce, expand_psk, load_channel_keys
from meshtastic_protobufs.exceptions import ConfigError, DecryptionError


def test_default_psk_is_aq_key():
    assert base64.b64encode(DEFAULT_PSK) == b'1PG7OiApB1nwvP+rz05pAQ=='


@pytest.mark.parametrize('psk, expected', [
    (b'', None),
    (b'\x00', None),
    (b'\x01', DEFAULT_PSK),
    (b'\x02', DEFAULT_PSK[:-1] + b'\x02'),
    (b'\x0a', DEFAULT_PSK[:-1] + b'\x0a'),
])
def test_expand_simple_psk(psk, expected):
    assert expand_psk(psk) == expected


def test_expand_psk_wraps_last_byte():
    assert expand_psk(b'\xff')[-1] == (DEFAULT_PSK[-1] + 0xfe) & 0xff


def test_expand_full_keys_unchanged():
    key16 = bytes(range(16))
    key32 = bytes(range(32))
    assert expand_psk(key16) == key16
    assert expand_psk(key32) == key32


def test_expand_short_keys_zero_padded():
    assert expand_psk(b'ab') == b'ab' + b'\x00' * 14
    assert expand_psk(b'x' * 20) == b'x' * 20 + b'\x00' * 12


def test_expand_psk_too_long():
    with pytest.raises(DecryptionError):
        expand_psk(b'x' * 33)


def test_build_nonce_layout():
    nonce = build_nonce(0x1234abcd, 0xda548c90)
    assert nonce == bytes.fromhex('cdab341200000000' '908c54da' '00000000')
    assert len(nonce) == 16


def test_encrypt_is_aes_ctr(cipher):
    plaintext = b'\x08\x01\x12\x05hello'
    nonce = build_nonce(42, 7)
    encryptor = Cipher(algorithms.AES(DEFAULT_PSK), modes.CTR(nonce)).encryptor()
    expected = encryptor.update(plaintext) + encryptor.finalize()

    assert cipher.encrypt(plaintext, 42, 7) == expected
    assert cipher.decrypt(expected, 42, 7, DEFAULT_PSK) == plaintext


def test_keystream_matches_firmware_counter_blocks(cipher):
    # Firmware counter block: packet id (u64 LE), sender (u32 LE), then a
    # big-endian block counter in the last four bytes
    blocks = bytes.fromhex(
        'cdab341200000000' '908c54da' '00000000'
        'cdab341200000000' '908c54da' '00000001'
    )
    encryptor = Cipher(algorithms.AES(DEFAULT_PSK), modes.ECB()).encryptor()
    keystream = encryptor.update(blocks) + encryptor.finalize()

    assert cipher.encrypt(bytes(32), 0x1234abcd, 0xda548c90) == keystream


def test_decrypt_packet(cipher, encrypted_packet, text_data):
    assert cipher.decrypt_packet(encrypted_packet) == text_data


def test_decrypt_packet_tries_keys_in_order(encrypted_packet, text_data):
    cipher = PacketCipher({'private': bytes(range(16)), 'LongFast': b'\x01'})
    assert list(cipher.keys) == ['private', 'LongFast']
    assert cipher.decrypt_packet(encrypted_packet) == text_data


def test_decrypt_packet_wrong_key(encrypted_packet):
    cipher = PacketCipher({'private': bytes(range(32))})
    assert cipher.decrypt_packet(encrypted_packet) is None


def test_decrypt_packet_requires_encrypted_payload(cipher, packet_factory, text_data):
    with pytest.raises(DecryptionError):
        cipher.decrypt_packet(packet_factory(data=text_data))
    with pytest.raises(DecryptionError):
        cipher.decrypt_packet(mesh_pb2.MeshPacket())


def test_decrypt_rejects_zero_portnum(cipher, packet_factory):
    data = mesh_pb2.Data(portnum=portnums_pb2.UNKNOWN_APP, payload=b'x')
    packet = packet_factory()
    packet.encrypted = cipher.encrypt(data.SerializeToString(), packet.id, getattr(packet, 'from'))
    assert cipher.decrypt_packet(packet) is None


def test_unencrypted_channels_dropped():
    cipher = PacketCipher({'open': b'\x00', 'default': b'\x01'})
    assert list(cipher.keys) == ['default']


def test_encrypt_without_keys():
    cipher = PacketCipher({'open': b''})
    with pytest.raises(DecryptionError):
        cipher.encrypt(b'data', 1, 2)


def test_load_channel_keys_named_format():
    keys = load_channel_keys({'LongFast': {'psk': 'AQ=='}, 'Secret': {'psk': base64.b64encode(b'k' * 16).decode()}})
    assert keys == {'LongFast': b'\x01', 'Secret': b'k' * 16}


def test_load_channel_keys_indexed_format():
    keys = load_channel_keys({'0': {'name': 'LongFast', 'psk': 'AQ=='}, '1': {'psk': 'Ag=='}})
    assert keys == {'LongFast': b'\x01', '1': b'\x02'}


def test_load_channel_keys_defaults():
    assert load_channel_keys(None) == {'default': DEFAULT_PSK}
    assert load_channel_keys({'x': {'name': 'no psk'}}) == {'default': DEFAULT_PSK}


def test_load_channel_keys_invalid_base64():
    with pytest.raises(ConfigError):
        load_channel_keys({'bad': {'psk': 'not base64!'}})
