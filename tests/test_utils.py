import pytest

from meshtastic_protobufs.exceptions import NodeIdError
from meshtastic_protobufs.utils import (
    BROADCAST_ID, BROADCAST_NUM, NodeIdParser, PayloadDetector, format_node_id, is_broadcast, parse_node_id,
)


@pytest.mark.parametrize('node_id, expected', [
    ('!da548c90', 0xda548c90),
    ('@DA548C90', 0xda548c90),
    ('0xda548c90', 0xda548c90),
    ('3663007888', 3663007888),
    ('  !1  ', 1),
    ('^all', BROADCAST_NUM),
    ('^ALL', BROADCAST_NUM),
    (42, 42),
    (0xFFFFFFFF, BROADCAST_NUM),
])
def test_parse_node_id(node_id, expected):
    assert parse_node_id(node_id) == expected


@pytest.mark.parametrize('node_id', [
    '!', '!xyz', '!123456789', '4294967296', '-1', '^none', 'abc', '', True, 1.5, None, -1, 1 << 32,
    '1' * 17,
])
def test_parse_node_id_invalid(node_id):
    with pytest.raises(NodeIdError):
        NodeIdParser.parse(node_id)


def test_format_node_id():
    assert format_node_id(0xda548c90) == '!da548c90'
    assert format_node_id(1) == '!00000001'
    assert format_node_id(BROADCAST_NUM) == BROADCAST_ID


def test_format_node_id_out_of_range():
    with pytest.raises(NodeIdError):
        format_node_id(1 << 32)


def test_is_broadcast():
    assert is_broadcast(BROADCAST_NUM)
    assert not is_broadcast(0xda548c90)


@pytest.mark.parametrize('payload, expected', [
    (b'{"from": 1}', True),
    (b'  \n[1, 2]', True),
    (b'\x0a\x02hi', False),
    (b'', False),
])
def test_is_json(payload, expected):
    assert PayloadDetector.is_json(payload) is expected
