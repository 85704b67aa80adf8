import pytest

from meshtastic_protobufs.message_filter import MessageFilter
from meshtastic_protobufs.models import DecodedPacket, PacketInfo


def make(portnum_name='TEXT_MESSAGE_APP', encrypted=False, decrypted=False):
    info = PacketInfo(1, '!00000001', 2, '!00000002', 3, '0x00000003', 0, 3, 3, 0, False, False)
    payload = None if encrypted and not decrypted else b''
    return DecodedPacket(info, encrypted=encrypted, decrypted=decrypted,
                         portnum_name=portnum_name, payload=payload)


def test_no_filter_shows_everything():
    message_filter = MessageFilter()
    assert not message_filter.should_filter(make())
    assert not message_filter.should_filter(make(encrypted=True))


def test_include_filter():
    message_filter = MessageFilter({'include': {'text', 'position'}, 'exclude': set()})
    assert not message_filter.should_filter(make('TEXT_MESSAGE_APP'))
    assert not message_filter.should_filter(make('POSITION_APP'))
    assert message_filter.should_filter(make('TELEMETRY_APP'))
    assert message_filter.should_filter(make(encrypted=True))


def test_include_encrypted_only():
    message_filter = MessageFilter({'include': {'encrypted'}, 'exclude': set()})
    assert not message_filter.should_filter(make(encrypted=True))
    assert message_filter.should_filter(make('TEXT_MESSAGE_APP'))


def test_exclude_filter():
    message_filter = MessageFilter({'include': set(), 'exclude': {'telemetry', 'encrypted'}})
    assert message_filter.should_filter(make('TELEMETRY_APP'))
    assert message_filter.should_filter(make(encrypted=True))
    assert not message_filter.should_filter(make('TEXT_MESSAGE_APP'))


def test_decrypted_packets_filtered_by_port():
    message_filter = MessageFilter({'include': {'text'}, 'exclude': set()})
    assert not message_filter.should_filter(make('TEXT_MESSAGE_APP', encrypted=True, decrypted=True))


def test_unknown_filter_name():
    with pytest.raises(ValueError, match='bogus'):
        MessageFilter({'include': {'bogus'}, 'exclude': set()})


def test_choices():
    choices = MessageFilter.choices()
    assert 'encrypted' in choices
    assert 'text' in choices
    assert 'map' in choices
