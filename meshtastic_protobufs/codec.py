"""
Encoding, decoding and dict/JSON conversion of Meshtastic messages.

All wire work is done by the protobuf runtime. This module adapts its
errors to DecodeError and fixes the conversion options used throughout
the package (proto field names, enum names).
"""

import base64
import binascii
import re
from typing import Any, Optional, Union

from google.protobuf import json_format, message_factory
from google.protobuf.descriptor import Descriptor
from google.protobuf.message import DecodeError as ProtobufDecodeError
from google.protobuf.message import Message

from .exceptions import DecodeError
from .logging_config import get_logger

logger = get_logger('codec')

MessageType = Union[type, Descriptor]

_HEX_RE = re.compile(r'[0-9a-fA-F]*')
_SEPARATORS_RE = re.compile(r'[\s:]')


def message_type_of(message_type: MessageType) -> type:
    """Message class for a class or a descriptor."""
    if isinstance(message_type, Descriptor):
        return message_factory.GetMessageClass(message_type)
    return message_type


def decode(message_type: MessageType, data: bytes) -> Message:
    """
    Parse bytes into a new message.

    Args:
        message_type: Message class or descriptor
        data: Serialized message

    Returns:
        Message instance

    Raises:
        DecodeError: If the runtime rejects the bytes
    """
    cls = message_type_of(message_type)
    message = cls()
    try:
        message.ParseFromString(bytes(data))
    except ProtobufDecodeError as e:
        raise DecodeError(
            f"Cannot decode {len(data)} bytes as {cls.DESCRIPTOR.full_name}: {e}"
        ) from e
    logger.debug(f"Decoded {len(data)} bytes as {cls.DESCRIPTOR.full_name}")
    return message


def encode(message: Message, deterministic: bool = False) -> bytes:
    """Serialize a message."""
    return message.SerializeToString(deterministic=deterministic)


def to_dict(message: Message, include_defaults: bool = False) -> dict[str, Any]:
    """
    Convert a message to a dict keyed by proto field names.

    Enums are emitted by name, bytes as base64, 64-bit integers as strings
    (the protobuf JSON mapping).

    Args:
        message: Message to convert
        include_defaults: Also emit fields that hold their default value
    """
    return json_format.MessageToDict(
        message,
        preserving_proto_field_name=True,
        always_print_fields_with_no_presence=include_defaults,
    )


def to_json(message: Message, include_defaults: bool = False, indent: Optional[int] = 2) -> str:
    """JSON text of a message, see to_dict()."""
    return json_format.MessageToJson(
        message,
        preserving_proto_field_name=True,
        always_print_fields_with_no_presence=include_defaults,
        indent=indent,
    )


def from_dict(message_type: MessageType, data: dict, ignore_unknown_fields: bool = False) -> Message:
    """
    Build a message from a dict in the protobuf JSON mapping.

    Both proto field names and lowerCamelCase JSON names are accepted.

    Raises:
        DecodeError: On unknown fields (unless ignored) or ill-typed values
    """
    cls = message_type_of(message_type)
    try:
        return json_format.ParseDict(data, cls(), ignore_unknown_fields=ignore_unknown_fields)
    except json_format.ParseError as e:
        raise DecodeError(f"Invalid {cls.DESCRIPTOR.full_name} data: {e}") from e


def from_json(message_type: MessageType, text: str, ignore_unknown_fields: bool = False) -> Message:
    """Build a message from JSON text, see from_dict()."""
    cls = message_type_of(message_type)
    try:
        return json_format.Parse(text, cls(), ignore_unknown_fields=ignore_unknown_fields)
    except json_format.ParseError as e:
        raise DecodeError(f"Invalid {cls.DESCRIPTOR.full_name} JSON: {e}") from e


def which_oneof(message: Message, group: str) -> Optional[str]:
    """
    Name of the field set in a oneof group, or None.

    Raises:
        ValueError: If the message has no such oneof
    """
    return message.WhichOneof(group)


def parse_bytes_argument(text: str) -> bytes:
    """
    Parse bytes given on a command line or in a config file.

    Hex is tried first: an optional 0x prefix, whitespace and colons are
    allowed ("08 01", "08:01", "0x0801"). Anything else must be base64
    (standard or URL-safe alphabet, padding optional).

    Raises:
        DecodeError: If the text is neither
    """
    compact = _SEPARATORS_RE.sub('', text)
    if compact[:2].lower() == '0x':
        hex_part = compact[2:]
        if _HEX_RE.fullmatch(hex_part) and len(hex_part) % 2 == 0:
            return bytes.fromhex(hex_part)
        raise DecodeError(f"Invalid hex input: '{text}'")

    if _HEX_RE.fullmatch(compact) and len(compact) % 2 == 0:
        return bytes.fromhex(compact)

    padded = compact + '=' * (-len(compact) % 4)
    for altchars in (None, b'-_'):
        try:
            return base64.b64decode(padded, altchars=altchars, validate=True)
        except (binascii.Error, ValueError):
            continue
    raise DecodeError(f"Input is neither hex nor base64: '{text}'")
