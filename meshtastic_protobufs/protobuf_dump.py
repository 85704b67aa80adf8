"""
Annotated dump of protobuf wire data.

The walker reads tags and lengths only to label bytes; the message itself is
always decoded by the protobuf runtime. Field names, enum names and signedness
come from the message descriptor.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List, Optional

from google.protobuf.descriptor import Descriptor, FieldDescriptor

WIRE_VARINT = 0
WIRE_I64 = 1
WIRE_LEN = 2
WIRE_I32 = 5

WIRE_TYPE_NAMES = {
    0: "VARINT",
    1: "I64",
    2: "LEN",
    3: "SGROUP",
    4: "EGROUP",
    5: "I32",
}

_SIGNED_VARINTS = (FieldDescriptor.TYPE_INT32, FieldDescriptor.TYPE_INT64)
_ZIGZAG_VARINTS = (FieldDescriptor.TYPE_SINT32, FieldDescriptor.TYPE_SINT64)
_PACKABLE = {
    FieldDescriptor.TYPE_FIXED32: WIRE_I32,
    FieldDescriptor.TYPE_SFIXED32: WIRE_I32,
    FieldDescriptor.TYPE_FLOAT: WIRE_I32,
    FieldDescriptor.TYPE_FIXED64: WIRE_I64,
    FieldDescriptor.TYPE_SFIXED64: WIRE_I64,
    FieldDescriptor.TYPE_DOUBLE: WIRE_I64,
}


@dataclass(frozen=True)
class FieldDump:
    """A slice of protobuf wire data with its annotation."""
    indent: int
    offset: int
    data: bytes
    description: str


class _TruncatedError(ValueError):
    pass


def format_protobuf_dump(descriptor: Optional[Descriptor], data: bytes, indent: int = 0,
                         base_offset: int = 0) -> List[FieldDump]:
    """
    Produce annotated slices of protobuf wire data.

    Malformed or truncated input never raises: the walk stops with an entry
    describing the problem, followed by any bytes left unparsed.

    Args:
        descriptor: Message descriptor, or None to dump without field names
        data: Raw protobuf bytes
        indent: Indentation level of top-level entries
        base_offset: Offset of data within the outer buffer

    Returns:
        List of FieldDump entries in wire order
    """
    entries: List[FieldDump] = []
    pos = 0
    total = len(data)

    def add(level: int, start: int, end: int, description: str) -> None:
        entries.append(FieldDump(level, base_offset + start, bytes(data[start:end]), description))

    while pos < total:
        field_start = pos
        try:
            key, pos = _read_varint(data, pos)
        except _TruncatedError as exc:
            add(indent, field_start, field_start, f"error reading key: {exc}")
            pos = field_start
            break

        field_number, wire_type = key >> 3, key & 0x07
        field = descriptor.fields_by_number.get(field_number) if descriptor is not None else None
        field_name = field.name if field is not None else f"unknown_{field_number}"
        add(indent, field_start, pos,
            f"field {field_number} ({field_name}) [{WIRE_TYPE_NAMES.get(wire_type, f'wire={wire_type}')}]")

        value_start = pos
        try:
            if wire_type == WIRE_VARINT:
                value, pos = _read_varint(data, pos)
                add(indent + 1, value_start, pos, _describe_varint(field, value))

            elif wire_type in (WIRE_I32, WIRE_I64):
                size = 4 if wire_type == WIRE_I32 else 8
                if pos + size > total:
                    raise _TruncatedError(f"truncated {size * 8}-bit value")
                pos += size
                add(indent + 1, value_start, pos, _describe_fixed(field, data[value_start:pos]))

            elif wire_type == WIRE_LEN:
                length, pos = _read_varint(data, pos)
                add(indent + 1, value_start, pos, f"length = {length}")
                if pos + length > total:
                    raise _TruncatedError(f"length {length} runs past end of buffer ({total - pos} left)")
                payload_start, pos = pos, pos + length
                entries.extend(_describe_length_delimited(
                    field, data[payload_start:pos], indent + 1, base_offset + payload_start))

            else:
                add(indent + 1, pos, pos, f"unsupported wire type {wire_type}")
                break
        except _TruncatedError as exc:
            add(indent + 1, value_start, value_start, f"error: {exc}")
            pos = value_start
            break

    if pos < total:
        add(indent, pos, total, f"{total - pos} trailing byte(s) not parsed")

    return entries


def dump_message(message) -> List[FieldDump]:
    """Dump a message instance by serializing it."""
    return format_protobuf_dump(message.DESCRIPTOR, message.SerializeToString())


def render_dump(entries: List[FieldDump], indent_width: int = 2, max_bytes: int = 16) -> str:
    """
    Render dump entries as text, one line per entry.

    Each line shows the offset, up to max_bytes of hex and the description.
    """
    lines = []
    for entry in entries:
        hex_part = entry.data[:max_bytes].hex(' ')
        if len(entry.data) > max_bytes:
            hex_part += ' ..'
        pad = ' ' * (entry.indent * indent_width)
        lines.append(f"{entry.offset:04x}  {hex_part:<{max_bytes * 3 + 2}} {pad}{entry.description}")
    return '\n'.join(lines)


def _read_varint(data: bytes, pos: int) -> tuple[int, int]:
    """Read a varint at pos; return the value and the position after it."""
    result = 0
    shift = 0
    while pos < len(data):
        byte = data[pos]
        pos += 1
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result, pos
        shift += 7
        if shift >= 70:
            raise _TruncatedError("varint longer than 10 bytes")
    raise _TruncatedError("unexpected end of buffer in varint")


def _zigzag_decode(value: int) -> int:
    return (value >> 1) ^ -(value & 1)


def _describe_varint(field: Optional[FieldDescriptor], value: int) -> str:
    if field is None:
        return f"value = {value}"

    if field.type == FieldDescriptor.TYPE_BOOL:
        return f"value = {bool(value)} (bool)"
    if field.type == FieldDescriptor.TYPE_ENUM:
        enum_value = field.enum_type.values_by_number.get(_to_signed(value, 64))
        name = enum_value.name if enum_value is not None else 'unknown enum value'
        return f"value = {name} ({_to_signed(value, 64)})"
    if field.type in _ZIGZAG_VARINTS:
        return f"value = {_zigzag_decode(value)} (zigzag)"
    if field.type in _SIGNED_VARINTS:
        return f"value = {_to_signed(value, 64)}"
    return f"value = {value}"


def _describe_fixed(field: Optional[FieldDescriptor], value_bytes: bytes) -> str:
    bits = len(value_bytes) * 8
    field_type = field.type if field is not None else None

    if field_type == FieldDescriptor.TYPE_FLOAT and bits == 32:
        return f"value = {struct.unpack('<f', value_bytes)[0]:g} (float)"
    if field_type == FieldDescriptor.TYPE_DOUBLE and bits == 64:
        return f"value = {struct.unpack('<d', value_bytes)[0]!r} (double)"

    signed = field_type in (FieldDescriptor.TYPE_SFIXED32, FieldDescriptor.TYPE_SFIXED64)
    value = int.from_bytes(value_bytes, 'little', signed=signed)
    return f"value = {value} ({'sfixed' if signed else 'fixed'}{bits})"


def _describe_length_delimited(field: Optional[FieldDescriptor], payload: bytes,
                               indent: int, offset: int) -> List[FieldDump]:
    if field is None:
        return [FieldDump(indent, offset, payload, f"bytes ({len(payload)})")]

    if field.type == FieldDescriptor.TYPE_STRING:
        text = payload.decode('utf-8', errors='replace')
        return [FieldDump(indent, offset, payload, f'string = "{text}"')]

    if field.type == FieldDescriptor.TYPE_BYTES:
        return [FieldDump(indent, offset, payload, f"bytes ({len(payload)})")]

    if field.type == FieldDescriptor.TYPE_MESSAGE:
        header = FieldDump(indent, offset, b'', f"message {field.message_type.name} ({len(payload)} bytes)")
        return [header] + format_protobuf_dump(field.message_type, payload, indent + 1, offset)

    # LEN on a numeric field only occurs for packed repeated values
    if field.type != FieldDescriptor.TYPE_GROUP:
        return _describe_packed(field, payload, indent, offset)

    return [FieldDump(indent, offset, payload, f"length-delimited ({len(payload)} bytes)")]


def _describe_packed(field: FieldDescriptor, payload: bytes, indent: int, offset: int) -> List[FieldDump]:
    entries = [FieldDump(indent, offset, b'', f"packed {len(payload)} bytes")]
    pos = 0
    fixed_wire = _PACKABLE.get(field.type)
    while pos < len(payload):
        start = pos
        if fixed_wire is not None:
            size = 4 if fixed_wire == WIRE_I32 else 8
            if pos + size > len(payload):
                entries.append(FieldDump(indent + 1, offset + start, payload[start:], "error: truncated packed element"))
                break
            pos += size
            description = _describe_fixed(field, payload[start:pos])
        else:
            try:
                value, pos = _read_varint(payload, pos)
            except _TruncatedError as exc:
                entries.append(FieldDump(indent + 1, offset + start, payload[start:], f"error: {exc}"))
                break
            description = _describe_varint(field, value)
        entries.append(FieldDump(indent + 1, offset + start, payload[start:pos], description))
    return entries


def _to_signed(value: int, bits: int) -> int:
    if value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value


__all__ = ["FieldDump", "format_protobuf_dump", "dump_message", "render_dump"]
