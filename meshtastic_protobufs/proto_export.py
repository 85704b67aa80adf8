"""
Render registered files back to .proto source.

The exported tree can be diffed against the upstream Meshtastic .proto files
when the schema is synced, and compiled with protoc to check that it yields
the same descriptors as the bindings in this package.
"""

from pathlib import Path
from typing import List, Optional

from google.protobuf import descriptor_pb2
from google.protobuf.descriptor import FileDescriptor

from ._schema import registered_files
from .logging_config import get_logger

logger = get_logger('proto_export')

_FDP = descriptor_pb2.FieldDescriptorProto

SCALAR_NAMES = {
    _FDP.TYPE_DOUBLE: 'double',
    _FDP.TYPE_FLOAT: 'float',
    _FDP.TYPE_INT64: 'int64',
    _FDP.TYPE_UINT64: 'uint64',
    _FDP.TYPE_INT32: 'int32',
    _FDP.TYPE_FIXED64: 'fixed64',
    _FDP.TYPE_FIXED32: 'fixed32',
    _FDP.TYPE_BOOL: 'bool',
    _FDP.TYPE_STRING: 'string',
    _FDP.TYPE_BYTES: 'bytes',
    _FDP.TYPE_UINT32: 'uint32',
    _FDP.TYPE_SFIXED32: 'sfixed32',
    _FDP.TYPE_SFIXED64: 'sfixed64',
    _FDP.TYPE_SINT32: 'sint32',
    _FDP.TYPE_SINT64: 'sint64',
}

INDENT = '  '


def file_proto(file_desc: FileDescriptor) -> descriptor_pb2.FileDescriptorProto:
    """FileDescriptorProto of a registered file."""
    return descriptor_pb2.FileDescriptorProto.FromString(file_desc.serialized_pb)


def render_proto(proto: descriptor_pb2.FileDescriptorProto) -> str:
    """
    Render a FileDescriptorProto as .proto source.

    Type references are written fully qualified (leading dot), so the output
    does not depend on protoc's relative name resolution.

    Args:
        proto: File to render

    Returns:
        .proto text ending in a newline
    """
    syntax = proto.syntax or 'proto2'
    lines = [f'syntax = "{syntax}";', '']
    if proto.package:
        lines += [f'package {proto.package};', '']
    if proto.dependency:
        lines += [f'import "{dep}";' for dep in proto.dependency]
        lines.append('')
    options = proto.options.ListFields()
    if options:
        lines += [f'option {fd.name} = {_literal(value)};' for fd, value in options]
        lines.append('')

    for enum_proto in proto.enum_type:
        lines += _render_enum(enum_proto, 0)
        lines.append('')
    for message_proto in proto.message_type:
        lines += _render_message(message_proto, syntax, 0)
        lines.append('')

    return '\n'.join(lines).rstrip('\n') + '\n'


def export_protos(directory: str | Path, files: Optional[List[FileDescriptor]] = None) -> List[Path]:
    """
    Write every registered file below a directory, keeping its import path.

    Args:
        directory: Output root, created if missing
        files: Files to export (defaults to all registered files)

    Returns:
        Paths written, in registration order
    """
    root = Path(directory)
    written = []
    for file_desc in files if files is not None else registered_files():
        path = root / file_desc.name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_proto(file_proto(file_desc)), encoding='utf-8')
        logger.debug(f"Exported {file_desc.name} to {path}")
        written.append(path)
    return written


def _render_enum(proto: descriptor_pb2.EnumDescriptorProto, depth: int) -> List[str]:
    pad = INDENT * depth
    lines = [f'{pad}enum {proto.name} {{']
    lines += [f'{pad}{INDENT}{value.name} = {value.number};' for value in proto.value]
    lines.append(f'{pad}}}')
    return lines


def _render_message(proto: descriptor_pb2.DescriptorProto, syntax: str, depth: int) -> List[str]:
    pad = INDENT * depth
    inner = pad + INDENT
    lines = [f'{pad}message {proto.name} {{']

    for enum_proto in proto.enum_type:
        lines += _render_enum(enum_proto, depth + 1)
    for nested in proto.nested_type:
        lines += _render_message(nested, syntax, depth + 1)

    # Members of a real oneof are emitted together where the first one appears
    emitted_oneofs = set()
    for field_proto in proto.field:
        in_real_oneof = field_proto.HasField('oneof_index') and not field_proto.proto3_optional
        if not in_real_oneof:
            lines.append(inner + _render_field(field_proto, syntax, in_oneof=False))
            continue
        index = field_proto.oneof_index
        if index in emitted_oneofs:
            continue
        emitted_oneofs.add(index)
        lines.append(f'{inner}oneof {proto.oneof_decl[index].name} {{')
        lines += [
            inner + INDENT + _render_field(member, syntax, in_oneof=True)
            for member in proto.field
            if member.HasField('oneof_index') and member.oneof_index == index and not member.proto3_optional
        ]
        lines.append(f'{inner}}}')

    lines.append(f'{pad}}}')
    return lines


def _render_field(proto: descriptor_pb2.FieldDescriptorProto, syntax: str, in_oneof: bool) -> str:
    if proto.type in (_FDP.TYPE_MESSAGE, _FDP.TYPE_ENUM):
        type_name = proto.type_name
    else:
        type_name = SCALAR_NAMES[proto.type]

    label = ''
    if proto.label == _FDP.LABEL_REPEATED:
        label = 'repeated '
    elif proto.label == _FDP.LABEL_REQUIRED:
        label = 'required '
    elif not in_oneof and (syntax == 'proto2' or proto.proto3_optional):
        label = 'optional '

    options = []
    if proto.HasField('default_value'):
        options.append(f'default = {_default_literal(proto)}')
    if proto.options.deprecated:
        options.append('deprecated = true')
    suffix = f' [{", ".join(options)}]' if options else ''

    return f'{label}{type_name} {proto.name} = {proto.number}{suffix};'


def _default_literal(proto: descriptor_pb2.FieldDescriptorProto) -> str:
    if proto.type in (_FDP.TYPE_STRING, _FDP.TYPE_BYTES):
        return _literal(proto.default_value)
    # Numbers, bools and enum value names are stored as their source text
    return proto.default_value


def _literal(value) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, str):
        escaped = value.replace('\\', '\\\\').replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)
