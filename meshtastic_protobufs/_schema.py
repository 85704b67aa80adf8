"""
Declarative description of .proto files, compiled into descriptors.

Each ``*_pb2`` module in this package describes one Meshtastic .proto file with
the small vocabulary below (``proto_file``, ``message``, ``field``, ``enum``),
registers it in a private descriptor pool and then lets the protobuf runtime
build message classes exactly as it does for protoc output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.descriptor import Descriptor, EnumDescriptor, FileDescriptor

from .exceptions import SchemaError, UnknownTypeError
from .logging_config import get_logger

logger = get_logger('schema')

_FDP = descriptor_pb2.FieldDescriptorProto

DOUBLE = _FDP.TYPE_DOUBLE
FLOAT = _FDP.TYPE_FLOAT
INT64 = _FDP.TYPE_INT64
UINT64 = _FDP.TYPE_UINT64
INT32 = _FDP.TYPE_INT32
FIXED64 = _FDP.TYPE_FIXED64
FIXED32 = _FDP.TYPE_FIXED32
BOOL = _FDP.TYPE_BOOL
STRING = _FDP.TYPE_STRING
BYTES = _FDP.TYPE_BYTES
UINT32 = _FDP.TYPE_UINT32
SFIXED32 = _FDP.TYPE_SFIXED32
SFIXED64 = _FDP.TYPE_SFIXED64
SINT32 = _FDP.TYPE_SINT32
SINT64 = _FDP.TYPE_SINT64

SCALAR_TYPES = frozenset({
    DOUBLE, FLOAT, INT64, UINT64, INT32, FIXED64, FIXED32, BOOL,
    STRING, BYTES, UINT32, SFIXED32, SFIXED64, SINT32, SINT64,
})

PACKAGE = 'meshtastic'

MAX_FIELD_NUMBER = (1 << 29) - 1
RESERVED_FIELD_NUMBERS = range(19000, 20000)

# All Meshtastic files share one pool, separate from the runtime's default
# pool, so these bindings can coexist with other copies of the same schema.
POOL = descriptor_pool.DescriptorPool()

_registered_files: list[str] = []


@dataclass(frozen=True)
class FieldSpec:
    """One field of a message declaration."""
    number: int
    name: str
    type: int
    type_name: Optional[str] = None
    repeated: bool = False
    optional: bool = False
    oneof: Optional[str] = None
    deprecated: bool = False
    default: Optional[str] = None
    json_name: Optional[str] = None


@dataclass(frozen=True)
class EnumSpec:
    """An enumeration and its (name, number) values, in declaration order."""
    name: str
    values: tuple[tuple[str, int], ...]


@dataclass(frozen=True)
class MessageSpec:
    """A message declaration with its nested messages and enums."""
    name: str
    fields: tuple[FieldSpec, ...] = ()
    nested: tuple['MessageSpec', ...] = ()
    enums: tuple[EnumSpec, ...] = ()


@dataclass(frozen=True)
class FileSpec:
    """A whole .proto file."""
    name: str
    package: str
    syntax: str
    dependencies: tuple[str, ...] = ()
    messages: tuple[MessageSpec, ...] = ()
    enums: tuple[EnumSpec, ...] = ()


def field(number: int, name: str, type: Optional[int] = None, *,
          message: Optional[str] = None, enum: Optional[str] = None,
          repeated: bool = False, optional: bool = False, oneof: Optional[str] = None,
          deprecated: bool = False, default: Optional[str] = None,
          json_name: Optional[str] = None) -> FieldSpec:
    """
    Declare a field.

    Exactly one of ``type`` (a scalar type constant), ``message`` or ``enum``
    (a fully qualified type name such as ``.meshtastic.User``) must be given.

    Args:
        number: Field number (tag)
        name: Field name as written in the .proto file
        type: Scalar type constant, e.g. ``UINT32``
        message: Referenced message type
        enum: Referenced enum type
        repeated: Repeated label
        optional: proto3 ``optional`` (explicit presence)
        oneof: Name of the oneof group this field belongs to
        deprecated: Mark the field deprecated
        default: proto2 default value, in .proto text form
        json_name: Override of the JSON name

    Returns:
        FieldSpec
    """
    given = [t for t in (type, message, enum) if t is not None]
    if len(given) != 1:
        raise SchemaError(f"Field '{name}' needs exactly one of type, message or enum")

    if message is not None:
        field_type, type_name = _FDP.TYPE_MESSAGE, _qualify(message)
    elif enum is not None:
        field_type, type_name = _FDP.TYPE_ENUM, _qualify(enum)
    else:
        if type not in SCALAR_TYPES:
            raise SchemaError(f"Field '{name}' has unknown scalar type {type!r}")
        field_type, type_name = type, None

    return FieldSpec(
        number=number,
        name=name,
        type=field_type,
        type_name=type_name,
        repeated=repeated,
        optional=optional,
        oneof=oneof,
        deprecated=deprecated,
        default=default,
        json_name=json_name,
    )


def enum(name: str, values: Iterable[tuple[str, int]]) -> EnumSpec:
    """Declare an enum from (VALUE_NAME, number) pairs."""
    return EnumSpec(name=name, values=tuple(values))


def message(name: str, fields: Iterable[FieldSpec] = (), *,
            nested: Iterable[MessageSpec] = (), enums: Iterable[EnumSpec] = ()) -> MessageSpec:
    """Declare a message."""
    return MessageSpec(name=name, fields=tuple(fields), nested=tuple(nested), enums=tuple(enums))


def proto_file(name: str, *, package: str = PACKAGE, syntax: str = 'proto3',
               dependencies: Sequence[str] = (), messages: Iterable[MessageSpec] = (),
               enums: Iterable[EnumSpec] = (), java_outer_classname: Optional[str] = None
               ) -> descriptor_pb2.FileDescriptorProto:
    """
    Compile a file declaration into a FileDescriptorProto.

    Raises:
        SchemaError: If any declaration in the file is malformed
    """
    if syntax not in ('proto2', 'proto3'):
        raise SchemaError(f"{name}: unsupported syntax '{syntax}'")

    spec = FileSpec(
        name=name,
        package=package,
        syntax=syntax,
        dependencies=tuple(dependencies),
        messages=tuple(messages),
        enums=tuple(enums),
    )

    proto = descriptor_pb2.FileDescriptorProto()
    proto.name = spec.name
    if spec.package:
        proto.package = spec.package
    proto.syntax = spec.syntax
    proto.dependency.extend(spec.dependencies)
    if java_outer_classname:
        proto.options.java_outer_classname = java_outer_classname

    for enum_spec in spec.enums:
        _compile_enum(enum_spec, spec.syntax, proto.enum_type.add())
    for message_spec in spec.messages:
        _compile_message(message_spec, spec.syntax, proto.message_type.add())

    return proto


def register(file_proto: descriptor_pb2.FileDescriptorProto) -> FileDescriptor:
    """
    Add a compiled file to the Meshtastic descriptor pool.

    Registering the same file twice returns the existing descriptor.

    Args:
        file_proto: Output of proto_file()

    Returns:
        FileDescriptor from POOL

    Raises:
        SchemaError: If the runtime rejects the file (e.g. unresolved type names)
    """
    try:
        existing = POOL.FindFileByName(file_proto.name)
    except KeyError:
        existing = None
    if existing is not None:
        logger.debug(f"{file_proto.name} already registered")
        return existing

    try:
        POOL.AddSerializedFile(file_proto.SerializeToString())
        file_desc = POOL.FindFileByName(file_proto.name)
    except (TypeError, KeyError, ValueError) as e:
        raise SchemaError(f"Could not register {file_proto.name}: {e}") from e

    _registered_files.append(file_proto.name)
    logger.debug(
        f"Registered {file_proto.name}: {len(file_proto.message_type)} messages, "
        f"{len(file_proto.enum_type)} enums"
    )
    return file_desc


def register_runtime_file(file_desc: FileDescriptor) -> FileDescriptor:
    """Make a file bundled with the protobuf runtime (e.g. descriptor.proto) importable from POOL."""
    try:
        return POOL.FindFileByName(file_desc.name)
    except KeyError:
        pass
    POOL.AddSerializedFile(file_desc.serialized_pb)
    return POOL.FindFileByName(file_desc.name)


def registered_files() -> list[FileDescriptor]:
    """File descriptors registered so far, in registration order."""
    return [POOL.FindFileByName(name) for name in _registered_files]


def find_message(full_name: str) -> Descriptor:
    """Look up a message descriptor by fully qualified name."""
    try:
        return POOL.FindMessageTypeByName(full_name.lstrip('.'))
    except KeyError as e:
        raise UnknownTypeError(f"Unknown message type: '{full_name}'") from e


def find_enum(full_name: str) -> EnumDescriptor:
    """Look up an enum descriptor by fully qualified name."""
    try:
        return POOL.FindEnumTypeByName(full_name.lstrip('.'))
    except KeyError as e:
        raise UnknownTypeError(f"Unknown enum type: '{full_name}'") from e


def message_class(full_name: str) -> type:
    """Message class for a fully qualified message name."""
    return message_factory.GetMessageClass(find_message(full_name))


def json_name(name: str) -> str:
    """lowerCamelCase JSON name, computed the way protoc does."""
    parts = name.split('_')
    return parts[0] + ''.join(p[:1].upper() + p[1:] for p in parts[1:])


def _qualify(type_name: str) -> str:
    return type_name if type_name.startswith('.') else f".{type_name}"


def _compile_enum(spec: EnumSpec, syntax: str, proto: descriptor_pb2.EnumDescriptorProto) -> None:
    if not spec.values:
        raise SchemaError(f"Enum '{spec.name}' has no values")
    if syntax == 'proto3' and spec.values[0][1] != 0:
        raise SchemaError(f"Enum '{spec.name}': first value must be zero in proto3")

    seen_names: set[str] = set()
    seen_numbers: set[int] = set()
    proto.name = spec.name
    for value_name, number in spec.values:
        if value_name in seen_names:
            raise SchemaError(f"Enum '{spec.name}': duplicate value name '{value_name}'")
        if number in seen_numbers:
            raise SchemaError(f"Enum '{spec.name}': duplicate value number {number}")
        seen_names.add(value_name)
        seen_numbers.add(number)
        proto.value.add(name=value_name, number=number)


def _compile_message(spec: MessageSpec, syntax: str, proto: descriptor_pb2.DescriptorProto) -> None:
    proto.name = spec.name
    _check_fields(spec, syntax)

    # Real oneofs first, in order of first appearance; synthetic ones for
    # proto3 optional fields must come after them.
    oneofs: dict[str, int] = {}
    for f in spec.fields:
        if f.oneof and f.oneof not in oneofs:
            oneofs[f.oneof] = len(oneofs)
            proto.oneof_decl.add(name=f.oneof)
    for f in spec.fields:
        if f.optional:
            synthetic = f"_{f.name}"
            oneofs[synthetic] = len(oneofs)
            proto.oneof_decl.add(name=synthetic)

    for f in spec.fields:
        fp = proto.field.add()
        fp.name = f.name
        fp.number = f.number
        fp.type = f.type
        fp.label = _FDP.LABEL_REPEATED if f.repeated else _FDP.LABEL_OPTIONAL
        fp.json_name = f.json_name or json_name(f.name)
        if f.type_name:
            fp.type_name = f.type_name
        if f.oneof:
            fp.oneof_index = oneofs[f.oneof]
        if f.optional:
            fp.oneof_index = oneofs[f"_{f.name}"]
            fp.proto3_optional = True
        if f.default is not None:
            fp.default_value = f.default
        if f.deprecated:
            fp.options.deprecated = True

    for enum_spec in spec.enums:
        _compile_enum(enum_spec, syntax, proto.enum_type.add())
    for nested in spec.nested:
        _compile_message(nested, syntax, proto.nested_type.add())


def _check_fields(spec: MessageSpec, syntax: str) -> None:
    numbers: set[int] = set()
    names: set[str] = set()
    for f in spec.fields:
        where = f"{spec.name}.{f.name}"
        if not 1 <= f.number <= MAX_FIELD_NUMBER:
            raise SchemaError(f"{where}: field number {f.number} out of range")
        if f.number in RESERVED_FIELD_NUMBERS:
            raise SchemaError(f"{where}: field number {f.number} is reserved by protobuf")
        if f.number in numbers:
            raise SchemaError(f"{where}: duplicate field number {f.number}")
        if f.name in names:
            raise SchemaError(f"{where}: duplicate field name")
        if f.repeated and (f.oneof or f.optional):
            raise SchemaError(f"{where}: repeated fields cannot be optional or part of a oneof")
        if f.optional and f.oneof:
            raise SchemaError(f"{where}: oneof members cannot be declared optional")
        if f.optional and syntax != 'proto3':
            raise SchemaError(f"{where}: 'optional' presence is only declared on proto3 files")
        if f.default is not None and syntax != 'proto2':
            raise SchemaError(f"{where}: default values are only allowed in proto2")
        numbers.add(f.number)
        names.add(f.name)
