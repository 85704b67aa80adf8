"""
Bindings for nanopb.proto, the nanopb generator options.

This is the only proto2 file of the set and has no package. Unlike the rest
it carries explicit defaults, which the runtime reports for unset fields.
The option extensions on google.protobuf.*Options are not declared here;
NanoPBOptions is usable as a plain message.
"""

from google.protobuf import descriptor_pb2
from google.protobuf.internal import builder as _builder

from ._schema import (
    BOOL, INT32, STRING, UINT32, enum, field, message, proto_file, register, register_runtime_file,
)

register_runtime_file(descriptor_pb2.DESCRIPTOR)

DESCRIPTOR = register(proto_file(
    'nanopb.proto',
    package='',
    syntax='proto2',
    dependencies=['google/protobuf/descriptor.proto'],
    java_outer_classname='Nanopb',
    messages=[
        message('NanoPBOptions', [
            field(1, 'max_size', INT32),
            field(14, 'max_length', INT32),
            field(2, 'max_count', INT32),
            field(7, 'int_size', enum='IntSize', default='IS_DEFAULT'),
            field(3, 'type', enum='FieldType', default='FT_DEFAULT'),
            field(4, 'long_names', BOOL, default='true'),
            field(5, 'packed_struct', BOOL, default='false'),
            field(10, 'packed_enum', BOOL, default='false'),
            field(6, 'skip_message', BOOL, default='false'),
            field(8, 'no_unions', BOOL, default='false'),
            field(9, 'msgid', UINT32),
            field(11, 'anonymous_oneof', BOOL, default='false'),
            field(12, 'proto3', BOOL, default='false'),
            field(21, 'proto3_singular_msgs', BOOL, default='false'),
            field(13, 'enum_to_string', BOOL, default='false'),
            field(15, 'fixed_length', BOOL, default='false'),
            field(16, 'fixed_count', BOOL, default='false'),
            field(22, 'submsg_callback', BOOL, default='false'),
            field(17, 'mangle_names', enum='TypenameMangling', default='M_NONE'),
            field(18, 'callback_datatype', STRING, default='pb_callback_t'),
            field(19, 'callback_function', STRING, default='pb_default_field_callback'),
            field(20, 'descriptorsize', enum='DescriptorSize', default='DS_AUTO'),
            field(23, 'default_has', BOOL, default='false'),
            field(24, 'include', STRING, repeated=True),
            field(26, 'exclude', STRING, repeated=True),
            field(25, 'package', STRING),
            field(27, 'type_override', enum='google.protobuf.FieldDescriptorProto.Type'),
            field(28, 'sort_by_tag', BOOL, default='true'),
            field(29, 'fallback_type', enum='FieldType', default='FT_CALLBACK'),
        ]),
    ],
    enums=[
        enum('FieldType', [
            ('FT_DEFAULT', 0), ('FT_CALLBACK', 1), ('FT_POINTER', 4),
            ('FT_STATIC', 2), ('FT_IGNORE', 3), ('FT_INLINE', 5),
        ]),
        enum('IntSize', [('IS_DEFAULT', 0), ('IS_8', 8), ('IS_16', 16), ('IS_32', 32), ('IS_64', 64)]),
        enum('TypenameMangling', [
            ('M_NONE', 0), ('M_STRIP_PACKAGE', 1), ('M_FLATTEN', 2), ('M_PACKAGE_INITIALS', 3),
        ]),
        enum('DescriptorSize', [('DS_AUTO', 0), ('DS_1', 1), ('DS_2', 2), ('DS_4', 4), ('DS_8', 8)]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
