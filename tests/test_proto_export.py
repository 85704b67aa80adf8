from pathlib import Path

import pytest

from meshtastic_protobufs import _schema, atak_pb2, deviceonly_pb2, mesh_pb2, nanopb_pb2
from meshtastic_protobufs.proto_export import export_protos, file_proto, render_proto


def rendered_lines(module):
    return render_proto(file_proto(module.DESCRIPTOR)).splitlines()


def test_render_header():
    lines = rendered_lines(mesh_pb2)

    assert lines[0] == 'syntax = "proto3";'
    assert 'package meshtastic;' in lines
    assert 'import "meshtastic/channel.proto";' in lines
    assert 'message MeshPacket {' in lines


def test_render_fields_and_oneofs():
    lines = rendered_lines(mesh_pb2)
    start = lines.index('message MeshPacket {')
    body = lines[start:lines.index('}', start)]

    assert '  fixed32 from = 1;' in body
    position = body.index('  oneof payload_variant {')
    assert body[position + 1:position + 4] == [
        '    .meshtastic.Data decoded = 4;',
        '    bytes encrypted = 5;',
        '  }',
    ]


def test_render_presence_and_deprecation():
    assert '  optional string to = 2;' in rendered_lines(atak_pb2)
    assert '  bool no_save = 9 [deprecated = true];' in rendered_lines(deviceonly_pb2)


def test_render_proto2_defaults():
    lines = rendered_lines(nanopb_pb2)

    assert lines[0] == 'syntax = "proto2";'
    assert not any(line.startswith('package ') for line in lines)
    assert 'option java_outer_classname = "Nanopb";' in lines
    assert '  optional bool long_names = 4 [default = true];' in lines
    assert '  optional string callback_datatype = 18 [default = "pb_callback_t"];' in lines
    assert '  optional .IntSize int_size = 7 [default = IS_DEFAULT];' in lines
    assert '  repeated string include = 24;' in lines


def test_export_protos(tmp_path):
    written = export_protos(tmp_path)

    assert len(written) == len(_schema.registered_files())
    assert tmp_path / 'meshtastic' / 'mesh.proto' in written
    assert (tmp_path / 'nanopb.proto').read_text(encoding='utf-8').startswith('syntax = "proto2";')


def _normalized(proto):
    proto = type(proto).FromString(proto.SerializeToString())
    if proto.syntax == 'proto2':
        proto.ClearField('syntax')

    def clear_json_names(messages):
        for message in messages:
            for field in message.field:
                field.ClearField('json_name')
            clear_json_names(message.nested_type)

    clear_json_names(proto.message_type)
    return proto


def test_protoc_rebuilds_same_descriptors(tmp_path):
    protoc = pytest.importorskip('grpc_tools.protoc')
    from google.protobuf import descriptor_pb2

    source = tmp_path / 'proto'
    written = export_protos(source)
    descriptor_set = tmp_path / 'schema.pb'
    include = Path(protoc.__file__).parent / '_proto'

    code = protoc.main([
        'protoc',
        f'-I{source}',
        f'-I{include}',
        f'--descriptor_set_out={descriptor_set}',
        *(str(path.relative_to(source)) for path in written),
    ])
    assert code == 0

    compiled = descriptor_pb2.FileDescriptorSet.FromString(descriptor_set.read_bytes())
    theirs = {proto.name: proto for proto in compiled.file}
    for file_desc in _schema.registered_files():
        assert _normalized(theirs[file_desc.name]) == _normalized(file_proto(file_desc)), file_desc.name
