"""
Bindings for meshtastic/cannedmessages.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import STRING, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/cannedmessages.proto',
    messages=[
        message('CannedMessageModuleConfig', [field(1, 'messages', STRING)]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
