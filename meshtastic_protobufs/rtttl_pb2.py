"""
Bindings for meshtastic/rtttl.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import STRING, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/rtttl.proto',
    messages=[message('RTTTLConfig', [field(1, 'ringtone', STRING)])],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
