"""
Bindings for meshtastic/storeforward.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import BOOL, BYTES, UINT32, enum, field, message, proto_file, register

_PFX = 'meshtastic.StoreAndForward.'

DESCRIPTOR = register(proto_file(
    'meshtastic/storeforward.proto',
    messages=[
        message('StoreAndForward', [
            field(1, 'rr', enum=_PFX + 'RequestResponse'),
            field(2, 'stats', message=_PFX + 'Statistics', oneof='variant'),
            field(3, 'history', message=_PFX + 'History', oneof='variant'),
            field(4, 'heartbeat', message=_PFX + 'Heartbeat', oneof='variant'),
            field(5, 'text', BYTES, oneof='variant'),
        ], nested=[
            message('Statistics', [
                field(1, 'messages_total', UINT32),
                field(2, 'messages_saved', UINT32),
                field(3, 'messages_max', UINT32),
                field(4, 'up_time', UINT32),
                field(5, 'requests', UINT32),
                field(6, 'requests_history', UINT32),
                field(7, 'heartbeat', BOOL),
                field(8, 'return_max', UINT32),
                field(9, 'return_window', UINT32),
            ]),
            message('History', [
                field(1, 'history_messages', UINT32),
                field(2, 'window', UINT32),
                field(3, 'last_request', UINT32),
            ]),
            message('Heartbeat', [
                field(1, 'period', UINT32),
                field(2, 'secondary', UINT32),
            ]),
        ], enums=[
            enum('RequestResponse', [
                ('UNSET', 0), ('ROUTER_ERROR', 1), ('ROUTER_HEARTBEAT', 2), ('ROUTER_PING', 3),
                ('ROUTER_PONG', 4), ('ROUTER_BUSY', 5), ('ROUTER_HISTORY', 6), ('ROUTER_STATS', 7),
                ('ROUTER_TEXT_DIRECT', 8), ('ROUTER_TEXT_BROADCAST', 9),
                ('CLIENT_ERROR', 64), ('CLIENT_HISTORY', 65), ('CLIENT_STATS', 66),
                ('CLIENT_PING', 67), ('CLIENT_PONG', 68), ('CLIENT_ABORT', 106),
            ]),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
