"""
Meshtastic protobuf bindings

Message classes for every Meshtastic .proto file, built at import time from
declarative descriptors, plus helpers to decode, decrypt and inspect
Meshtastic traffic (MQTT ServiceEnvelopes, radio streams, raw payloads).
"""

# Import order follows the .proto dependency graph
from . import (
    portnums_pb2, channel_pb2, config_pb2, module_config_pb2, telemetry_pb2, xmodem_pb2,
    mesh_pb2, connection_status_pb2, admin_pb2, apponly_pb2, atak_pb2,
    cannedmessages_pb2, localonly_pb2, clientonly_pb2, deviceonly_pb2, mqtt_pb2,
    paxcount_pb2, powermon_pb2, remote_hardware_pb2, rtttl_pb2, storeforward_pb2,
    nanopb_pb2,
)
from ._schema import POOL, find_enum, find_message, message_class
from .codec import decode, encode, to_dict, to_json, from_dict, from_json, which_oneof, parse_bytes_argument
from .registry import (
    PORTNUM_PAYLOADS, TEXT_PORTNUMS, portnum_name, payload_class, decode_payload,
    all_message_types, all_enum_types, resolve_message_type,
)
from .crypto import DEFAULT_PSK, PacketCipher, build_nonce, expand_psk, load_channel_keys
from .models import PacketInfo, DecodedPacket, Statistics
from .parsers import MessageParser
from .formatters import MessageFormatter
from .message_filter import MessageFilter
from .listener import EnvelopeListener
from .config import ServerConfig, DecoderConfig, create_default_config
from .utils import BROADCAST_NUM, BROADCAST_ID, NodeIdParser, PayloadDetector, format_node_id, parse_node_id, is_broadcast
from .exceptions import (
    MeshtasticError, SchemaError, UnknownTypeError, DecodeError, NodeIdError,
    DecryptionError, ConfigError, ConnectionError,
)
from .hex_dump import HexDumper, hex_dump
from .protobuf_dump import FieldDump, format_protobuf_dump, dump_message, render_dump
from .proto_export import export_protos, render_proto
from .logging_config import LoggingManager, setup_logging, get_logger

__all__ = [
    # Bindings
    'portnums_pb2',
    'channel_pb2',
    'config_pb2',
    'module_config_pb2',
    'telemetry_pb2',
    'xmodem_pb2',
    'mesh_pb2',
    'connection_status_pb2',
    'admin_pb2',
    'apponly_pb2',
    'atak_pb2',
    'cannedmessages_pb2',
    'localonly_pb2',
    'clientonly_pb2',
    'deviceonly_pb2',
    'mqtt_pb2',
    'paxcount_pb2',
    'powermon_pb2',
    'remote_hardware_pb2',
    'rtttl_pb2',
    'storeforward_pb2',
    'nanopb_pb2',
    # Schema
    'POOL',
    'find_message',
    'find_enum',
    'message_class',
    # Codec
    'decode',
    'encode',
    'to_dict',
    'to_json',
    'from_dict',
    'from_json',
    'which_oneof',
    'parse_bytes_argument',
    # Registry
    'PORTNUM_PAYLOADS',
    'TEXT_PORTNUMS',
    'portnum_name',
    'payload_class',
    'decode_payload',
    'all_message_types',
    'all_enum_types',
    'resolve_message_type',
    # Crypto
    'DEFAULT_PSK',
    'PacketCipher',
    'build_nonce',
    'expand_psk',
    'load_channel_keys',
    # Parsing and output
    'PacketInfo',
    'DecodedPacket',
    'Statistics',
    'MessageParser',
    'MessageFormatter',
    'MessageFilter',
    'EnvelopeListener',
    # Configuration
    'ServerConfig',
    'DecoderConfig',
    'create_default_config',
    # Utilities
    'BROADCAST_NUM',
    'BROADCAST_ID',
    'NodeIdParser',
    'PayloadDetector',
    'format_node_id',
    'parse_node_id',
    'is_broadcast',
    # Exceptions
    'MeshtasticError',
    'SchemaError',
    'UnknownTypeError',
    'DecodeError',
    'NodeIdError',
    'DecryptionError',
    'ConfigError',
    'ConnectionError',
    # Dumps
    'HexDumper',
    'hex_dump',
    'FieldDump',
    'format_protobuf_dump',
    'dump_message',
    'render_dump',
    # Schema export
    'render_proto',
    'export_protos',
    # Logging
    'LoggingManager',
    'setup_logging',
    'get_logger',
]

__version__ = '2.5.0'
