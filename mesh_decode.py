#!/usr/bin/env python3
"""
Meshtastic protobuf decoder CLI
Entry point for the meshtastic_protobufs package.
"""

import sys
import argparse
import time
from pathlib import Path

try:
    import argcomplete
    ARGCOMPLETE_AVAILABLE = True
except ImportError:
    ARGCOMPLETE_AVAILABLE = False

from meshtastic_protobufs import codec, registry
from meshtastic_protobufs.config import DEFAULT_CONFIG_PATH, DecoderConfig, ServerConfig, create_default_config
from meshtastic_protobufs.crypto import PacketCipher, load_channel_keys
from meshtastic_protobufs.exceptions import MeshtasticError
from meshtastic_protobufs.formatters import MessageFormatter
from meshtastic_protobufs.listener import EnvelopeListener
from meshtastic_protobufs.logging_config import LOG_LEVELS, parse_module_levels, setup_logging
from meshtastic_protobufs.message_filter import MessageFilter
from meshtastic_protobufs.parsers import MessageParser
from meshtastic_protobufs.proto_export import export_protos
from meshtastic_protobufs.protobuf_dump import format_protobuf_dump, render_dump


def root_topic_completer(prefix, parsed_args, **kwargs):
    """Custom completer for --root-topic with region suggestions."""
    regions = [
        'msh/US', 'msh/EU_433', 'msh/EU_868', 'msh/UA_433', 'msh/UA_868', 'msh/CN',
        'msh/JP', 'msh/KR', 'msh/TW', 'msh/IN', 'msh/TH', 'msh/ANZ', 'msh/NZ_865',
        'msh/SG_923', 'msh/MY_433', 'msh/MY_919', 'msh/PH_433', 'msh/PH_868',
        'msh/PH_915', 'msh/RU', 'msh/LORA_24', 'msh',
    ]
    return [r for r in regions if r.startswith(prefix)]


def filter_completer(prefix, parsed_args, **kwargs):
    """Custom completer for comma-separated filter types."""
    valid_types = MessageFilter.choices()

    if ',' in prefix:
        parts = prefix.split(',')
        already_specified = [p.strip() for p in parts[:-1]]
        current = parts[-1]
        available = [t for t in valid_types if t not in already_specified]
        prefix_without_current = ','.join(parts[:-1]) + ','
        return [prefix_without_current + t for t in available if t.startswith(current)]
    return [t for t in valid_types if t.startswith(prefix)]


def type_completer(prefix, parsed_args, **kwargs):
    """Complete message type names relative to the meshtastic package."""
    names = [d.full_name.removeprefix('meshtastic.') for d in registry.all_message_types()]
    return [n for n in names if n.startswith(prefix)]


def read_data(argument: str) -> bytes:
    """Bytes from a hex/base64 argument, or from a file given as @path."""
    if argument.startswith('@'):
        return Path(argument[1:]).read_bytes()
    return codec.parse_bytes_argument(argument)


def parse_filter_types(include: str | None, exclude: str | None) -> dict | None:
    """Turn --filter/--filter-out values into MessageFilter include/exclude sets."""
    include_types = {t.strip().lower() for t in include.split(',') if t.strip()} if include else set()
    exclude_types = {t.strip().lower() for t in exclude.split(',') if t.strip()} if exclude else set()

    # Only use include logic when both are specified
    if include_types and exclude_types:
        include_types -= exclude_types
        exclude_types = set()

    if not (include_types or exclude_types):
        return None
    return {'include': include_types, 'exclude': exclude_types}


def cmd_types(args) -> int:
    descriptors = registry.all_enum_types() if args.enums else registry.all_message_types()
    for descriptor in descriptors:
        print(descriptor.full_name)
    return 0


def cmd_decode(args, decoder_config: DecoderConfig) -> int:
    message = codec.decode(registry.resolve_message_type(args.type), read_data(args.data))
    include_defaults = args.defaults or decoder_config.include_defaults
    if args.json:
        print(codec.to_json(message, include_defaults=include_defaults))
    else:
        print(message.DESCRIPTOR.full_name)
        for line in MessageFormatter.format_fields(codec.to_dict(message, include_defaults), indent=1):
            print(line)
    return 0


def cmd_envelope(args, decoder_config: DecoderConfig) -> int:
    if args.psk:
        keys = load_channel_keys({f"psk{i}": {"psk": psk} for i, psk in enumerate(args.psk)})
    else:
        keys = decoder_config.channel_keys()
    parser = MessageParser(PacketCipher(keys))
    formatter = MessageFormatter(
        wire_dump=decoder_config.wire_dump,
        hex_width=decoder_config.hex_width,
        hex_dump_colored=decoder_config.colored,
        include_defaults=decoder_config.include_defaults,
    )
    print(formatter.format_packet(parser.parse_envelope(read_data(args.data))))
    return 0


def cmd_dump(args, decoder_config: DecoderConfig) -> int:
    message_type = registry.resolve_message_type(args.type)
    print(render_dump(format_protobuf_dump(message_type.DESCRIPTOR, read_data(args.data))))
    return 0


def cmd_listen(args, config_path: str, decoder_config: DecoderConfig) -> int:
    server_config = ServerConfig.from_json(config_path)
    if args.root_topic:
        server_config.root_topic = args.root_topic
        print(f"Overriding root topic to: {args.root_topic}")

    if args.psk:
        keys = load_channel_keys({f"psk{i}": {"psk": psk} for i, psk in enumerate(args.psk)})
    else:
        keys = decoder_config.channel_keys()

    listener = EnvelopeListener(
        server_config,
        MessageParser(PacketCipher(keys)),
        MessageFormatter(
            wire_dump=args.wire_dump or decoder_config.wire_dump,
            hex_width=decoder_config.hex_width,
            hex_dump_colored=args.colored or decoder_config.colored,
            include_defaults=decoder_config.include_defaults,
        ),
        MessageFilter(parse_filter_types(args.filter, args.filter_out)),
    )

    print(f"Connecting to {server_config.host}:{server_config.port}...")
    with listener:
        listener.connect()
        print(f"Listening on {server_config.subscription}")
        try:
            if args.duration > 0:
                print(f"Will listen for {args.duration} seconds")
                time.sleep(args.duration)
            else:
                print("Press Ctrl+C to stop")
                while True:
                    time.sleep(1)
        except KeyboardInterrupt:
            print("\nStopping...")
        print(f"\n{listener.format_stats()}\n")
    return 0


def cmd_init_config(args) -> int:
    if create_default_config(args.path):
        print(f"Created {args.path}")
        return 0
    print(f"{args.path} already exists, not overwriting", file=sys.stderr)
    return 1


def cmd_export_protos(args) -> int:
    for path in export_protos(args.directory):
        print(path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Decode Meshtastic protobuf messages')
    parser.add_argument('--config', default=DEFAULT_CONFIG_PATH,
                        help='Path to configuration file')
    parser.add_argument('--log-level', default='WARNING', choices=LOG_LEVELS,
                        help='Set logging level (NONE = disable logging)')
    parser.add_argument('--debug-modules', type=str,
                        help='Comma-separated list of modules to debug (e.g., parsers,crypto:INFO)')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    types_parser = subparsers.add_parser('types', help='List registered message types')
    types_parser.add_argument('--enums', action='store_true', help='List enum types instead')

    decode_parser = subparsers.add_parser('decode', help='Decode bytes as a message type')
    type_arg = decode_parser.add_argument('type', help='Message type (e.g. MeshPacket, Config.LoRaConfig)')
    if ARGCOMPLETE_AVAILABLE:
        type_arg.completer = type_completer
    decode_parser.add_argument('data', help='Hex or base64 bytes, or @file')
    decode_parser.add_argument('--json', action='store_true', help='Print JSON')
    decode_parser.add_argument('--defaults', action='store_true', help='Include fields with default values')

    envelope_parser = subparsers.add_parser('envelope', help='Decode (and decrypt) a ServiceEnvelope')
    envelope_parser.add_argument('data', help='Hex or base64 bytes, or @file')
    envelope_parser.add_argument('--psk', action='append',
                                 help='Channel PSK, base64 (repeatable; default: keys from config)')

    dump_parser = subparsers.add_parser('dump', help='Annotated wire dump of a message')
    type_arg = dump_parser.add_argument('type', help='Message type')
    if ARGCOMPLETE_AVAILABLE:
        type_arg.completer = type_completer
    dump_parser.add_argument('data', help='Hex or base64 bytes, or @file')

    listen_parser = subparsers.add_parser('listen', help='Decode ServiceEnvelopes from an MQTT broker')
    listen_parser.add_argument('--duration', type=int, default=0, help='Duration in seconds (0 = forever)')
    root_topic_arg = listen_parser.add_argument('--root-topic', type=str,
                                                help='Override MQTT root topic (e.g., msh/US, msh/EU_868)')
    if ARGCOMPLETE_AVAILABLE:
        root_topic_arg.completer = root_topic_completer
    listen_parser.add_argument('--psk', action='append',
                               help='Channel PSK, base64 (repeatable; default: keys from config)')
    filter_help = ', '.join(MessageFilter.choices())
    filter_arg = listen_parser.add_argument('--filter', type=str,
                                            help=f'Show only these message types (comma-separated): {filter_help}')
    if ARGCOMPLETE_AVAILABLE:
        filter_arg.completer = filter_completer
    filter_out_arg = listen_parser.add_argument('--filter-out', type=str,
                                                help='Hide these message types (comma-separated)')
    if ARGCOMPLETE_AVAILABLE:
        filter_out_arg.completer = filter_completer
    listen_parser.add_argument('--wire-dump', action='store_true', help='Show annotated wire dump of payloads')
    listen_parser.add_argument('--colored', action='store_true', help='Use colored output in hex dump')

    init_parser = subparsers.add_parser('init-config', help='Create a default configuration file')
    init_parser.add_argument('path', nargs='?', default=DEFAULT_CONFIG_PATH, help='File to create')

    export_parser = subparsers.add_parser('export-protos', help='Write the schema as .proto files')
    export_parser.add_argument('directory', help='Output directory')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    if ARGCOMPLETE_AVAILABLE:
        argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.log_level, parse_module_levels(args.debug_modules), sys.stderr.isatty())

    try:
        if args.command == 'types':
            return cmd_types(args)
        if args.command == 'init-config':
            return cmd_init_config(args)
        if args.command == 'export-protos':
            return cmd_export_protos(args)

        decoder_config = DecoderConfig.from_json(args.config)
        if args.command == 'decode':
            return cmd_decode(args, decoder_config)
        if args.command == 'envelope':
            return cmd_envelope(args, decoder_config)
        if args.command == 'dump':
            return cmd_dump(args, decoder_config)
        if args.command == 'listen':
            return cmd_listen(args, args.config, decoder_config)
    except (MeshtasticError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(0)
