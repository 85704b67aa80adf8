"""
Bindings for meshtastic/portnums.proto.

PortNum identifies the application a Data payload belongs to and therefore
how its payload bytes must be interpreted (see registry.PORTNUM_PAYLOADS).
"""

from google.protobuf.internal import builder as _builder

from ._schema import enum, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/portnums.proto',
    enums=[
        enum('PortNum', [
            ('UNKNOWN_APP', 0),
            ('TEXT_MESSAGE_APP', 1),
            ('REMOTE_HARDWARE_APP', 2),
            ('POSITION_APP', 3),
            ('NODEINFO_APP', 4),
            ('ROUTING_APP', 5),
            ('ADMIN_APP', 6),
            ('TEXT_MESSAGE_COMPRESSED_APP', 7),
            ('WAYPOINT_APP', 8),
            ('AUDIO_APP', 9),
            ('DETECTION_SENSOR_APP', 10),
            ('REPLY_APP', 32),
            ('IP_TUNNEL_APP', 33),
            ('PAXCOUNTER_APP', 34),
            ('SERIAL_APP', 64),
            ('STORE_FORWARD_APP', 65),
            ('RANGE_TEST_APP', 66),
            ('TELEMETRY_APP', 67),
            ('ZPS_APP', 68),
            ('SIMULATOR_APP', 69),
            ('TRACEROUTE_APP', 70),
            ('NEIGHBORINFO_APP', 71),
            ('ATAK_PLUGIN', 72),
            ('MAP_REPORT_APP', 73),
            ('POWERSTRESS_APP', 74),
            ('PRIVATE_APP', 256),
            ('ATAK_FORWARDER', 257),
            ('MAX', 511),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
