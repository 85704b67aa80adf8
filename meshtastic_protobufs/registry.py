"""
Type registry: PortNum payload dispatch and lookup of message types by name.
"""

from typing import Optional, Union

from google.protobuf.descriptor import Descriptor, EnumDescriptor
from google.protobuf.message import Message

from . import (  # noqa: F401  (importing registers every file in POOL)
    admin_pb2, apponly_pb2, atak_pb2, cannedmessages_pb2, channel_pb2, clientonly_pb2,
    config_pb2, connection_status_pb2, deviceonly_pb2, localonly_pb2, mesh_pb2,
    module_config_pb2, mqtt_pb2, nanopb_pb2, paxcount_pb2, portnums_pb2, powermon_pb2,
    remote_hardware_pb2, rtttl_pb2, storeforward_pb2, telemetry_pb2, xmodem_pb2,
)
from ._schema import PACKAGE, find_message, message_class, registered_files
from .codec import decode
from .exceptions import UnknownTypeError

PortNum = portnums_pb2.PortNum

# Ports whose Data.payload is a serialized protobuf message
PORTNUM_PAYLOADS: dict[int, type] = {
    portnums_pb2.REMOTE_HARDWARE_APP: remote_hardware_pb2.HardwareMessage,
    portnums_pb2.POSITION_APP: mesh_pb2.Position,
    portnums_pb2.NODEINFO_APP: mesh_pb2.User,
    portnums_pb2.ROUTING_APP: mesh_pb2.Routing,
    portnums_pb2.ADMIN_APP: admin_pb2.AdminMessage,
    portnums_pb2.WAYPOINT_APP: mesh_pb2.Waypoint,
    portnums_pb2.PAXCOUNTER_APP: paxcount_pb2.Paxcount,
    portnums_pb2.STORE_FORWARD_APP: storeforward_pb2.StoreAndForward,
    portnums_pb2.TELEMETRY_APP: telemetry_pb2.Telemetry,
    portnums_pb2.TRACEROUTE_APP: mesh_pb2.RouteDiscovery,
    portnums_pb2.NEIGHBORINFO_APP: mesh_pb2.NeighborInfo,
    portnums_pb2.ATAK_PLUGIN: atak_pb2.TAKPacket,
    portnums_pb2.MAP_REPORT_APP: mqtt_pb2.MapReport,
    portnums_pb2.POWERSTRESS_APP: powermon_pb2.PowerStressMessage,
}

# Ports whose payload is UTF-8 text
TEXT_PORTNUMS = frozenset({
    portnums_pb2.TEXT_MESSAGE_APP,
    portnums_pb2.DETECTION_SENSOR_APP,
    portnums_pb2.REPLY_APP,
    portnums_pb2.RANGE_TEST_APP,
})


def portnum_name(value: int) -> str:
    """PortNum name, or UNKNOWN_PORTNUM_<n> for values not in the enum."""
    try:
        return PortNum.Name(value)
    except ValueError:
        return f"UNKNOWN_PORTNUM_{value}"


def payload_class(portnum: int) -> Optional[type]:
    """Message class carried by a port, None for text and opaque ports."""
    return PORTNUM_PAYLOADS.get(portnum)


def decode_payload(portnum: int, payload: bytes) -> Union[Message, str, bytes]:
    """
    Interpret a Data payload according to its port.

    Returns:
        A message for protobuf ports, str for text ports, bytes otherwise

    Raises:
        DecodeError: If a protobuf port carries bytes that do not parse
    """
    cls = payload_class(portnum)
    if cls is not None:
        return decode(cls, payload)
    if portnum in TEXT_PORTNUMS:
        return bytes(payload).decode('utf-8', errors='replace')
    return bytes(payload)


def _walk_messages(descriptors):
    for descriptor in descriptors:
        yield descriptor
        yield from _walk_messages(descriptor.nested_types)


def all_message_types() -> list[Descriptor]:
    """Every registered message descriptor, nested ones included, in declaration order."""
    result = []
    for file_desc in registered_files():
        result.extend(_walk_messages(file_desc.message_types_by_name.values()))
    return result


def all_enum_types() -> list[EnumDescriptor]:
    """Every registered enum descriptor, nested ones included."""
    result = []
    for file_desc in registered_files():
        result.extend(file_desc.enum_types_by_name.values())
        for message in _walk_messages(file_desc.message_types_by_name.values()):
            result.extend(message.enum_types)
    return result


def resolve_message_type(name: str) -> type:
    """
    Find a message class by name.

    Accepts fully qualified names (``meshtastic.MeshPacket``), names relative
    to the meshtastic package (``MeshPacket``, ``Config.LoRaConfig``) and
    unambiguous simple names of nested types (``LoRaConfig``).

    Raises:
        UnknownTypeError: If the name matches no type, or several
    """
    name = name.strip().lstrip('.')
    for candidate in (name, f"{PACKAGE}.{name}"):
        try:
            find_message(candidate)
        except UnknownTypeError:
            continue
        return message_class(candidate)

    matches = [d for d in all_message_types() if d.name == name]
    if len(matches) == 1:
        return message_class(matches[0].full_name)
    if matches:
        options = ', '.join(sorted(d.full_name for d in matches))
        raise UnknownTypeError(f"Ambiguous message type '{name}': {options}")
    raise UnknownTypeError(f"Unknown message type: '{name}'")
