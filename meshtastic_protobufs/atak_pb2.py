"""
Bindings for meshtastic/atak.proto (ATAK plugin packets).
"""

from google.protobuf.internal import builder as _builder

from ._schema import BOOL, INT32, SFIXED32, STRING, UINT32, enum, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/atak.proto',
    messages=[
        message('TAKPacket', [
            field(1, 'is_compressed', BOOL),
            field(2, 'contact', message='meshtastic.Contact'),
            field(3, 'group', message='meshtastic.Group'),
            field(4, 'status', message='meshtastic.Status'),
            field(5, 'pli', message='meshtastic.PLI', oneof='payload_variant'),
            field(6, 'chat', message='meshtastic.GeoChat', oneof='payload_variant'),
        ]),
        message('GeoChat', [
            field(1, 'message', STRING),
            field(2, 'to', STRING, optional=True),
            field(3, 'to_callsign', STRING, optional=True),
        ]),
        message('Group', [
            field(1, 'role', enum='meshtastic.MemberRole'),
            field(2, 'team', enum='meshtastic.Team'),
        ]),
        message('Status', [
            field(1, 'battery', UINT32),
        ]),
        message('Contact', [
            field(1, 'callsign', STRING),
            field(2, 'device_callsign', STRING),
        ]),
        message('PLI', [
            field(1, 'latitude_i', SFIXED32),
            field(2, 'longitude_i', SFIXED32),
            field(3, 'altitude', INT32),
            field(4, 'speed', UINT32),
            field(5, 'course', UINT32),
        ]),
    ],
    enums=[
        # Value spellings, typos included, are part of the published schema
        enum('Team', [
            ('Unspecifed_Color', 0), ('White', 1), ('Yellow', 2), ('Orange', 3), ('Magenta', 4),
            ('Red', 5), ('Maroon', 6), ('Purple', 7), ('Dark_Blue', 8), ('Blue', 9),
            ('Cyan', 10), ('Teal', 11), ('Green', 12), ('Dark_Green', 13), ('Brown', 14),
        ]),
        enum('MemberRole', [
            ('Unspecifed', 0), ('TeamMember', 1), ('TeamLead', 2), ('HQ', 3), ('Sniper', 4),
            ('Medic', 5), ('ForwardObserver', 6), ('RTO', 7), ('K9', 8),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
