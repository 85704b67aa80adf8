"""
Bindings for meshtastic/powermon.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import FLOAT, enum, field, message, proto_file, register

DESCRIPTOR = register(proto_file(
    'meshtastic/powermon.proto',
    messages=[
        # PowerMon only scopes the State bit flags
        message('PowerMon', enums=[
            enum('State', [
                ('None', 0), ('CPU_DeepSleep', 1), ('CPU_LightSleep', 2), ('Vext1_On', 4),
                ('Lora_RXOn', 8), ('Lora_TXOn', 16), ('Lora_RXActive', 32), ('BT_On', 64),
                ('LED_On', 128), ('Screen_On', 256), ('Screen_Drawing', 512), ('Wifi_On', 1024),
                ('GPS_Active', 2048),
            ]),
        ]),
        message('PowerStressMessage', [
            field(1, 'cmd', enum='meshtastic.PowerStressMessage.Opcode'),
            field(2, 'num_seconds', FLOAT),
        ], enums=[
            enum('Opcode', [
                ('UNSET', 0), ('PRINT_INFO', 1), ('FORCE_QUIET', 2), ('END_QUIET', 3),
                ('SCREEN_ON', 16), ('SCREEN_OFF', 17),
                ('CPU_IDLE', 32), ('CPU_DEEPSLEEP', 33), ('CPU_FULLON', 34),
                ('LED_ON', 48), ('LED_OFF', 49),
                ('LORA_OFF', 64), ('LORA_TX', 65), ('LORA_RX', 66),
                ('BT_OFF', 80), ('BT_ON', 81),
                ('WIFI_OFF', 96), ('WIFI_ON', 97),
                ('GPS_OFF', 112), ('GPS_ON', 113),
            ]),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
