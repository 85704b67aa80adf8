"""
Bindings for meshtastic/telemetry.proto.
"""

from google.protobuf.internal import builder as _builder

from ._schema import FIXED32, FLOAT, INT32, UINT32, enum, field, message, proto_file, register


def _floats(*names, start=1):
    return [field(number, name, FLOAT) for number, name in enumerate(names, start)]


DESCRIPTOR = register(proto_file(
    'meshtastic/telemetry.proto',
    messages=[
        message('DeviceMetrics', [
            field(1, 'battery_level', UINT32),
            field(2, 'voltage', FLOAT),
            field(3, 'channel_utilization', FLOAT),
            field(4, 'air_util_tx', FLOAT),
            field(5, 'uptime_seconds', UINT32),
        ]),
        message('EnvironmentMetrics', [
            *_floats('temperature', 'relative_humidity', 'barometric_pressure',
                     'gas_resistance', 'voltage', 'current'),
            field(7, 'iaq', UINT32),
            *_floats('distance', 'lux', 'white_lux', 'ir_lux', 'uv_lux', start=8),
            field(13, 'wind_direction', UINT32),
            *_floats('wind_speed', 'weight', 'wind_gust', 'wind_lull', start=14),
        ]),
        message('PowerMetrics', _floats(
            'ch1_voltage', 'ch1_current', 'ch2_voltage', 'ch2_current', 'ch3_voltage', 'ch3_current',
        )),
        message('AirQualityMetrics', [
            field(number, name, UINT32) for number, name in enumerate([
                'pm10_standard', 'pm25_standard', 'pm100_standard',
                'pm10_environmental', 'pm25_environmental', 'pm100_environmental',
                'particles_03um', 'particles_05um', 'particles_10um',
                'particles_25um', 'particles_50um', 'particles_100um',
            ], 1)
        ]),
        message('Telemetry', [
            field(1, 'time', FIXED32),
            field(2, 'device_metrics', message='meshtastic.DeviceMetrics', oneof='variant'),
            field(3, 'environment_metrics', message='meshtastic.EnvironmentMetrics', oneof='variant'),
            field(4, 'air_quality_metrics', message='meshtastic.AirQualityMetrics', oneof='variant'),
            field(5, 'power_metrics', message='meshtastic.PowerMetrics', oneof='variant'),
        ]),
        message('Nau7802Config', [
            field(1, 'zeroOffset', INT32),
            field(2, 'calibrationFactor', FLOAT),
        ]),
    ],
    enums=[
        enum('TelemetrySensorType', [
            ('SENSOR_UNSET', 0), ('BME280', 1), ('BME680', 2), ('MCP9808', 3), ('INA260', 4),
            ('INA219', 5), ('BMP280', 6), ('SHTC3', 7), ('LPS22', 8), ('QMC6310', 9),
            ('QMI8658', 10), ('QMC5883L', 11), ('SHT31', 12), ('PMSA003I', 13), ('INA3221', 14),
            ('BMP085', 15), ('RCWL9620', 16), ('SHT4X', 17), ('VEML7700', 18), ('MLX90632', 19),
            ('OPT3001', 20), ('LTR390UV', 21), ('TSL25911FN', 22), ('AHT10', 23),
            ('DFROBOT_LARK', 24), ('NAU7802', 25), ('BMP3XX', 26), ('ICM20948', 27),
            ('MAX17048', 28),
        ]),
    ],
))

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, globals())
