"""
Exceptions raised by the Meshtastic protobuf bindings and tools.
"""


class MeshtasticError(Exception):
    """Base exception for all meshtastic_protobufs errors."""
    pass


class SchemaError(MeshtasticError):
    """A schema declaration is malformed or could not be registered."""
    pass


class UnknownTypeError(MeshtasticError, KeyError):
    """A message or enum name does not resolve to a registered type."""

    def __str__(self):
        # KeyError would quote the message
        return str(self.args[0]) if self.args else ''


class DecodeError(MeshtasticError):
    """Bytes could not be parsed as the requested message type."""
    pass


class NodeIdError(MeshtasticError):
    """Exception raised for node ID parsing or validation errors."""
    pass


class DecryptionError(MeshtasticError):
    """Exception raised for decryption failures."""
    pass


class ConfigError(MeshtasticError):
    """Exception raised for configuration errors."""
    pass


class ConnectionError(MeshtasticError):
    """Exception raised for MQTT connection errors."""
    pass
