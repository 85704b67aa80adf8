"""
Configuration dataclasses for the mesh-decode tools.

A single JSON file holds two sections:

    {
      "server":  {"host": ..., "port": ..., "username": ..., "password": ..., "root_topic": ...},
      "decoder": {"channels": {...}, "include_defaults": false, "wire_dump": false, ...}
    }

Keys starting with '_' are comments and ignored.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path

from .crypto import load_channel_keys
from .exceptions import ConfigError

DEFAULT_CONFIG_PATH = 'mesh_decode.json'


def _read_section(path: str | Path, section: str) -> dict:
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be an object")
    values = data.get(section, {})
    if not isinstance(values, dict):
        raise ConfigError(f"{path}: '{section}' must be an object")
    return {k: v for k, v in values.items() if not k.startswith('_')}


def _build(cls, values: dict, path: str | Path):
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown {cls.__name__} option(s): {', '.join(unknown)}")
    try:
        return cls(**values)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{path}: invalid {cls.__name__} option: {e}") from e


@dataclass
class ServerConfig:
    """MQTT server configuration."""
    host: str = "mqtt.meshtastic.org"
    port: int = 1883
    username: str = "meshdev"
    password: str = "large4cats"
    root_topic: str = "msh"
    keepalive: int = 60

    @property
    def subscription(self) -> str:
        """Topic filter covering everything below the root topic."""
        return f"{self.root_topic.rstrip('/')}/#"

    @classmethod
    def from_json(cls, path: str | Path) -> 'ServerConfig':
        """Load the 'server' section. The file must exist."""
        try:
            return _build(cls, _read_section(path, 'server'), path)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e


@dataclass
class DecoderConfig:
    """Decoding options and channel keys."""
    channels: dict = field(default_factory=dict)
    include_defaults: bool = False
    wire_dump: bool = False
    hex_width: int = 16
    colored: bool = False

    def __post_init__(self):
        if self.hex_width <= 0:
            raise ConfigError(f"hex_width must be positive, got {self.hex_width}")

    def channel_keys(self) -> dict[str, bytes]:
        """Channel name -> PSK, the default key when no channel is configured."""
        return load_channel_keys(self.channels)

    @classmethod
    def from_json(cls, path: str | Path) -> 'DecoderConfig':
        """Load the 'decoder' section, falling back to defaults if the file is missing."""
        try:
            return _build(cls, _read_section(path, 'decoder'), path)
        except FileNotFoundError:
            return cls()
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def create_default_config(path: str | Path = DEFAULT_CONFIG_PATH) -> bool:
    """
    Write a starter configuration file.

    Returns:
        True if the file was created, False if it already existed
    """
    config = {
        "server": {
            "host": "mqtt.meshtastic.org",
            "port": 1883,
            "username": "meshdev",
            "password": "large4cats",
            "root_topic": "msh",
            "_comment": "Public broker credentials; root_topic is subscribed as <root_topic>/#"
        },
        "decoder": {
            "channels": {
                "0": {"name": "LongFast", "psk": "AQ=="}
            },
            "_channels_comment": "Base64 PSKs. 'AQ==' is the default key, 'AA==' means unencrypted",
            "include_defaults": False,
            "wire_dump": False,
            "hex_width": 16,
            "colored": False
        }
    }

    path_obj = Path(path)
    if path_obj.exists():
        return False
    with open(path_obj, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)
    return True
