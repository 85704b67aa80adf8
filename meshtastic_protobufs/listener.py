"""
MQTT listener decoding ServiceEnvelopes published by Meshtastic gateways.
"""

import time
import uuid
from typing import Callable, Optional

import paho.mqtt.client as mqtt

from .config import ServerConfig
from .exceptions import ConnectionError, MeshtasticError
from .formatters import MessageFormatter
from .hex_dump import hex_dump
from .logging_config import get_logger
from .message_filter import MessageFilter
from .models import DecodedPacket, Statistics
from .parsers import MessageParser
from .utils import PayloadDetector

logger = get_logger('listener')


class EnvelopeListener:
    """
    Subscribes below the root topic and prints every decodable packet.

    Gateways publish one ServiceEnvelope per packet on
    ``<root>/2/e/<channel>/<gateway>``; JSON mirrors and ``/stat/`` presence
    messages are skipped.
    """

    def __init__(self, server_config: ServerConfig, parser: MessageParser,
                 formatter: MessageFormatter, message_filter: Optional[MessageFilter] = None,
                 output: Callable[[str], None] = print):
        """
        Initialize EnvelopeListener.

        Args:
            server_config: Broker address, credentials and root topic
            parser: MessageParser (with a cipher to decrypt packets)
            formatter: MessageFormatter for console output
            message_filter: Optional MessageFilter (None = show all)
            output: Sink for formatted packets
        """
        self.server_config = server_config
        self.parser = parser
        self.formatter = formatter
        self.message_filter = message_filter or MessageFilter()
        self.output = output
        self.stats = Statistics()
        self.client: Optional[mqtt.Client] = None
        self.connected = False

    def on_connect(self, client, userdata, flags, reason_code, properties=None):
        """Callback when connected to MQTT broker."""
        if reason_code.is_failure:
            logger.error(f"Connection refused: {reason_code}")
            self.connected = False
            return
        logger.info(f"Connected to {self.server_config.host}:{self.server_config.port}")
        self.connected = True
        client.subscribe(self.server_config.subscription, qos=1)
        logger.info(f"Subscribed to {self.server_config.subscription}")

    def on_disconnect(self, client, userdata, flags, reason_code, properties=None):
        """Callback when disconnected from MQTT broker."""
        logger.info(f"Disconnected from MQTT broker (reason: {reason_code})")
        self.connected = False

    def on_message(self, client, userdata, msg):
        """Callback when message is received."""
        self.handle_message(msg.topic, msg.payload)

    def handle_message(self, topic: str, payload: bytes) -> Optional[DecodedPacket]:
        """
        Decode, filter and print one MQTT message.

        Returns:
            The decoded packet if it was shown, None otherwise
        """
        self.stats.total_messages += 1
        logger.debug(f"Received message: topic={topic}, payload_len={len(payload)}")

        if '/stat/' in topic:
            logger.debug(f"Skipping status topic {topic}")
            return None
        if PayloadDetector.is_json(payload):
            logger.debug("Skipping JSON payload")
            return None

        try:
            packet = self.parser.parse_envelope(payload, topic=topic)
        except MeshtasticError as e:
            self.stats.parse_errors += 1
            logger.error(f"Error parsing ServiceEnvelope on {topic} ({len(payload)} bytes): {e}")
            logger.error(f"Payload dump:\n{hex_dump(payload)}")
            return None

        if packet.encrypted:
            if packet.decrypted:
                self.stats.successful_decrypts += 1
            else:
                self.stats.failed_decrypts += 1

        if packet.has_payload:
            self.stats.increment_portnum(packet.portnum_name)
            logger.info(f"Received {packet.portnum_name} from {packet.packet_info.from_node_hex}")

        try:
            if self.message_filter.should_filter(packet):
                self.stats.filtered += 1
                logger.debug(f"Filtered out {packet.portnum_name if packet.has_payload else 'encrypted'} packet")
                return None
            self.output(f"\n{self.formatter.format_packet(packet)}\n")
        except Exception:
            # Runs on the paho network thread
            self.stats.parse_errors += 1
            logger.exception(f"Error displaying {packet.portnum_name} packet on {topic}")
            return None
        return packet

    def connect(self, timeout: float = 10.0) -> None:
        """
        Connect to the broker and start the network loop.

        Raises:
            ConnectionError: If the broker cannot be reached or refuses the connection
        """
        # Random listener id, shaped like a node id, avoids clashing with real nodes
        client_id = f"!{uuid.uuid4().hex[:8]}"
        self.client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2, client_id=client_id)
        self.client.username_pw_set(self.server_config.username, self.server_config.password)
        self.client.on_connect = self.on_connect
        self.client.on_disconnect = self.on_disconnect
        self.client.on_message = self.on_message

        logger.info(f"Connecting to {self.server_config.host}:{self.server_config.port} as {client_id}")
        try:
            self.client.connect(self.server_config.host, self.server_config.port,
                                self.server_config.keepalive)
        except OSError as e:
            raise ConnectionError(
                f"Cannot connect to {self.server_config.host}:{self.server_config.port}: {e}"
            ) from e
        self.client.loop_start()

        start = time.time()
        while not self.connected and (time.time() - start) < timeout:
            time.sleep(0.1)

        if not self.connected:
            self.client.loop_stop()
            raise ConnectionError(f"No connection to {self.server_config.host} after {timeout:.0f}s")

    def disconnect(self):
        """Stop the network loop and disconnect."""
        if self.client is not None:
            self.client.loop_stop()
            self.client.disconnect()
            self.client = None

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and disconnect."""
        self.disconnect()
        return False

    def format_stats(self) -> str:
        """Statistics summary."""
        return self.formatter.format_statistics(self.stats)
