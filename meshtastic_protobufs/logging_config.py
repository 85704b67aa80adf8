"""
Logging configuration for the meshtastic_protobufs package.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER = 'meshtastic_protobufs'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'NONE')


class LoggingManager:
    """Manager for logging configuration."""

    _handler: Optional[logging.Handler] = None

    class ColoredFormatter(logging.Formatter):
        """Colored log formatter for console output."""

        COLORS = {
            'DEBUG': '\033[36m',     # Cyan
            'INFO': '\033[32m',      # Green
            'WARNING': '\033[33m',   # Yellow
            'ERROR': '\033[31m',     # Red
            'CRITICAL': '\033[35m',  # Magenta
        }
        RESET = '\033[0m'

        def __init__(self, fmt=None, use_color=True):
            super().__init__(fmt)
            self.use_color = use_color

        def format(self, record):
            if not (self.use_color and record.levelname in self.COLORS):
                return super().format(record)
            # Colour a copy so other handlers see the plain level name
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            return super().format(record)

    @classmethod
    def setup(cls, level: str = 'WARNING', module_levels: Optional[dict] = None, use_color: bool = True):
        """
        Setup logging configuration.

        Calling setup() again replaces the handler installed by the previous call.

        Args:
            level: Default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL, NONE)
            module_levels: Dict of module-specific levels, e.g. {'codec': 'DEBUG', 'crypto': 'INFO'}
            use_color: Use colored output for log messages
        """
        root_logger = logging.getLogger(ROOT_LOGGER)
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
            cls._handler = None

        # NONE disables all package logging
        if level.upper() == 'NONE':
            root_logger.setLevel(logging.CRITICAL + 1)
            return

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(cls.ColoredFormatter(
            '%(levelname)s [%(name)s] %(message)s',
            use_color=use_color and sys.stderr.isatty()
        ))
        root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        root_logger.addHandler(handler)
        cls._handler = handler

        if module_levels:
            for module, mod_level in module_levels.items():
                logger = logging.getLogger(f'{ROOT_LOGGER}.{module}')
                logger.setLevel(getattr(logging, mod_level.upper(), logging.WARNING))

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """
        Get logger for a module.

        Args:
            name: Module name (e.g., 'codec', 'listener')

        Returns:
            Logger instance
        """
        return logging.getLogger(f'{ROOT_LOGGER}.{name}')


def parse_module_levels(spec: Optional[str]) -> dict:
    """
    Parse a 'module:LEVEL,module:LEVEL' option into a dict.

    Entries without a level default to DEBUG.
    """
    levels = {}
    if not spec:
        return levels
    for item in spec.split(','):
        item = item.strip()
        if not item:
            continue
        module, _, mod_level = item.partition(':')
        levels[module.strip()] = (mod_level.strip() or 'DEBUG').upper()
    return levels


def setup_logging(level: str = 'WARNING', module_levels: Optional[dict] = None, use_color: bool = True):
    """Module-level shortcut for LoggingManager.setup()."""
    LoggingManager.setup(level, module_levels, use_color)


def get_logger(name: str) -> logging.Logger:
    """Module-level shortcut for LoggingManager.get_logger()."""
    return LoggingManager.get_logger(name)
