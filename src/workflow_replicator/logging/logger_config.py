"""
Logger configuration and setup for the workflow replicator.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Dict
from dataclasses import dataclass

from ..config import LoggingConfig
from .log_formatter import StructuredFormatter, ColoredFormatter, PlainFormatter

THIRD_PARTY_LOGGERS = ('urllib3', 'requests', 'git')


@dataclass
class LoggerConfig:
    """Configuration for logging system."""
    level: str = "INFO"
    file_path: Optional[str] = None
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_file_size: int = 10  # MB
    backup_count: int = 5
    enable_console: bool = True
    enable_structured: bool = False
    enable_colors: bool = True

    @classmethod
    def from_app_config(cls, config: LoggingConfig) -> 'LoggerConfig':
        return cls(
            level=config.level,
            file_path=config.file,
            format_string=config.format,
            max_file_size=config.max_file_size,
            backup_count=config.backup_count,
            enable_structured=config.structured
        )


class LoggingManager:
    """
    Centralized logging manager.

    Configures the root logger once per process with a console handler and an
    optional rotating file handler. Every formatter redacts tokens embedded
    in remote URLs.
    """

    def __init__(self):
        self._handlers: Dict[str, logging.Handler] = {}
        self._configured = False

    def setup_logging(self, config: Optional[LoggerConfig] = None) -> None:
        """
        Set up the logging system with the specified configuration.

        Args:
            config: Logging configuration, defaults to ``LoggerConfig()``
        """
        if self._configured:
            return

        config = config or LoggerConfig()
        level = self._get_log_level(config.level)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        if config.enable_console:
            console_handler = self._create_console_handler(config)
            root_logger.addHandler(console_handler)
            self._handlers['console'] = console_handler

        if config.file_path:
            file_handler = self._create_file_handler(config)
            root_logger.addHandler(file_handler)
            self._handlers['file'] = file_handler

        for name in THIRD_PARTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

        logging.getLogger(__name__).debug(f"Logging system initialized with level: {config.level}")
        self._configured = True

    def _create_console_handler(self, config: LoggerConfig) -> logging.Handler:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self._get_log_level(config.level))

        if config.enable_structured:
            formatter = StructuredFormatter()
        elif config.enable_colors and sys.stderr.isatty():
            formatter = ColoredFormatter(config.format_string)
        else:
            formatter = PlainFormatter(config.format_string)

        handler.setFormatter(formatter)
        return handler

    def _create_file_handler(self, config: LoggerConfig) -> logging.Handler:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=config.max_file_size * 1024 * 1024,
            backupCount=config.backup_count,
            encoding='utf-8'
        )
        handler.setLevel(self._get_log_level(config.level))

        if config.enable_structured:
            handler.setFormatter(StructuredFormatter())
        else:
            handler.setFormatter(PlainFormatter(config.format_string))
        return handler

    def _get_log_level(self, level_str: str) -> int:
        return getattr(logging, level_str.upper(), logging.INFO)

    def close_handlers(self) -> None:
        """Detach and close all handlers installed by this manager."""
        root_logger = logging.getLogger()
        for handler in self._handlers.values():
            root_logger.removeHandler(handler)
            handler.close()

        self._handlers.clear()
        self._configured = False


# Global logging manager instance
_logging_manager = LoggingManager()


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """Set up the global logging system."""
    _logging_manager.setup_logging(config)


def close_logging() -> None:
    """Close logging system and clean up resources."""
    _logging_manager.close_handlers()
