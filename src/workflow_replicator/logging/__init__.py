"""
Logging system for the workflow replicator.
"""

from .logger_config import setup_logging, close_logging, LoggerConfig
from .log_formatter import StructuredFormatter, ColoredFormatter, PlainFormatter, redact_credentials

__all__ = [
    "setup_logging",
    "close_logging",
    "LoggerConfig",
    "StructuredFormatter",
    "ColoredFormatter",
    "PlainFormatter",
    "redact_credentials"
]
