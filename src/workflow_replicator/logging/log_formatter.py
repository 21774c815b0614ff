"""
Log formatters for console and machine-readable output.
"""

import re
import json
import logging
from datetime import datetime
from typing import Dict, Any, Optional

# Credentials embedded in remote URLs, e.g. https://<token>@github.com/org/repo.git
_URL_CREDENTIALS = re.compile(r"(https?://)[^/@\s]+@")


def redact_credentials(message: str) -> str:
    """Replace credentials embedded in URLs with ``***``."""
    return _URL_CREDENTIALS.sub(r"\1***@", message)


class StructuredFormatter(logging.Formatter):
    """
    Structured JSON formatter for machine-readable logs.

    One JSON object per record, suited to log collection on CI runners.
    """

    # Attributes every LogRecord carries; anything else came in through ``extra``
    STANDARD_FIELDS = frozenset({
        'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
        'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
        'thread', 'threadName', 'processName', 'process', 'taskName',
        'exc_info', 'exc_text', 'stack_info', 'message'
    })

    def __init__(self, include_extra: bool = True):
        """
        Initialize structured formatter.

        Args:
            include_extra: Whether to include extra fields from log records
        """
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_credentials(record.getMessage()),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = redact_credentials(self.formatException(record.exc_info))

        if self.include_extra:
            extra_fields = self._extract_extra_fields(record)
            if extra_fields:
                log_entry["extra"] = extra_fields

        return json.dumps(log_entry, default=str, ensure_ascii=False)

    def _extract_extra_fields(self, record: logging.LogRecord) -> Dict[str, Any]:
        return {
            key: value for key, value in record.__dict__.items()
            if key not in self.STANDARD_FIELDS and not key.startswith('_')
        }


class ColoredFormatter(logging.Formatter):
    """Formatter adding ANSI colors per level for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m',
        'BOLD': '\033[1m'
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        super().__init__(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        formatted = redact_credentials(super().format(record))

        level_color = self.COLORS.get(record.levelname, '')
        if not level_color:
            return formatted

        reset_color = self.COLORS['RESET']
        formatted = f"{level_color}{formatted}{reset_color}"

        bold_level = f"{self.COLORS['BOLD']}{record.levelname}{reset_color}{level_color}"
        return formatted.replace(record.levelname, bold_level, 1)


class PlainFormatter(logging.Formatter):
    """Standard formatter with credential redaction, used for files and non-TTY output."""

    def format(self, record: logging.LogRecord) -> str:
        return redact_credentials(super().format(record))
