"""
Plain text formatter for the suppression console handler
"""

import logging
from datetime import datetime
from typing import Optional

from .config import SuppressionConfig, get_default_config
from .context import record_origin


class PlainTextFormatter(logging.Formatter):
    """Render ``[timestamp] LEVEL name message (origin=...)``"""

    def __init__(self, config: Optional[SuppressionConfig] = None):
        super().__init__()
        self.config = config or get_default_config()

    def format(self, record: logging.LogRecord) -> str:
        parts = []

        if self.config.include_timestamp:
            parts.append(f"[{datetime.fromtimestamp(record.created).isoformat()}]")

        parts.extend([record.levelname, record.name, record.getMessage()])

        origin = record_origin(record)
        if origin:
            parts.append(f"(origin={origin})")

        if record.exc_info:
            parts.append("\n" + self.formatException(record.exc_info))

        return " ".join(parts)
