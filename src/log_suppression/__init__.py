"""
Log Suppression

Suppress a noisy warning from the standard logging pipeline and echo its
arguments when it was emitted by a specific caller.
"""

__version__ = "1.0.0"

from .config import SuppressionConfig, get_default_config, set_default_config
from .context import (
    ORIGIN_ATTR,
    get_origin,
    origin_context,
    record_origin,
    set_origin,
)
from .filtering import (
    DEFAULT_CALLER_SUBSTRING,
    DEFAULT_MESSAGE_SUBSTRING,
    CallFrame,
    FilterResult,
    LogFilter,
    RecordFilter,
    SuppressionRule,
    current_call_stack,
    describe_frame,
    format_parameters,
    frames_from_names,
)
from .formatter import PlainTextFormatter
from .logger import get_logger, install, uninstall

__all__ = [
    "CallFrame",
    "DEFAULT_CALLER_SUBSTRING",
    "DEFAULT_MESSAGE_SUBSTRING",
    "FilterResult",
    "LogFilter",
    "ORIGIN_ATTR",
    "PlainTextFormatter",
    "RecordFilter",
    "SuppressionConfig",
    "SuppressionRule",
    "current_call_stack",
    "describe_frame",
    "format_parameters",
    "frames_from_names",
    "get_default_config",
    "get_logger",
    "get_origin",
    "install",
    "origin_context",
    "record_origin",
    "set_default_config",
    "set_origin",
    "uninstall",
]
