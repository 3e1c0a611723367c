"""
Log record suppression with call-site aware routing
"""

from .base import FilterResult, LogFilter
from .frames import CallFrame, current_call_stack, describe_frame, frames_from_names
from .record_filter import RecordFilter, format_parameters
from .rule import DEFAULT_CALLER_SUBSTRING, DEFAULT_MESSAGE_SUBSTRING, SuppressionRule

__all__ = [
    "CallFrame",
    "DEFAULT_CALLER_SUBSTRING",
    "DEFAULT_MESSAGE_SUBSTRING",
    "FilterResult",
    "LogFilter",
    "RecordFilter",
    "SuppressionRule",
    "current_call_stack",
    "describe_frame",
    "format_parameters",
    "frames_from_names",
]
