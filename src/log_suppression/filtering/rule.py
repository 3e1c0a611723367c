"""
Suppression rule pairing a message pattern with a caller pattern
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_MESSAGE_SUBSTRING = "Cannot load configuration from stream"
DEFAULT_CALLER_SUBSTRING = "ConfigUtils"


@dataclass(frozen=True)
class SuppressionRule:
    """Immutable rule consulted for every record"""

    message_substring: str = DEFAULT_MESSAGE_SUBSTRING
    caller_substring: str = DEFAULT_CALLER_SUBSTRING

    def __post_init__(self) -> None:
        for name in ("message_substring", "caller_substring"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")

    def matches_message(self, message: Optional[str]) -> bool:
        if message is None:
            return False
        return self.message_substring in message

    def matches_caller(self, declaring_type_name: Optional[str]) -> bool:
        if not declaring_type_name:
            return False
        return self.caller_substring in declaring_type_name
