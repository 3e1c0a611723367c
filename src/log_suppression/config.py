import os
from dataclasses import dataclass
from typing import Optional

from .filtering.rule import (
    DEFAULT_CALLER_SUBSTRING,
    DEFAULT_MESSAGE_SUBSTRING,
    SuppressionRule,
)


@dataclass
class SuppressionConfig:
    """Configuration for the suppression filter and its console logger"""

    enabled: bool = True
    message_substring: str = DEFAULT_MESSAGE_SUBSTRING
    caller_substring: str = DEFAULT_CALLER_SUBSTRING
    echo_each_frame: bool = False
    log_level: str = "INFO"
    include_timestamp: bool = True

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def from_env(cls) -> "SuppressionConfig":
        """Create configuration from environment variables"""
        return cls(
            enabled=cls._parse_bool_env("LOG_SUPPRESSION_ENABLED", "true"),
            message_substring=os.getenv(
                "LOG_SUPPRESSION_MESSAGE", DEFAULT_MESSAGE_SUBSTRING
            ),
            caller_substring=os.getenv(
                "LOG_SUPPRESSION_CALLER", DEFAULT_CALLER_SUBSTRING
            ),
            echo_each_frame=cls._parse_bool_env("LOG_SUPPRESSION_ECHO_EACH_FRAME"),
            log_level=os.getenv("LOG_SUPPRESSION_LEVEL", "INFO"),
            include_timestamp=cls._parse_bool_env("LOG_SUPPRESSION_TIMESTAMP", "true"),
        )

    def to_rule(self) -> SuppressionRule:
        """Build the immutable suppression rule from this configuration"""
        return SuppressionRule(
            message_substring=self.message_substring,
            caller_substring=self.caller_substring,
        )


_default_config: Optional[SuppressionConfig] = None


def get_default_config() -> SuppressionConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = SuppressionConfig.from_env()
    return _default_config


def set_default_config(config: Optional[SuppressionConfig]) -> None:
    """Set the default configuration instance"""
    global _default_config
    _default_config = config
