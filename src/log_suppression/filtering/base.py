"""
Base classes for log record suppression
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from .frames import CallFrame


@dataclass
class FilterResult:
    """Result of a suppression decision"""

    should_log: bool
    reason: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


class LogFilter(ABC):
    """Abstract base class for call-site aware log filters"""

    @abstractmethod
    def evaluate(
        self, record: logging.LogRecord, call_stack: Sequence[CallFrame]
    ) -> FilterResult:
        """Decide whether the record reaches its handlers"""
        pass

    def should_log(
        self, record: logging.LogRecord, call_stack: Sequence[CallFrame]
    ) -> bool:
        return self.evaluate(record, call_stack).should_log
