"""
Suppression filter with call-site aware parameter echo
"""

import logging
import sys
from collections.abc import Mapping
from typing import IO, Any, Optional, Sequence

from ..context import record_origin
from .base import FilterResult, LogFilter
from .frames import CallFrame, current_call_stack
from .rule import SuppressionRule


def format_parameters(args: Any) -> str:
    """Render record arguments as ``[a, b]``.

    A mapping (the stdlib collapses a single dict argument into one) renders
    as ``[key=value, ...]``.
    """
    if args is None:
        return "[]"
    if isinstance(args, Mapping):
        items = [f"{key}={value}" for key, value in args.items()]
    elif isinstance(args, (str, bytes)):
        items = [str(args)]
    else:
        try:
            items = [str(arg) for arg in args]
        except TypeError:
            items = [str(args)]
    return "[" + ", ".join(items) + "]"


def _record_message(record: logging.LogRecord) -> Optional[str]:
    msg = getattr(record, "msg", None)
    if msg is None or isinstance(msg, str):
        return msg
    try:
        return str(msg)
    except Exception:
        return None


class RecordFilter(logging.Filter, LogFilter):
    """Suppress records matching a rule, echoing their arguments for one caller.

    Records whose message template does not contain the rule's message
    substring always pass. Matching records are always suppressed; when a
    frame of the call stack belongs to the rule's caller, the record's
    arguments are written to ``stream`` (``sys.stdout`` by default).

    By default the echo fires at most once per record. ``echo_each_frame``
    writes one line per matching frame instead.
    """

    def __init__(
        self,
        rule: Optional[SuppressionRule] = None,
        *,
        echo_each_frame: bool = False,
        stream: Optional[IO[str]] = None,
    ):
        super().__init__()
        self.rule = rule or SuppressionRule()
        self.echo_each_frame = echo_each_frame
        self.stream = stream

    @classmethod
    def from_config(cls, config: Any) -> "RecordFilter":
        """Create a filter from a ``SuppressionConfig``"""
        return cls(config.to_rule(), echo_each_frame=config.echo_each_frame)

    def evaluate(
        self, record: logging.LogRecord, call_stack: Sequence[CallFrame]
    ) -> FilterResult:
        message = _record_message(record)
        if not self.rule.matches_message(message):
            return FilterResult(should_log=True, reason="record_filter: message not matched")

        metadata = {"echo_count": 0}
        for frame in call_stack or ():
            if not self.rule.matches_caller(getattr(frame, "declaring_type_name", None)):
                continue
            try:
                self._echo(record)
            except Exception as e:
                metadata["echo_error"] = str(e)
                break
            metadata["echo_count"] += 1
            if not self.echo_each_frame:
                break

        return FilterResult(
            should_log=False,
            reason=f"record_filter: suppressed '{self.rule.message_substring}'",
            metadata=metadata,
        )

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            matched = self.rule.matches_message(_record_message(record))
        except Exception:
            return True
        if not matched:
            return True

        # Past this point the record is suppressed; failures only lose the echo
        try:
            # Drop this frame so the stack starts at the logging machinery
            call_stack = current_call_stack(skip=1)
        except Exception:
            call_stack = []
        try:
            origin = record_origin(record)
        except Exception:
            origin = None
        if origin:
            call_stack.insert(0, CallFrame(origin))

        try:
            return self.evaluate(record, call_stack).should_log
        except Exception:
            return False

    def _echo(self, record: logging.LogRecord) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        if stream is None:
            raise OSError("no output stream available")
        stream.write(format_parameters(record.args) + "\n")

    def __repr__(self) -> str:
        return (
            f"RecordFilter(message='{self.rule.message_substring}', "
            f"caller='{self.rule.caller_substring}', "
            f"echo_each_frame={self.echo_each_frame})"
        )
