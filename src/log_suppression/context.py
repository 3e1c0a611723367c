import logging
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Optional

ORIGIN_ATTR = "origin"

emission_origin: ContextVar[str] = ContextVar("emission_origin", default="")


def get_origin() -> str:
    """Get the origin tag of the current context"""
    return emission_origin.get("")


def set_origin(origin: Optional[str]) -> None:
    """Set the origin tag for the current context"""
    emission_origin.set(origin or "")


def record_origin(record: logging.LogRecord) -> Optional[str]:
    """Origin of a record: its own tag first, then the current context"""
    origin = getattr(record, ORIGIN_ATTR, None)
    if origin:
        return str(origin)
    return get_origin() or None


@contextmanager
def origin_context(origin: str) -> Generator[str, None, None]:
    """Context manager tagging every record emitted inside it with ``origin``"""
    old_origin = get_origin()
    try:
        set_origin(origin)
        yield origin
    finally:
        set_origin(old_origin)
