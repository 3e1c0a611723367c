"""
Call stack capture for caller identification

Frames are always ordered innermost-first: index 0 is the most recent call.
"""

import inspect
from dataclasses import dataclass
from types import FrameType
from typing import Iterable, List


@dataclass(frozen=True)
class CallFrame:
    """One entry of a call stack, identified by its declaring type name"""

    declaring_type_name: str


def describe_frame(frame: FrameType) -> str:
    """Return ``<module>.<qualified name>`` for a live frame.

    Methods resolve to ``pkg.module.ClassName.method``. Interpreters without
    ``co_qualname`` recover the class from a ``self`` or ``cls`` local.
    """
    code = frame.f_code
    module = frame.f_globals.get("__name__", "<unknown>")

    qualname = getattr(code, "co_qualname", None)
    if qualname is None:
        qualname = code.co_name
        owner = frame.f_locals.get("self", frame.f_locals.get("cls"))
        if owner is not None:
            owner_type = owner if isinstance(owner, type) else type(owner)
            qualname = f"{owner_type.__qualname__}.{code.co_name}"

    return f"{module}.{qualname}"


def current_call_stack(skip: int = 0) -> List[CallFrame]:
    """Capture the calling thread's stack, innermost-first.

    ``skip`` drops that many frames above the caller of this function.
    """
    frames: List[CallFrame] = []
    frame = None
    current = inspect.currentframe()
    try:
        # Start at our caller, not at this function
        frame = current.f_back if current is not None else None
        while frame is not None and skip > 0:
            frame = frame.f_back
            skip -= 1
        while frame is not None:
            frames.append(CallFrame(describe_frame(frame)))
            frame = frame.f_back
    finally:
        del current, frame
    return frames


def frames_from_names(names: Iterable[str]) -> List[CallFrame]:
    """Build a call stack from declaring type names, innermost-first"""
    return [CallFrame(name) for name in names]
