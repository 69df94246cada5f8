"""Trampolines run by the thread primitive on the worker thread.

Each trampoline takes the single opaque payload the primitive hands it,
recovers the call context, performs the bound call and releases the context.
Exceptions raised by the bound procedure are not caught here; they leave the
thread and are reported through ``threading.excepthook``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..exceptions import CallShapeError, ContextReleasedError
from ..models.call_context import CallContext, CallShape

logger = logging.getLogger(__name__)


def _unwrap(payload: Any, shape: CallShape | None) -> CallContext[Any]:
    if not isinstance(payload, CallContext):
        raise TypeError(f"Trampoline payload must be a CallContext, got {type(payload).__name__}")
    if shape is not None and payload.shape is not shape:
        raise CallShapeError(
            f"Call context {payload.id} has shape {payload.shape.value}, expected {shape.value}"
        )
    if payload.released:
        raise ContextReleasedError(f"Call context {payload.id} was already released")
    return payload


def _run(context: CallContext[Any]) -> None:
    logger.debug("Dispatching call context %s", context.id)
    try:
        context.invoke()
    finally:
        context.release()


def dispatch_no_arg(payload: Any) -> None:
    """Run a no-argument call context and release it."""
    _run(_unwrap(payload, CallShape.NO_ARG))


def dispatch_with_arg(payload: Any) -> None:
    """Run a single-argument call context and release it."""
    _run(_unwrap(payload, CallShape.WITH_ARG))


def dispatch(payload: Any) -> None:
    """Run a call context of either shape and release it."""
    _run(_unwrap(payload, None))


_TRAMPOLINES: dict[CallShape, Callable[[Any], None]] = {
    CallShape.NO_ARG: dispatch_no_arg,
    CallShape.WITH_ARG: dispatch_with_arg,
}


def trampoline_for(shape: CallShape) -> Callable[[Any], None]:
    """Return the trampoline matching ``shape``."""
    return _TRAMPOLINES[shape]
