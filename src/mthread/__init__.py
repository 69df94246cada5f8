"""Run threads on procedures bound to an object."""

from __future__ import annotations

from .config import Config, get_config
from .exceptions import CallShapeError, ContextReleasedError, MThreadError, ThreadCreationError
from .models import CallContext, CallShape, ThreadAttributes, ThreadHandle
from .services import (
    NativeThreadPrimitive,
    ThreadLauncher,
    get_launcher,
    mthread_create,
    mthread_create_with_arg,
)

__all__ = [
    "CallContext",
    "CallShape",
    "CallShapeError",
    "Config",
    "ContextReleasedError",
    "MThreadError",
    "NativeThreadPrimitive",
    "ThreadAttributes",
    "ThreadCreationError",
    "ThreadHandle",
    "ThreadLauncher",
    "get_config",
    "get_launcher",
    "mthread_create",
    "mthread_create_with_arg",
]
