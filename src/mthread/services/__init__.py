"""Services package for the thread launching layer.

This package provides the thread-creation primitive, the trampolines that run
on worker threads, and the launcher that wires bound procedures to them.
"""

from .launcher import ThreadLauncher, get_launcher, mthread_create, mthread_create_with_arg
from .native_thread import NativeThreadPrimitive
from .trampoline import dispatch, dispatch_no_arg, dispatch_with_arg, trampoline_for

__all__ = [
    "NativeThreadPrimitive",
    "ThreadLauncher",
    "dispatch",
    "dispatch_no_arg",
    "dispatch_with_arg",
    "get_launcher",
    "mthread_create",
    "mthread_create_with_arg",
    "trampoline_for",
]
