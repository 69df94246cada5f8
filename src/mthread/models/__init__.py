"""
Models for mthread.

This package provides the call context carried across the thread boundary and
the thread attribute and handle types.
"""

from .call_context import CallContext, CallShape
from .thread import ThreadAttributes, ThreadHandle

__all__ = [
    "CallContext",
    "CallShape",
    "ThreadAttributes",
    "ThreadHandle",
]
