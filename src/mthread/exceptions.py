"""Exceptions raised by the thread launching layer."""

from __future__ import annotations


class MThreadError(Exception):
    """Base class for mthread errors."""

    pass


class ThreadCreationError(MThreadError):
    """Raised when the thread primitive refuses to start a thread.

    Attributes:
        code: Nonzero errno value reported by the primitive
    """

    def __init__(self, code: int, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or f"Thread creation failed with code {code}")


class ContextReleasedError(MThreadError):
    """Raised when a call context is used or released after release."""

    pass


class CallShapeError(MThreadError):
    """Raised when a call context reaches the trampoline of the other call shape."""

    pass
