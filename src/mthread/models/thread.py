"""
Thread attribute block and thread handle models.
"""

from __future__ import annotations

import threading
from typing import Any

from ..config import get_config


class ThreadAttributes:
    """Attributes applied when the primitive creates a thread."""

    def __init__(self, name: str | None = None, daemon: bool = False, stack_size: int = 0) -> None:
        """Initialize the attributes.

        Args:
            name: Thread name; generated by the primitive when None
            daemon: Whether the thread is a daemon thread
            stack_size: Stack size in bytes, 0 for the platform default
        """
        self.name = name
        self.daemon = daemon
        self.stack_size = stack_size

    @classmethod
    def from_config(cls, name: str | None = None) -> ThreadAttributes:
        """Build attributes from the configured defaults."""
        config = get_config()
        return cls(name=name, daemon=config.MTHREAD_DAEMON, stack_size=config.MTHREAD_STACK_SIZE)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "daemon": self.daemon, "stack_size": self.stack_size}

    def __repr__(self) -> str:
        return (
            f"ThreadAttributes(name={self.name!r}, daemon={self.daemon!r}, "
            f"stack_size={self.stack_size!r})"
        )


class ThreadHandle:
    """Handle to a thread started by the primitive."""

    def __init__(self, thread: threading.Thread) -> None:
        self.thread = thread

    @property
    def name(self) -> str:
        return self.thread.name

    @property
    def ident(self) -> int | None:
        return self.thread.ident

    @property
    def native_id(self) -> int | None:
        return self.thread.native_id

    @property
    def daemon(self) -> bool:
        return self.thread.daemon

    def is_alive(self) -> bool:
        return self.thread.is_alive()

    def __repr__(self) -> str:
        return f"<ThreadHandle {self.name} ident={self.ident} alive={self.is_alive()}>"
