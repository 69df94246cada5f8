"""Launch threads whose entry point is a procedure bound to an object."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from ..exceptions import ContextReleasedError, ThreadCreationError
from ..models.call_context import CallContext
from ..models.thread import ThreadAttributes, ThreadHandle
from .native_thread import NativeThreadPrimitive
from .trampoline import trampoline_for

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ThreadLauncher:
    """Starts threads running bound procedures through the thread primitive.

    The launcher never joins; callers join the returned handle through
    :attr:`primitive`.
    """

    def __init__(self, primitive: NativeThreadPrimitive | None = None) -> None:
        """Initialize the launcher.

        Args:
            primitive: Thread-creation primitive to launch on
        """
        self.primitive = primitive or NativeThreadPrimitive()

    def launch(
        self,
        owner: T,
        procedure: Callable[[T], Any],
        attributes: ThreadAttributes | None = None,
    ) -> ThreadHandle:
        """Start a thread running ``procedure(owner)``.

        Args:
            owner: Object the procedure runs on; must outlive the call
            procedure: Function of the owner's type taking no other argument
            attributes: Thread attributes; configured defaults when None

        Returns:
            Handle of the started thread

        Raises:
            ThreadCreationError: If the primitive could not start the thread
        """
        return self.spawn(CallContext.for_no_arg(owner, procedure), attributes)

    def launch_with_arg(
        self,
        owner: T,
        procedure: Callable[[T, Any], Any],
        argument: Any,
        attributes: ThreadAttributes | None = None,
    ) -> ThreadHandle:
        """Start a thread running ``procedure(owner, argument)``.

        Args:
            owner: Object the procedure runs on; must outlive the call
            procedure: Function of the owner's type taking one argument
            argument: Passed through as-is; must outlive the call
            attributes: Thread attributes; configured defaults when None

        Returns:
            Handle of the started thread

        Raises:
            ThreadCreationError: If the primitive could not start the thread
        """
        return self.spawn(CallContext.for_arg(owner, procedure, argument), attributes)

    def spawn(
        self,
        context: CallContext[Any],
        attributes: ThreadAttributes | None = None,
    ) -> ThreadHandle:
        """Hand a fresh call context to a new thread.

        The context belongs to the worker thread once this returns. If the
        thread cannot be created the context is released here.
        """
        if context.released:
            raise ContextReleasedError(f"Call context {context.id} was already released")

        context_id = context.id
        shape = context.shape
        try:
            handle = self.primitive.create(attributes, trampoline_for(shape), context)
        except ThreadCreationError as e:
            context.release()
            logger.warning(
                "Could not start thread for call context %s (code %d): %s", context_id, e.code, e
            )
            raise

        logger.debug("Call context %s (%s) handed to thread %s", context_id, shape.value, handle.name)
        return handle


_default_launcher: ThreadLauncher | None = None
_default_launcher_lock = threading.Lock()


def get_launcher() -> ThreadLauncher:
    """Get the shared default launcher."""
    global _default_launcher
    with _default_launcher_lock:
        if _default_launcher is None:
            _default_launcher = ThreadLauncher()
    return _default_launcher


def mthread_create(
    owner: T,
    procedure: Callable[[T], Any],
    attributes: ThreadAttributes | None = None,
) -> ThreadHandle:
    """Start a thread running ``procedure(owner)`` on the default launcher."""
    return get_launcher().launch(owner, procedure, attributes)


def mthread_create_with_arg(
    owner: T,
    procedure: Callable[[T, Any], Any],
    argument: Any,
    attributes: ThreadAttributes | None = None,
) -> ThreadHandle:
    """Start a thread running ``procedure(owner, argument)`` on the default launcher."""
    return get_launcher().launch_with_arg(owner, procedure, argument, attributes)
