"""Thread-creation primitive built on ``threading.Thread``.

The primitive only knows free functions taking one opaque payload. It knows
nothing about owners or procedures; that binding lives in the launcher and the
trampolines.
"""

from __future__ import annotations

import errno
import itertools
import logging
import threading
from collections.abc import Callable
from typing import Any

from ..config import get_config
from ..exceptions import ThreadCreationError
from ..models.thread import ThreadAttributes, ThreadHandle

logger = logging.getLogger(__name__)

StartRoutine = Callable[[Any], Any]

# threading.stack_size() is process-wide
_stack_size_lock = threading.Lock()

_thread_counter = itertools.count(1)


class NativeThreadPrimitive:
    """Creates and joins OS threads running a single-payload start routine."""

    def __init__(self, max_threads: int | None = None) -> None:
        """Initialize the primitive.

        Args:
            max_threads: Limit on live threads started by this primitive;
                0 means unlimited. Defaults to MTHREAD_MAX_THREADS.
        """
        if max_threads is None:
            max_threads = get_config().MTHREAD_MAX_THREADS
        self.max_threads = max_threads
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []

    def create(
        self,
        attributes: ThreadAttributes | None,
        start_routine: StartRoutine,
        payload: Any,
    ) -> ThreadHandle:
        """Start a thread running ``start_routine(payload)``.

        Args:
            attributes: Thread attributes; configured defaults when None
            start_routine: Free function taking the payload
            payload: Opaque value handed to the start routine

        Returns:
            Handle of the started thread

        Raises:
            ThreadCreationError: EAGAIN when the thread limit is reached or the
                interpreter cannot start a thread, EINVAL when the stack size
                is rejected
        """
        if attributes is None:
            attributes = ThreadAttributes.from_config()

        name = attributes.name or f"{get_config().MTHREAD_THREAD_NAME_PREFIX}-{next(_thread_counter)}"
        thread = threading.Thread(
            target=start_routine,
            args=(payload,),
            name=name,
            daemon=attributes.daemon,
        )

        with self._lock:
            self._prune()
            if self.max_threads and len(self._threads) >= self.max_threads:
                raise ThreadCreationError(
                    errno.EAGAIN,
                    f"Thread limit of {self.max_threads} reached",
                )
            self._start(thread, attributes.stack_size)
            self._threads.append(thread)

        logger.info("Started thread %s (ident=%s)", thread.name, thread.ident)
        return ThreadHandle(thread)

    def join(self, handle: ThreadHandle, timeout: float | None = None) -> bool:
        """Wait for a thread started by this primitive.

        Returns:
            True if the thread ran to completion, False if it is still
            running after ``timeout`` seconds
        """
        handle.thread.join(timeout)
        finished = not handle.thread.is_alive()
        if finished:
            with self._lock:
                self._prune()
        return finished

    def active_count(self) -> int:
        """Number of live threads started by this primitive."""
        with self._lock:
            self._prune()
            return len(self._threads)

    def _prune(self) -> None:
        self._threads = [t for t in self._threads if t.is_alive()]

    @staticmethod
    def _start(thread: threading.Thread, stack_size: int) -> None:
        if not stack_size:
            with _stack_size_lock:
                try:
                    thread.start()
                except RuntimeError as e:
                    raise ThreadCreationError(errno.EAGAIN, str(e)) from e
            return

        with _stack_size_lock:
            try:
                previous = threading.stack_size(stack_size)
            except (ValueError, RuntimeError) as e:
                raise ThreadCreationError(errno.EINVAL, f"Invalid stack size {stack_size}: {e}") from e
            try:
                thread.start()
            except RuntimeError as e:
                raise ThreadCreationError(errno.EAGAIN, str(e)) from e
            finally:
                threading.stack_size(previous)
