"""
Call context carried across the thread boundary.

A context captures everything needed to perform one deferred call of a
procedure on a specific owner object: the owner, exactly one procedure of one
of two call shapes, and the optional argument.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar
from uuid import uuid4

from ..exceptions import ContextReleasedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CallShape(Enum):
    """The two call shapes a context can hold."""

    NO_ARG = "no_arg"
    WITH_ARG = "with_arg"


def _unbind(owner: Any, procedure: Callable[..., Any]) -> Callable[..., Any]:
    """Return a callable taking ``owner`` first for a method bound to ``owner``.

    Builtin bound methods have no ``__func__``; they are wrapped so the owner
    is dropped and the method runs with its own receiver.
    """
    if not hasattr(procedure, "__self__") or procedure.__self__ is not owner:
        return procedure
    if hasattr(procedure, "__func__"):
        return procedure.__func__

    @functools.wraps(procedure)
    def call_bound(_owner: Any, *args: Any) -> Any:
        return procedure(*args)

    return call_bound


class CallContext(Generic[T]):
    """One deferred call of a procedure on an owner object.

    Neither the owner nor the argument is owned by the context: releasing the
    context drops its references without touching the referents. Use
    :meth:`for_no_arg` or :meth:`for_arg` to build one.
    """

    def __init__(
        self,
        owner: T,
        shape: CallShape,
        procedure: Callable[..., Any],
        argument: Any = None,
    ) -> None:
        """Initialize the context.

        Args:
            owner: Object the procedure is invoked on
            shape: Which call shape ``procedure`` has
            procedure: Function of the owner's type, called as
                ``procedure(owner)`` or ``procedure(owner, argument)``
            argument: Argument for the single-argument shape

        Raises:
            TypeError: If ``procedure`` is not callable
        """
        if not callable(procedure):
            raise TypeError(f"procedure must be callable, got {type(procedure).__name__}")

        self.id: str = uuid4().hex
        self.created_at: datetime = datetime.now(timezone.utc)
        self.shape = shape
        self.owner: T | None = owner
        self.no_arg_procedure: Callable[[T], Any] | None = None
        self.arg_procedure: Callable[[T, Any], Any] | None = None
        self.argument: Any = None
        self._released = False

        procedure = _unbind(owner, procedure)
        if shape is CallShape.NO_ARG:
            self.no_arg_procedure = procedure
        else:
            self.arg_procedure = procedure
            self.argument = argument

        logger.debug("Created %s call context %s", shape.value, self.id)

    @classmethod
    def for_no_arg(cls, owner: T, procedure: Callable[[T], Any]) -> CallContext[T]:
        """Capture a call of ``procedure(owner)``."""
        return cls(owner, CallShape.NO_ARG, procedure)

    @classmethod
    def for_arg(
        cls, owner: T, procedure: Callable[[T, Any], Any], argument: Any
    ) -> CallContext[T]:
        """Capture a call of ``procedure(owner, argument)``.

        ``argument`` may be None; on this shape None is a real argument.
        """
        return cls(owner, CallShape.WITH_ARG, procedure, argument)

    @property
    def released(self) -> bool:
        return self._released

    @property
    def procedure(self) -> Callable[..., Any] | None:
        """The stored procedure, whichever shape it has."""
        if self.shape is CallShape.NO_ARG:
            return self.no_arg_procedure
        return self.arg_procedure

    def invoke(self) -> Any:
        """Perform the deferred call and return the procedure's result.

        Raises:
            ContextReleasedError: If the context was already released
        """
        if self._released:
            raise ContextReleasedError(f"Call context {self.id} was already released")

        if self.shape is CallShape.NO_ARG:
            return self.no_arg_procedure(self.owner)
        return self.arg_procedure(self.owner, self.argument)

    def release(self) -> None:
        """Drop the owner, argument and procedure references.

        Raises:
            ContextReleasedError: If the context was already released
        """
        if self._released:
            raise ContextReleasedError(f"Call context {self.id} was already released")

        self.owner = None
        self.argument = None
        self.no_arg_procedure = None
        self.arg_procedure = None
        self._released = True
        logger.debug("Released call context %s", self.id)

    def to_dict(self) -> dict[str, Any]:
        """Describe the context for logging."""
        procedure = self.procedure
        return {
            "id": self.id,
            "shape": self.shape.value,
            "owner_type": type(self.owner).__name__ if self.owner is not None else None,
            "procedure": getattr(procedure, "__qualname__", repr(procedure)) if procedure else None,
            "created_at": self.created_at.isoformat(),
            "released": self._released,
        }

    def __repr__(self) -> str:
        return f"<CallContext {self.id} {self.shape.value} released={self._released}>"
