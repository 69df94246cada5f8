"""Owner objects used as launch targets in tests."""

from __future__ import annotations

import threading
from typing import Any


class Counter:
    """Owner with a no-argument procedure that records the calling thread."""

    def __init__(self) -> None:
        self.value = 0
        self.thread_idents: list[int] = []
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self.value += 1
            self.thread_idents.append(threading.get_ident())


class ResultSlot:
    """Owner with a single-argument procedure that stores what it receives."""

    def __init__(self) -> None:
        self.value: Any = None
        self.received: list[Any] = []

    def store(self, argument: Any) -> str:
        self.value = argument
        self.received.append(argument)
        return "discarded"


class Gate:
    """Owner whose procedure blocks until released by the test."""

    def __init__(self) -> None:
        self.started = threading.Event()
        self.release = threading.Event()

    def wait(self) -> None:
        self.started.set()
        self.release.wait(timeout=5)


class Failing:
    """Owner whose procedure raises."""

    def explode(self) -> None:
        raise RuntimeError("boom")
