"""Shared pytest fixtures."""

from __future__ import annotations

import threading
from collections.abc import Iterator

import pytest
from owners import Counter, Gate, ResultSlot

from mthread.models.thread import ThreadHandle
from mthread.services.launcher import ThreadLauncher
from mthread.services.native_thread import NativeThreadPrimitive


@pytest.fixture
def counter() -> Counter:
    return Counter()


@pytest.fixture
def result_slot() -> ResultSlot:
    return ResultSlot()


@pytest.fixture
def gate() -> Iterator[Gate]:
    gate = Gate()
    yield gate
    # Never leave a worker blocked past the test
    gate.release.set()


@pytest.fixture
def primitive() -> NativeThreadPrimitive:
    """Thread primitive without a thread limit."""
    return NativeThreadPrimitive(max_threads=0)


@pytest.fixture
def limited_primitive() -> NativeThreadPrimitive:
    """Thread primitive allowing a single live thread."""
    return NativeThreadPrimitive(max_threads=1)


@pytest.fixture
def launcher(primitive: NativeThreadPrimitive) -> ThreadLauncher:
    return ThreadLauncher(primitive)


@pytest.fixture
def join_all(primitive: NativeThreadPrimitive):
    """Join every given handle and assert each thread finished."""

    def _join(handles: list[ThreadHandle]) -> None:
        for handle in handles:
            assert primitive.join(handle, timeout=5)

    return _join


@pytest.fixture
def thread_errors(monkeypatch: pytest.MonkeyPatch) -> list[threading.ExceptHookArgs]:
    """Capture exceptions that escape worker threads."""
    captured: list[threading.ExceptHookArgs] = []
    monkeypatch.setattr(threading, "excepthook", captured.append)
    return captured
