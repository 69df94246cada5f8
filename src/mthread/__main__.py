"""Entry point for running the mthread demo as a module."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from typing import Any

from .config import get_config
from .exceptions import ThreadCreationError
from .services.launcher import ThreadLauncher

logger = logging.getLogger("mthread")


class Counter:
    """Shared counter incremented from many threads."""

    def __init__(self) -> None:
        self.value = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self.value += 1


class ResultSlot:
    """Holds the value written by one call."""

    def __init__(self) -> None:
        self.value: Any = None

    def store(self, value: Any) -> None:
        self.value = value


def run_demo(launcher: ThreadLauncher, threads: int, value: int) -> tuple[int, Any]:
    """Run the counter and result-slot scenarios.

    Returns:
        Final counter value and the value written to the result slot
    """
    counter = Counter()
    handles = [launcher.launch(counter, Counter.increment) for _ in range(threads)]

    slot = ResultSlot()
    handles.append(launcher.launch_with_arg(slot, ResultSlot.store, value))

    for handle in handles:
        launcher.primitive.join(handle)

    return counter.value, slot.value


def main(argv: list[str] | None = None) -> int:
    config = get_config()

    parser = argparse.ArgumentParser(prog="mthread", description="Run threads on bound procedures.")
    parser.add_argument("--threads", type=int, default=100, help="number of counter threads")
    parser.add_argument("--value", type=int, default=42, help="value passed to the result slot")
    parser.add_argument(
        "--log-level",
        default=config.MTHREAD_LOG_LEVEL,
        choices=config.LOG_LEVELS,
        type=str.upper,
        help="logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    errors = config.validate()
    if errors:
        logger.warning("Configuration warnings: %s", errors)

    try:
        count, result = run_demo(ThreadLauncher(), args.threads, args.value)
    except ThreadCreationError as e:
        logger.error("Demo aborted: %s", e)
        return e.code

    print(f"counter: {count}/{args.threads}")
    print(f"result slot: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
