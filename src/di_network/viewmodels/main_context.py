"""
Main Context Module

Message-passing channel from worker threads to the thread that owns
view-model state. Workers ``post`` callables; the owner runs them.
"""

import functools
import logging
import queue
import time
from typing import Any, Callable, Optional


logger = logging.getLogger(__name__)


class MainContext:
    """
    Queue of pending state updates for the owning thread.

    View-model fields must only be written by callables executed through
    ``run_pending``.
    """

    def __init__(self):
        self._queue: "queue.Queue[Callable[[], Any]]" = queue.Queue()

    def post(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Schedule ``fn(*args, **kwargs)`` on the owning thread. Thread-safe."""
        self._queue.put(functools.partial(fn, *args, **kwargs))

    @property
    def pending(self) -> int:
        """Approximate number of callables waiting to run."""
        return self._queue.qsize()

    def run_pending(self) -> int:
        """
        Run every callable queued so far, in posting order.

        Returns:
            Number of callables executed.
        """
        executed = 0
        while True:
            try:
                fn = self._queue.get_nowait()
            except queue.Empty:
                break
            fn()
            executed += 1

        if executed:
            logger.debug(f"Ran {executed} main-context update(s)")
        return executed

    def run_until(
        self,
        predicate: Callable[[], bool],
        timeout: Optional[float] = None
    ) -> bool:
        """
        Block, running queued callables as they arrive, until ``predicate``
        holds.

        Args:
            predicate: Checked before waiting and after every callable.
            timeout: Maximum seconds to wait (waits forever if None).

        Returns:
            True if the predicate held, False if the timeout expired first.
        """
        deadline = None if timeout is None else time.monotonic() + timeout

        while not predicate():
            remaining = None
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
            try:
                fn = self._queue.get(timeout=remaining)
            except queue.Empty:
                return predicate()
            fn()

        return True
