"""Deferred-timer services used to expire memoized entries.

A scheduler runs a callback once, no earlier than a given number of
milliseconds from now. Everything here is single-threaded:

- ``TimerQueue`` keeps pending timers in a heap and fires the due ones when
  ``run_due()`` is called. The memoizer calls it at the start of every call.
- ``VirtualTimerQueue`` is a ``TimerQueue`` whose clock only moves when
  ``advance()`` is called, for deterministic tests.
- ``EventLoopScheduler`` hands timers to an asyncio event loop.
"""

import asyncio
import heapq
import itertools
import time
from typing import Any, Callable, Protocol


def monotonic_ms() -> float:
    """Milliseconds from the monotonic clock."""
    return time.monotonic() * 1000


class Scheduler(Protocol):
    """Anything that can run a callback once after a delay."""

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> Any:
        """Schedule ``callback`` to run once, at least ``delay_ms`` from now."""
        ...

    def run_due(self) -> int:
        """Fire every callback whose time has come.

        Returns:
            Number of callbacks fired
        """
        ...


class TimerQueue:
    """Heap of pending one-shot timers against a millisecond clock.

    A timer scheduled for ``delay_ms`` is due once ``clock() >= now + delay_ms``.
    Timers due at the same instant fire in the order they were scheduled.
    Timers cannot be cancelled.
    """

    def __init__(self, clock: Callable[[], float] | None = None):
        """Initialize the queue.

        Args:
            clock: Zero-argument callable returning the current time in
                milliseconds (defaults to the monotonic clock)
        """
        self._clock = clock or monotonic_ms
        self._timers: list[tuple[float, int, Callable[[], Any]]] = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> float:
        """Schedule ``callback``; negative delays count as zero.

        Returns:
            The clock value at which the timer becomes due
        """
        due = self.now() + max(delay_ms, 0)
        heapq.heappush(self._timers, (due, next(self._counter), callback))
        return due

    def run_due(self) -> int:
        fired = 0
        now = self.now()
        while self._timers and self._timers[0][0] <= now:
            _, _, callback = heapq.heappop(self._timers)
            callback()
            fired += 1
        return fired

    def __len__(self) -> int:
        return len(self._timers)


class VirtualTimerQueue(TimerQueue):
    """TimerQueue driven by a manual clock.

    Example:
        >>> timers = VirtualTimerQueue()
        >>> timers.call_later(1000, lambda: print("fired"))
        1000
        >>> timers.advance(999)
        0
        >>> timers.advance(1)
        fired
        1
    """

    def __init__(self, start_ms: float = 0):
        self._virtual_now = start_ms
        super().__init__(clock=lambda: self._virtual_now)

    def advance(self, ms: float) -> int:
        """Move virtual time forward and fire the timers that became due.

        Args:
            ms: Milliseconds to advance (must not be negative)

        Returns:
            Number of callbacks fired

        Raises:
            ValueError: If ``ms`` is negative
        """
        if ms < 0:
            raise ValueError(f"Cannot move virtual time backwards (got {ms} ms)")
        self._virtual_now += ms
        return self.run_due()


class EventLoopScheduler:
    """Schedules expiries on an asyncio event loop via ``loop.call_later``."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """Bind to an event loop.

        Args:
            loop: Loop to schedule on. When omitted, the running loop is used,
                so construction outside a running loop raises RuntimeError.
        """
        self.loop = loop or asyncio.get_running_loop()

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(delay_ms, 0) / 1000, callback)

    def run_due(self) -> int:
        # The loop fires timers itself
        return 0
