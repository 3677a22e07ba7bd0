"""Function-result memoization with time-based expiry.

This package wraps functions so repeated calls with equivalent arguments reuse
an earlier result until it times out.
"""

from .config import settings
from .keys import default_key
from .log import configure_logging, disable_logging, enable_logging
from .memoizer import memoize, ttl_cache
from .scheduler import EventLoopScheduler, Scheduler, TimerQueue, VirtualTimerQueue

configure_logging()

__all__ = [
    "EventLoopScheduler",
    "Scheduler",
    "TimerQueue",
    "VirtualTimerQueue",
    "default_key",
    "disable_logging",
    "enable_logging",
    "memoize",
    "settings",
    "ttl_cache",
]
