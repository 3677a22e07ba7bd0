"""Memoization with time-based expiry for function results."""

import functools
from typing import Any, Callable, TypeVar

from loguru import logger

from ttl_memo.keys import default_key
from ttl_memo.scheduler import Scheduler, TimerQueue

T = TypeVar("T")

# Marks "never cached" so that a cached None still counts as a hit
_MISSING = object()


def memoize(
    func: Callable[..., T],
    timeout_ms: float,
    resolver: Callable[..., str] | None = None,
    *,
    scheduler: Scheduler | None = None,
) -> Callable[..., T]:
    """Wrap ``func`` so that results are reused until they time out.

    Each result is stored under a key and removed ``timeout_ms`` milliseconds
    after it was stored; later calls with the same key recompute it. Reads do
    not extend the lifetime of an entry. Every wrapper owns its own cache.

    With the default ``TimerQueue`` expired entries are only removed when the
    wrapper is called again, so an idle wrapper keeps them in memory. Pass an
    ``EventLoopScheduler`` to have the event loop free them on time instead.

    Example:
        >>> import time
        >>> def add_to_time(year, month, day):
        ...     return time.time() + year + month + day
        >>> memoized = memoize(add_to_time, 5000, lambda y, m, d: f"{y}-{m}-{d}")
        >>> first = memoized(1, 11, 26)
        >>> memoized(1, 11, 26) == first  # served from the cache
        True

    Args:
        func: Function whose return values should be cached
        timeout_ms: Lifetime of each cached value in milliseconds
        resolver: Called with the exact arguments of each call; its return
            value is the cache key. Without it the arguments are serialized
            with :func:`ttl_memo.keys.default_key`.
        scheduler: Timer service used to expire entries (defaults to a
            ``TimerQueue`` owned by this wrapper)

    Returns:
        Function with the same signature as ``func``
    """
    cache: dict[str, Any] = {}
    timers = scheduler if scheduler is not None else TimerQueue()
    name = getattr(func, "__qualname__", repr(func))

    def expire(cache_key: str) -> None:
        # Deletes whatever is stored under the key now, even if it was re-cached
        if cache.pop(cache_key, _MISSING) is not _MISSING:
            logger.debug(f"Expired {name} entry {cache_key}")

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> T:
        timers.run_due()

        # Create cache key with the resolver if provided, otherwise serialize the arguments
        if resolver is None:
            cache_key = default_key(args, kwargs)
        else:
            cache_key = resolver(*args, **kwargs)

        cached = cache.get(cache_key, _MISSING)
        if cached is not _MISSING:
            logger.debug(f"Cache hit for {name} with key {cache_key}")
            return cached

        logger.debug(f"Cache miss for {name} with key {cache_key}")
        result = func(*args, **kwargs)
        timers.call_later(timeout_ms, functools.partial(expire, cache_key))
        cache[cache_key] = result

        return result

    return wrapper


def ttl_cache(
    timeout_ms: float,
    resolver: Callable[..., str] | None = None,
    *,
    scheduler: Scheduler | None = None,
):
    """Decorator form of :func:`memoize`.

    Usage:
        @ttl_cache(30_000)
        def expensive(a, b):
            ...

    Args:
        timeout_ms: Lifetime of each cached value in milliseconds
        resolver: Optional key function, see :func:`memoize`
        scheduler: Optional timer service, see :func:`memoize`

    Returns:
        Decorator function
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        return memoize(func, timeout_ms, resolver, scheduler=scheduler)

    return decorator
