"""Run asynchronous work from synchronous code.

``run_sync()`` hands the work to a shared worker thread, which drives it on
a fresh event loop with ``asyncio.run``, and blocks the caller until the
result is available.  Because the loop lives on the worker thread, it is
safe to call from plain threads and from code that is itself running
inside an event loop (the calling loop is blocked for the duration).

There is no timeout and no cancellation.  Exceptions raised by the work
propagate to the caller unchanged.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from collections.abc import Awaitable, Callable, Coroutine
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

from convenience.core.config import get_settings

_logger = logging.getLogger("convenience.sync")

T = TypeVar("T")

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            settings = get_settings()
            _executor = ThreadPoolExecutor(
                max_workers=settings.RUN_SYNC_MAX_WORKERS,
                thread_name_prefix=settings.RUN_SYNC_THREAD_PREFIX,
            )
            _logger.debug(
                "run_sync worker pool created (max_workers=%s)",
                settings.RUN_SYNC_MAX_WORKERS,
            )
        return _executor


async def _await_result(work: Callable[..., Awaitable[T]], args: tuple, kwargs: dict) -> T:
    return await work(*args, **kwargs)


async def _await_coroutine(coroutine: Coroutine[Any, Any, T]) -> T:
    return await coroutine


def _run_in_worker(
    work: Callable[..., Awaitable[T]] | Coroutine[Any, Any, T], args: tuple, kwargs: dict
) -> T:
    if inspect.iscoroutine(work):
        return asyncio.run(_await_coroutine(work))
    return asyncio.run(_await_result(work, args, kwargs))


def run_sync(
    work: Callable[..., Awaitable[T]] | Coroutine[Any, Any, T], *args: Any, **kwargs: Any
) -> T:
    """Block until *work* completes and return its result.

    *work* is a coroutine function (called with *args* and *kwargs* on the
    worker thread) or an already created coroutine object.  Work returning
    nothing yields ``None``.
    """
    if inspect.iscoroutine(work) and (args or kwargs):
        raise TypeError("arguments cannot be passed with a coroutine object")
    future = _get_executor().submit(_run_in_worker, work, args, kwargs)
    return future.result()


def shutdown_run_sync(wait: bool = True) -> None:
    """Dispose of the worker pool; the next ``run_sync`` creates a new one."""
    global _executor
    with _executor_lock:
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=wait)
        _logger.debug("run_sync worker pool shut down")
