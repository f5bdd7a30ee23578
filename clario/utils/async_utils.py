"""Utilities for running async code inside Celery tasks."""

import asyncio
import threading

_thread_state = threading.local()


def _thread_loop() -> asyncio.AbstractEventLoop:
    loop = getattr(_thread_state, "loop", None)
    if loop is None or loop.is_closed():
        loop = asyncio.new_event_loop()
        _thread_state.loop = loop
    return loop


def run_async(coro):
    """
    Run a coroutine to completion from synchronous Celery task code.

    Each thread keeps one event loop for its lifetime, so async engine
    connections stay bound to a single loop across tasks in the same
    worker process.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return _thread_loop().run_until_complete(coro)

    coro.close()
    raise RuntimeError("run_async cannot be called from a running event loop")
