"""Utilities for reusing a background asyncio event loop.

Callback-style callers submit coroutines here instead of running their own
event loop. A single loop is created on demand in a dedicated thread and shared
across callers, so the httpx connection pool bound to that loop is reused.
"""

from __future__ import annotations

import asyncio
import atexit
import threading
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine


class AsyncioRunner:
    """Run coroutines on a shared background event loop."""

    _instance: AsyncioRunner | None = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._loop.run_forever, name="diary-sync-runner", daemon=True
        )
        self._thread.start()
        atexit.register(self.stop)

    @classmethod
    def get_global(cls) -> AsyncioRunner:
        """Get or create the process-wide runner instance."""

        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def submit(self, coro: Coroutine[Any, Any, Any]) -> Future[Any]:
        """Schedule a coroutine on the background loop without waiting."""

        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    def run(self, coro: Coroutine[Any, Any, Any]) -> Any:
        """Execute a coroutine on the background loop and wait for result."""

        return self.submit(coro).result()

    def stop(self) -> None:
        """Shut down the background event loop."""

        if self._loop.is_running():
            self._loop.call_soon_threadsafe(self._loop.stop)
            self._thread.join(timeout=1)
