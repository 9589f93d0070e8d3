"""Asyncio reader/writer lock.

Readers share the lock; a writer holds it alone. Writers that are waiting
block new readers, so a steady stream of list requests cannot starve a
create or delete.

Release is synchronous, so a task cancelled while leaving a critical
section cannot leave the counters behind.
"""

import asyncio
from collections import deque
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager


class AsyncRWLock:
    """Reader/writer lock for coroutines running on one event loop.

    Example:
        ```python
        lock = AsyncRWLock()

        async with lock.read():
            snapshot = list(data.values())

        async with lock.write():
            data[key] = value
        ```
    """

    def __init__(self) -> None:
        self._readers = 0
        self._writer = False
        self._pending_writers = 0
        self._waiters: deque[asyncio.Future[None]] = deque()

    @property
    def readers(self) -> int:
        """Number of tasks currently holding the read side."""
        return self._readers

    @property
    def writing(self) -> bool:
        """Whether a task currently holds the write side."""
        return self._writer

    def _can_read(self) -> bool:
        return not self._writer and self._pending_writers == 0

    def _can_write(self) -> bool:
        return not self._writer and self._readers == 0

    def _wake_all(self) -> None:
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_result(None)

    async def _wait_until(self, predicate: Callable[[], bool]) -> None:
        loop = asyncio.get_running_loop()
        while not predicate():
            waiter = loop.create_future()
            self._waiters.append(waiter)
            try:
                await waiter
            finally:
                if waiter in self._waiters:
                    self._waiters.remove(waiter)

    async def acquire_read(self) -> None:
        await self._wait_until(self._can_read)
        self._readers += 1

    def release_read(self) -> None:
        if self._readers <= 0:
            raise RuntimeError("release_read() called without a matching acquire_read()")
        self._readers -= 1
        if self._readers == 0:
            self._wake_all()

    async def acquire_write(self) -> None:
        self._pending_writers += 1
        try:
            await self._wait_until(self._can_write)
        except BaseException:
            self._pending_writers -= 1
            # Readers parked behind this writer may now proceed
            self._wake_all()
            raise
        self._pending_writers -= 1
        self._writer = True

    def release_write(self) -> None:
        if not self._writer:
            raise RuntimeError("release_write() called without a matching acquire_write()")
        self._writer = False
        self._wake_all()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        await self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold the lock in exclusive mode for the duration of the block."""
        await self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
