"""Per-session serialization of read-modify-write turns."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class SessionLockRegistry:
    """
    One asyncio.Lock per session key, dropped once nobody holds or waits on it.

    Turns for the same key run one after another. Different keys never block
    each other.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def acquire(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    def active_keys(self) -> int:
        return len(self._locks)


session_locks = SessionLockRegistry()
