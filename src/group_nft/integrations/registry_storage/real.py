"""Redis-backed state storage implementation."""

from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

from group_nft.integrations.registry_storage.abc import RegistryStorage


class RealRegistryStorage(RegistryStorage):
    """Production Redis-backed state storage.

    Redis Schema:
    - group_nft:slot:{location} - Hash holding the record at a location,
      location rendered as 64 hex digits
    - group_nft:lock - Lock serializing mutating operations across processes
    """

    def __init__(self, redis_client: Any, lock_timeout: float = 10.0) -> None:
        """Create RealRegistryStorage.

        Args:
            redis_client: Connected redis.asyncio client
            lock_timeout: Seconds after which a lock held by a dead process expires
        """
        self._redis = redis_client
        self._lock_timeout = lock_timeout

    def _slot_key(self, location: int) -> str:
        """Get Redis key for the record at a location."""
        return f"group_nft:slot:{location:064x}"

    def locked(self) -> AbstractAsyncContextManager[None]:
        return self._hold_lock()

    @asynccontextmanager
    async def _hold_lock(self) -> AsyncIterator[None]:
        async with self._redis.lock("group_nft:lock", timeout=self._lock_timeout):
            yield

    async def read_fields(self, location: int) -> dict[str, str] | None:
        data = await self._redis.hgetall(self._slot_key(location))
        if not data:
            return None
        return {key.decode(): value.decode() for key, value in data.items()}

    async def write_fields(self, location: int, fields: dict[str, str]) -> None:
        key = self._slot_key(location)
        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.delete(key)
            pipe.hset(key, mapping=fields)
            await pipe.execute()
