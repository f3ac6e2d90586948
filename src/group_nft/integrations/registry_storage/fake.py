"""Fake in-memory state storage for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from group_nft.integrations.registry_storage.abc import RegistryStorage


class FakeRegistryStorage(RegistryStorage):
    """In-memory fake implementation for testing.

    State is provided via constructor or captured during execution.
    """

    def __init__(self, records: dict[int, dict[str, str]] | None = None) -> None:
        """Create FakeRegistryStorage.

        Args:
            records: Optional initial records (location -> fields)
        """
        self._records: dict[int, dict[str, str]] = {
            location: dict(fields) for location, fields in (records or {}).items()
        }
        self._lock = asyncio.Lock()
        self._write_count = 0

    @property
    def records(self) -> dict[int, dict[str, str]]:
        """Get a copy of the stored records for test assertions."""
        return {location: dict(fields) for location, fields in self._records.items()}

    @property
    def write_count(self) -> int:
        """Number of write_fields() calls made, for test assertions."""
        return self._write_count

    def locked(self) -> AbstractAsyncContextManager[None]:
        return self._hold_lock()

    @asynccontextmanager
    async def _hold_lock(self) -> AsyncIterator[None]:
        async with self._lock:
            yield

    async def read_fields(self, location: int) -> dict[str, str] | None:
        if location not in self._records:
            return None
        return dict(self._records[location])

    async def write_fields(self, location: int, fields: dict[str, str]) -> None:
        self._records[location] = dict(fields)
        self._write_count += 1
