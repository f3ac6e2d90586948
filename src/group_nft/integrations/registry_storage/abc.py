"""Abstract base class for namespaced state storage."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class RegistryStorage(ABC):
    """Abstract interface for location-addressed field storage.

    Each location holds a flat map of string fields. Locations are 256-bit
    integers derived from namespace strings, so unrelated components never
    share a record.

    Implementations include:
    - FakeRegistryStorage: In-memory for testing
    - RealRegistryStorage: Redis-backed for production
    """

    @abstractmethod
    def locked(self) -> AbstractAsyncContextManager[None]:
        """Hold the exclusive write lock for the duration of one operation.

        Mutating operations run entirely inside this context so that no two
        of them interleave.
        """
        ...

    @abstractmethod
    async def read_fields(self, location: int) -> dict[str, str] | None:
        """Read the field map stored at a location.

        Args:
            location: Storage location of the record

        Returns:
            The stored fields, or None if nothing was ever written there
        """
        ...

    @abstractmethod
    async def write_fields(self, location: int, fields: dict[str, str]) -> None:
        """Replace the field map stored at a location.

        Args:
            location: Storage location of the record
            fields: Complete set of fields for the record
        """
        ...
