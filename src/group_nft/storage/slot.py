"""Typed access to the record stored under one namespace."""

import logging
from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from group_nft.integrations.registry_storage.abc import RegistryStorage
from group_nft.storage.location import format_location, storage_location

logger = logging.getLogger(__name__)


class StateRecord(Protocol):
    def to_fields(self) -> dict[str, str]: ...


RecordT = TypeVar("RecordT", bound=StateRecord)


class NamespacedSlot(Generic[RecordT]):
    """Reads and writes one record at its namespace's fixed location.

    The location is computed once, when the slot is created, and never
    changes for the lifetime of the slot.
    """

    def __init__(
        self,
        storage: RegistryStorage,
        namespace: str,
        decode: Callable[[dict[str, str]], RecordT],
    ) -> None:
        self._storage = storage
        self._decode = decode
        self.namespace = namespace
        self.location = storage_location(namespace)
        logger.debug("Namespace %s at %s", namespace, format_location(self.location))

    async def read(self) -> RecordT | None:
        """Load the record, or None if it was never written."""
        fields = await self._storage.read_fields(self.location)
        if fields is None:
            return None
        return self._decode(fields)

    async def write(self, record: RecordT) -> None:
        await self._storage.write_fields(self.location, record.to_fields())
