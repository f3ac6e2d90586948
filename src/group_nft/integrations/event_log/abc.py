"""Abstract base class for event publication."""

from abc import ABC, abstractmethod

from group_nft.models.events import RegistryEvent


class EventLog(ABC):
    """Abstract interface for publishing registry events to observers."""

    @abstractmethod
    async def emit(self, event: RegistryEvent) -> None:
        """Publish one event.

        Args:
            event: Event describing a committed state change
        """
        ...
