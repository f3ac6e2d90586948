"""Fake in-memory event log for testing."""

from group_nft.integrations.event_log.abc import EventLog
from group_nft.models.events import EventType, RegistryEvent


class FakeEventLog(EventLog):
    """In-memory fake that captures emitted events."""

    def __init__(self) -> None:
        self._events: list[RegistryEvent] = []

    @property
    def events(self) -> list[RegistryEvent]:
        """Get emitted events in order, for test assertions."""
        return self._events.copy()

    def events_of(self, event_type: EventType) -> list[RegistryEvent]:
        return [event for event in self._events if event.event_type == event_type]

    async def emit(self, event: RegistryEvent) -> None:
        self._events.append(event)
