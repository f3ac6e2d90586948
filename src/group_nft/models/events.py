"""Events emitted after committed state changes."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class EventType(str, Enum):
    """Kinds of registry events."""

    INITIALIZED = "initialized"
    GROUP_MINTED = "group_minted"
    BATCH_METADATA_UPDATE = "batch_metadata_update"
    UPGRADED = "upgraded"


@dataclass(frozen=True)
class RegistryEvent:
    """A single registry event.

    Payload values are strings so events serialize to any field-map backend
    without a schema. Identifiers are rendered in decimal.
    """

    event_type: EventType
    payload: dict[str, str]
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_fields(self) -> dict[str, str]:
        return {
            "event_type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            **self.payload,
        }


def initialized(version: int) -> RegistryEvent:
    return RegistryEvent(EventType.INITIALIZED, {"version": str(version)})


def group_minted(minter: str, receiver: str, identifier: int) -> RegistryEvent:
    """Issuance event carrying the originator the minter reported."""
    return RegistryEvent(
        EventType.GROUP_MINTED,
        {"minter": minter, "receiver": receiver, "identifier": str(identifier)},
    )


def batch_metadata_update(from_identifier: int, to_identifier: int) -> RegistryEvent:
    """Metadata of every identifier in [from_identifier, to_identifier) may have changed."""
    return RegistryEvent(
        EventType.BATCH_METADATA_UPDATE,
        {"from_identifier": str(from_identifier), "to_identifier": str(to_identifier)},
    )


def upgraded(implementation: str) -> RegistryEvent:
    return RegistryEvent(EventType.UPGRADED, {"implementation": implementation})
