"""Data models for the group NFT registry."""

from group_nft.models.events import EventType, RegistryEvent
from group_nft.models.state import (
    UINT256_MAX,
    AccessState,
    ImplementationState,
    InitializationState,
    RegistryState,
)

__all__ = [
    "UINT256_MAX",
    "AccessState",
    "EventType",
    "ImplementationState",
    "InitializationState",
    "RegistryEvent",
    "RegistryState",
]
