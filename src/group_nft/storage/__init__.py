"""Upgrade-stable, namespaced state storage."""

from group_nft.storage.location import (
    ACCESS_NAMESPACE,
    IMPLEMENTATION_NAMESPACE,
    INITIALIZABLE_NAMESPACE,
    REGISTRY_NAMESPACE,
    format_location,
    storage_location,
)
from group_nft.storage.slot import NamespacedSlot

__all__ = [
    "ACCESS_NAMESPACE",
    "IMPLEMENTATION_NAMESPACE",
    "INITIALIZABLE_NAMESPACE",
    "REGISTRY_NAMESPACE",
    "NamespacedSlot",
    "format_location",
    "storage_location",
]
