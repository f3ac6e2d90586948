"""Namespaced state storage integration."""

from group_nft.integrations.registry_storage.abc import RegistryStorage
from group_nft.integrations.registry_storage.fake import FakeRegistryStorage

__all__ = ["RegistryStorage", "FakeRegistryStorage"]
