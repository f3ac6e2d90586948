"""Identifier ownership integration."""

from group_nft.integrations.ownership.abc import Ownership
from group_nft.integrations.ownership.fake import FakeOwnership

__all__ = ["Ownership", "FakeOwnership"]
