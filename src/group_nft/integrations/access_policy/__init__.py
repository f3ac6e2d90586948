"""Administrative access policy integration."""

from group_nft.integrations.access_policy.abc import AccessPolicy
from group_nft.integrations.access_policy.fake import FakeAccessPolicy

__all__ = ["AccessPolicy", "FakeAccessPolicy"]
