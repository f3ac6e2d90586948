"""Registry business logic."""

from group_nft.services.gate import AuthorizationGate
from group_nft.services.group_nft_service import GroupNFTService

__all__ = ["AuthorizationGate", "GroupNFTService"]
