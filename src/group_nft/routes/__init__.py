"""HTTP surface of the registry."""

from group_nft.routes.errors import group_nft_error_handler
from group_nft.routes.group_nft import router

__all__ = ["group_nft_error_handler", "router"]
