"""Content-derived storage locations.

A namespace string maps to a fixed 256-bit location:

    H(uint256(H(namespace)) - 1) & ~0xff

H is SHA3-256 read as a big-endian integer. The cleared low byte marks the
location as the root of a storage region. The location depends only on the
namespace string, never on the code reading the record.
"""

import hashlib

from group_nft.models.state import UINT256_MAX

WORD_SIZE = 32

REGISTRY_NAMESPACE = "group-nft.GroupNFT"
INITIALIZABLE_NAMESPACE = "group-nft.Initializable"
ACCESS_NAMESPACE = "group-nft.AccessManaged"
IMPLEMENTATION_NAMESPACE = "group-nft.Implementation"


def _hash_word(data: bytes) -> int:
    return int.from_bytes(hashlib.sha3_256(data).digest(), "big")


def storage_location(namespace: str) -> int:
    """Compute the root location of a namespace's record.

    Args:
        namespace: Domain string identifying the record, e.g. "group-nft.GroupNFT"

    Returns:
        256-bit location with its low byte cleared
    """
    inner = (_hash_word(namespace.encode("utf-8")) - 1) % (UINT256_MAX + 1)
    outer = _hash_word(inner.to_bytes(WORD_SIZE, "big"))
    return outer & (UINT256_MAX ^ 0xFF)


def format_location(location: int) -> str:
    """Render a location as a 0x-prefixed 32-byte hex word."""
    return f"0x{location:064x}"
