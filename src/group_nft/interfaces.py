"""ERC-165 style capability identifiers.

An interface id is the XOR of the 4-byte selectors of the interface's
operations, rendered as 0x-prefixed hex.
"""

import hashlib
from functools import reduce

GROUP_NFT_OPERATIONS = (
    "initialize(address,string)",
    "set_image_reference(string)",
    "issue(address,address)",
    "total_issued()",
    "render_metadata(uint256)",
)

ERC165_INTERFACE_ID = "0x01ffc9a7"
ERC721_INTERFACE_ID = "0x80ac58cd"
ERC721_METADATA_INTERFACE_ID = "0x5b5e139f"
ERC4906_INTERFACE_ID = "0x49064906"

# Reserved by ERC-165; never supported
INVALID_INTERFACE_ID = "0xffffffff"


def selector(signature: str) -> int:
    """First four bytes of the SHA3-256 digest of an operation signature."""
    return int.from_bytes(hashlib.sha3_256(signature.encode("ascii")).digest()[:4], "big")


def interface_id(signatures: tuple[str, ...]) -> str:
    combined = reduce(lambda acc, sig: acc ^ selector(sig), signatures, 0)
    return f"0x{combined:08x}"


GROUP_NFT_INTERFACE_ID = interface_id(GROUP_NFT_OPERATIONS)

SUPPORTED_INTERFACES: dict[str, str] = {
    GROUP_NFT_INTERFACE_ID: "IGroupNFT",
    ERC165_INTERFACE_ID: "IERC165",
    ERC721_INTERFACE_ID: "IERC721",
    ERC721_METADATA_INTERFACE_ID: "IERC721Metadata",
    ERC4906_INTERFACE_ID: "IERC4906",
}


def supports_interface(candidate: str) -> bool:
    """Check whether the registry declares support for an interface id.

    Args:
        candidate: 0x-prefixed 4-byte hex id, any letter case
    """
    normalized = candidate.strip().lower()
    if normalized == INVALID_INTERFACE_ID:
        return False
    return normalized in SUPPORTED_INTERFACES
