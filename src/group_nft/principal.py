"""Caller identities.

Principals are plain strings, usually 20-byte hex addresses. Comparison ignores
surrounding whitespace and hex letter case.
"""

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def normalize_principal(principal: str) -> str:
    """Return the canonical form used for identity comparison."""
    return principal.strip().lower()


def is_null_principal(principal: str | None) -> bool:
    """Check whether a principal is empty or the zero address."""
    if principal is None:
        return True
    normalized = normalize_principal(principal)
    return normalized == "" or normalized == ZERO_ADDRESS


def same_principal(left: str, right: str) -> bool:
    return normalize_principal(left) == normalize_principal(right)
