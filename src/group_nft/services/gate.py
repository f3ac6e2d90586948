"""Authorization checks guarding mutating operations.

Issuance and administration are guarded separately. The minter check is a
plain identity comparison against the principal fixed at construction. The
administrative check asks the policy engine, so its rules can change without
touching the registry.
"""

import logging

from group_nft.errors import InvalidMinterBinding, NotAuthorizedAdmin, NotAuthorizedMinter
from group_nft.integrations.access_policy.abc import AccessPolicy
from group_nft.principal import is_null_principal, same_principal

logger = logging.getLogger(__name__)


class AuthorizationGate:
    """Minter and administrative checks."""

    def __init__(self, minter: str, access_policy: AccessPolicy) -> None:
        """Create AuthorizationGate.

        Args:
            minter: The only principal allowed to issue identifiers
            access_policy: Policy engine consulted for administrative calls

        Raises:
            InvalidMinterBinding: If minter is a null principal
        """
        if is_null_principal(minter):
            raise InvalidMinterBinding()
        self._minter = minter
        self._access_policy = access_policy

    @property
    def minter(self) -> str:
        return self._minter

    def ensure_minter(self, caller: str) -> None:
        """Raise NotAuthorizedMinter unless caller is the designated minter."""
        if not same_principal(caller, self._minter):
            logger.warning("Rejected issuance from %s", caller)
            raise NotAuthorizedMinter(caller)

    async def ensure_admin(self, authority: str, caller: str, operation: str) -> None:
        """Raise NotAuthorizedAdmin unless the policy engine allows the call.

        Args:
            authority: Administrative authority bound at initialization
            caller: Principal invoking the operation
            operation: Name of the privileged operation
        """
        allowed = await self._access_policy.is_authorized(authority, caller, operation)
        logger.debug("Policy decision for %s on %s: %s", caller, operation, allowed)
        if not allowed:
            logger.warning("Rejected %s from %s", operation, caller)
            raise NotAuthorizedAdmin(caller, operation)
