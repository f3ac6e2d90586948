"""Allow-list policy engine configured from the environment."""

from group_nft.integrations.access_policy.abc import AccessPolicy
from group_nft.principal import normalize_principal, same_principal


class AllowListAccessPolicy(AccessPolicy):
    """Grants every administrative operation to the bound authority and fixed admins.

    Stands in for a governance-managed policy engine in single-operator
    deployments.
    """

    def __init__(self, admins: frozenset[str]) -> None:
        """Create AllowListAccessPolicy.

        Args:
            admins: Principals allowed alongside the bound authority
        """
        self._admins = frozenset(normalize_principal(admin) for admin in admins)

    async def is_authorized(self, authority: str, caller: str, operation: str) -> bool:
        if same_principal(caller, authority):
            return True
        return normalize_principal(caller) in self._admins
