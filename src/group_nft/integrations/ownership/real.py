"""Redis-backed ownership component implementation."""

from typing import Any

from group_nft.errors import IdentifierAlreadyBound, IdentifierNotBound, InvalidReceiver
from group_nft.integrations.ownership.abc import Ownership
from group_nft.principal import is_null_principal, normalize_principal


class RealOwnership(Ownership):
    """Production Redis-backed ownership records.

    Redis Schema:
    - group_nft:owner:{identifier} - String holding the owner principal
    - group_nft:balances - Hash mapping normalized owner -> identifier count
    """

    def __init__(self, redis_client: Any) -> None:
        """Create RealOwnership.

        Args:
            redis_client: Connected redis.asyncio client
        """
        self._redis = redis_client

    def _owner_key(self, identifier: int) -> str:
        """Get Redis key for an identifier's owner."""
        return f"group_nft:owner:{identifier}"

    async def bind(self, identifier: int, owner: str) -> None:
        if is_null_principal(owner):
            raise InvalidReceiver(owner)

        # SET NX makes a duplicate bind fail without overwriting the first owner
        created = await self._redis.set(self._owner_key(identifier), owner, nx=True)
        if not created:
            raise IdentifierAlreadyBound(identifier)

        await self._redis.hincrby("group_nft:balances", normalize_principal(owner), 1)

    async def unbind(self, identifier: int) -> None:
        key = self._owner_key(identifier)
        owner = await self._redis.getdel(key)
        if owner is None:
            return
        await self._redis.hincrby("group_nft:balances", normalize_principal(owner.decode()), -1)

    async def owner_of(self, identifier: int) -> str:
        owner = await self._redis.get(self._owner_key(identifier))
        if owner is None:
            raise IdentifierNotBound(identifier)
        return owner.decode()

    async def balance_of(self, owner: str) -> int:
        count = await self._redis.hget("group_nft:balances", normalize_principal(owner))
        if count is None:
            return 0
        return int(count)
