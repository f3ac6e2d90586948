"""Fake in-memory ownership component for testing."""

from group_nft.errors import IdentifierAlreadyBound, IdentifierNotBound, InvalidReceiver
from group_nft.integrations.ownership.abc import Ownership
from group_nft.principal import is_null_principal, normalize_principal


class FakeOwnership(Ownership):
    """In-memory fake implementation for testing.

    This class has NO public setup methods. All state is provided via
    constructor or captured during execution.
    """

    def __init__(self, owners: dict[int, str] | None = None) -> None:
        """Create FakeOwnership.

        Args:
            owners: Optional initial ownership records (identifier -> owner)
        """
        self._owners: dict[int, str] = dict(owners or {})
        self._bind_calls: list[tuple[int, str]] = []

    @property
    def owners(self) -> dict[int, str]:
        """Get current ownership records for test assertions."""
        return self._owners.copy()

    @property
    def bind_calls(self) -> list[tuple[int, str]]:
        """Get (identifier, owner) pairs passed to bind(), including rejected ones."""
        return self._bind_calls.copy()

    async def bind(self, identifier: int, owner: str) -> None:
        self._bind_calls.append((identifier, owner))
        if is_null_principal(owner):
            raise InvalidReceiver(owner)
        if identifier in self._owners:
            raise IdentifierAlreadyBound(identifier)
        self._owners[identifier] = owner

    async def unbind(self, identifier: int) -> None:
        self._owners.pop(identifier, None)

    async def owner_of(self, identifier: int) -> str:
        if identifier not in self._owners:
            raise IdentifierNotBound(identifier)
        return self._owners[identifier]

    async def balance_of(self, owner: str) -> int:
        target = normalize_principal(owner)
        return sum(1 for held_by in self._owners.values() if normalize_principal(held_by) == target)
