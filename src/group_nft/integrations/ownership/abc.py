"""Abstract base class for the identifier ownership component."""

from abc import ABC, abstractmethod


class Ownership(ABC):
    """Abstract interface for binding identifiers to owners.

    This covers only what issuance needs from a transferable-ownership
    component. Transfers and approvals belong to the component itself.
    """

    @abstractmethod
    async def bind(self, identifier: int, owner: str) -> None:
        """Create the ownership record for a new identifier.

        Args:
            identifier: Freshly issued identifier
            owner: Principal receiving the identifier

        Raises:
            InvalidReceiver: If owner is a null principal
            IdentifierAlreadyBound: If identifier already has an owner
        """
        ...

    @abstractmethod
    async def unbind(self, identifier: int) -> None:
        """Remove the ownership record created by bind().

        Only used to roll back an issuance whose state write failed. Unbound
        identifiers are ignored.
        """
        ...

    @abstractmethod
    async def owner_of(self, identifier: int) -> str:
        """Get the owner of an identifier.

        Raises:
            IdentifierNotBound: If identifier was never bound
        """
        ...

    @abstractmethod
    async def balance_of(self, owner: str) -> int:
        """Count the identifiers held by an owner."""
        ...
