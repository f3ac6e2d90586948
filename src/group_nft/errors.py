"""Typed failures raised by the group NFT registry.

Every failure aborts the operation that raised it before any state is written,
so callers may retry a rejected call without cleanup.
"""


class GroupNFTError(Exception):
    """Base class for all registry failures."""


class NotAuthorizedMinter(GroupNFTError):
    """Raised when a caller other than the designated minter tries to issue."""

    def __init__(self, caller: str) -> None:
        self.caller = caller
        super().__init__(f"Caller {caller!r} is not the designated minter")


class NotAuthorizedAdmin(GroupNFTError):
    """Raised when the access policy rejects a privileged call."""

    def __init__(self, caller: str, operation: str) -> None:
        self.caller = caller
        self.operation = operation
        super().__init__(f"Caller {caller!r} is not authorized for {operation!r}")


class InvalidReceiver(GroupNFTError):
    """Raised when an identifier would be bound to a null owner."""

    def __init__(self, receiver: str) -> None:
        self.receiver = receiver
        super().__init__(f"Invalid receiver {receiver!r}")


class InvalidAdministrativeBinding(GroupNFTError):
    """Raised when initialization is given a null administrative authority."""

    def __init__(self) -> None:
        super().__init__("Administrative authority must not be null")


class InvalidMinterBinding(GroupNFTError):
    """Raised when the service is constructed with a null minter."""

    def __init__(self) -> None:
        super().__init__("Minter must not be null")


class CounterOverflow(GroupNFTError):
    """Raised when the issuance counter would leave the uint256 range."""

    def __init__(self, next_identifier: int) -> None:
        self.next_identifier = next_identifier
        super().__init__(f"Issuance counter overflow at {next_identifier}")


class InvalidImplementation(GroupNFTError):
    """Raised when an upgrade names an empty implementation."""

    def __init__(self, implementation: str) -> None:
        self.implementation = implementation
        super().__init__(f"Invalid implementation {implementation!r}")


class NotInitialized(GroupNFTError):
    """Raised when a stateful operation runs before initialize()."""

    def __init__(self) -> None:
        super().__init__("Registry is not initialized")


class AlreadyInitialized(GroupNFTError):
    """Raised when initialize() is called a second time."""

    def __init__(self) -> None:
        super().__init__("Registry is already initialized")


class IdentifierAlreadyBound(GroupNFTError):
    """Raised by the ownership component when an identifier already has an owner."""

    def __init__(self, identifier: int) -> None:
        self.identifier = identifier
        super().__init__(f"Identifier {identifier} is already bound")


class IdentifierNotBound(GroupNFTError):
    """Raised by the ownership component when an identifier has no owner."""

    def __init__(self, identifier: int) -> None:
        self.identifier = identifier
        super().__init__(f"Identifier {identifier} is not bound")
