"""Persistent state records, one per storage namespace.

Each record converts to and from a flat string field map so any backend that
stores hashes of strings (Redis, an in-memory dict) can hold it.
"""

from dataclasses import dataclass

UINT256_MAX = 2**256 - 1


@dataclass
class RegistryState:
    """Mutable registry state shared by every issued identifier.

    Fields:
        image_reference: Image applied to the metadata of all identifiers
        next_identifier: Next identifier to issue; equals the issued count
    """

    image_reference: str
    next_identifier: int = 0

    def to_fields(self) -> dict[str, str]:
        return {
            "image_reference": self.image_reference,
            "next_identifier": str(self.next_identifier),
        }

    @staticmethod
    def from_fields(fields: dict[str, str]) -> "RegistryState":
        return RegistryState(
            image_reference=fields["image_reference"],
            next_identifier=int(fields["next_identifier"]),
        )


@dataclass(frozen=True)
class InitializationState:
    """Initialization bookkeeping; version 0 means never initialized."""

    initialized_version: int

    def to_fields(self) -> dict[str, str]:
        return {"initialized_version": str(self.initialized_version)}

    @staticmethod
    def from_fields(fields: dict[str, str]) -> "InitializationState":
        return InitializationState(initialized_version=int(fields["initialized_version"]))


@dataclass(frozen=True)
class AccessState:
    """Administrative authority bound at initialization."""

    authority: str

    def to_fields(self) -> dict[str, str]:
        return {"authority": self.authority}

    @staticmethod
    def from_fields(fields: dict[str, str]) -> "AccessState":
        return AccessState(authority=fields["authority"])


@dataclass(frozen=True)
class ImplementationState:
    """Logic version currently operating on the stored state."""

    implementation: str

    def to_fields(self) -> dict[str, str]:
        return {"implementation": self.implementation}

    @staticmethod
    def from_fields(fields: dict[str, str]) -> "ImplementationState":
        return ImplementationState(implementation=fields["implementation"])
