"""Registry context for dependency injection."""

from dataclasses import dataclass

from group_nft.integrations.access_policy.abc import AccessPolicy
from group_nft.integrations.access_policy.fake import FakeAccessPolicy
from group_nft.integrations.event_log.abc import EventLog
from group_nft.integrations.event_log.fake import FakeEventLog
from group_nft.integrations.ownership.abc import Ownership
from group_nft.integrations.ownership.fake import FakeOwnership
from group_nft.integrations.registry_storage.abc import RegistryStorage
from group_nft.integrations.registry_storage.fake import FakeRegistryStorage
from group_nft.metadata import DEFAULT_TEMPLATE, MetadataTemplate

TEST_MINTER = "0x00000000000000000000000000000000000000aa"


@dataclass(frozen=True)
class RegistryContext:
    """Registry context containing all dependencies.

    This is a frozen dataclass that holds all injected dependencies for the
    registry. The minter is part of the context so it is fixed for the
    lifetime of the service built from it. Use for_test() for testing
    scenarios.
    """

    storage: RegistryStorage
    ownership: Ownership
    access_policy: AccessPolicy
    event_log: EventLog
    minter: str
    metadata_template: MetadataTemplate = DEFAULT_TEMPLATE
    collection_name: str = "Programmable IP Asset Group IP NFT"
    collection_symbol: str = "GroupNFT"

    @classmethod
    def for_test(
        cls,
        *,
        minter: str = TEST_MINTER,
        grants: dict[str, set[str]] | None = None,
        owners: dict[int, str] | None = None,
        records: dict[int, dict[str, str]] | None = None,
        metadata_template: MetadataTemplate = DEFAULT_TEMPLATE,
    ) -> "RegistryContext":
        """Create a test context with fake implementations.

        Args:
            minter: Designated minter principal
            grants: Pre-configured grants for FakeAccessPolicy (caller -> operations)
            owners: Pre-populated ownership records for FakeOwnership
            records: Pre-populated storage records for FakeRegistryStorage
            metadata_template: Template used for rendering

        Returns:
            RegistryContext with fake implementations
        """
        return cls(
            storage=FakeRegistryStorage(records=records),
            ownership=FakeOwnership(owners=owners),
            access_policy=FakeAccessPolicy(grants=grants),
            event_log=FakeEventLog(),
            minter=minter,
            metadata_template=metadata_template,
        )
