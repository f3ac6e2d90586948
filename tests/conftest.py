"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
from group_nft.context import TEST_MINTER, RegistryContext
from group_nft.integrations.access_policy.fake import FakeAccessPolicy
from group_nft.integrations.event_log.fake import FakeEventLog
from group_nft.integrations.ownership.fake import FakeOwnership
from group_nft.integrations.registry_storage.fake import FakeRegistryStorage
from group_nft.main import create_app
from group_nft.services.group_nft_service import GroupNFTService
from httpx import ASGITransport, AsyncClient

from tests.constants import ADMIN, AUTHORITY, IMAGE


@pytest.fixture
def fake_storage() -> FakeRegistryStorage:
    """Create a fresh FakeRegistryStorage."""
    return FakeRegistryStorage()


@pytest.fixture
def fake_ownership() -> FakeOwnership:
    """Create a fresh FakeOwnership."""
    return FakeOwnership()


@pytest.fixture
def fake_access_policy() -> FakeAccessPolicy:
    """Create a FakeAccessPolicy granting ADMIN every administrative operation."""
    return FakeAccessPolicy(grants={ADMIN: {"set_image_reference", "upgrade_to"}})


@pytest.fixture
def fake_event_log() -> FakeEventLog:
    """Create a fresh FakeEventLog."""
    return FakeEventLog()


@pytest.fixture
def registry_context(
    fake_storage: FakeRegistryStorage,
    fake_ownership: FakeOwnership,
    fake_access_policy: FakeAccessPolicy,
    fake_event_log: FakeEventLog,
) -> RegistryContext:
    """Create a RegistryContext with fake implementations."""
    return RegistryContext(
        storage=fake_storage,
        ownership=fake_ownership,
        access_policy=fake_access_policy,
        event_log=fake_event_log,
        minter=TEST_MINTER,
    )


@pytest.fixture
def group_nft_service(registry_context: RegistryContext) -> GroupNFTService:
    """Create an uninitialized GroupNFTService with fake context."""
    return GroupNFTService(registry_context)


@pytest.fixture
async def initialized_service(group_nft_service: GroupNFTService) -> GroupNFTService:
    """Create a GroupNFTService initialized with AUTHORITY and IMAGE."""
    await group_nft_service.initialize(AUTHORITY, IMAGE)
    return group_nft_service


@pytest.fixture
async def async_client(registry_context: RegistryContext) -> AsyncGenerator[AsyncClient]:
    """Create an async test client over an app wired with fakes."""
    app = create_app(context=registry_context)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
