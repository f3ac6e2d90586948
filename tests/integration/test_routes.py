"""Integration tests for FastAPI routes."""

import pytest
from group_nft.context import TEST_MINTER
from group_nft.integrations.ownership.fake import FakeOwnership
from group_nft.interfaces import ERC4906_INTERFACE_ID, GROUP_NFT_INTERFACE_ID
from group_nft.metadata import decode_metadata
from group_nft.models.state import UINT256_MAX
from group_nft.principal import ZERO_ADDRESS
from httpx import AsyncClient

from tests.constants import ADMIN, ALICE, AUTHORITY, IMAGE, STRANGER


async def _initialize(client: AsyncClient) -> None:
    response = await client.post(
        "/api/group-nft/initialize",
        json={"admin_authority": AUTHORITY, "image_reference": IMAGE},
    )
    assert response.status_code == 200


async def _issue(client: AsyncClient, caller: str, receiver: str) -> dict:
    response = await client.post(
        "/api/group-nft/tokens",
        json={"minter_origin": caller, "receiver": receiver},
        headers={"X-Caller": caller},
    )
    return {"status": response.status_code, **response.json()}


class TestInitializeRoute:
    """Tests for POST /api/group-nft/initialize."""

    async def test_initialize(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/group-nft/initialize",
            json={"admin_authority": AUTHORITY, "image_reference": IMAGE},
        )

        assert response.status_code == 200
        assert response.json() == {"initialized": True}

        authority = await async_client.get("/api/group-nft/authority")
        assert authority.json() == {"authority": AUTHORITY}

    async def test_initialize_twice_conflicts(self, async_client: AsyncClient) -> None:
        await _initialize(async_client)

        response = await async_client.post(
            "/api/group-nft/initialize",
            json={"admin_authority": AUTHORITY, "image_reference": IMAGE},
        )

        assert response.status_code == 409
        assert response.json()["error"] == "AlreadyInitialized"

    async def test_null_authority_is_rejected(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/group-nft/initialize",
            json={"admin_authority": ZERO_ADDRESS, "image_reference": IMAGE},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "InvalidAdministrativeBinding"

        total = await async_client.get("/api/group-nft/tokens/total")
        assert total.status_code == 409
        assert total.json()["error"] == "NotInitialized"


class TestTokenRoutes:
    """Tests for issuance and metadata routes."""

    @pytest.fixture(autouse=True)
    async def initialized(self, async_client: AsyncClient) -> None:
        """Initialize the registry before each test."""
        await _initialize(async_client)

    async def test_issue_and_render(self, async_client: AsyncClient) -> None:
        issued = await _issue(async_client, TEST_MINTER, ALICE)

        assert issued == {"status": 200, "identifier": 0, "receiver": ALICE}

        total = await async_client.get("/api/group-nft/tokens/total")
        assert total.json() == {"total_issued": 1}

        rendered = await async_client.get("/api/group-nft/tokens/0/metadata")
        assert rendered.status_code == 200
        assert decode_metadata(rendered.json()["token_uri"])["image"] == IMAGE

        owner = await async_client.get("/api/group-nft/tokens/0/owner")
        assert owner.json() == {"identifier": 0, "owner": ALICE}

    async def test_issue_by_non_minter_is_forbidden(self, async_client: AsyncClient) -> None:
        issued = await _issue(async_client, STRANGER, ALICE)

        assert issued["status"] == 403
        assert issued["error"] == "NotAuthorizedMinter"

        total = await async_client.get("/api/group-nft/tokens/total")
        assert total.json() == {"total_issued": 0}

    async def test_issue_to_null_receiver_is_rejected(
        self, async_client: AsyncClient, fake_ownership: FakeOwnership
    ) -> None:
        issued = await _issue(async_client, TEST_MINTER, ZERO_ADDRESS)

        assert issued["status"] == 422
        assert issued["error"] == "InvalidReceiver"
        assert fake_ownership.owners == {}

    async def test_issue_requires_caller_header(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/group-nft/tokens",
            json={"minter_origin": TEST_MINTER, "receiver": ALICE},
        )

        assert response.status_code == 422

    async def test_owner_of_unissued_identifier(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/group-nft/tokens/5/owner")

        assert response.status_code == 404
        assert response.json()["error"] == "IdentifierNotBound"

    async def test_negative_identifier_is_rejected(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/group-nft/tokens/-1/metadata")

        assert response.status_code == 422

    async def test_identifier_beyond_uint256_is_rejected(self, async_client: AsyncClient) -> None:
        largest = await async_client.get(f"/api/group-nft/tokens/{UINT256_MAX}/metadata")
        beyond = await async_client.get(f"/api/group-nft/tokens/{UINT256_MAX + 1}/metadata")

        assert largest.status_code == 200
        assert beyond.status_code == 422


class TestAdministrativeRoutes:
    """Tests for image and upgrade routes."""

    @pytest.fixture(autouse=True)
    async def initialized(self, async_client: AsyncClient) -> None:
        """Initialize the registry and issue one identifier before each test."""
        await _initialize(async_client)
        await _issue(async_client, TEST_MINTER, ALICE)

    async def test_admin_sets_image(self, async_client: AsyncClient) -> None:
        response = await async_client.put(
            "/api/group-nft/image",
            json={"image_reference": "ipfs://v2"},
            headers={"X-Caller": ADMIN},
        )

        assert response.status_code == 200
        rendered = await async_client.get("/api/group-nft/tokens/0/metadata")
        assert decode_metadata(rendered.json()["token_uri"])["image"] == "ipfs://v2"

    async def test_stranger_cannot_set_image(self, async_client: AsyncClient) -> None:
        response = await async_client.put(
            "/api/group-nft/image",
            json={"image_reference": "ipfs://evil"},
            headers={"X-Caller": STRANGER},
        )

        assert response.status_code == 403
        assert response.json()["error"] == "NotAuthorizedAdmin"
        rendered = await async_client.get("/api/group-nft/tokens/0/metadata")
        assert decode_metadata(rendered.json()["token_uri"])["image"] == IMAGE

    async def test_upgrade(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/group-nft/upgrade",
            json={"implementation": "group-nft/2"},
            headers={"X-Caller": ADMIN},
        )

        assert response.status_code == 200
        current = await async_client.get("/api/group-nft/implementation")
        assert current.json() == {"implementation": "group-nft/2"}
        total = await async_client.get("/api/group-nft/tokens/total")
        assert total.json() == {"total_issued": 1}


class TestQueryRoutes:
    """Tests for read-only routes that need no initialization."""

    async def test_collection(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/group-nft")

        assert response.status_code == 200
        assert response.json() == {
            "name": "Programmable IP Asset Group IP NFT",
            "symbol": "GroupNFT",
            "minter": TEST_MINTER,
        }

    @pytest.mark.parametrize(
        ("interface_id", "supported"),
        [
            (GROUP_NFT_INTERFACE_ID, True),
            (ERC4906_INTERFACE_ID, True),
            ("0xffffffff", False),
        ],
    )
    async def test_supports_interface(
        self, async_client: AsyncClient, interface_id: str, supported: bool
    ) -> None:
        response = await async_client.get(f"/api/group-nft/interfaces/{interface_id}")

        assert response.status_code == 200
        assert response.json() == {"interface_id": interface_id, "supported": supported}
