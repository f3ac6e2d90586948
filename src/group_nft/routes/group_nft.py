"""HTTP route handlers for the group NFT registry."""

from typing import Annotated

from fastapi import APIRouter, Header, Path, Request
from pydantic import BaseModel

from group_nft.models.state import UINT256_MAX
from group_nft.services.group_nft_service import GroupNFTService

router = APIRouter(prefix="/api/group-nft", tags=["group-nft"])

CallerHeader = Annotated[str, Header(alias="X-Caller")]
Identifier = Annotated[int, Path(ge=0, le=UINT256_MAX)]


class CollectionResponse(BaseModel):
    """Response body for collection identity."""

    name: str
    symbol: str
    minter: str


class InitializeRequest(BaseModel):
    """Request body for initialization."""

    admin_authority: str
    image_reference: str


class InitializeResponse(BaseModel):
    """Response body for initialization."""

    initialized: bool


class ImageReferenceRequest(BaseModel):
    """Request body for replacing the shared image reference."""

    image_reference: str


class ImageReferenceResponse(BaseModel):
    """Response body after replacing the shared image reference."""

    image_reference: str


class IssueRequest(BaseModel):
    """Request body for issuing an identifier."""

    minter_origin: str
    receiver: str


class IssueResponse(BaseModel):
    """Response body for an issued identifier."""

    identifier: int
    receiver: str


class TotalIssuedResponse(BaseModel):
    """Response body for the issued count."""

    total_issued: int


class MetadataResponse(BaseModel):
    """Response body for rendered metadata."""

    identifier: int
    token_uri: str


class OwnerResponse(BaseModel):
    """Response body for identifier ownership."""

    identifier: int
    owner: str


class InterfaceResponse(BaseModel):
    """Response body for capability queries."""

    interface_id: str
    supported: bool


class AuthorityResponse(BaseModel):
    """Response body for the administrative authority."""

    authority: str


class UpgradeRequest(BaseModel):
    """Request body for recording a new logic version."""

    implementation: str


class ImplementationResponse(BaseModel):
    """Response body for the active logic version."""

    implementation: str


def get_group_nft_service(request: Request) -> GroupNFTService:
    """Get GroupNFTService from request state."""
    return request.app.state.group_nft_service


@router.get("", response_model=CollectionResponse)
async def get_collection(request: Request) -> CollectionResponse:
    """Describe the collection."""
    service = get_group_nft_service(request)
    return CollectionResponse(name=service.name, symbol=service.symbol, minter=service.minter)


@router.post("/initialize", response_model=InitializeResponse)
async def initialize(request: Request, body: InitializeRequest) -> InitializeResponse:
    """Initialize the registry once."""
    service = get_group_nft_service(request)
    await service.initialize(body.admin_authority, body.image_reference)
    return InitializeResponse(initialized=True)


@router.put("/image", response_model=ImageReferenceResponse)
async def set_image_reference(
    request: Request, body: ImageReferenceRequest, caller: CallerHeader
) -> ImageReferenceResponse:
    """Replace the image shared by every identifier."""
    service = get_group_nft_service(request)
    await service.set_image_reference(caller, body.image_reference)
    return ImageReferenceResponse(image_reference=body.image_reference)


@router.post("/tokens", response_model=IssueResponse)
async def issue(request: Request, body: IssueRequest, caller: CallerHeader) -> IssueResponse:
    """Issue the next identifier."""
    service = get_group_nft_service(request)
    identifier = await service.issue(caller, body.minter_origin, body.receiver)
    return IssueResponse(identifier=identifier, receiver=body.receiver)


@router.get("/tokens/total", response_model=TotalIssuedResponse)
async def total_issued(request: Request) -> TotalIssuedResponse:
    """Get the number of issued identifiers."""
    service = get_group_nft_service(request)
    return TotalIssuedResponse(total_issued=await service.total_issued())


@router.get("/tokens/{identifier}/metadata", response_model=MetadataResponse)
async def render_metadata(request: Request, identifier: Identifier) -> MetadataResponse:
    """Render an identifier's metadata document."""
    service = get_group_nft_service(request)
    token_uri = await service.render_metadata(identifier)
    return MetadataResponse(identifier=identifier, token_uri=token_uri)


@router.get("/tokens/{identifier}/owner", response_model=OwnerResponse)
async def owner_of(request: Request, identifier: Identifier) -> OwnerResponse:
    """Get an identifier's owner."""
    service = get_group_nft_service(request)
    owner = await service.owner_of(identifier)
    return OwnerResponse(identifier=identifier, owner=owner)


@router.get("/interfaces/{interface_id}", response_model=InterfaceResponse)
async def supports_interface(request: Request, interface_id: str) -> InterfaceResponse:
    """Check whether an interface id is supported."""
    service = get_group_nft_service(request)
    return InterfaceResponse(
        interface_id=interface_id, supported=service.supports_interface(interface_id)
    )


@router.get("/authority", response_model=AuthorityResponse)
async def get_authority(request: Request) -> AuthorityResponse:
    """Get the administrative authority."""
    service = get_group_nft_service(request)
    return AuthorityResponse(authority=await service.authority())


@router.get("/implementation", response_model=ImplementationResponse)
async def get_implementation(request: Request) -> ImplementationResponse:
    """Get the active logic version."""
    service = get_group_nft_service(request)
    return ImplementationResponse(implementation=await service.implementation())


@router.post("/upgrade", response_model=ImplementationResponse)
async def upgrade_to(
    request: Request, body: UpgradeRequest, caller: CallerHeader
) -> ImplementationResponse:
    """Record a new logic version."""
    service = get_group_nft_service(request)
    await service.upgrade_to(caller, body.implementation)
    return ImplementationResponse(implementation=body.implementation)
