"""Translate registry failures into HTTP responses."""

from fastapi import Request
from fastapi.responses import JSONResponse

from group_nft.errors import (
    AlreadyInitialized,
    CounterOverflow,
    GroupNFTError,
    IdentifierAlreadyBound,
    IdentifierNotBound,
    InvalidAdministrativeBinding,
    InvalidImplementation,
    InvalidReceiver,
    NotAuthorizedAdmin,
    NotAuthorizedMinter,
    NotInitialized,
)

STATUS_BY_ERROR: dict[type[GroupNFTError], int] = {
    NotAuthorizedMinter: 403,
    NotAuthorizedAdmin: 403,
    InvalidReceiver: 422,
    InvalidAdministrativeBinding: 422,
    InvalidImplementation: 422,
    IdentifierNotBound: 404,
    NotInitialized: 409,
    AlreadyInitialized: 409,
    IdentifierAlreadyBound: 409,
    CounterOverflow: 500,
}


def status_for(error: GroupNFTError) -> int:
    for error_type in type(error).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return 400


async def group_nft_error_handler(request: Request, exc: GroupNFTError) -> JSONResponse:
    """Render a GroupNFTError as {"error": <type>, "detail": <message>}."""
    return JSONResponse(
        status_code=status_for(exc),
        content={"error": type(exc).__name__, "detail": str(exc)},
    )
