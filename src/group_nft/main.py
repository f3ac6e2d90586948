"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import redis.asyncio as redis
from fastapi import FastAPI

from group_nft import __version__
from group_nft.config import RegistryConfig
from group_nft.context import RegistryContext
from group_nft.errors import GroupNFTError
from group_nft.integrations.access_policy.real import AllowListAccessPolicy
from group_nft.integrations.event_log.real import RealEventLog
from group_nft.integrations.ownership.real import RealOwnership
from group_nft.integrations.registry_storage.real import RealRegistryStorage
from group_nft.routes import group_nft_error_handler, router
from group_nft.services.group_nft_service import GroupNFTService


def create_production_context(config: RegistryConfig, redis_client: Any) -> RegistryContext:
    """Wire the Redis-backed integrations into a RegistryContext."""
    return RegistryContext(
        storage=RealRegistryStorage(redis_client),
        ownership=RealOwnership(redis_client),
        access_policy=AllowListAccessPolicy(config.admins),
        event_log=RealEventLog(redis_client),
        minter=config.minter,
        metadata_template=config.metadata_template,
        collection_name=config.collection_name,
        collection_symbol=config.collection_symbol,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown.

    Creates production context with real implementations on startup.
    """
    config = RegistryConfig.from_env()
    redis_client = redis.from_url(config.redis_url)  # type: ignore[no-untyped-call]

    context = create_production_context(config, redis_client)
    app.state.group_nft_service = GroupNFTService(context)

    yield

    # Cleanup on shutdown
    await redis_client.aclose()


def create_app(context: RegistryContext | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        context: Optional RegistryContext for testing. If None, uses lifespan
                 to create production context.

    Returns:
        Configured FastAPI application
    """
    if context is not None:
        # Test mode: use provided context, no lifespan
        app = FastAPI(
            title="Group NFT Registry",
            description="Issuance and metadata service for registry group identifiers",
            version=__version__,
        )
        app.state.group_nft_service = GroupNFTService(context)
    else:
        # Production mode: use lifespan for DI
        app = FastAPI(
            title="Group NFT Registry",
            description="Issuance and metadata service for registry group identifiers",
            version=__version__,
            lifespan=lifespan,
        )

    app.add_exception_handler(GroupNFTError, group_nft_error_handler)  # type: ignore[arg-type]
    app.include_router(router)

    return app
