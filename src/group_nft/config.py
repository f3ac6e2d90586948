"""Registry configuration from environment variables."""

import os
from dataclasses import dataclass

from group_nft.metadata import DEFAULT_TEMPLATE, MetadataTemplate


@dataclass(frozen=True)
class RegistryConfig:
    """Registry configuration loaded from environment variables."""

    host: str
    port: int
    redis_url: str
    minter: str
    admins: frozenset[str]
    collection_name: str
    collection_symbol: str
    metadata_template: MetadataTemplate
    log_level: str
    debug: bool

    @staticmethod
    def from_env() -> "RegistryConfig":
        """Load configuration from environment variables.

        Raises:
            ValueError: If GROUP_NFT_MINTER is not set
        """
        minter = os.environ.get("GROUP_NFT_MINTER", "").strip()
        if not minter:
            raise ValueError("GROUP_NFT_MINTER must name the designated minter")

        admins = os.environ.get("GROUP_NFT_ADMINS", "")
        return RegistryConfig(
            host=os.environ.get("GROUP_NFT_HOST", "0.0.0.0"),
            port=int(os.environ.get("GROUP_NFT_PORT", "8000")),
            redis_url=os.environ.get("GROUP_NFT_REDIS_URL", "redis://localhost:6379"),
            minter=minter,
            admins=frozenset(admin.strip() for admin in admins.split(",") if admin.strip()),
            collection_name=os.environ.get(
                "GROUP_NFT_COLLECTION_NAME", "Programmable IP Asset Group IP NFT"
            ),
            collection_symbol=os.environ.get("GROUP_NFT_COLLECTION_SYMBOL", "GroupNFT"),
            metadata_template=MetadataTemplate(
                name_prefix=os.environ.get("GROUP_NFT_NAME_PREFIX", DEFAULT_TEMPLATE.name_prefix),
                description=os.environ.get("GROUP_NFT_DESCRIPTION", DEFAULT_TEMPLATE.description),
                external_url_base=os.environ.get(
                    "GROUP_NFT_EXTERNAL_URL_BASE", DEFAULT_TEMPLATE.external_url_base
                ),
            ),
            log_level=os.environ.get("GROUP_NFT_LOG_LEVEL", "INFO").upper(),
            debug=os.environ.get("GROUP_NFT_DEBUG", "false").lower() == "true",
        )
