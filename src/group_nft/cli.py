"""Command line interface for the group NFT registry."""

import logging

import click
import uvicorn

from group_nft.config import RegistryConfig
from group_nft.metadata import DEFAULT_TEMPLATE, MetadataTemplate, render_metadata
from group_nft.storage.location import REGISTRY_NAMESPACE, format_location, storage_location

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

logger = logging.getLogger(__name__)


@click.group(name="group-nft", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="group-nft")
def cli() -> None:
    """Issue and describe registry group identifiers."""
    pass


@click.command(name="serve")
def serve_command() -> None:
    """Run the HTTP server configured from GROUP_NFT_* variables."""
    try:
        config = RegistryConfig.from_env()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving on %s:%d with minter %s", config.host, config.port, config.minter)

    uvicorn.run(
        "group_nft.main:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        reload=config.debug,
    )


@click.command(name="render")
@click.argument("identifier", type=click.IntRange(min=0))
@click.option("--image", "image_reference", required=True, help="Image reference to embed")
@click.option("--name-prefix", default=DEFAULT_TEMPLATE.name_prefix, show_default=True)
@click.option("--description", default=DEFAULT_TEMPLATE.description, show_default=True)
@click.option(
    "--external-url-base", default=DEFAULT_TEMPLATE.external_url_base, show_default=True
)
def render_command(
    identifier: int,
    image_reference: str,
    name_prefix: str,
    description: str,
    external_url_base: str,
) -> None:
    """Print the metadata data URI for IDENTIFIER without contacting storage."""
    template = MetadataTemplate(
        name_prefix=name_prefix,
        description=description,
        external_url_base=external_url_base,
    )
    click.echo(render_metadata(identifier, image_reference, template))


@click.command(name="location")
@click.argument("namespace", default=REGISTRY_NAMESPACE)
def location_command(namespace: str) -> None:
    """Print the storage location of NAMESPACE."""
    click.echo(format_location(storage_location(namespace)))


# Register all commands
cli.add_command(serve_command)
cli.add_command(render_command)
cli.add_command(location_command)


def main() -> None:
    """CLI entry point used by the `group-nft` console script."""
    cli()
