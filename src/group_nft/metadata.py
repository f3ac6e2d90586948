"""Self-contained token metadata rendering.

The rendered document is embedded in a data URI, so resolving a token's
metadata never requires fetching from external hosting.
"""

import base64
import json
from dataclasses import dataclass

DATA_URI_PREFIX = "data:application/json;base64,"


@dataclass(frozen=True)
class MetadataTemplate:
    """Fixed text used when rendering every identifier's document.

    Fields:
        name_prefix: Name shown before "#<identifier>"
        description: Description shared by all identifiers
        external_url_base: Link prefix; the identifier is appended verbatim
    """

    name_prefix: str = "Story Protocol IP Assets Group"
    description: str = "IPAsset Group"
    external_url_base: str = "https://protocol.storyprotocol.xyz/ipa/"


DEFAULT_TEMPLATE = MetadataTemplate()


def build_document(
    identifier: int, image_reference: str, template: MetadataTemplate
) -> dict[str, str]:
    """Build the metadata document for an identifier.

    Field order is fixed: name, description, external_url, image.
    """
    return {
        "name": f"{template.name_prefix} #{identifier}",
        "description": template.description,
        "external_url": f"{template.external_url_base}{identifier}",
        "image": image_reference,
    }


def render_metadata(
    identifier: int,
    image_reference: str,
    template: MetadataTemplate = DEFAULT_TEMPLATE,
) -> str:
    """Render an identifier's metadata as a base64 JSON data URI.

    Pure function of its arguments: the same inputs always produce the same
    string. Does not check whether the identifier has been issued.

    Args:
        identifier: Identifier to render, issued or not
        image_reference: Shared image reference, embedded verbatim
        template: Fixed document text

    Returns:
        "data:application/json;base64,<payload>"

    Example:
        >>> uri = render_metadata(0, "ipfs://group.png")
        >>> decode_metadata(uri)["name"]
        'Story Protocol IP Assets Group #0'
    """
    document = build_document(identifier, image_reference, template)
    payload = json.dumps(document, separators=(",", ":"), ensure_ascii=False)
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return f"{DATA_URI_PREFIX}{encoded}"


def decode_metadata(uri: str) -> dict[str, str]:
    """Decode a data URI produced by render_metadata().

    Raises:
        ValueError: If uri is not a base64 JSON data URI
    """
    if not uri.startswith(DATA_URI_PREFIX):
        raise ValueError(f"Not a base64 JSON data URI: {uri[:40]!r}")
    payload = base64.b64decode(uri[len(DATA_URI_PREFIX) :], validate=True)
    return json.loads(payload.decode("utf-8"))
