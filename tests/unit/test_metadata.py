"""Tests for metadata rendering."""

import base64
import json

import pytest
from group_nft.metadata import (
    DATA_URI_PREFIX,
    MetadataTemplate,
    decode_metadata,
    render_metadata,
)


def test_render_produces_base64_json_data_uri() -> None:
    """Rendered metadata is an inline base64 JSON document."""
    uri = render_metadata(3, "ipfs://image")

    assert uri.startswith(DATA_URI_PREFIX)
    payload = base64.b64decode(uri[len(DATA_URI_PREFIX) :])
    assert json.loads(payload) == {
        "name": "Story Protocol IP Assets Group #3",
        "description": "IPAsset Group",
        "external_url": "https://protocol.storyprotocol.xyz/ipa/3",
        "image": "ipfs://image",
    }


def test_document_field_order_is_fixed() -> None:
    """Fields appear as name, description, external_url, image."""
    document = decode_metadata(render_metadata(0, "ipfs://image"))

    assert list(document) == ["name", "description", "external_url", "image"]


def test_render_is_idempotent() -> None:
    """Same inputs give byte-identical output."""
    assert render_metadata(42, "https://img/a.png") == render_metadata(42, "https://img/a.png")


def test_image_reference_is_embedded_verbatim() -> None:
    """The image reference is not validated or rewritten."""
    odd = 'not a url "with quotes" and ünïcode'

    assert decode_metadata(render_metadata(1, odd))["image"] == odd


def test_render_does_not_require_issued_identifier() -> None:
    """Any identifier renders, issued or not."""
    huge = 2**256 - 1

    document = decode_metadata(render_metadata(huge, "ipfs://image"))

    assert document["name"].endswith(f"#{huge}")
    assert document["external_url"].endswith(str(huge))


def test_custom_template() -> None:
    """Template text replaces the defaults."""
    template = MetadataTemplate(
        name_prefix="Group",
        description="A group of assets",
        external_url_base="https://example.test/groups/",
    )

    document = decode_metadata(render_metadata(9, "ipfs://image", template))

    assert document == {
        "name": "Group #9",
        "description": "A group of assets",
        "external_url": "https://example.test/groups/9",
        "image": "ipfs://image",
    }


def test_decode_rejects_other_uris() -> None:
    """decode_metadata only accepts base64 JSON data URIs."""
    with pytest.raises(ValueError, match="Not a base64 JSON data URI"):
        decode_metadata("https://example.test/metadata/1.json")
