"""Issuance and metadata service for registry group identifiers."""

__version__ = "0.1.0"
