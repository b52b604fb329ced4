"""Metadata adapters: $metadata retrieval and parsing."""

from odatakit.infrastructure.metadata.edmx_catalog import EdmxCatalog
from odatakit.infrastructure.metadata.http_source import HttpMetadataSource

__all__ = ["EdmxCatalog", "HttpMetadataSource"]
