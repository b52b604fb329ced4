"""Application ports - interfaces for external adapters."""

from odatakit.application.ports.document_builder import DocumentBuilder
from odatakit.application.ports.metadata_source import MetadataSource
from odatakit.application.ports.property_holder import PropertyHolder
from odatakit.application.ports.service_catalog import ServiceCatalog

__all__ = [
    "DocumentBuilder",
    "MetadataSource",
    "PropertyHolder",
    "ServiceCatalog",
]
