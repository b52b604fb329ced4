"""Payload serialization adapters."""

from odatakit.infrastructure.serialization.xml_builder import (
    DATA_NAMESPACE,
    METADATA_NAMESPACE,
    XmlDocumentBuilder,
)

__all__ = ["DATA_NAMESPACE", "METADATA_NAMESPACE", "XmlDocumentBuilder"]
