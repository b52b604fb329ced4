"""odatakit - metadata-driven OData data-access client."""

__version__ = "0.1.0"
