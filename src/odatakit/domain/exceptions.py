"""Domain exceptions."""


class ODataError(Exception):
    """Base exception for odatakit."""

    pass


class ConfigurationError(ODataError):
    """Required options are missing or reference undeclared metadata."""

    pass


class UnknownPropertyError(ODataError):
    """Property name is not declared on the type."""

    def __init__(self, type_name: str, property_name: str) -> None:
        self.type_name = type_name
        self.property_name = property_name
        super().__init__(f"{type_name} has no property '{property_name}'")


class ValidationError(ODataError):
    """Value cannot be held by the property's Edm type."""

    pass


class MetadataError(ODataError):
    """Service metadata could not be fetched or parsed."""

    pass
