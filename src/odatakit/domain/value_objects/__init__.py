"""Domain value objects."""

from odatakit.domain.value_objects.edm_type import EdmType
from odatakit.domain.value_objects.property_definition import PropertyDefinition

__all__ = [
    "EdmType",
    "PropertyDefinition",
]
