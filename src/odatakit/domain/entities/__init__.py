"""Domain entities."""

from odatakit.domain.entities.complex_type import ComplexType
from odatakit.domain.entities.property import (
    BooleanProperty,
    ComplexProperty,
    DateTimeProperty,
    DecimalProperty,
    FloatProperty,
    GuidProperty,
    IntegerProperty,
    Property,
    StringProperty,
    property_class_for,
)

__all__ = [
    "BooleanProperty",
    "ComplexProperty",
    "ComplexType",
    "DateTimeProperty",
    "DecimalProperty",
    "FloatProperty",
    "GuidProperty",
    "IntegerProperty",
    "Property",
    "StringProperty",
    "property_class_for",
]
