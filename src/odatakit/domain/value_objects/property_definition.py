"""Declared property of a metadata type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PropertyDefinition:
    """Name, declared type and nullability of one property in a schema."""

    name: str
    type_name: str
    nullable: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Property name must not be empty")
        if not self.type_name:
            raise ValueError("Property type must not be empty")

    @property
    def is_primitive(self) -> bool:
        return self.type_name.startswith("Edm.")
