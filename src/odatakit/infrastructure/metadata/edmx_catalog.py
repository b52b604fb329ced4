"""Service catalog built from a CSDL ($metadata) document."""

import logging
import xml.etree.ElementTree as ET

from odatakit.domain.entities import ComplexProperty, ComplexType, Property, property_class_for
from odatakit.domain.exceptions import ConfigurationError, MetadataError
from odatakit.domain.value_objects import PropertyDefinition

logger = logging.getLogger(__name__)


def _local(tag: str) -> str:
    """Strip the ``{uri}`` part; CSDL versions differ only in namespace URIs."""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local(child.tag) == name]


class EdmxCatalog:
    """Read-only catalog of the types declared in a service's metadata."""

    def __init__(
        self,
        namespace: str,
        complex_types: dict[str, tuple[PropertyDefinition, ...]],
        entity_types: tuple[str, ...] = (),
    ) -> None:
        self._namespace = namespace
        self._complex_types = complex_types
        self._entity_types = entity_types

    @classmethod
    def from_xml(cls, data: bytes | str) -> "EdmxCatalog":
        """Parse an EDMX/CSDL document. Raises MetadataError on unreadable input."""
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise MetadataError(f"Invalid metadata document: {e}") from e

        schemas = [el for el in root.iter() if _local(el.tag) == "Schema"]
        if not schemas:
            raise MetadataError("Metadata document declares no Schema")

        primary = next(
            (
                s
                for s in schemas
                if _children(s, "ComplexType") or _children(s, "EntityType")
            ),
            schemas[0],
        )
        namespace = primary.get("Namespace")
        if not namespace:
            raise MetadataError("Schema has no Namespace")

        # Types are qualified with a single catalog-wide namespace, so only the
        # primary schema's types are exposed.
        for schema in schemas:
            if schema is not primary and _children(schema, "ComplexType"):
                logger.warning(
                    "Ignoring complex types of schema %s; catalog namespace is %s",
                    schema.get("Namespace"),
                    namespace,
                )

        complex_types: dict[str, tuple[PropertyDefinition, ...]] = {}
        for el in _children(primary, "ComplexType"):
            name = el.get("Name", "")
            if name in complex_types:
                raise MetadataError(f"ComplexType {name} declared twice in {namespace}")
            complex_types[name] = cls._definitions(el)
        entity_types = [el.get("Name", "") for el in _children(primary, "EntityType")]

        logger.info(
            "Loaded metadata namespace=%s complex_types=%d entity_types=%d",
            namespace,
            len(complex_types),
            len(entity_types),
        )
        return cls(namespace, complex_types, tuple(entity_types))

    @staticmethod
    def _definitions(type_element: ET.Element) -> tuple[PropertyDefinition, ...]:
        try:
            return tuple(
                PropertyDefinition(
                    name=el.get("Name", ""),
                    type_name=el.get("Type", ""),
                    nullable=el.get("Nullable", "true").lower() != "false",
                )
                for el in _children(type_element, "Property")
            )
        except ValueError as e:
            raise MetadataError(
                f"Invalid property in ComplexType {type_element.get('Name')}: {e}"
            ) from e

    def namespace(self) -> str:
        return self._namespace

    def complex_types(self) -> tuple[str, ...]:
        return tuple(self._complex_types)

    def entity_types(self) -> tuple[str, ...]:
        return self._entity_types

    def definitions_for_complex_type(self, name: str) -> tuple[PropertyDefinition, ...]:
        try:
            return self._complex_types[name]
        except KeyError:
            raise ConfigurationError(f"Not a ComplexType: {name}") from None

    def properties_for_complex_type(self, name: str) -> dict[str, Property]:
        """Fresh property holders for one instance of ``name``, in declaration order."""
        return {
            definition.name: self._build_property(definition)
            for definition in self.definitions_for_complex_type(name)
        }

    def _build_property(self, definition: PropertyDefinition) -> Property:
        if definition.is_primitive:
            cls = property_class_for(definition.type_name)
            return cls(
                definition.name,
                nullable=definition.nullable,
                type_name=definition.type_name,
            )
        nested = self._complex_type_name(definition.type_name)
        if nested is not None:
            return ComplexProperty(definition.name, ComplexType(name=nested, service=self))
        logger.warning(
            "Unsupported type %s for property %s, holding raw values",
            definition.type_name,
            definition.name,
        )
        return Property(
            definition.name,
            nullable=definition.nullable,
            type_name=definition.type_name,
        )

    def _complex_type_name(self, type_name: str) -> str | None:
        prefix = f"{self._namespace}."
        local = type_name[len(prefix) :] if type_name.startswith(prefix) else type_name
        return local if local in self._complex_types else None
