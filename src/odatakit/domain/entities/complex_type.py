"""ComplexType entity - structured property value resolved from service metadata."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import cached_property
from typing import TYPE_CHECKING, Any

from odatakit.domain.exceptions import ConfigurationError, UnknownPropertyError

if TYPE_CHECKING:
    from odatakit.application.ports import DocumentBuilder, PropertyHolder, ServiceCatalog

logger = logging.getLogger(__name__)


class ComplexType:
    """Named, ordered bag of properties used as the value of an entity field.

    The set of properties is fixed at construction from the catalog; only the
    values held by those properties change afterwards.
    """

    def __init__(self, name: Any = None, service: ServiceCatalog | None = None) -> None:
        self._validate(name, service)
        self._name = str(name)
        self._service = service
        self._properties: dict[str, PropertyHolder] = service.properties_for_complex_type(
            self._name
        )
        logger.debug(
            "Resolved complex type %s with properties %s",
            self._name,
            list(self._properties),
        )

    @staticmethod
    def _validate(name: Any, service: ServiceCatalog | None) -> None:
        if name is None or str(name) == "":
            raise ConfigurationError("Name is required")
        if service is None:
            raise ConfigurationError("Service is required")
        if str(name) not in service.complex_types():
            raise ConfigurationError(f"Not a ComplexType: {name}")

    @property
    def name(self) -> str:
        return self._name

    @cached_property
    def namespace(self) -> str:
        """Namespace of the owning service, read once from the catalog."""
        return self._service.namespace()

    @property
    def type(self) -> str:
        """Namespace-qualified type name, e.g. ``ODataDemo.Address``."""
        return f"{self.namespace}.{self._name}"

    @cached_property
    def property_names(self) -> tuple[str, ...]:
        """Declared property names in catalog order."""
        return tuple(self._properties)

    def get(self, property_name: Any) -> Any:
        """Return the current value of the named property."""
        return self._property(property_name).value

    def set(self, property_name: Any, value: Any) -> None:
        """Write a value through to the named property."""
        self._property(property_name).value = value

    def update(self, values: Mapping[Any, Any]) -> None:
        """Write several values at once; nothing is written if any entry fails."""
        for holder, staged in self.prepare_update(values):
            holder.commit(staged)

    def prepare_update(self, values: Mapping[Any, Any]) -> list[tuple[PropertyHolder, Any]]:
        """Check every key and value of ``values`` and return the staged writes."""
        holders = [(self._property(key), item) for key, item in values.items()]
        return [(holder, holder.prepare(item)) for holder, item in holders]

    def serialize(self, builder: DocumentBuilder) -> None:
        """Write this value as an element tagged with ``name`` into ``builder``."""
        with builder.element(self._name, {"m:type": self.type}):
            for prop in self._properties.values():
                prop.serialize(builder)

    def to_dict(self) -> dict[str, Any]:
        """Current values keyed by property name, nested complex values included."""
        result: dict[str, Any] = {}
        for key, prop in self._properties.items():
            value = prop.value
            result[key] = value.to_dict() if isinstance(value, ComplexType) else value
        return result

    def _property(self, property_name: Any) -> PropertyHolder:
        key = str(property_name)
        try:
            return self._properties[key]
        except KeyError:
            raise UnknownPropertyError(self._name, key) from None

    def __getitem__(self, property_name: Any) -> Any:
        return self.get(property_name)

    def __setitem__(self, property_name: Any, value: Any) -> None:
        self.set(property_name, value)

    def __contains__(self, property_name: object) -> bool:
        return str(property_name) in self._properties

    def __repr__(self) -> str:
        return f"ComplexType({self._name!r})"
