"""Service catalog port - declared metadata types."""

from collections.abc import Collection
from typing import Protocol

from odatakit.application.ports.property_holder import PropertyHolder


class ServiceCatalog(Protocol):
    """Port for the metadata registry a complex type is resolved against.

    ``namespace()`` must be constant for the lifetime of the catalog, and
    ``properties_for_complex_type`` must return a fresh set of holders on
    every call, in declaration order.
    """

    def namespace(self) -> str: ...

    def complex_types(self) -> Collection[str]: ...

    def properties_for_complex_type(self, name: str) -> dict[str, PropertyHolder]: ...
