"""Property holder port - a single named value that can serialize itself."""

from typing import Any, Protocol

from odatakit.application.ports.document_builder import DocumentBuilder


class PropertyHolder(Protocol):
    """Port for the leaf value holders owned by a complex type."""

    name: str

    @property
    def value(self) -> Any: ...

    @value.setter
    def value(self, value: Any) -> None: ...

    def serialize(self, builder: DocumentBuilder) -> None: ...

    def prepare(self, value: Any) -> Any:
        """Validate ``value`` and return what would be stored, changing nothing."""
        ...

    def commit(self, prepared: Any) -> None: ...
