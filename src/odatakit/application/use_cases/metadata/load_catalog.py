"""Load catalog use case."""

from collections.abc import Callable
from typing import Generic, TypeVar

from odatakit.application.ports import MetadataSource, ServiceCatalog

CatalogT = TypeVar("CatalogT", bound=ServiceCatalog)


class LoadCatalogUseCase(Generic[CatalogT]):
    """Fetch a service's metadata document and build its catalog."""

    def __init__(
        self,
        metadata_source: MetadataSource,
        catalog_factory: Callable[[bytes], CatalogT],
    ) -> None:
        self._metadata_source = metadata_source
        self._catalog_factory = catalog_factory

    async def execute(self) -> CatalogT:
        """Fetch and parse. MetadataError from either step propagates."""
        data = await self._metadata_source.fetch()
        return self._catalog_factory(data)
