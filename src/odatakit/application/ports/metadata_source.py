"""Metadata source port - raw $metadata documents."""

from typing import Protocol


class MetadataSource(Protocol):
    """Port for retrieving a service's CSDL metadata document."""

    async def fetch(self) -> bytes: ...
