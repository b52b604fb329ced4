"""Document builder port - structured payload output."""

from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Protocol


class DocumentBuilder(Protocol):
    """Port for writing nested elements into a payload document."""

    def element(
        self, name: str, attributes: Mapping[str, str] | None = None
    ) -> AbstractContextManager[None]:
        """Open a child element; children written inside the block nest under it."""
        ...

    def add_element(
        self,
        name: str,
        text: str | None = None,
        attributes: Mapping[str, str] | None = None,
    ) -> None: ...
