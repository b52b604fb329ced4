"""ElementTree-backed document builder for OData Atom property payloads."""

import xml.etree.ElementTree as ET
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

DATA_NAMESPACE = "http://schemas.microsoft.com/ado/2007/08/dataservices"
METADATA_NAMESPACE = "http://schemas.microsoft.com/ado/2007/08/dataservices/metadata"

# attribute prefix -> namespace URI
_PREFIXES: dict[str, str] = {
    "d": DATA_NAMESPACE,
    "data": DATA_NAMESPACE,
    "m": METADATA_NAMESPACE,
    "metadata": METADATA_NAMESPACE,
}

ET.register_namespace("d", DATA_NAMESPACE)
ET.register_namespace("m", METADATA_NAMESPACE)


def _qualify(name: str, default_namespace: str | None = None) -> str:
    """Turn ``prefix:local`` into ElementTree's ``{uri}local`` form."""
    prefix, sep, local = name.partition(":")
    if sep:
        namespace = _PREFIXES.get(prefix)
        if namespace is None:
            raise ValueError(f"Unknown namespace prefix: {prefix}")
        return f"{{{namespace}}}{local}"
    if default_namespace:
        return f"{{{default_namespace}}}{name}"
    return name


class XmlDocumentBuilder:
    """Builds a ``m:properties`` tree; element names land in the data namespace."""

    def __init__(self, root_name: str = "m:properties") -> None:
        self._root = ET.Element(_qualify(root_name, DATA_NAMESPACE))
        self._stack: list[ET.Element] = [self._root]

    @property
    def root(self) -> ET.Element:
        return self._root

    @contextmanager
    def element(
        self, name: str, attributes: Mapping[str, str] | None = None
    ) -> Iterator[None]:
        child = self._append(name, attributes)
        self._stack.append(child)
        try:
            yield
        finally:
            self._stack.pop()

    def add_element(
        self,
        name: str,
        text: str | None = None,
        attributes: Mapping[str, str] | None = None,
    ) -> None:
        child = self._append(name, attributes)
        child.text = text

    def to_string(self) -> str:
        return ET.tostring(self._root, encoding="unicode")

    def _append(self, name: str, attributes: Mapping[str, str] | None) -> ET.Element:
        attrib = {_qualify(key): value for key, value in (attributes or {}).items()}
        return ET.SubElement(self._stack[-1], _qualify(name, DATA_NAMESPACE), attrib)
