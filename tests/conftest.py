"""Pytest fixtures for odatakit tests."""

from __future__ import annotations

import pytest

from odatakit.domain.entities import ComplexType, Property, StringProperty
from odatakit.infrastructure.metadata import EdmxCatalog
from odatakit.infrastructure.serialization import XmlDocumentBuilder

METADATA_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<edmx:Edmx Version="1.0" xmlns:edmx="http://schemas.microsoft.com/ado/2007/06/edmx">
  <edmx:DataServices m:DataServiceVersion="3.0"
      xmlns:m="http://schemas.microsoft.com/ado/2007/08/dataservices/metadata">
    <Schema Namespace="ODataDemo" xmlns="http://schemas.microsoft.com/ado/2009/11/edm">
      <EntityType Name="Product">
        <Key><PropertyRef Name="ID"/></Key>
        <Property Name="ID" Type="Edm.Int32" Nullable="false"/>
        <Property Name="Name" Type="Edm.String"/>
      </EntityType>
      <EntityType Name="Supplier">
        <Key><PropertyRef Name="ID"/></Key>
        <Property Name="ID" Type="Edm.Int32" Nullable="false"/>
        <Property Name="Address" Type="ODataDemo.Address"/>
      </EntityType>
      <ComplexType Name="Address">
        <Property Name="Street" Type="Edm.String"/>
        <Property Name="City" Type="Edm.String"/>
        <Property Name="State" Type="Edm.String"/>
        <Property Name="ZipCode" Type="Edm.String"/>
        <Property Name="Country" Type="Edm.String"/>
      </ComplexType>
      <ComplexType Name="Location">
        <Property Name="Label" Type="Edm.String" Nullable="false"/>
        <Property Name="Address" Type="ODataDemo.Address"/>
        <Property Name="Latitude" Type="Edm.Double"/>
        <Property Name="Floor" Type="Edm.Int16"/>
        <Property Name="Shape" Type="Edm.Geography"/>
      </ComplexType>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>
"""


# --- Fakes ---


class FakeCatalog:
    """In-memory catalog declaring string-valued complex types."""

    def __init__(
        self,
        complex_types: dict[str, list[str]] | None = None,
        namespace: str = "ODataDemo",
    ) -> None:
        self._complex_types = (
            complex_types if complex_types is not None else {"Address": ["Street", "City"]}
        )
        self._namespace = namespace
        self.namespace_calls = 0
        self.property_calls: list[str] = []

    def namespace(self) -> str:
        self.namespace_calls += 1
        return self._namespace

    def complex_types(self) -> list[str]:
        return list(self._complex_types)

    def properties_for_complex_type(self, name: str) -> dict[str, Property]:
        self.property_calls.append(name)
        return {key: StringProperty(key) for key in self._complex_types[name]}


class FakeMetadataSource:
    """Metadata source returning a fixed document."""

    def __init__(self, data: bytes = METADATA_XML) -> None:
        self._data = data
        self.calls = 0

    async def fetch(self) -> bytes:
        self.calls += 1
        return self._data


class RecordingProperty:
    """Property holder that records serialize calls into a shared log."""

    def __init__(self, name: str, log: list[str], error: Exception | None = None) -> None:
        self.name = name
        self.value = None
        self._log = log
        self._error = error

    def prepare(self, value):
        return value

    def commit(self, prepared) -> None:
        self.value = prepared

    def serialize(self, builder) -> None:
        if self._error is not None:
            raise self._error
        self._log.append(self.name)
        builder.add_element(self.name, None if self.value is None else str(self.value))


# --- Fixtures ---


@pytest.fixture
def catalog() -> FakeCatalog:
    """Catalog declaring ODataDemo.Address with Street and City."""
    return FakeCatalog()


@pytest.fixture
def address(catalog: FakeCatalog) -> ComplexType:
    return ComplexType(name="Address", service=catalog)


@pytest.fixture
def builder() -> XmlDocumentBuilder:
    return XmlDocumentBuilder()


@pytest.fixture
def edmx_catalog() -> EdmxCatalog:
    """Catalog parsed from the sample ODataDemo metadata document."""
    return EdmxCatalog.from_xml(METADATA_XML)


@pytest.fixture
def location(edmx_catalog: EdmxCatalog) -> ComplexType:
    """ODataDemo.Location with a nested Address."""
    return ComplexType(name="Location", service=edmx_catalog)
