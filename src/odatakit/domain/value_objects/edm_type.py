"""Edm primitive type names."""

from enum import StrEnum


class EdmType(StrEnum):
    """Primitive types declared by the Entity Data Model."""

    BINARY = "Edm.Binary"
    BOOLEAN = "Edm.Boolean"
    BYTE = "Edm.Byte"
    DATETIME = "Edm.DateTime"
    DATETIME_OFFSET = "Edm.DateTimeOffset"
    DECIMAL = "Edm.Decimal"
    DOUBLE = "Edm.Double"
    GUID = "Edm.Guid"
    INT16 = "Edm.Int16"
    INT32 = "Edm.Int32"
    INT64 = "Edm.Int64"
    SBYTE = "Edm.SByte"
    SINGLE = "Edm.Single"
    STRING = "Edm.String"
    TIME = "Edm.Time"
