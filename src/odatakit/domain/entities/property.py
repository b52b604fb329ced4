"""Property entities - named value holders for Edm primitive and complex types."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, ClassVar
from uuid import UUID

from odatakit.domain.entities.complex_type import ComplexType
from odatakit.domain.exceptions import ValidationError
from odatakit.domain.value_objects import EdmType

if TYPE_CHECKING:
    from odatakit.application.ports import DocumentBuilder


class Property:
    """Single named value; renders itself as one leaf element."""

    edm_type: ClassVar[str | None] = None

    def __init__(
        self,
        name: str,
        value: Any = None,
        *,
        nullable: bool = True,
        type_name: str | None = None,
    ) -> None:
        self.name = name
        self.nullable = nullable
        self._type_name = type_name or self.edm_type
        self._value: Any = None
        if value is not None:
            self.value = value

    @property
    def type_name(self) -> str | None:
        return self._type_name

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self.commit(self.prepare(value))

    def prepare(self, value: Any) -> Any:
        """Return what assigning ``value`` would store, without storing it."""
        if value is None:
            if not self.nullable:
                raise ValidationError(f"{self.name} is not nullable")
            return None
        return self.coerce(value)

    def commit(self, prepared: Any) -> None:
        """Store a value returned by ``prepare``."""
        self._value = prepared

    def coerce(self, value: Any) -> Any:
        """Convert ``value`` into the representation held by this property."""
        return value

    def xml_value(self) -> str:
        return str(self._value)

    def serialize(self, builder: DocumentBuilder) -> None:
        attributes: dict[str, str] = {}
        if self.type_name and self.type_name != EdmType.STRING:
            attributes["m:type"] = str(self.type_name)
        if self._value is None:
            attributes["m:null"] = "true"
            builder.add_element(self.name, None, attributes)
        else:
            builder.add_element(self.name, self.xml_value(), attributes)

    def _invalid(self, value: Any) -> ValidationError:
        return ValidationError(
            f"{self.name}: {value!r} is not a valid {self.type_name or 'value'}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self._value!r})"


class StringProperty(Property):
    """Edm.String."""

    edm_type = EdmType.STRING

    def coerce(self, value: Any) -> str:
        return str(value)


class IntegerProperty(Property):
    """Edm integral types, range-checked against the declared width."""

    edm_type = EdmType.INT32

    _RANGES: ClassVar[dict[str, tuple[int, int]]] = {
        EdmType.BYTE: (0, 2**8 - 1),
        EdmType.SBYTE: (-(2**7), 2**7 - 1),
        EdmType.INT16: (-(2**15), 2**15 - 1),
        EdmType.INT32: (-(2**31), 2**31 - 1),
        EdmType.INT64: (-(2**63), 2**63 - 1),
    }

    def coerce(self, value: Any) -> int:
        if isinstance(value, bool):
            raise self._invalid(value)
        if isinstance(value, int):
            number = value
        elif isinstance(value, str):
            try:
                number = int(value.strip())
            except ValueError:
                raise self._invalid(value) from None
        else:
            raise self._invalid(value)
        low, high = self._RANGES.get(self.type_name or "", self._RANGES[EdmType.INT64])
        if not low <= number <= high:
            raise ValidationError(
                f"{self.name}: {number} is out of range for {self.type_name}"
            )
        return number


class DecimalProperty(Property):
    """Edm.Decimal."""

    edm_type = EdmType.DECIMAL

    def coerce(self, value: Any) -> Decimal:
        if isinstance(value, bool):
            raise self._invalid(value)
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            raise self._invalid(value) from None
        if not number.is_finite():
            raise self._invalid(value)
        return number

    def xml_value(self) -> str:
        return format(self._value, "f")


class FloatProperty(Property):
    """Edm.Double and Edm.Single."""

    edm_type = EdmType.DOUBLE

    def coerce(self, value: Any) -> float:
        if isinstance(value, bool):
            raise self._invalid(value)
        try:
            return float(value)
        except (TypeError, ValueError):
            raise self._invalid(value) from None

    def xml_value(self) -> str:
        if math.isnan(self._value):
            return "NaN"
        if math.isinf(self._value):
            return "INF" if self._value > 0 else "-INF"
        return repr(self._value)


class BooleanProperty(Property):
    """Edm.Boolean; accepts ``"true"``/``"false"`` as well as bools."""

    edm_type = EdmType.BOOLEAN

    _TEXT: ClassVar[dict[str, bool]] = {"true": True, "1": True, "false": False, "0": False}

    def coerce(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in self._TEXT:
            return self._TEXT[value.strip().lower()]
        raise self._invalid(value)

    def xml_value(self) -> str:
        return "true" if self._value else "false"


class DateTimeProperty(Property):
    """Edm.DateTime and Edm.DateTimeOffset; ISO-8601 strings are parsed."""

    edm_type = EdmType.DATETIME

    def coerce(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.strip())
            except ValueError:
                raise self._invalid(value) from None
        raise self._invalid(value)

    def xml_value(self) -> str:
        return self._value.isoformat()


class GuidProperty(Property):
    """Edm.Guid."""

    edm_type = EdmType.GUID

    def coerce(self, value: Any) -> UUID:
        if isinstance(value, UUID):
            return value
        if isinstance(value, str):
            try:
                return UUID(value.strip())
            except ValueError:
                raise self._invalid(value) from None
        raise self._invalid(value)


class ComplexProperty(Property):
    """Property whose value is a nested ComplexType.

    Assigning a mapping writes its entries through the nested type; assigning a
    ComplexType of the same qualified type copies its values. Either way every
    entry is checked before any is written, so a failed assignment leaves the
    nested value unchanged.

    The nested value serializes under the complex type's name, not this
    property's name, so two properties of the same complex type produce
    same-named elements told apart only by position.
    """

    def __init__(self, name: str, complex_type: ComplexType) -> None:
        self._complex_type = complex_type
        super().__init__(name, nullable=False)

    @property
    def type_name(self) -> str:
        return self._complex_type.type

    @property
    def value(self) -> ComplexType:
        return self._complex_type

    @value.setter
    def value(self, value: Any) -> None:
        self.commit(self.prepare(value))

    def prepare(self, value: Any) -> list[tuple[Property, Any]]:
        if isinstance(value, ComplexType):
            if value is self._complex_type:
                return []
            if value.type != self.type_name:
                raise self._invalid(value)
            value = {key: value.get(key) for key in value.property_names}
        elif not isinstance(value, Mapping):
            raise self._invalid(value)
        return self._complex_type.prepare_update(value)

    def commit(self, prepared: list[tuple[Property, Any]]) -> None:
        for holder, staged in prepared:
            holder.commit(staged)

    def serialize(self, builder: DocumentBuilder) -> None:
        self._complex_type.serialize(builder)

    def __repr__(self) -> str:
        return f"ComplexProperty({self.name!r}, {self._complex_type!r})"


_CLASSES_BY_TYPE: dict[str, type[Property]] = {
    EdmType.STRING: StringProperty,
    EdmType.BYTE: IntegerProperty,
    EdmType.SBYTE: IntegerProperty,
    EdmType.INT16: IntegerProperty,
    EdmType.INT32: IntegerProperty,
    EdmType.INT64: IntegerProperty,
    EdmType.DECIMAL: DecimalProperty,
    EdmType.DOUBLE: FloatProperty,
    EdmType.SINGLE: FloatProperty,
    EdmType.BOOLEAN: BooleanProperty,
    EdmType.DATETIME: DateTimeProperty,
    EdmType.DATETIME_OFFSET: DateTimeProperty,
    EdmType.GUID: GuidProperty,
}


def property_class_for(type_name: str) -> type[Property]:
    """Return the Property class for an Edm primitive type name, or the base class."""
    return _CLASSES_BY_TYPE.get(type_name, Property)
