"""Field types and the type -> dynamic-field suffix table."""

from enum import StrEnum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import RootModel, field_validator

from solrdoc.domain.shared.error import ConfigurationError


class FieldType(StrEnum):
    """Semantic field types understood by the index schema."""

    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    STRING = "string"
    TEXT = "text"
    DATE = "date"
    RANGE_INTEGER = "range_integer"
    RANGE_FLOAT = "range_float"
    FACET = "facet"


class RawSuffix(RootModel[str]):
    """A suffix used verbatim, for dynamic fields outside the standard table.

    Example:
        FieldSpec(name="keywords", type=RawSuffix("sm"))  # -> keywords_sm
    """

    @field_validator("root")
    @classmethod
    def _validate(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("raw suffix must not be empty")
        return v

    def __str__(self) -> str:
        return self.root


# Decimal shares the float suffix: the schema has no fixed-precision field.
TYPE_SUFFIXES: Mapping[FieldType, str] = MappingProxyType(
    {
        FieldType.INTEGER: "i",
        FieldType.FLOAT: "f",
        FieldType.DECIMAL: "f",
        FieldType.DOUBLE: "do",
        FieldType.BOOLEAN: "b",
        FieldType.STRING: "s",
        FieldType.TEXT: "t",
        FieldType.DATE: "d",
        FieldType.RANGE_INTEGER: "ri",
        FieldType.RANGE_FLOAT: "rf",
        FieldType.FACET: "facet",
    }
)


def field_type_suffix(field_type: Any) -> str:
    """Return the dynamic-field suffix for a field type.

    Args:
        field_type: A FieldType, the name of one ("integer", "text", ...),
            or a RawSuffix.

    Raises:
        ConfigurationError: If the type is unknown or not a string at all.
    """
    if isinstance(field_type, RawSuffix):
        return field_type.root
    if isinstance(field_type, FieldType):
        return TYPE_SUFFIXES[field_type]
    if isinstance(field_type, str):
        try:
            return TYPE_SUFFIXES[FieldType(field_type)]
        except ValueError:
            raise ConfigurationError(
                f"Unknown field type '{field_type}'", code="UNKNOWN_FIELD_TYPE"
            ) from None
    raise ConfigurationError(
        f"Field type must be a FieldType, a type name or a RawSuffix, "
        f"got {type(field_type).__name__}",
        code="UNKNOWN_FIELD_TYPE",
    )
