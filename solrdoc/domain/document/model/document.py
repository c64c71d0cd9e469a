"""Document value objects - the output of the mapper."""

from __future__ import annotations

import html
import re
from typing import Any, ClassVar

from pydantic import field_validator

from solrdoc.domain.shared.error import ValidationError
from solrdoc.domain.shared.model.value import ValueObject

# Characters with meaning to the Lucene query parser
_QUERY_SPECIAL = re.compile(r'([\\+\-!():^\[\]{}~*?"/&|])')


def query_parser_escape(text: str) -> str:
    """Backslash-escape Lucene query parser syntax so `text` matches literally."""
    return _QUERY_SPECIAL.sub(r"\\\1", text)


def escape_value(value: Any) -> Any:
    """HTML-escape string values; other scalars pass through unchanged."""
    if isinstance(value, str):
        return html.escape(value, quote=True)
    return value


class DocumentId(ValueObject):
    """Composite id `{type_name}:{key}`, unique across all indexed record types."""

    SEPARATOR: ClassVar[str] = ":"

    type_name: str
    key: str

    @classmethod
    def parse(cls, value: str) -> DocumentId:
        type_name, sep, key = value.partition(cls.SEPARATOR)
        if not sep or not type_name or not key:
            raise ValidationError(
                f"Invalid document id '{value}' (expected 'Type:key')", field="id"
            )
        return cls(type_name=type_name, key=key)

    def __str__(self) -> str:
        return f"{self.type_name}{self.SEPARATOR}{self.key}"


class Field(ValueObject):
    """A single named value inside a document. The name carries the type suffix.

    Multi-valued fields are held as tuples.
    """

    name: str
    value: Any
    boost: float = 1.0

    @field_validator("value")
    @classmethod
    def freeze_sequence(cls, v: Any) -> Any:
        if isinstance(v, list):
            return tuple(v)
        return v

    @property
    def values(self) -> list[Any]:
        return list(self.value) if isinstance(self.value, tuple) else [self.value]


class Document(ValueObject):
    """A fully built search document, ready for submission.

    Identity fields are kept apart from `fields` so that they are emitted
    exactly once whatever the field configuration says.
    """

    id: DocumentId
    type_field: str
    type_value: str
    primary_key_field: str
    primary_key: str
    fields: tuple[Field, ...] = ()
    boost: float | None = None

    def values(self, name: str) -> list[Any]:
        """All values emitted under `name`, in order."""
        out: list[Any] = []
        for f in self.fields:
            if f.name == name:
                out.extend(f.values)
        return out

    def field_boosts(self) -> dict[str, float]:
        """Boost per field name. Repeated names share the last boost seen."""
        return {f.name: f.boost for f in self.fields}

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the submission shape; repeated names become lists."""
        doc: dict[str, Any] = {
            "id": str(self.id),
            self.type_field: self.type_value,
            self.primary_key_field: self.primary_key,
        }
        for f in self.fields:
            if f.name in doc:
                existing = doc[f.name]
                existing = existing if isinstance(existing, list) else [existing]
                doc[f.name] = existing + f.values
            elif isinstance(f.value, tuple):
                doc[f.name] = f.values
            else:
                doc[f.name] = f.value
        return doc
