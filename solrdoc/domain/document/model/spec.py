"""Indexing configuration value objects.

These describe *what* gets indexed for a record type. They are plain data:
nothing here touches a record. Resolution happens in the mapper.
"""

from typing import Any, Callable

import inflect
from pydantic import ConfigDict, Field

from solrdoc.domain.document.model.field_type import FieldType, RawSuffix
from solrdoc.domain.shared.model.value import ValueObject

_inflector = inflect.engine()

# A boost is a literal number, a zero-argument callable, or the name of a
# record attribute. Validated lazily by resolve_boost.
BoostSource = Any

# A condition is a bool, None, a one-argument predicate, or a safe expression
# string. Validated lazily by evaluate_condition.
Condition = Any


class FieldSpec(ValueObject):
    """A record field to copy into the document."""

    name: str
    stored_as: str | None = None  # Index name to use instead of `name`
    type: FieldType | RawSuffix | str = FieldType.TEXT
    boost: BoostSource = None

    @property
    def index_name(self) -> str:
        """Base name of the emitted field, before the type suffix."""
        return self.stored_as or self.name


class AssociationSpec(ValueObject):
    """An association whose records are flattened into the document.

    Value extraction, in order of precedence:
    - `using`: attribute name or one-argument callable applied to each associated record
    - `fields`: the listed attributes, escaped and joined with a space
    - otherwise: every visible attribute, escaped and joined with a space
    """

    name: str
    stored_as: str | None = None
    type: FieldType | RawSuffix | str = FieldType.TEXT
    boost: BoostSource = None
    using: str | Callable[[Any], Any] | None = None
    fields: list[str] | None = None

    @property
    def index_name(self) -> str:
        """Base field name; the singular of the association name unless aliased."""
        if self.stored_as:
            return self.stored_as
        return _inflector.singular_noun(self.name) or self.name


class IndexingSpec(ValueObject):
    """Everything the mapper needs to know about one indexed record type."""

    model_config = ConfigDict(populate_by_name=True)

    type_name: str | None = None  # Defaults to the record's class name
    fields: list[FieldSpec] = []
    associations: list[AssociationSpec] = []
    boost: BoostSource = None  # Document-level boost
    if_: Condition = Field(default=True, alias="if")
    offline: Condition = False
    auto_commit: bool = True

    # Optional extension blocks, see DocumentExtras
    dynamic_attributes: bool = False
    taggable: bool = False
    spatial: bool = False

    def type_name_for(self, record: Any) -> str:
        return self.type_name or type(record).__name__
