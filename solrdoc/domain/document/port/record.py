"""Record capability ports.

Backing stores expose identity and associations differently; the mapper only
talks to these protocols. One adapter per store lives in
solrdoc.infrastructure.record.
"""

from enum import StrEnum
from typing import Any, Protocol

from solrdoc.domain.shared.model.value import ValueObject


class Cardinality(StrEnum):
    ONE = "one"
    MANY = "many"


class ResolvedAssociation(ValueObject):
    """An association after resolution. `records` never contains None."""

    cardinality: Cardinality
    records: tuple[Any, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.records


class RecordIdentity(Protocol):
    """Extracts a record's primary key."""

    def primary_key(self, record: Any) -> str:
        """Primary-key value rendered as a string."""
        ...

    def key_name(self, record: Any) -> str:
        """Name of the attribute holding the primary key."""
        ...


class RecordAccessor(Protocol):
    """Reads a field's raw value from a record."""

    def get(self, record: Any, name: str) -> Any | None:
        """Return the value, or None when it is absent."""
        ...


class AssociationResolver(Protocol):
    """Resolves associations and describes associated records."""

    def resolve(self, record: Any, name: str) -> ResolvedAssociation:
        """Return cardinality and associated records.

        Raises:
            ConfigurationError: If the record type has no such association.
        """
        ...

    def attributes(self, record: Any) -> dict[str, Any]:
        """All visible attributes of a record, in declaration order."""
        ...
