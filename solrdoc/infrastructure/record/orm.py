"""Identity and associations for SQLAlchemy mapped classes."""

from typing import Any

from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.orm import Mapper

from solrdoc.domain.document.port.record import Cardinality, ResolvedAssociation
from solrdoc.domain.shared.error import ConfigurationError


def _mapper(record: Any) -> Mapper:
    try:
        return inspect(type(record))
    except NoInspectionAvailable:
        raise ConfigurationError(
            f"{type(record).__name__} is not a SQLAlchemy mapped class"
        ) from None


class SqlAlchemyIdentity:
    """Identity from the mapped primary key. Composite keys are not supported."""

    def key_name(self, record: Any) -> str:
        mapper = _mapper(record)
        if len(mapper.primary_key) != 1:
            raise ConfigurationError(
                f"{type(record).__name__} has a composite primary key; "
                "use AttributeIdentity with a surrogate key"
            )
        return mapper.get_property_by_column(mapper.primary_key[0]).key

    def primary_key(self, record: Any) -> str:
        return str(getattr(record, self.key_name(record)))


class SqlAlchemyAssociationResolver:
    """Resolves relationships; `uselist` decides the cardinality."""

    def resolve(self, record: Any, name: str) -> ResolvedAssociation:
        relationship = _mapper(record).relationships.get(name)
        if relationship is None:
            raise ConfigurationError(
                f"{type(record).__name__} has no relationship '{name}'"
            )

        value = getattr(record, name)
        if relationship.uselist:
            records = tuple(r for r in (value or ()) if r is not None)
            return ResolvedAssociation(cardinality=Cardinality.MANY, records=records)
        records = () if value is None else (value,)
        return ResolvedAssociation(cardinality=Cardinality.ONE, records=records)

    def attributes(self, record: Any) -> dict[str, Any]:
        """Column attributes only; relationships are never expanded."""
        return {prop.key: getattr(record, prop.key) for prop in _mapper(record).column_attrs}
