"""Identity and associations for plain Python objects."""

from collections.abc import Mapping
from typing import Any

from solrdoc.domain.document.port.record import Cardinality, ResolvedAssociation
from solrdoc.domain.shared.error import ConfigurationError


class AttributeIdentity:
    """Identity read from a fixed attribute, `id` by default.

    Suits document stores whose records always carry the same identity
    attribute whatever the model (e.g. an ObjectId string).
    """

    def __init__(self, attribute: str = "id") -> None:
        self._attribute = attribute

    def key_name(self, record: Any) -> str:
        return self._attribute

    def primary_key(self, record: Any) -> str:
        try:
            value = getattr(record, self._attribute)
        except AttributeError:
            raise ConfigurationError(
                f"{type(record).__name__} has no identity attribute '{self._attribute}'"
            ) from None
        return str(value)


class AttributeAssociationResolver:
    """Associations are plain attributes: a list, tuple or set means many."""

    def resolve(self, record: Any, name: str) -> ResolvedAssociation:
        if not hasattr(record, name):
            raise ConfigurationError(
                f"{type(record).__name__} has no association '{name}'"
            )
        value = getattr(record, name)
        if isinstance(value, (list, tuple, set, frozenset)):
            records = tuple(r for r in value if r is not None)
            return ResolvedAssociation(cardinality=Cardinality.MANY, records=records)
        records = () if value is None else (value,)
        return ResolvedAssociation(cardinality=Cardinality.ONE, records=records)

    def attributes(self, record: Any) -> dict[str, Any]:
        if isinstance(record, Mapping):
            return dict(record)
        return {k: v for k, v in vars(record).items() if not k.startswith("_")}
