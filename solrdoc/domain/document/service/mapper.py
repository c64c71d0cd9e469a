"""DocumentMapper - turns a record into a boosted, type-suffixed document."""

import json
import logging
from collections.abc import Iterator
from typing import Any

from solrdoc.config import MapperConfig
from solrdoc.domain.document.model.document import (
    Document,
    DocumentId,
    Field,
    escape_value,
    query_parser_escape,
)
from solrdoc.domain.document.model.extras import DocumentExtras
from solrdoc.domain.document.model.field_type import field_type_suffix
from solrdoc.domain.document.model.spec import AssociationSpec, FieldSpec, IndexingSpec
from solrdoc.domain.document.port.record import (
    AssociationResolver,
    Cardinality,
    RecordAccessor,
    RecordIdentity,
)
from solrdoc.domain.document.service.boost import resolve_boost
from solrdoc.domain.shared.service import Service

logger = logging.getLogger(__name__)

# Field names that would collide with the identity fields
_RESERVED_NAMES = frozenset({"type"})


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def _normalize(value: Any) -> Any | None:
    """Escape a raw value; None when there is nothing to index.

    Sequences are escaped element-wise into a tuple and a single element
    collapses to a scalar.
    """
    if value is None:
        return None
    if not _is_sequence(value):
        return escape_value(value)
    items = [escape_value(v) for v in value if v is not None]
    if not items:
        return None
    return items[0] if len(items) == 1 else tuple(items)


class DocumentMapper(Service):
    """Builds search documents from records.

    Stateless: every call allocates a fresh Document and nothing is retained,
    so one mapper can be shared between threads.
    """

    identity: RecordIdentity
    accessor: RecordAccessor
    associations: AssociationResolver
    config: MapperConfig

    def document_id(self, record: Any, spec: IndexingSpec) -> DocumentId:
        """Composite `{type}:{primary key}` id for a record."""
        return DocumentId(
            type_name=spec.type_name_for(record),
            key=self.identity.primary_key(record),
        )

    def build_document(
        self,
        record: Any,
        spec: IndexingSpec,
        extras: DocumentExtras | None = None,
        default_boost: float | None = None,
    ) -> Document:
        """Map a record into a Document.

        Args:
            record: The record to index.
            spec: Field, association and extension configuration for the record type.
            extras: Dynamic attributes, tags and location. Only the blocks
                enabled on `spec` are used.
            default_boost: Overrides the configured default boost.

        Raises:
            ConfigurationError: On an unknown field type, an unsupported boost
                source or an unknown association.
        """
        boost = self.config.default_boost if default_boost is None else default_boost
        doc_id = self.document_id(record, spec)
        logger.debug(f"build_document: creating doc for {doc_id}")

        skip = _RESERVED_NAMES | {self.identity.key_name(record)}
        fields: list[Field] = []
        for field_spec in spec.fields:
            if field_spec.name in skip or field_spec.index_name in skip:
                continue
            field = self._field(record, field_spec, boost)
            if field is not None:
                fields.append(field)

        for assoc_spec in spec.associations:
            fields.extend(self._association_fields(record, assoc_spec, boost))

        extras = extras or DocumentExtras()
        if spec.dynamic_attributes:
            fields.extend(self._dynamic_attribute_fields(extras, boost))
        if spec.taggable:
            fields.extend(self._tag_fields(extras, boost))
        if spec.spatial and extras.location is not None:
            fields.append(Field(name="lat_f", value=extras.location.latitude, boost=boost))
            fields.append(Field(name="lng_f", value=extras.location.longitude, boost=boost))

        # Identity fields are emitted once, by the document itself
        identity_names = {"id", self.config.type_field, self.config.primary_key_field}
        clashing = [f.name for f in fields if f.name in identity_names]
        if clashing:
            logger.warning(f"build_document: {doc_id} dropped fields named like identity fields: {clashing}")

        document = Document(
            id=doc_id,
            type_field=self.config.type_field,
            type_value=query_parser_escape(doc_id.type_name),
            primary_key_field=self.config.primary_key_field,
            primary_key=doc_id.key,
            fields=tuple(f for f in fields if f.name not in identity_names),
            boost=resolve_boost(spec.boost, record, boost) if spec.boost is not None else None,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps(document.to_dict(), default=str))
        return document

    # -------------------------------------------------------------------------
    # Fields
    # -------------------------------------------------------------------------

    def _field(self, record: Any, field_spec: FieldSpec, default_boost: float) -> Field | None:
        suffix = field_type_suffix(field_spec.type)
        value = _normalize(self.accessor.get(record, field_spec.name))
        if value is None:
            return None
        return Field(
            name=f"{field_spec.index_name}_{suffix}",
            value=value,
            boost=resolve_boost(field_spec.boost, record, default_boost),
        )

    # -------------------------------------------------------------------------
    # Associations
    # -------------------------------------------------------------------------

    def _association_fields(
        self, record: Any, assoc_spec: AssociationSpec, default_boost: float
    ) -> Iterator[Field]:
        suffix = field_type_suffix(assoc_spec.type)
        name = f"{assoc_spec.index_name}_{suffix}"
        resolved = self.associations.resolve(record, assoc_spec.name)
        if resolved.is_empty:
            return

        related = resolved.records
        if resolved.cardinality is Cardinality.ONE:
            related = related[:1]

        for associated in related:
            value = self._association_value(associated, assoc_spec)
            if value is None:
                continue
            yield Field(
                name=name,
                value=value,
                boost=resolve_boost(assoc_spec.boost, record, default_boost),
            )

    def _association_value(self, associated: Any, assoc_spec: AssociationSpec) -> Any:
        using = assoc_spec.using
        if callable(using):
            return _normalize(using(associated))
        if isinstance(using, str):
            value = getattr(associated, using, None)
            return _normalize(value() if callable(value) else value)

        if assoc_spec.fields:
            values = [getattr(associated, f, None) for f in assoc_spec.fields]
        else:
            values = list(self.associations.attributes(associated).values())
        joined = " ".join(str(escape_value(v)) for v in values if v is not None)
        return joined or None

    # -------------------------------------------------------------------------
    # Extensions
    # -------------------------------------------------------------------------

    def _dynamic_attribute_fields(self, extras: DocumentExtras, boost: float) -> Iterator[Field]:
        for attribute in extras.dynamic_attributes:
            value = _normalize(attribute.value)
            if value is None:
                continue
            name = attribute.name.lower()
            yield Field(name=f"{name}_t", value=value, boost=boost)
            yield Field(name=f"{name}_facet", value=value, boost=boost)

    def _tag_fields(self, extras: DocumentExtras, boost: float) -> Iterator[Field]:
        for tag in extras.tags:
            value = escape_value(tag)
            yield Field(name="tag_facet", value=value, boost=boost)
            yield Field(name="tag_t", value=value, boost=boost)
