"""IndexingService - decides whether a record is indexed and ships it to the sink."""

import logging
from typing import Any

from solrdoc.config import IndexingConfig
from solrdoc.domain.document.model.extras import DocumentExtras
from solrdoc.domain.document.model.spec import IndexingSpec
from solrdoc.domain.document.port.sink import SubmissionSink
from solrdoc.domain.document.service.condition import evaluate_condition
from solrdoc.domain.document.service.mapper import DocumentMapper
from solrdoc.domain.shared.service import Service

logger = logging.getLogger(__name__)


class IndexingService(Service):
    """Keeps the index in step with a record.

    Meant to be called from whatever persistence hook the application uses
    (after save, after delete). Sink errors propagate to the caller.
    """

    mapper: DocumentMapper
    sink: SubmissionSink
    config: IndexingConfig

    def is_disabled(self, record: Any, spec: IndexingSpec) -> bool:
        """True when indexing is switched off globally, the record is offline,
        or the record type's `if` condition is configured as falsy."""
        if not self.config.enabled:
            return True
        return evaluate_condition(spec.offline, record) or not spec.if_

    async def save(
        self,
        record: Any,
        spec: IndexingSpec,
        extras: DocumentExtras | None = None,
    ) -> bool:
        """Index the record, or remove it when its `if` condition is false.

        Returns:
            True once the index reflects the record.
        """
        if self.is_disabled(record, spec):
            return True

        if not evaluate_condition(spec.if_, record):
            return await self.destroy(record, spec)

        document = self.mapper.build_document(record, spec, extras)
        logger.debug(f"save: {document.id}")
        await self.sink.add(document)
        if spec.auto_commit:
            await self.sink.commit()
        return True

    async def destroy(self, record: Any, spec: IndexingSpec) -> bool:
        """Remove the record's document from the index."""
        if self.is_disabled(record, spec):
            return True

        doc_id = self.mapper.document_id(record, spec)
        logger.debug(f"destroy: {doc_id}")
        await self.sink.delete(doc_id)
        if spec.auto_commit:
            await self.sink.commit()
        return True
