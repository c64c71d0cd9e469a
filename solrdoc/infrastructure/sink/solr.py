"""Solr submission sink using pysolr."""

import asyncio
import logging
from typing import Any

import pysolr

from solrdoc.config import SolrConfig
from solrdoc.domain.document.model.document import Document, DocumentId
from solrdoc.domain.shared.error import ExternalServiceError

logger = logging.getLogger(__name__)


class SolrSink:
    """Ships documents to Solr through pysolr.

    pysolr is blocking, so every call runs in a thread pool to keep the
    event loop free. Nothing is committed implicitly; callers decide
    when to call commit().
    """

    def __init__(self, config: SolrConfig, client: pysolr.Solr | None = None) -> None:
        self._config = config
        self._client = client or pysolr.Solr(config.url, timeout=config.timeout)

    async def add(self, document: Document) -> None:
        """Add or replace a document."""
        payload = self._to_solr(document)
        kwargs: dict[str, Any] = {"commit": False}
        if self._config.index_time_boosts:
            kwargs["boost"] = document.field_boosts()
        await self._call(self._client.add, [payload], **kwargs)
        logger.debug(f"Added {document.id} to Solr")

    async def delete(self, document_id: DocumentId) -> None:
        """Remove a document by composite id."""
        await self._call(self._client.delete, id=str(document_id), commit=False)
        logger.debug(f"Deleted {document_id} from Solr")

    async def commit(self) -> None:
        await self._call(self._client.commit)

    async def health(self) -> bool:
        """Ping the core."""
        try:
            await asyncio.to_thread(self._client.ping)
            return True
        except Exception:
            return False

    def _to_solr(self, document: Document) -> dict[str, Any]:
        payload = document.to_dict()
        if self._config.index_time_boosts and document.boost is not None:
            # pysolr turns a "boost" key into the <doc boost="..."> attribute
            payload["boost"] = document.boost
        return payload

    async def _call(self, fn: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return await asyncio.to_thread(fn, *args, **kwargs)
        except pysolr.SolrError as e:
            raise ExternalServiceError(f"Solr request failed: {e}") from e
