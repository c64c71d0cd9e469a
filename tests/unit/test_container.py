"""Tests for DI wiring."""

import pytest

from solrdoc.application.di import create_container
from solrdoc.config import Config, MapperConfig, RecordBackend
from solrdoc.domain.document.port.sink import SubmissionSink
from solrdoc.domain.document.service.indexing import IndexingService
from solrdoc.domain.document.service.mapper import DocumentMapper
from solrdoc.infrastructure.record.orm import SqlAlchemyIdentity
from solrdoc.infrastructure.record.plain import AttributeIdentity
from solrdoc.infrastructure.sink.solr import SolrSink


class TestContainer:
    @pytest.mark.asyncio
    async def test_resolves_indexing_service(self):
        container = create_container(Config())
        try:
            service = await container.get(IndexingService)
            assert isinstance(service.mapper, DocumentMapper)
            assert isinstance(service.mapper.identity, SqlAlchemyIdentity)
            assert isinstance(await container.get(SubmissionSink), SolrSink)
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_attribute_backend(self):
        config = Config(mapper=MapperConfig(backend=RecordBackend.ATTRIBUTE, identity_attribute="uuid"))
        container = create_container(config)
        try:
            mapper = await container.get(DocumentMapper)
            assert isinstance(mapper.identity, AttributeIdentity)
            assert mapper.identity.key_name(object()) == "uuid"
        finally:
            await container.close()
