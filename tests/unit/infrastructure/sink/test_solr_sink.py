"""Tests for SolrSink with a mocked pysolr client."""

from unittest.mock import MagicMock

import pysolr
import pytest

from solrdoc.config import SolrConfig
from solrdoc.domain.document.model.document import Document, DocumentId, Field
from solrdoc.domain.shared.error import ExternalServiceError
from solrdoc.infrastructure.sink.solr import SolrSink


@pytest.fixture
def client() -> MagicMock:
    return MagicMock(spec=pysolr.Solr)


@pytest.fixture
def document() -> Document:
    return Document(
        id=DocumentId(type_name="Article", key="42"),
        type_field="type_t",
        type_value="Article",
        primary_key_field="pk_s",
        primary_key="42",
        fields=(
            Field(name="title_t", value="Hello", boost=2.0),
            Field(name="tag_facet", value="a"),
            Field(name="tag_facet", value="b"),
        ),
        boost=1.5,
    )


class TestSolrSink:
    @pytest.mark.asyncio
    async def test_add_sends_document_with_boosts(self, client, document):
        sink = SolrSink(SolrConfig(), client=client)

        await sink.add(document)

        client.add.assert_called_once_with(
            [
                {
                    "id": "Article:42",
                    "type_t": "Article",
                    "pk_s": "42",
                    "title_t": "Hello",
                    "tag_facet": ["a", "b"],
                    "boost": 1.5,
                }
            ],
            commit=False,
            boost={"title_t": 2.0, "tag_facet": 1.0},
        )

    @pytest.mark.asyncio
    async def test_add_without_index_time_boosts(self, client, document):
        sink = SolrSink(SolrConfig(index_time_boosts=False), client=client)

        await sink.add(document)

        args, kwargs = client.add.call_args
        assert "boost" not in args[0][0]
        assert kwargs == {"commit": False}

    @pytest.mark.asyncio
    async def test_delete_by_composite_id(self, client):
        sink = SolrSink(SolrConfig(), client=client)

        await sink.delete(DocumentId(type_name="Article", key="42"))

        client.delete.assert_called_once_with(id="Article:42", commit=False)

    @pytest.mark.asyncio
    async def test_commit(self, client):
        await SolrSink(SolrConfig(), client=client).commit()
        client.commit.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_solr_errors_are_wrapped(self, client, document):
        client.add.side_effect = pysolr.SolrError("HTTP 500")
        sink = SolrSink(SolrConfig(), client=client)

        with pytest.raises(ExternalServiceError) as exc:
            await sink.add(document)
        assert "HTTP 500" in exc.value.message

    @pytest.mark.asyncio
    async def test_health(self, client):
        sink = SolrSink(SolrConfig(), client=client)
        assert await sink.health() is True

        client.ping.side_effect = pysolr.SolrError("down")
        assert await sink.health() is False
