"""Index commands - talk to the configured Solr core."""

import asyncio
import sys

import cyclopts

from solrdoc.cli.console import get_console
from solrdoc.config import Config, configure_logging
from solrdoc.domain.document.model.document import DocumentId
from solrdoc.domain.shared.error import ExternalServiceError, ValidationError
from solrdoc.infrastructure.sink.solr import SolrSink

app = cyclopts.App(name="index", help="Inspect and maintain the search index")


def _sink() -> SolrSink:
    config = Config()
    configure_logging(config.logging)
    return SolrSink(config.solr)


@app.command
def ping() -> None:
    """Check that the Solr core answers."""
    console = get_console()
    sink = _sink()
    if asyncio.run(sink.health()):
        console.success("Solr is reachable")
    else:
        console.error("Solr did not answer", hint="Check solr.url in your config")
        sys.exit(1)


@app.command
def delete(document_id: str, *, commit: bool = True) -> None:
    """Delete one document by composite id.

    Args:
        document_id: Composite id, e.g. Article:42
        commit: Commit right away.
    """
    console = get_console()
    try:
        doc_id = DocumentId.parse(document_id)
    except ValidationError as e:
        console.error(e.message)
        sys.exit(1)

    sink = _sink()

    async def _run() -> None:
        await sink.delete(doc_id)
        if commit:
            await sink.commit()

    try:
        asyncio.run(_run())
    except ExternalServiceError as e:
        console.error(e.message)
        sys.exit(1)
    console.success(f"Deleted {doc_id}")


@app.command
def commit() -> None:
    """Commit pending changes."""
    console = get_console()
    try:
        asyncio.run(_sink().commit())
    except ExternalServiceError as e:
        console.error(e.message)
        sys.exit(1)
    console.success("Committed")
