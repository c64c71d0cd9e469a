"""SubmissionSink protocol for pluggable search servers."""

from typing import Protocol

from solrdoc.domain.document.model.document import Document, DocumentId


class SubmissionSink(Protocol):
    """Protocol for the component that ships documents to the search server.

    Batching and commits are the sink's business; the mapper never calls it.
    """

    async def add(self, document: Document) -> None:
        """Add or replace a document in the index.

        Args:
            document: The fully built document.
        """
        ...

    async def delete(self, document_id: DocumentId) -> None:
        """Remove a document from the index.

        Args:
            document_id: Composite id of the document to remove.
        """
        ...

    async def commit(self) -> None:
        """Make pending adds and deletes visible to searches."""
        ...

    async def health(self) -> bool:
        """Check if the search server is reachable.

        Returns:
            True if the server answered, False otherwise.
        """
        ...
