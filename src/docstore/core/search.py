"""Query engine: apply a SearchRequest to a collection of documents"""

from typing import Iterable, Optional

from loguru import logger

from docstore.core.clauses import CLAUSES
from docstore.crud.models import Document, SearchRequest


def matches(document: Document, request: Optional[SearchRequest]) -> bool:
    """True when request is None, else the AND of every clause."""
    if request is None:
        return True
    return all(clause(document, request) for clause in CLAUSES)


def search_documents(
    documents: Iterable[Document],
    request: Optional[SearchRequest] = None,
    ) -> list[Document]:
    """Return the documents matching request, in iteration order."""
    scanned = 0
    results = []
    for doc in documents:
        scanned += 1
        if matches(doc, request):
            results.append(doc)
    logger.debug("Search matched {} of {} document(s)", len(results), scanned)
    return results
