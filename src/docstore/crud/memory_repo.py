from dataclasses import dataclass, field
from threading import RLock
from typing import Callable
from uuid import uuid4

from loguru import logger

from docstore.config import Settings
from docstore.core.search import search_documents
from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo


def new_id() -> str:
    return str(uuid4())


@dataclass
class MemoryRepo(DocumentRepo):
    """Dict-backed store. Not safe for concurrent use; see SynchronizedMemoryRepo."""
    id_factory: Callable[[], str] = new_id
    _docs: dict[str, Document] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def _issue_id(self) -> str:
        doc_id = self.id_factory()
        while doc_id in self._docs:
            doc_id = self.id_factory()
        return doc_id

    def save(self, doc: Document) -> Document:
        if doc.id is None or doc.id not in self._docs:
            previous = doc.id
            doc.id = self._issue_id()
            logger.debug("Assigned id {} (supplied: {})", doc.id, previous)
        else:
            logger.debug("Replacing document {}", doc.id)
        self._docs[doc.id] = doc
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def _snapshot(self) -> list[Document]:
        return list(self._docs.values())

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        return search_documents(self._snapshot(), request)


@dataclass
class SynchronizedMemoryRepo(MemoryRepo):
    """MemoryRepo guarded by a re-entrant lock; search filters a locked snapshot."""
    _lock: RLock = field(default_factory=RLock, repr=False)

    def save(self, doc: Document) -> Document:
        with self._lock:
            return super().save(doc)

    def find_by_id(self, doc_id: str) -> Document | None:
        with self._lock:
            return super().find_by_id(doc_id)

    def _snapshot(self) -> list[Document]:
        with self._lock:
            return super()._snapshot()


def make_repo(settings: Settings) -> MemoryRepo:
    """Return the store variant selected by settings.synchronized."""
    return SynchronizedMemoryRepo() if settings.synchronized else MemoryRepo()
