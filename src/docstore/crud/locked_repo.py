"""Serialize access to a repo shared between threads"""

from __future__ import annotations

import threading

from docstore.core.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo


class LockedRepo(DocumentRepo):
    """Wrap a repo so each call holds one lock for its whole duration."""

    def __init__(self, inner: DocumentRepo):
        self.inner = inner
        self._lock = threading.Lock()

    def save(self, doc: Document) -> Document:
        with self._lock:
            return self.inner.save(doc)

    def find_by_id(self, doc_id: str) -> Document | None:
        with self._lock:
            return self.inner.find_by_id(doc_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        with self._lock:
            return self.inner.search(request)
