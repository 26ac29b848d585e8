"""In-memory document store: upsert with id assignment and created-time preservation"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from docstore.core.matcher import matches
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.clock import Clock, ensure_utc, utc_now
from docstore.core.utils.ids import IdFactory, new_id
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    """Dict-backed repo. Iteration order is the order ids were first saved."""
    id_factory: IdFactory = new_id
    clock: Clock = utc_now
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, doc: Document) -> Document:
        """Upsert doc in place and return it.

        A missing or empty id is replaced with a generated one. created is
        stamped with the clock for new docs that lack it, and always reset
        to the stored value when the id already exists.
        """
        if not doc.id:
            doc.id = self.id_factory()

        existing = self._docs.get(doc.id)
        if existing is None:
            if doc.created is None:
                doc.created = ensure_utc(self.clock())
            logger.debug("created document %s", doc.id)
        else:
            doc.created = existing.created
            logger.debug("updated document %s", doc.id)

        self._docs[doc.id] = doc
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        if request is None or request.is_unconstrained():
            return self.all()
        return [doc for doc in self._docs.values() if matches(doc, request)]

    def all(self) -> list[Document]:
        return list(self._docs.values())

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs
