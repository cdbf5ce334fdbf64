"""In-memory document registry keyed by document id."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from citelink.documents.schemas import SourceDocument

logger = logging.getLogger(__name__)


class DocumentRegistry:
    """Mapping from document id to ``SourceDocument``.

    Registering an id that is already present replaces the earlier document.
    """

    def __init__(self, documents: Iterable[SourceDocument] | None = None):
        self._documents: dict[str, SourceDocument] = {}
        if documents is not None:
            self.register(documents)

    def register(self, documents: Iterable[SourceDocument]) -> None:
        count = 0
        for doc in documents:
            if doc.id in self._documents:
                logger.debug("Replacing registered document %s", doc.id)
            self._documents[doc.id] = doc
            count += 1
        logger.debug("Registered %d documents (%d total)", count, len(self._documents))

    def get(self, doc_id: str) -> SourceDocument | None:
        return self._documents.get(doc_id)

    def get_by_name(self, name: str) -> SourceDocument | None:
        """Return the first registered document with the given display name."""
        for doc in self._documents.values():
            if doc.name == name:
                return doc
        return None

    def documents(self) -> list[SourceDocument]:
        return list(self._documents.values())

    def clear(self) -> None:
        self._documents.clear()

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[SourceDocument]:
        return iter(self._documents.values())
