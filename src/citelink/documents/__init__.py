"""Source documents and the per-call document registry."""

from citelink.documents.registry import DocumentRegistry
from citelink.documents.schemas import SourceDocument

__all__ = [
    "DocumentRegistry",
    "SourceDocument",
]
