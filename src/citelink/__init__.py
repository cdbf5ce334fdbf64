"""citelink — sentence-level citation extraction and highlighting."""

from citelink.documents.schemas import SourceDocument
from citelink.pipeline.processor import CitationProcessor, process_response
from citelink.pipeline.schemas import Citation, ProcessedResponse

__version__ = "0.1.0"

__all__ = [
    "Citation",
    "CitationProcessor",
    "ProcessedResponse",
    "SourceDocument",
    "process_response",
]
