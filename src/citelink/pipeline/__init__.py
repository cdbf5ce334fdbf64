"""End-to-end citation pipeline — schemas, markers, processor, formatting."""

from citelink.pipeline.schemas import Citation, ProcessedResponse
from citelink.pipeline.markers import MarkerInserter, insert_markers, strip_markers
from citelink.pipeline.processor import CitationProcessor, process_response

__all__ = [
    "Citation",
    "CitationProcessor",
    "MarkerInserter",
    "ProcessedResponse",
    "insert_markers",
    "process_response",
    "strip_markers",
]
