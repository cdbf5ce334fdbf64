"""Data models for the citation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class Citation:
    """A claim that a response substring is supported by a document substring.

    Attributes:
        id: Identifier, unique within one processing call.
        source_document: Name of the cited document.
        source_type: Content type tag of the cited document.
        text_snippet: The matched document sentence.
        start_index: Start offset of ``text_snippet`` in the document content.
        end_index: End offset (exclusive) in the document content.
        confidence: Similarity score in [0, 1].
        highlighted_text: The matched response substring.
        response_start_index: Start offset in the original response text.
        response_end_index: End offset (exclusive) in the original response text.
        timestamp: Creation time.
        page_number: Page of the snippet, when the document is paged.
    """

    id: str
    source_document: str
    source_type: str
    text_snippet: str
    start_index: int
    end_index: int
    confidence: float
    highlighted_text: str
    response_start_index: int
    response_end_index: int
    timestamp: datetime = field(default_factory=_utcnow)
    page_number: int | None = None

    @property
    def response_span(self) -> tuple[int, int]:
        return self.response_start_index, self.response_end_index

    @property
    def document_span(self) -> tuple[int, int]:
        return self.start_index, self.end_index

    def overlaps(self, other: Citation) -> bool:
        """True if the response spans intersect. Touching spans do not."""
        return not (
            other.response_end_index <= self.response_start_index
            or other.response_start_index >= self.response_end_index
        )

    def with_id(self, citation_id: str) -> Citation:
        return replace(self, id=citation_id)


@dataclass(frozen=True)
class ProcessedResponse:
    """Output of the citation pipeline.

    ``citations`` are in final rank order; ``highlighted_content`` is
    ``content`` with each cited span wrapped and followed by its ordinal
    marker.
    """

    content: str
    citations: list[Citation] = field(default_factory=list)
    highlighted_content: str = ""
