"""Citation pipeline — response + documents → ranked, highlighted citations.

segment → match every (document, sentence) pair → rank → insert markers.
Each call is self-contained: matching only sees the documents passed in.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from citelink.config import Settings
from citelink.documents.schemas import SourceDocument
from citelink.matching.matcher import CandidateMatcher
from citelink.pipeline.markers import MarkerInserter
from citelink.pipeline.schemas import Citation, ProcessedResponse
from citelink.ranking.base import CitationRanker
from citelink.ranking.factory import get_ranker
from citelink.text.segmenter import SentenceSegmenter

logger = logging.getLogger(__name__)


class CitationProcessor:
    """Orchestrates segmentation, matching, ranking and marker insertion."""

    def __init__(
        self,
        settings: Settings | None = None,
        ranker: CitationRanker | None = None,
    ):
        self.settings = settings or Settings()
        self.segmenter = SentenceSegmenter(self.settings.segmentation.min_sentence_length)
        self.matcher = CandidateMatcher(self.settings.matching)
        self.ranker = ranker or get_ranker(self.settings.ranking.strategy)
        self.inserter = MarkerInserter(
            highlight_template=self.settings.markup.highlight_template,
            marker_template=self.settings.markup.marker_template,
        )

    def process_response(
        self,
        response_text: str,
        documents: Sequence[SourceDocument],
        max_citations: int | None = None,
    ) -> ProcessedResponse:
        """Extract citations from a response and highlight them.

        Args:
            response_text: The generated response.
            documents: Source documents to cite against.
            max_citations: Cap on the number of citations. Defaults to the
                ``ranking.max_citations`` setting.

        Returns:
            A ``ProcessedResponse``. With no citations, ``highlighted_content``
            equals ``response_text``.
        """
        if max_citations is None:
            max_citations = self.settings.ranking.max_citations

        candidates = self.find_candidates(response_text, documents)
        citations = self.ranker.rank(candidates, max_count=max_citations)
        highlighted = self.inserter.insert_markers(response_text, citations)

        logger.info(
            "Processed response: %d documents, %d candidates, %d citations",
            len(documents), len(candidates), len(citations),
        )

        return ProcessedResponse(
            content=response_text,
            citations=citations,
            highlighted_content=highlighted,
        )

    def find_candidates(
        self,
        response_text: str,
        documents: Sequence[SourceDocument],
    ) -> list[Citation]:
        """All unranked candidates, documents outer, sentences inner."""
        sentences = [
            s for s in self.segmenter.segment(response_text)
            if len(s.strip()) >= self.settings.segmentation.min_candidate_length
        ]

        candidates: list[Citation] = []
        for document in documents:
            for sentence in sentences:
                candidates.extend(self.matcher.match(
                    sentence,
                    document,
                    response_text,
                    citation_id=f"candidate-{len(candidates) + 1}",
                ))

        logger.debug(
            "%d sentences x %d documents -> %d candidates",
            len(sentences), len(documents), len(candidates),
        )
        return candidates

    @staticmethod
    def get_citation(citation_id: str, citations: Sequence[Citation]) -> Citation | None:
        return next((c for c in citations if c.id == citation_id), None)

    @staticmethod
    def citations_for_document(
        document_name: str,
        citations: Sequence[Citation],
    ) -> list[Citation]:
        return [c for c in citations if c.source_document == document_name]


def process_response(
    response_text: str,
    documents: Sequence[SourceDocument],
    max_citations: int | None = None,
    settings: Settings | None = None,
) -> ProcessedResponse:
    """Convenience wrapper around a fresh ``CitationProcessor``."""
    processor = CitationProcessor(settings=settings)
    return processor.process_response(response_text, documents, max_citations)
