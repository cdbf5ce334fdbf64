"""Candidate matching — locate a response sentence in a source document.

For one (response sentence, document) pair the matcher finds the most
similar document sentence above the similarity threshold and resolves the
absolute offsets of both sides. A pair that cannot be matched, or whose
response offset cannot be recovered, yields no candidate.
"""

from __future__ import annotations

import logging

from citelink.config import MatchingSettings
from citelink.documents.schemas import SourceDocument
from citelink.pipeline.schemas import Citation
from citelink.text.segmenter import clean_sentence, ends_with_terminal, split_document_sentences
from citelink.text.similarity import SimilarityScorer

logger = logging.getLogger(__name__)


class CandidateMatcher:
    """Produces at most one scored candidate per sentence/document pair."""

    def __init__(
        self,
        settings: MatchingSettings | None = None,
        scorer: SimilarityScorer | None = None,
    ):
        self.settings = settings or MatchingSettings()
        self.scorer = scorer or SimilarityScorer(self.settings.min_token_length)

    def is_citable(self, cleaned: str) -> bool:
        """Whether a cleaned sentence is long and complete enough to cite."""
        return len(cleaned) >= self.settings.min_citable_length and ends_with_terminal(cleaned)

    def match(
        self,
        sentence: str,
        document: SourceDocument,
        full_response: str,
        citation_id: str = "candidate",
    ) -> list[Citation]:
        """Match a response sentence against a single document.

        Args:
            sentence: A sentence produced by the segmenter.
            document: The document to search.
            full_response: The original response text, used to recover
                response offsets.
            citation_id: Provisional identifier for the candidate.

        Returns:
            A list holding the best candidate, or an empty list.
        """
        cleaned = clean_sentence(sentence)
        if not self.is_citable(cleaned):
            return []

        best_sentence: str | None = None
        best_score = 0.0
        for doc_sentence in split_document_sentences(
            document.content, self.settings.min_document_sentence_length,
        ):
            score = self.scorer.score(cleaned, doc_sentence)
            # strict > keeps the earliest sentence on ties
            if score > self.settings.similarity_threshold and (
                best_sentence is None or score > best_score
            ):
                best_sentence = doc_sentence
                best_score = score

        if best_sentence is None:
            return []

        response_start = full_response.find(cleaned)
        if response_start == -1:
            logger.debug(
                "Dropping match against %s: cleaned sentence not found in response",
                document.name,
            )
            return []

        doc_start = document.content.find(best_sentence)
        return [
            Citation(
                id=citation_id,
                source_document=document.name,
                source_type=document.type,
                text_snippet=best_sentence,
                start_index=doc_start,
                end_index=doc_start + len(best_sentence),
                confidence=best_score,
                highlighted_text=cleaned,
                response_start_index=response_start,
                response_end_index=response_start + len(cleaned),
            ),
        ]
