"""Text primitives — sentence segmentation and similarity scoring."""

from citelink.text.segmenter import (
    SentenceSegmenter,
    clean_sentence,
    segment,
    split_document_sentences,
)
from citelink.text.similarity import SimilarityScorer, jaccard_similarity, normalize

__all__ = [
    "SentenceSegmenter",
    "SimilarityScorer",
    "clean_sentence",
    "jaccard_similarity",
    "normalize",
    "segment",
    "split_document_sentences",
]
