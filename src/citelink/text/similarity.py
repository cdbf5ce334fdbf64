"""Token-set Jaccard similarity between two sentences."""

from __future__ import annotations

import re

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")

DEFAULT_MIN_TOKEN_LENGTH = 2


def normalize(text: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace."""
    text = _NON_WORD_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def tokenize(normalized: str, min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> set[str]:
    """Return the set of tokens longer than ``min_token_length`` characters."""
    return {tok for tok in normalized.split(" ") if len(tok) > min_token_length}


def jaccard_similarity(
    a: str,
    b: str,
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
) -> float:
    """Jaccard index of the normalized token sets of ``a`` and ``b``.

    Returns 1.0 when the normalized strings are identical (including two
    strings that normalize to empty), and 0.0 when either token set is empty.
    """
    norm_a = normalize(a)
    norm_b = normalize(b)

    if norm_a == norm_b:
        return 1.0

    tokens_a = tokenize(norm_a, min_token_length)
    tokens_b = tokenize(norm_b, min_token_length)
    if not tokens_a or not tokens_b:
        return 0.0

    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


class SimilarityScorer:
    """Symmetric sentence similarity scorer."""

    def __init__(self, min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH):
        self.min_token_length = min_token_length

    def score(self, a: str, b: str) -> float:
        return jaccard_similarity(a, b, min_token_length=self.min_token_length)
