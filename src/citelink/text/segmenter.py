"""Sentence segmentation for response and document text.

Sentences end at a run of ``.``, ``!`` or ``?``. Response sentences keep
exactly one terminal character so that a cleaned sentence can be located
verbatim in the response; document sentences are returned without it.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

TERMINAL_PUNCTUATION = (".", "!", "?")

_TERMINAL_SPLIT_RE = re.compile(r"([.!?]+)")
_TERMINAL_RUN_RE = re.compile(r"[.!?]+")
_BULLET_RE = re.compile(r"^\*\s*")
_DASH_RE = re.compile(r"^[-•]\s*")
_WHITESPACE_RE = re.compile(r"\s+")

DEFAULT_MIN_SENTENCE_LENGTH = 50


def ends_with_terminal(text: str) -> bool:
    return text.endswith(TERMINAL_PUNCTUATION)


def segment(text: str, min_length: int = DEFAULT_MIN_SENTENCE_LENGTH) -> Iterator[str]:
    """Yield complete sentences from ``text``, left to right.

    Trailing text with no terminal punctuation is dropped, as is any
    sentence shorter than ``min_length`` characters.
    """
    parts = _TERMINAL_SPLIT_RE.split(text)
    # parts alternates body, punctuation run, body, ...; the final body has
    # no terminator
    for i in range(0, len(parts) - 1, 2):
        sentence = parts[i].strip() + parts[i + 1][0]
        if len(sentence) < min_length or not ends_with_terminal(sentence):
            continue
        yield sentence


class SentenceSegmenter:
    """Splits text into citation-eligible sentences."""

    def __init__(self, min_length: int = DEFAULT_MIN_SENTENCE_LENGTH):
        self.min_length = min_length

    def segment(self, text: str) -> Iterator[str]:
        return segment(text, min_length=self.min_length)


def clean_sentence(sentence: str) -> str:
    """Strip a leading bullet or dash marker and collapse whitespace."""
    cleaned = sentence.strip()
    cleaned = _BULLET_RE.sub("", cleaned, count=1)
    cleaned = _DASH_RE.sub("", cleaned, count=1)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned)
    return cleaned.strip()


def split_document_sentences(content: str, min_length: int = 50) -> list[str]:
    """Split document content into trimmed sentences longer than ``min_length``.

    Terminal punctuation is not kept.
    """
    pieces = (piece.strip() for piece in _TERMINAL_RUN_RE.split(content))
    return [piece for piece in pieces if len(piece) > min_length]
