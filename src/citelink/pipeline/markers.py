"""Citation marker insertion.

Rewrites the response back to front: each cited ``[start, end)`` span is
replaced by a highlight wrapper around the original substring, followed by
an ordinal marker. Working from the highest start offset down means every
splice happens left of all spans already rewritten, so the remaining
offsets still index the original text.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from citelink.config import DEFAULT_HIGHLIGHT_TEMPLATE, DEFAULT_MARKER_TEMPLATE
from citelink.pipeline.schemas import Citation

# a wrapper and its marker carry the same citation id
_DEFAULT_CITATION_RE = re.compile(
    r'<span class="cited-text" data-citation-id="([^"]*)">(.*?)</span>'
    r'<sup class="citation-marker" data-citation-id="\1">\[\d+\]</sup>',
    re.DOTALL,
)


class MarkerInserter:
    """Splices highlight wrappers and ordinal markers into response text."""

    def __init__(
        self,
        highlight_template: str = DEFAULT_HIGHLIGHT_TEMPLATE,
        marker_template: str = DEFAULT_MARKER_TEMPLATE,
    ):
        self.highlight_template = highlight_template
        self.marker_template = marker_template

    def render(self, citation: Citation, text: str, ordinal: int) -> str:
        return self.highlight_template.format(
            citation_id=citation.id, text=text,
        ) + self.marker_template.format(
            citation_id=citation.id, ordinal=ordinal,
        )

    def insert_markers(self, text: str, citations: Sequence[Citation]) -> str:
        """Return ``text`` with every citation span wrapped and numbered.

        Args:
            text: The original response text.
            citations: Final citations in rank order. Ordinals follow this
                order, not the position of the span in the text.

        Raises:
            ValueError: If a span falls outside ``text`` or two spans overlap.
        """
        if not citations:
            return text

        ordinals = {id(c): rank for rank, c in enumerate(citations, start=1)}
        back_to_front = sorted(
            citations, key=lambda c: c.response_start_index, reverse=True,
        )
        _validate_spans(back_to_front, len(text))

        pieces: list[str] = []
        cursor = len(text)
        for citation in back_to_front:
            start, end = citation.response_span
            pieces.append(text[end:cursor])
            pieces.append(self.render(citation, text[start:end], ordinals[id(citation)]))
            cursor = start
        pieces.append(text[:cursor])

        return "".join(reversed(pieces))


def _validate_spans(back_to_front: Sequence[Citation], length: int) -> None:
    limit = length
    for c in back_to_front:
        start, end = c.response_span
        if not 0 <= start < end <= length:
            raise ValueError(
                f"Citation {c.id} span [{start}, {end}) is outside text of length {length}"
            )
        if end > limit:
            raise ValueError(f"Citation {c.id} span [{start}, {end}) overlaps another citation")
        limit = start


def insert_markers(text: str, citations: Sequence[Citation]) -> str:
    """Insert markers using the default markup."""
    return MarkerInserter().insert_markers(text, citations)


def strip_markers(highlighted: str) -> str:
    """Remove default-markup highlight wrappers and ordinal markers."""
    return _DEFAULT_CITATION_RE.sub(r"\2", highlighted)
