"""Display helpers for citations — plain text, HTML preview, bibliography."""

from __future__ import annotations

import html
from collections.abc import Sequence
from datetime import date

from citelink.pipeline.schemas import Citation

PREVIEW_SNIPPET_LENGTH = 200


def confidence_percent(citation: Citation) -> int:
    return round(citation.confidence * 100)


def format_citation(citation: Citation) -> str:
    """Two-line plain-text rendering: source and match, then the snippet."""
    return (
        f"Source: {citation.source_document} ({confidence_percent(citation)}% match)\n"
        f'"{citation.text_snippet}"'
    )


def citation_preview(citation: Citation) -> str:
    """HTML preview block for a tooltip or popover.

    The snippet is truncated to 200 characters. All document-derived text
    is HTML-escaped.
    """
    snippet = citation.text_snippet
    if len(snippet) > PREVIEW_SNIPPET_LENGTH:
        snippet = snippet[:PREVIEW_SNIPPET_LENGTH] + "..."

    return (
        '<div class="citation-preview">\n'
        '  <div class="citation-header">\n'
        f"    <strong>{html.escape(citation.source_document)}</strong>\n"
        f'    <span class="confidence">{confidence_percent(citation)}% match</span>\n'
        "  </div>\n"
        f'  <div class="citation-snippet">"{html.escape(snippet)}"</div>\n'
        "</div>"
    )


def create_bibliography(
    citations: Sequence[Citation],
    retrieved: date | None = None,
) -> list[str]:
    """One numbered entry per distinct source document, in first-cited order."""
    retrieved = retrieved or date.today()
    sources = list(dict.fromkeys(c.source_document for c in citations))
    return [
        f"[{i}] {source}. Retrieved {retrieved.isoformat()}."
        for i, source in enumerate(sources, start=1)
    ]


def format_citations(citations: Sequence[Citation]) -> str:
    """Format citations for display.

    Returns a markdown-formatted sources block, numbered by rank.
    """
    if not citations:
        return ""

    lines = ["\n---\n**Sources:**"]
    for i, c in enumerate(citations, start=1):
        lines.append(f"- [{i}] {c.source_document} ({confidence_percent(c)}% match)")

    return "\n".join(lines)
