"""Tests for citation display helpers."""

from __future__ import annotations

from dataclasses import replace
from datetime import date

from samples import make_citation

from citelink.pipeline.formatting import (
    citation_preview,
    create_bibliography,
    format_citation,
    format_citations,
)


def _citation(doc: str = "handbook.txt", snippet: str = "Wetlands absorb storm surges", conf: float = 0.857):
    return replace(make_citation(0, 10, conf, doc=doc), text_snippet=snippet)


class TestFormatCitation:
    def test_text(self):
        assert format_citation(_citation()) == (
            'Source: handbook.txt (86% match)\n"Wetlands absorb storm surges"'
        )


class TestCitationPreview:
    def test_contains_source_and_confidence(self):
        preview = citation_preview(_citation(conf=1.0))
        assert "<strong>handbook.txt</strong>" in preview
        assert "100% match" in preview
        assert '"Wetlands absorb storm surges"' in preview

    def test_truncates_long_snippet(self):
        preview = citation_preview(_citation(snippet="x" * 250))
        assert "x" * 200 + "..." in preview
        assert "x" * 201 not in preview

    def test_escapes_html(self):
        preview = citation_preview(_citation(doc="<b>evil</b>.txt", snippet="a < b & c"))
        assert "&lt;b&gt;evil&lt;/b&gt;.txt" in preview
        assert "a &lt; b &amp; c" in preview


class TestBibliography:
    def test_unique_sources_in_order(self):
        citations = [
            _citation(doc="b.txt"),
            _citation(doc="a.txt"),
            _citation(doc="b.txt"),
        ]
        entries = create_bibliography(citations, retrieved=date(2024, 5, 1))
        assert entries == [
            "[1] b.txt. Retrieved 2024-05-01.",
            "[2] a.txt. Retrieved 2024-05-01.",
        ]

    def test_empty(self):
        assert create_bibliography([]) == []


class TestFormatCitations:
    def test_sources_block(self):
        formatted = format_citations([_citation(doc="a.txt", conf=1.0), _citation(doc="b.txt")])
        assert "Sources:" in formatted
        assert "- [1] a.txt (100% match)" in formatted
        assert "- [2] b.txt (86% match)" in formatted

    def test_empty(self):
        assert format_citations([]) == ""
