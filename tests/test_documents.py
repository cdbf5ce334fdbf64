"""Tests for source documents and the document registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from citelink.documents.registry import DocumentRegistry
from citelink.documents.schemas import SourceDocument


def _doc(doc_id: str, name: str | None = None, content: str = "text") -> SourceDocument:
    return SourceDocument(id=doc_id, name=name or f"{doc_id}.txt", type="txt", content=content)


class TestSourceDocument:
    def test_frozen(self):
        doc = _doc("a")
        with pytest.raises(AttributeError):
            doc.content = "changed"  # type: ignore[misc]

    def test_uploaded_at_default(self):
        assert _doc("a").uploaded_at.tzinfo is not None

    def test_from_path(self, tmp_path: Path):
        p = tmp_path / "handbook.md"
        p.write_text("Hello from the handbook.", encoding="utf-8")

        doc = SourceDocument.from_path(p)

        assert doc.id == "handbook"
        assert doc.name == "handbook.md"
        assert doc.type == "md"
        assert doc.content == "Hello from the handbook."

    def test_from_path_overrides(self, tmp_path: Path):
        p = tmp_path / "notes"
        p.write_text("x", encoding="utf-8")
        doc = SourceDocument.from_path(p, doc_id="n-1")
        assert doc.id == "n-1"
        assert doc.type == "txt"
        assert SourceDocument.from_path(p, doc_type="memo").type == "memo"

    def test_from_missing_path(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            SourceDocument.from_path(tmp_path / "missing.txt")


class TestDocumentRegistry:
    def test_register_and_get(self):
        registry = DocumentRegistry()
        registry.register([_doc("a"), _doc("b")])
        assert len(registry) == 2
        assert "a" in registry
        assert registry.get("b").name == "b.txt"
        assert registry.get("missing") is None

    def test_constructor_registers(self):
        registry = DocumentRegistry([_doc("a")])
        assert [d.id for d in registry] == ["a"]

    def test_replace_same_id(self):
        registry = DocumentRegistry([_doc("a", content="old")])
        registry.register([_doc("a", content="new")])
        assert len(registry) == 1
        assert registry.get("a").content == "new"

    def test_get_by_name(self):
        registry = DocumentRegistry([_doc("a", name="Handbook"), _doc("b", name="FAQ")])
        assert registry.get_by_name("FAQ").id == "b"
        assert registry.get_by_name("Nope") is None

    def test_documents_and_clear(self):
        registry = DocumentRegistry([_doc("a"), _doc("b")])
        assert [d.id for d in registry.documents()] == ["a", "b"]
        registry.clear()
        assert len(registry) == 0
