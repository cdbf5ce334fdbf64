"""Data models for source documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class SourceDocument:
    """A document that response text may be cited against.

    Attributes:
        id: Unique identifier within a processing call.
        name: Display name, used as the citation's source reference.
        type: Free-form content type tag (``text/plain``, ``pdf``, ...).
        content: Full text content. Citation offsets index into this string.
        uploaded_at: Upload timestamp.
    """

    id: str
    name: str
    type: str
    content: str
    uploaded_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_path(
        cls,
        path: Path,
        doc_id: str | None = None,
        doc_type: str | None = None,
    ) -> SourceDocument:
        """Load a UTF-8 text file as a source document."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        return cls(
            id=doc_id or path.stem,
            name=path.name,
            type=doc_type or (path.suffix.lstrip(".") or "txt"),
            content=content,
        )
