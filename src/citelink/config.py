"""Engine settings loaded from YAML with profile-based overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

DEFAULT_HIGHLIGHT_TEMPLATE = (
    '<span class="cited-text" data-citation-id="{citation_id}">{text}</span>'
)
DEFAULT_MARKER_TEMPLATE = (
    '<sup class="citation-marker" data-citation-id="{citation_id}">[{ordinal}]</sup>'
)

# ---------------------------------------------------------------------------
# Settings sections
# ---------------------------------------------------------------------------


class SegmentationSettings(BaseModel):
    min_sentence_length: int = Field(default=50, ge=0)
    min_candidate_length: int = Field(default=60, ge=0)


class MatchingSettings(BaseModel):
    min_citable_length: int = Field(default=80, ge=0)
    min_document_sentence_length: int = Field(default=50, ge=0)
    similarity_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    min_token_length: int = Field(default=2, ge=0)


class RankingSettings(BaseModel):
    strategy: str = "greedy"
    max_citations: int = Field(default=5, ge=0)


class MarkupSettings(BaseModel):
    highlight_template: str = DEFAULT_HIGHLIGHT_TEMPLATE
    marker_template: str = DEFAULT_MARKER_TEMPLATE


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    segmentation: SegmentationSettings = Field(default_factory=SegmentationSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    ranking: RankingSettings = Field(default_factory=RankingSettings)
    markup: MarkupSettings = Field(default_factory=MarkupSettings)


def _find_settings_file() -> Path | None:
    """Walk up from cwd looking for settings.yaml."""
    profile = os.getenv("CITELINK_PROFILE", "")
    names = [f"settings-{profile}.yaml", "settings.yaml"] if profile else ["settings.yaml"]

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        for name in names:
            candidate = parent / name
            if candidate.exists():
                return candidate
    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a YAML file, falling back to defaults.

    Args:
        path: Explicit settings file. When omitted, ``settings.yaml`` (or
            ``settings-$CITELINK_PROFILE.yaml``) is searched for from the
            current directory upwards.
    """
    path = path or _find_settings_file()
    if path is None:
        return Settings()

    with open(path, encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}

    return Settings(**raw)
