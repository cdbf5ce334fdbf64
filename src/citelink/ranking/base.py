"""Abstract base class for citation rankers.

A ranker reduces the candidate pool to the final citation list: no two
citations share a response span or overlap in the response, the list is
sorted by confidence (highest first), capped, and renumbered ``cite-1``,
``cite-2``, ... in that order.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from citelink.pipeline.schemas import Citation

logger = logging.getLogger(__name__)

DEFAULT_MAX_CITATIONS = 5


def deduplicate(candidates: Sequence[Citation]) -> list[Citation]:
    """Drop repeated (document, response span) triples, keeping the first."""
    seen: set[tuple[str, int, int]] = set()
    unique: list[Citation] = []
    for c in candidates:
        key = (c.source_document, c.response_start_index, c.response_end_index)
        if key in seen:
            continue
        seen.add(key)
        unique.append(c)
    return unique


def renumber(citations: Sequence[Citation], prefix: str = "cite") -> list[Citation]:
    return [c.with_id(f"{prefix}-{i}") for i, c in enumerate(citations, start=1)]


def by_confidence(citations: Sequence[Citation]) -> list[Citation]:
    """Stable sort, highest confidence first."""
    return sorted(citations, key=lambda c: c.confidence, reverse=True)


class CitationRanker(ABC):
    """Interface for overlap-resolution strategies."""

    def rank(
        self,
        candidates: Sequence[Citation],
        max_count: int = DEFAULT_MAX_CITATIONS,
    ) -> list[Citation]:
        """Select, order and renumber the final citations.

        Args:
            candidates: Possibly overlapping candidates in discovery order.
            max_count: Maximum number of citations to return.

        Returns:
            Non-overlapping citations, highest confidence first.
        """
        if max_count < 0:
            raise ValueError(f"max_count must be >= 0, got {max_count}")
        if max_count == 0 or not candidates:
            return []

        unique = deduplicate(candidates)
        selected = by_confidence(self.select(unique, max_count))

        logger.info(
            "%s: %d candidates -> %d unique -> %d citations",
            self.strategy_name(), len(candidates), len(unique), len(selected),
        )
        return renumber(selected)

    @abstractmethod
    def select(self, candidates: list[Citation], max_count: int) -> list[Citation]:
        """Choose at most ``max_count`` pairwise non-overlapping candidates.

        ``candidates`` are already deduplicated and in discovery order.
        """

    @classmethod
    def strategy_name(cls) -> str:
        """Return human-readable strategy name."""
        return cls.__name__
