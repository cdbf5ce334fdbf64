"""Confidence-first greedy interval selection.

Candidates are visited from highest to lowest confidence and accepted when
their response span does not intersect an accepted one. This does not
maximise total confidence (see ``WeightedIntervalRanker`` for that) but it
always keeps the single most confident citation and runs in
O(n log n + n·k).
"""

from __future__ import annotations

from citelink.pipeline.schemas import Citation
from citelink.ranking.base import CitationRanker, by_confidence


class GreedyRanker(CitationRanker):
    """Accept candidates in confidence order while they do not overlap."""

    def select(self, candidates: list[Citation], max_count: int) -> list[Citation]:
        accepted: list[Citation] = []
        for candidate in by_confidence(candidates):
            if len(accepted) >= max_count:
                break
            if any(candidate.overlaps(a) for a in accepted):
                continue
            accepted.append(candidate)
        return accepted
