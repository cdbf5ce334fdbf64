"""Optimal weighted interval scheduling with a cardinality cap.

Maximises the total confidence of at most ``max_count`` non-overlapping
response spans. Candidates are sorted by span end; ``best[i][j]`` is the
best total using the first ``i`` candidates and at most ``j`` picks:

    best[i][j] = max(best[i-1][j], best[p(i)][j-1] + confidence_i)

where ``p(i)`` counts the candidates ending at or before candidate ``i``
starts. Runs in O(n log n + n·k). Picks are returned in discovery order, so
equal-confidence citations rank the same way the greedy strategy ranks them.
"""

from __future__ import annotations

import bisect

from citelink.pipeline.schemas import Citation
from citelink.ranking.base import CitationRanker


class WeightedIntervalRanker(CitationRanker):
    """Exact maximum-total-confidence selection."""

    def select(self, candidates: list[Citation], max_count: int) -> list[Citation]:
        ordered = sorted(
            candidates,
            key=lambda c: (c.response_end_index, c.response_start_index),
        )
        n = len(ordered)
        k = min(max_count, n)
        ends = [c.response_end_index for c in ordered]
        # predecessor[i]: how many of ordered[:i] end at or before ordered[i] starts
        predecessor = [
            bisect.bisect_right(ends, c.response_start_index, 0, i)
            for i, c in enumerate(ordered)
        ]

        best = [[0.0] * (k + 1) for _ in range(n + 1)]
        for i in range(1, n + 1):
            c = ordered[i - 1]
            p = predecessor[i - 1]
            row, prev = best[i], best[i - 1]
            for j in range(1, k + 1):
                take = best[p][j - 1] + c.confidence
                row[j] = take if take > prev[j] else prev[j]

        selected: list[Citation] = []
        i, j = n, k
        while i > 0 and j > 0:
            if best[i][j] == best[i - 1][j]:
                i -= 1
                continue
            selected.append(ordered[i - 1])
            i = predecessor[i - 1]
            j -= 1

        # equal-confidence picks keep discovery order once ranked by confidence
        position = {id(c): idx for idx, c in enumerate(candidates)}
        selected.sort(key=lambda c: position[id(c)])
        return selected
