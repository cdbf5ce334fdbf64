"""Citation ranking — overlap resolution, deduplication, capping."""

from citelink.ranking.base import CitationRanker
from citelink.ranking.factory import available_rankers, get_ranker

__all__ = ["CitationRanker", "available_rankers", "get_ranker"]
