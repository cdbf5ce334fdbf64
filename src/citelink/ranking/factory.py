"""Ranker factory — registry, lazy import, singleton cache."""

from __future__ import annotations

import importlib
import logging

from citelink.ranking.base import CitationRanker

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Ranker registry: (strategy_key, module_path, class_name)
# ---------------------------------------------------------------------------

_RANKER_REGISTRY: list[tuple[str, str, str]] = [
    ("greedy", "citelink.ranking.greedy", "GreedyRanker"),
    ("weighted", "citelink.ranking.weighted", "WeightedIntervalRanker"),
]

# Singleton cache
_ranker_cache: dict[str, CitationRanker] = {}


def get_ranker(strategy: str = "greedy") -> CitationRanker:
    """Get a citation ranker by strategy name.

    Args:
        strategy: One of ``greedy``, ``weighted``.

    Returns:
        A ``CitationRanker`` instance.
    """
    key = strategy.lower()

    if key in _ranker_cache:
        return _ranker_cache[key]

    for reg_key, module_path, cls_name in _RANKER_REGISTRY:
        if reg_key == key:
            mod = importlib.import_module(module_path)
            cls = getattr(mod, cls_name)
            instance = cls()
            _ranker_cache[key] = instance
            logger.debug("Loaded ranker %s", cls_name)
            return instance

    available = [k for k, _, _ in _RANKER_REGISTRY]
    raise ValueError(f"Unknown ranking strategy '{strategy}'. Available: {available}")


def available_rankers() -> list[str]:
    """Return names of registered ranking strategies."""
    return [k for k, _, _ in _RANKER_REGISTRY]


def clear_cache() -> None:
    """Clear singleton cache (for testing)."""
    _ranker_cache.clear()
