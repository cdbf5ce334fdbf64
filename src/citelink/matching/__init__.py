"""Candidate matching between response sentences and source documents."""

from citelink.matching.matcher import CandidateMatcher

__all__ = ["CandidateMatcher"]
