"""Skill-based job matching engine module."""

from .matching_engine import (
    MatchingEngine,
    MatchResult,
    compute_matches,
    match_percentage,
)

__all__ = [
    "MatchingEngine",
    "MatchResult",
    "compute_matches",
    "match_percentage",
]
