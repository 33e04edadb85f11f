"""Admin statistics over users and jobs."""

from .aggregator import (
    AdminStats,
    SkillCount,
    WorkTypeCount,
    compute_stats,
    count_roles,
    count_work_types,
    tally_skills,
)

__all__ = [
    "AdminStats",
    "SkillCount",
    "WorkTypeCount",
    "compute_stats",
    "count_roles",
    "count_work_types",
    "tally_skills",
]
