"""
Skill-based job matching engine.

Scores every job against a seeker's skill set by the share of the job's
required skills the seeker already has, then ranks the jobs by that
percentage. Comparison is case-insensitive; results keep the job's own
spelling of each skill.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from careerpath.core.skills import clean_skills
from careerpath.data.models import Job
from careerpath.utils.constants import MatchScoreLevel
from careerpath.utils.exceptions import ValidationError
from careerpath.utils.logger import get_logger

logger = get_logger(__name__)


def match_percentage(matched: int, required: int) -> int:
    """
    ``round(100 * matched / required)`` with halves rounded up.

    A job without required skills counts as one required skill, so it
    scores 0 rather than dividing by zero.
    """
    total = max(required, 1)
    return (200 * matched + total) // (2 * total)


@dataclass
class MatchResult:
    """Result of matching one job against a seeker's skills."""

    job: Job
    already_have: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    match_percent: int = 0

    @property
    def level(self) -> MatchScoreLevel:
        return MatchScoreLevel.from_percent(self.match_percent)

    def to_dict(self) -> dict[str, Any]:
        """Job fields plus the match breakdown, salary formatted for display."""
        job = self.job
        return {
            "id": str(job.id) if job.id else None,
            "title": job.title,
            "company": job.company,
            "location": job.location,
            "work_type": job.work_type,
            "salary": job.salary_display,
            "seniority": job.seniority,
            "summary": job.summary,
            "required_skills": list(job.required_skills),
            "already_have": list(self.already_have),
            "missing_skills": list(self.missing_skills),
            "match_percent": self.match_percent,
            "match_level": self.level.value,
            "apply_url": job.apply_url,
            "created_at": job.created_at.isoformat(),
        }


class MatchingEngine:
    """Scores and ranks jobs for a set of seeker skills."""

    @staticmethod
    def skill_keys(skills: Iterable[str]) -> set[str]:
        """Canonical comparison form of a skill set."""
        return {skill.strip().lower() for skill in skills}

    def match_job(self, skill_keys: set[str], job: Job) -> MatchResult:
        """Partition one job's required skills into held and missing."""
        required = list(job.required_skills)
        have = [skill for skill in required if skill.lower() in skill_keys]
        missing = [skill for skill in required if skill.lower() not in skill_keys]
        return MatchResult(
            job=job,
            already_have=have,
            missing_skills=missing,
            match_percent=match_percentage(len(have), len(required)),
        )

    def rank(self, results: list[MatchResult]) -> list[MatchResult]:
        """Highest match first; equal percentages keep their input order."""
        return sorted(results, key=lambda r: r.match_percent, reverse=True)

    def compute_matches(self, skills: Sequence[str], jobs: Sequence[Job]) -> list[MatchResult]:
        """
        Match a seeker's skills against every job.

        Args:
            skills: The seeker's skills, any casing
            jobs: Candidate jobs, in the order ties should keep

        Returns:
            MatchResults sorted by match percentage, descending

        Raises:
            ValidationError: If ``skills`` is not a list of strings or is empty
        """
        cleaned = clean_skills(skills)
        if not cleaned:
            raise ValidationError("No skills provided", fields=["skills"])

        keys = self.skill_keys(cleaned)
        results = [self.match_job(keys, job) for job in jobs]
        logger.debug(f"Matched {len(cleaned)} skills against {len(results)} jobs")
        return self.rank(results)


def compute_matches(skills: Sequence[str], jobs: Sequence[Job]) -> list[MatchResult]:
    """Module-level shortcut for :meth:`MatchingEngine.compute_matches`."""
    return MatchingEngine().compute_matches(skills, jobs)
