"""Matches a seeker's skills against every posted job."""

from collections.abc import Sequence
from typing import Any

from careerpath.core.matching import MatchingEngine, MatchResult
from careerpath.core.skills import parse_skills
from careerpath.data.repositories import JobRepository
from careerpath.utils.logger import LoggerMixin


class MatchingService(LoggerMixin):
    """Loads jobs and ranks them for a skill set."""

    def __init__(self, jobs: JobRepository, engine: MatchingEngine | None = None) -> None:
        self._jobs = jobs
        self._engine = engine or MatchingEngine()

    def match_jobs(self, skills: str | Sequence[Any]) -> list[MatchResult]:
        """
        Rank all jobs for ``skills``.

        Args:
            skills: Comma-separated text or a list of skill strings

        Raises:
            ValidationError: No usable skills, or non-string entries
        """
        if isinstance(skills, str):
            skills = parse_skills(skills)

        # Newest first, so equal scores list recent postings first
        jobs = self._jobs.list_all()
        results = self._engine.compute_matches(skills, jobs)
        self.logger.debug(f"Ranked {len(results)} jobs")
        return results
