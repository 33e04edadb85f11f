"""
Application-wide constants for CareerPath.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Skills
# =============================================================================

# Separator used when skills travel or are stored as a single string
SKILL_SEPARATOR: Final[str] = ","

# Number of skills reported by the admin statistics
TOP_SKILLS_LIMIT: Final[int] = 10


# =============================================================================
# Matching Constants
# =============================================================================

# Match percentage thresholds for categorization
SCORE_THRESHOLDS: Final[dict[str, int]] = {
    "excellent": 85,
    "good": 70,
    "fair": 50,
}


# =============================================================================
# Collections
# =============================================================================

USERS_COLLECTION: Final[str] = "users"
JOBS_COLLECTION: Final[str] = "jobs"


# =============================================================================
# Enumerations
# =============================================================================


class UserRole(str, Enum):
    """Access level of a user account."""

    SEEKER = "seeker"
    EMPLOYER = "employer"
    ADMIN = "admin"


class MatchScoreLevel(Enum):
    """Categorical levels for match percentages."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_percent(cls, percent: int) -> "MatchScoreLevel":
        """Convert a match percentage to a level."""
        if percent >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif percent >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif percent >= SCORE_THRESHOLDS["fair"]:
            return cls.FAIR
        return cls.POOR


class AuditAction(str, Enum):
    """Types of actions that are written to the audit log."""

    USER_REGISTERED = "user_registered"
    ADMIN_SEEDED = "admin_seeded"
    SKILLS_UPDATED = "skills_updated"
    JOB_CREATED = "job_created"
    JOB_DELETED = "job_deleted"
    JOB_DELETED_BY_ADMIN = "job_deleted_by_admin"


class AuditType(str, Enum):
    """Audit log categories."""

    ACCESS = "ACCESS"
    CHANGE = "CHANGE"
    ADMIN = "ADMIN"
