"""
Skill string handling shared by the stores, matching and analytics.

Skills travel either as lists of strings or as a single comma-separated
string (legacy rows, free-text form input). Stored skills are capitalized
word-by-word so "node js" and "Node JS" are saved as "Node Js".
"""

from collections.abc import Sequence
from typing import Any, Optional

from careerpath.utils.constants import SKILL_SEPARATOR
from careerpath.utils.exceptions import ValidationError


def parse_skills(text: Optional[str]) -> list[str]:
    """Split comma-separated text into trimmed, non-empty skills."""
    return [part.strip() for part in str(text or "").split(SKILL_SEPARATOR) if part.strip()]


def split_stored_skills(value: Any) -> list[str]:
    """
    Read a stored skill list.

    Accepts the list form used by current documents as well as the
    comma-separated string form of older rows. Anything else reads as empty.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return parse_skills(value)
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return []


def normalize_skill(text: str) -> Optional[str]:
    """Capitalize each word of a skill; returns None for blank input."""
    words = text.split()
    if not words:
        return None
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def ensure_skill_strings(skills: Any, field: str = "skills") -> list[str]:
    """
    Validate that ``skills`` is a sequence of strings.

    Raises:
        ValidationError: If ``skills`` is not a list/tuple or holds non-strings.
    """
    if isinstance(skills, str) or not isinstance(skills, Sequence):
        raise ValidationError("Skills must be an array", fields=[field])
    if any(not isinstance(skill, str) for skill in skills):
        raise ValidationError("Skills must be strings", fields=[field])
    return list(skills)


def normalize_skills(skills: Any) -> list[str]:
    """Validate and normalize a skill list for storage, dropping blanks."""
    normalized = (normalize_skill(skill) for skill in ensure_skill_strings(skills))
    return [skill for skill in normalized if skill]


def clean_skills(skills: Any) -> list[str]:
    """Validate a skill list and trim entries, dropping blanks. Casing is kept."""
    return [skill.strip() for skill in ensure_skill_strings(skills) if skill.strip()]
