"""Credential hashing, session tokens and role checks."""

from .passwords import hash_password, verify_password
from .permissions import require_role, require_user
from .tokens import TokenClaims, TokenManager

__all__ = [
    "hash_password",
    "verify_password",
    "require_role",
    "require_user",
    "TokenClaims",
    "TokenManager",
]
