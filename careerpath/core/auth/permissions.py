"""Role checks applied by the services before privileged operations."""

from typing import Optional

from careerpath.data.models import User
from careerpath.utils.constants import UserRole
from careerpath.utils.exceptions import AuthenticationError, PermissionDeniedError


def require_user(actor: Optional[User]) -> User:
    """Raise AuthenticationError when no user is signed in."""
    if actor is None:
        raise AuthenticationError()
    return actor


def require_role(actor: Optional[User], role: UserRole) -> User:
    """Raise unless ``actor`` is signed in and holds exactly ``role``."""
    user = require_user(actor)
    if not user.has_role(role):
        raise PermissionDeniedError(f"{role.value} role required")
    return user
