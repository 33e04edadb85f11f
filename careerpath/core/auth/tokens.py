"""
Session tokens.

Tokens are HS256-signed JWTs carrying the user's id, email, role and name.
They are stateless; logging out is a client-side concern.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from careerpath.data.models import User
from careerpath.utils.config import AuthSettings
from careerpath.utils.constants import UserRole
from careerpath.utils.exceptions import AuthenticationError
from careerpath.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Decoded contents of a session token."""

    user_id: str
    email: str
    role: str
    name: str
    expires_at: datetime


class TokenManager:
    """Issues and verifies session tokens."""

    def __init__(self, settings: AuthSettings) -> None:
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self._ttl = timedelta(days=settings.token_ttl_days)

    def issue(self, user: User, now: Optional[datetime] = None) -> str:
        """Sign a token for ``user``."""
        issued_at = now or datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "role": UserRole(user.role).value,
            "name": user.name,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            AuthenticationError: If the token is expired, tampered with or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.debug("Rejected expired token")
            raise AuthenticationError() from e
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected invalid token: {e}")
            raise AuthenticationError() from e

        return TokenClaims(
            user_id=payload["sub"],
            email=payload.get("email", ""),
            role=payload.get("role", ""),
            name=payload.get("name", ""),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
