"""
Account operations: registration, login, session lookup and skill updates.
"""

from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from careerpath.core.auth import (
    TokenManager,
    hash_password,
    require_role,
    require_user,
    verify_password,
)
from careerpath.core.skills import normalize_skills
from careerpath.data.models import User, UserRegistration
from careerpath.data.repositories import UserRepository
from careerpath.utils.config import AdminSettings, AuthSettings
from careerpath.utils.constants import AuditAction, AuditType, UserRole
from careerpath.utils.exceptions import AuthenticationError, ConflictError, ValidationError
from careerpath.utils.logger import LoggerMixin, audit_log

from .validation import parse_payload


class AccountService(LoggerMixin):
    """Registers users, signs them in and maintains their skills."""

    def __init__(
        self,
        users: UserRepository,
        tokens: TokenManager,
        auth_settings: AuthSettings,
        admin_settings: AdminSettings,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._auth = auth_settings
        self._admin = admin_settings

    # -------------------------------------------------------------------------
    # Registration & login
    # -------------------------------------------------------------------------

    def resolve_role(self, requested: Optional[str]) -> UserRole:
        """
        Map a requested role onto the roles self-registration may grant.

        Unlike the legacy signup route, which granted admin to anyone who
        asked for it, a requested admin role falls back to seeker unless
        ``AUTH_ALLOW_ADMIN_SIGNUP`` is set.
        """
        if requested == UserRole.EMPLOYER.value:
            return UserRole.EMPLOYER
        if requested == UserRole.ADMIN.value and self._auth.allow_admin_signup:
            return UserRole.ADMIN
        return UserRole.SEEKER

    def register(self, payload: UserRegistration | dict[str, Any]) -> tuple[User, str]:
        """
        Create an account and sign it in.

        Returns:
            The stored user and a session token

        Raises:
            ValidationError: Missing name/email/password, short password, bad email
            ConflictError: The email is already registered
        """
        if isinstance(payload, dict) and not all(payload.get(key) for key in ("name", "email", "password")):
            raise ValidationError(
                "Name, email, and password are required.",
                fields=[k for k in ("name", "email", "password") if not payload.get(k)],
            )

        registration = parse_payload(UserRegistration, payload)
        if len(registration.password) < self._auth.min_password_length:
            raise ValidationError(
                f"Password must be at least {self._auth.min_password_length} characters.",
                fields=["password"],
            )

        if self._users.email_exists(registration.email):
            raise ConflictError("Email already registered")

        user = User(
            name=registration.name,
            email=registration.email,
            password_hash=hash_password(registration.password, rounds=self._auth.bcrypt_rounds),
            role=self.resolve_role(registration.role),
            company=registration.company_profile(),
        )
        user = self._users.create(user)

        self.logger.info(f"Registered {user.role} account {user.id}")
        audit_log(
            AuditAction.USER_REGISTERED,
            {"user_id": str(user.id), "email": user.email, "role": UserRole(user.role).value},
        )
        return user, self._tokens.issue(user)

    def login(self, email: Optional[str], password: Optional[str]) -> tuple[User, str]:
        """
        Check credentials and issue a session token.

        Raises:
            ValidationError: Email or password missing
            AuthenticationError: Unknown email or wrong password
        """
        if not email or not password:
            raise ValidationError(
                "Email and password are required.",
                fields=[k for k, v in (("email", email), ("password", password)) if not v],
            )

        user = self._users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            self.logger.info("Rejected login attempt")
            raise AuthenticationError("Invalid credentials")

        return user, self._tokens.issue(user)

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    def authenticate(self, token: Optional[str]) -> User:
        """
        Resolve a session token to its stored user.

        Raises:
            AuthenticationError: Missing, invalid or expired token, or deleted user
        """
        if not token:
            raise AuthenticationError()
        claims = self._tokens.decode(token)
        user = self._users.get_by_id(claims.user_id)
        if user is None:
            raise AuthenticationError()
        return user

    def current_user(self, token: Optional[str]) -> Optional[User]:
        """Like :meth:`authenticate`, but anonymous visitors get None."""
        try:
            return self.authenticate(token)
        except AuthenticationError:
            return None

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    def update_skills(self, actor: Optional[User], skills: Any) -> list[str]:
        """
        Replace the actor's skills with their normalized form.

        Each skill is trimmed and capitalized word by word; blanks are dropped.
        """
        user = require_user(actor)
        normalized = normalize_skills(skills)
        self._users.update_skills(user.id, normalized)
        user.skills = normalized

        audit_log(
            AuditAction.SKILLS_UPDATED,
            {"user_id": str(user.id), "count": len(normalized)},
            audit_type=AuditType.CHANGE,
        )
        return normalized

    def list_users(self, actor: Optional[User]) -> list[User]:
        """All users, newest first. Admin only."""
        require_role(actor, UserRole.ADMIN)
        return self._users.list_all()

    # -------------------------------------------------------------------------
    # Bootstrap
    # -------------------------------------------------------------------------

    def ensure_admin_user(self) -> Optional[User]:
        """Create the configured admin account unless its email is taken."""
        if self._users.email_exists(self._admin.email):
            return None

        try:
            admin = User(
                name=self._admin.name,
                email=self._admin.email,
                password_hash=hash_password(self._admin.password, rounds=self._auth.bcrypt_rounds),
                role=UserRole.ADMIN,
            )
        except PydanticValidationError as e:
            fields = [str(error["loc"][0]) for error in e.errors() if error.get("loc")]
            self.logger.error(f"Admin account settings rejected: {fields}")
            raise ValidationError("Invalid admin account settings", fields=fields) from e

        admin = self._users.create(admin)

        self.logger.info(f"Seeded default admin user: {admin.email}")
        audit_log(
            AuditAction.ADMIN_SEEDED,
            {"user_id": str(admin.id), "email": admin.email},
            audit_type=AuditType.ADMIN,
        )
        return admin
