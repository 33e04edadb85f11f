"""
Utility modules for CareerPath.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
- exceptions: Error taxonomy
"""

from careerpath.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
)
from careerpath.utils.constants import (
    AuditAction,
    AuditType,
    MatchScoreLevel,
    UserRole,
)
from careerpath.utils.exceptions import (
    AuthenticationError,
    CareerPathError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    PersistenceError,
    ValidationError,
)
from careerpath.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    LoggerMixin,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    # Constants
    "AuditAction",
    "AuditType",
    "MatchScoreLevel",
    "UserRole",
    # Exceptions
    "AuthenticationError",
    "CareerPathError",
    "ConflictError",
    "NotFoundError",
    "PermissionDeniedError",
    "PersistenceError",
    "ValidationError",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "LoggerMixin",
]
