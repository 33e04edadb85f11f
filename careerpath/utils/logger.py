"""
Logging for CareerPath.

All output goes through Loguru. ``setup_logging`` installs a colored stderr
sink and, when file output is enabled, a rotating application log with an
audit log beside it. Only records bound with an ``audit_type`` reach the
audit log; ``audit_log`` is the way to write them.
"""

import sys
from typing import Any, Optional

from loguru import logger

from careerpath.utils.config import AppSettings, LoggingSettings, get_settings
from careerpath.utils.constants import AuditAction, AuditType

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
AUDIT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[audit_type]} | {extra[action]} | {message}"
AUDIT_FILE_NAME = "audit.log"

REDACTED = "***REDACTED***"
SENSITIVE_KEYS = frozenset({
    "password", "passwd", "pwd", "secret", "token", "api_key",
    "apikey", "auth", "credential", "password_hash", "access_token",
})


def _is_audit_record(record: dict[str, Any]) -> bool:
    return "audit_type" in record["extra"]


def _add_file_sinks(log_settings: LoggingSettings, diagnose: bool) -> None:
    log_file = log_settings.file_path
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        format=log_settings.format,
        level=log_settings.level,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        diagnose=diagnose,
        enqueue=True,
    )
    logger.add(
        log_file.parent / AUDIT_FILE_NAME,
        format=AUDIT_FORMAT,
        level="INFO",
        filter=_is_audit_record,
        rotation=log_settings.audit_rotation,
        retention=log_settings.audit_retention,
        compression="zip",
        enqueue=True,
    )


def setup_logging(settings: Optional[AppSettings] = None) -> None:
    """Replace Loguru's default handler with the configured sinks."""
    settings = settings or get_settings()
    log_settings = settings.logging

    # Locals in tracebacks only while debugging locally
    diagnose = settings.debug and settings.environment == "development"

    logger.remove()
    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            diagnose=diagnose,
        )
    if log_settings.file_output:
        _add_file_sinks(log_settings, diagnose)

    logger.debug(f"Logging configured ({settings.environment}, level {log_settings.level})")


def get_logger(name: str) -> Any:
    """Logger tagged with the component that owns it."""
    return logger.bind(component=name)


def redact(data: Any) -> Any:
    """Copy of ``data`` with credential-like keys masked, at any depth."""
    if isinstance(data, dict):
        return {
            key: REDACTED if any(s in str(key).lower() for s in SENSITIVE_KEYS) else redact(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact(item) for item in data]
    return data


def audit_log(
    action: AuditAction,
    details: dict[str, Any],
    audit_type: AuditType = AuditType.ACCESS,
) -> None:
    """
    Write one entry to the audit log.

    Args:
        action: What happened, e.g. ``AuditAction.JOB_DELETED_BY_ADMIN``
        details: Ids and other context; credentials are redacted
        audit_type: ACCESS, CHANGE or ADMIN
    """
    logger.bind(audit_type=audit_type.value, action=action.value).info(str(redact(details)))


class LoggerMixin:
    """Gives a class a ``logger`` property bound to its class name."""

    @property
    def logger(self) -> Any:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(type(self).__name__)
        return self._logger
