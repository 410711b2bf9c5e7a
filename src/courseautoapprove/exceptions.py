"""
courseautoapprove exception hierarchy.

Configuration-disabled runs are not errors and never raise. Everything here is
raised by the collaborators or the admin settings layer and propagates to the
caller (the scheduler or the CLI).
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class CourseAutoApproveError(Exception):
    """
    Base exception class for all courseautoapprove errors.

    Attributes
    ----------
    message : str
        Human-readable error message
    error_code : str
        Machine-readable error code for categorization
    context : Dict[str, Any]
        Additional error context
    timestamp : datetime
        When the error occurred
    """

    def __init__(
        self,
        message: str,
        error_code: str = "courseautoapprove_error",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = dict(context or {})  # Create a copy to avoid mutation
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging and serialization."""
        return {
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "exception_type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        return f"{self.message} ({self.error_code})"


class ConfigurationError(CourseAutoApproveError):
    """Errors in plugin configuration."""

    def __init__(
        self,
        message: str,
        config_section: Optional[str] = None,
        error_code: str = "config_error",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if config_section:
            context["config_section"] = config_section
        super().__init__(message=message, error_code=error_code, context=context)
        self.config_section = config_section


class SettingValidationError(ConfigurationError):
    """Raised when an admin setting value fails validation."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        super().__init__(
            message=f"Invalid value {value!r} for setting '{name}': {reason}",
            config_section=name,
            error_code="setting_validation_failed",
            context={"value": value, "reason": reason},
        )
        self.name = name
        self.value = value


class RequestStoreError(CourseAutoApproveError):
    """Base exception for course request store failures."""


class RequestNotPendingError(RequestStoreError):
    """Raised when approving or rejecting a request that was already decided."""

    def __init__(self, request_id: int, status: str) -> None:
        super().__init__(
            message=f"Course request {request_id} is not pending (status={status})",
            error_code="request_not_pending",
            context={"request_id": request_id, "status": status},
        )
        self.request_id = request_id
        self.status = status


class UnknownRoleError(RequestStoreError):
    """Raised when the configured creator role does not exist."""

    def __init__(self, shortname: str) -> None:
        super().__init__(
            message=f"Role '{shortname}' does not exist",
            error_code="unknown_role",
            context={"role": shortname},
        )
        self.shortname = shortname
