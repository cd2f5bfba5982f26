from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    UNKNOWN = "E0000"

    # E1xxx: running cargo
    TOOLCHAIN_EXECUTION_ERROR = "E1000"
    TOOLCHAIN_SPAWN_ERROR = "E1001"
    TARGET_NOT_FOUND = "E1002"
    PACKAGE_NOT_FOUND = "E1003"
    TOOLCHAIN_FAILED = "E1004"
    MISSING_EXECUTABLE = "E1005"
    ARTIFACT_INVARIANT_VIOLATION = "E1006"

    # E2xxx: listing tests in built binaries
    LISTING_EXECUTE_ERROR = "E2000"
    LISTING_FAILED = "E2001"
    LISTING_PARSE_ERROR = "E2002"

    @property
    def stage(self) -> str:
        return {"1": "build", "2": "discovery"}.get(self.value[1], "unknown")


class CargobayBaseException(Exception):
    """Root of every error raised by cargobay.

    ``details`` holds structured context (command line, stderr, paths) that
    ends up in JSON logs through :meth:`to_dict`.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details: Dict[str, Any] = dict(details) if details else {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error_code.value}, {self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "exception_type": type(self).__name__,
            "error_code": self.error_code.value,
            "stage": self.error_code.stage,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def with_context(self, **context: Any) -> "CargobayBaseException":
        self.details.update(context)
        return self


class NonRetryableException(CargobayBaseException):
    """An error that rerunning the same request cannot fix."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        requires_manual_intervention: bool = False,
    ):
        super().__init__(message, error_code, details, cause)
        self.requires_manual_intervention = requires_manual_intervention
