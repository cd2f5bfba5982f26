from typing import Optional, Dict, Any

from cargobay.common.exceptions.base_exceptions import (
    CargobayBaseException,
    ErrorCode,
)


class DiscoveryException(CargobayBaseException):
    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        executable: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        details = details or {}
        if executable:
            details["executable"] = executable
        super().__init__(message, error_code, details, cause)
        self.executable = executable


class ListingExecuteError(DiscoveryException):
    def __init__(
        self,
        executable: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=f"Failed to execute `{executable} --list`: {cause}",
            error_code=ErrorCode.LISTING_EXECUTE_ERROR,
            executable=executable,
            cause=cause,
        )


class ListingFailedError(DiscoveryException):
    def __init__(
        self,
        stderr: str,
        executable: Optional[str] = None,
        exit_code: Optional[int] = None,
    ):
        details: Dict[str, Any] = {"stderr": stderr}
        if exit_code is not None:
            details["exit_code"] = exit_code
        super().__init__(
            message=(
                "`<test_binary> --list` returned failure. "
                f"Are you using a custom test runner? Stderr: {stderr}"
            ),
            error_code=ErrorCode.LISTING_FAILED,
            executable=executable,
            details=details,
        )
        self.stderr = stderr
        self.exit_code = exit_code


class ListingParseError(DiscoveryException):
    def __init__(
        self,
        output: str,
        executable: Optional[str] = None,
        line: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        details: Dict[str, Any] = {"output": output}
        if line is not None:
            details["line"] = line
        super().__init__(
            message=(
                "Failed to parse stdout of `<test_binary> --list`. "
                f"Are you using a custom test runner? Got: {output}"
            ),
            error_code=ErrorCode.LISTING_PARSE_ERROR,
            executable=executable,
            details=details,
            cause=cause,
        )
        self.output = output
        self.line = line
