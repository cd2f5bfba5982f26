from typing import Optional, Dict, Any, List

from cargobay.common.exceptions.base_exceptions import (
    CargobayBaseException,
    NonRetryableException,
    ErrorCode,
)


class BuildException(CargobayBaseException):
    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.TOOLCHAIN_FAILED,
        command: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        details = details or {}
        if command:
            details["command"] = command
        super().__init__(message, error_code, details, cause)
        self.command = command


class ToolchainExecutionError(BuildException):
    """Failed to run cargo or to read its output."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.TOOLCHAIN_EXECUTION_ERROR,
        command: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        details = details or {}
        if cause is not None:
            details["io_error"] = str(cause)
        super().__init__(
            message=message,
            error_code=error_code,
            command=command,
            details=details,
            cause=cause,
        )


class ToolchainSpawnError(ToolchainExecutionError):
    def __init__(
        self,
        executable: str,
        command: Optional[List[str]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=f"Failed to spawn `{executable}`: {cause}",
            error_code=ErrorCode.TOOLCHAIN_SPAWN_ERROR,
            command=command,
            details={"executable": executable},
            cause=cause,
        )
        self.executable = executable


class TargetNotFoundError(BuildException):
    def __init__(
        self,
        target_name: str,
        stderr: Optional[str] = None,
        command: Optional[List[str]] = None,
    ):
        super().__init__(
            message=f"`{target_name}` not found",
            error_code=ErrorCode.TARGET_NOT_FOUND,
            command=command,
            details={"target_name": target_name},
        )
        self.target_name = target_name
        self.stderr = stderr


class PackageNotFoundError(BuildException):
    def __init__(
        self,
        package_spec: str,
        stderr: Optional[str] = None,
        command: Optional[List[str]] = None,
    ):
        super().__init__(
            message=f"Package ID specification {package_spec!r} did not match any packages",
            error_code=ErrorCode.PACKAGE_NOT_FOUND,
            command=command,
            details={"package_spec": package_spec},
        )
        self.package_spec = package_spec
        self.stderr = stderr


class ToolchainFailedError(BuildException):
    def __init__(
        self,
        stderr: str,
        exit_code: Optional[int] = None,
        command: Optional[List[str]] = None,
    ):
        details: Dict[str, Any] = {"stderr": stderr}
        if exit_code is not None:
            details["exit_code"] = exit_code
        super().__init__(
            message=f"Cargo build failed, stderr: {stderr}",
            error_code=ErrorCode.TOOLCHAIN_FAILED,
            command=command,
            details=details,
        )
        self.stderr = stderr
        self.exit_code = exit_code


class MissingExecutableError(BuildException):
    def __init__(
        self,
        target_name: str,
        command: Optional[List[str]] = None,
    ):
        super().__init__(
            message=f"Expected build of `{target_name}` to have produced a binary",
            error_code=ErrorCode.MISSING_EXECUTABLE,
            command=command,
            details={"target_name": target_name},
        )
        self.target_name = target_name


class ArtifactInvariantError(NonRetryableException):
    """The toolchain reported more executables than the request allows."""

    def __init__(
        self,
        target_name: str,
        executables: List[str],
    ):
        super().__init__(
            message=(
                "Expected cargo build with --bin or --example to only produce one executable, "
                f"got {len(executables)} for `{target_name}`"
            ),
            error_code=ErrorCode.ARTIFACT_INVARIANT_VIOLATION,
            details={"target_name": target_name, "executables": executables},
            requires_manual_intervention=True,
        )
        self.target_name = target_name
        self.executables = executables
