from cargobay.common.exceptions.base_exceptions import (
    CargobayBaseException,
    ErrorCode,
    NonRetryableException,
)
from cargobay.common.exceptions.build_exceptions import (
    BuildException,
    ToolchainExecutionError,
    ToolchainSpawnError,
    TargetNotFoundError,
    PackageNotFoundError,
    ToolchainFailedError,
    MissingExecutableError,
    ArtifactInvariantError,
)
from cargobay.common.exceptions.discovery_exceptions import (
    DiscoveryException,
    ListingExecuteError,
    ListingFailedError,
    ListingParseError,
)

__all__ = [
    "CargobayBaseException",
    "ErrorCode",
    "NonRetryableException",
    "BuildException",
    "ToolchainExecutionError",
    "ToolchainSpawnError",
    "TargetNotFoundError",
    "PackageNotFoundError",
    "ToolchainFailedError",
    "MissingExecutableError",
    "ArtifactInvariantError",
    "DiscoveryException",
    "ListingExecuteError",
    "ListingFailedError",
    "ListingParseError",
]
