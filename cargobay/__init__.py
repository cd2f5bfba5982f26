from cargobay.builder import (
    BinaryCompiler,
    TestCompiler,
    TestDiscoverer,
    DiagnosticChannel,
    BuildErrorClassifier,
)
from cargobay.common.config import Settings, get_settings, setup_logging
from cargobay.common.dto import (
    PackageSpec,
    FeatureSpec,
    BuildContext,
    ExecutableRequest,
    NameSpec,
    TypeSpec,
    TestRequest,
    Target,
    ArtifactProfile,
    BuildArtifact,
    ExecutableArtifact,
    CompilerMessage,
    Diagnostic,
    TestUnit,
    TestArtifactResult,
)
from cargobay.common.config.constants import TestUnitKind
from cargobay.common.exceptions import (
    CargobayBaseException,
    BuildException,
    ToolchainExecutionError,
    ToolchainSpawnError,
    TargetNotFoundError,
    PackageNotFoundError,
    ToolchainFailedError,
    MissingExecutableError,
    ArtifactInvariantError,
    DiscoveryException,
    ListingExecuteError,
    ListingFailedError,
    ListingParseError,
)

__version__ = "0.1.0"
__all__ = [
    "BinaryCompiler",
    "TestCompiler",
    "TestDiscoverer",
    "DiagnosticChannel",
    "BuildErrorClassifier",
    "Settings",
    "get_settings",
    "setup_logging",
    "PackageSpec",
    "FeatureSpec",
    "BuildContext",
    "ExecutableRequest",
    "NameSpec",
    "TypeSpec",
    "TestRequest",
    "Target",
    "ArtifactProfile",
    "BuildArtifact",
    "ExecutableArtifact",
    "CompilerMessage",
    "Diagnostic",
    "TestUnit",
    "TestUnitKind",
    "TestArtifactResult",
    "CargobayBaseException",
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
