from cargobay.common.dto.base import FrozenDTO, ToolchainRecord
from cargobay.common.dto.artifact import (
    Target,
    ArtifactProfile,
    BuildArtifact,
    ExecutableArtifact,
)
from cargobay.common.dto.diagnostic import (
    Diagnostic,
    DiagnosticCode,
    CompilerMessage,
)
from cargobay.common.dto.specs import (
    PackageSpec,
    FeatureSpec,
    BuildContext,
    ExecutableRequest,
    NameSpec,
    TypeSpec,
    TestRequest,
)
from cargobay.common.dto.test_result import TestUnit, TestArtifactResult

__all__ = [
    "FrozenDTO",
    "ToolchainRecord",
    "Target",
    "ArtifactProfile",
    "BuildArtifact",
    "ExecutableArtifact",
    "Diagnostic",
    "DiagnosticCode",
    "CompilerMessage",
    "PackageSpec",
    "FeatureSpec",
    "BuildContext",
    "ExecutableRequest",
    "NameSpec",
    "TypeSpec",
    "TestRequest",
    "TestUnit",
    "TestArtifactResult",
]
