from pathlib import Path
from typing import Optional, List, Union

from pydantic import Field

from cargobay.common.dto.base import ToolchainRecord


class Target(ToolchainRecord):
    name: str
    kind: List[str] = Field(default_factory=list)
    crate_types: List[str] = Field(default_factory=list)
    src_path: Path
    edition: Optional[str] = None
    doctest: bool = False
    test: bool = False
    doc: bool = False

    def is_kind(self, kind: str) -> bool:
        return kind in self.kind


class ArtifactProfile(ToolchainRecord):
    opt_level: str
    debuginfo: Optional[Union[int, str]] = None
    debug_assertions: bool = False
    overflow_checks: bool = False
    test: bool = False

    @property
    def is_optimized(self) -> bool:
        return self.opt_level != "0"


class BuildArtifact(ToolchainRecord):
    package_id: str
    manifest_path: Optional[Path] = None
    target: Target
    profile: ArtifactProfile
    features: List[str] = Field(default_factory=list)
    filenames: List[Path] = Field(default_factory=list)
    executable: Optional[Path] = None
    fresh: bool = False


class ExecutableArtifact(ToolchainRecord):
    """A :class:`BuildArtifact` that is guaranteed to have an executable."""

    package_id: str
    manifest_path: Optional[Path] = None
    target: Target
    profile: ArtifactProfile
    features: List[str] = Field(default_factory=list)
    filenames: List[Path] = Field(default_factory=list)
    executable: Path
    fresh: bool = False

    @classmethod
    def from_build_artifact(cls, artifact: BuildArtifact) -> Optional["ExecutableArtifact"]:
        if artifact.executable is None:
            return None
        return cls(
            package_id=artifact.package_id,
            manifest_path=artifact.manifest_path,
            target=artifact.target,
            profile=artifact.profile,
            features=artifact.features,
            filenames=artifact.filenames,
            executable=artifact.executable,
            fresh=artifact.fresh,
        )
