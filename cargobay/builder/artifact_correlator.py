from typing import Optional, List, Iterable

from cargobay.common.config.logging_config import get_logger
from cargobay.common.dto.artifact import BuildArtifact, ExecutableArtifact
from cargobay.common.exceptions.build_exceptions import (
    ArtifactInvariantError,
    MissingExecutableError,
)


logger = get_logger(__name__)


class ArtifactCorrelator:
    def to_executables(self, artifacts: Iterable[BuildArtifact]) -> List[ExecutableArtifact]:
        executables: List[ExecutableArtifact] = []
        for artifact in artifacts:
            executable = ExecutableArtifact.from_build_artifact(artifact)
            if executable is None:
                logger.debug(f"Dropping artifact {artifact.target.name} without executable")
                continue
            executables.append(executable)
        return executables

    def single_executable(
        self,
        artifacts: Iterable[BuildArtifact],
        target_name: str,
        command: Optional[List[str]] = None,
    ) -> ExecutableArtifact:
        executables = self.to_executables(artifacts)

        if not executables:
            raise MissingExecutableError(target_name=target_name, command=command)

        if len(executables) > 1:
            raise ArtifactInvariantError(
                target_name=target_name,
                executables=[str(e.executable) for e in executables],
            )

        return executables[0]

    def test_executables(self, artifacts: Iterable[BuildArtifact]) -> List[ExecutableArtifact]:
        return self.to_executables(artifacts)
