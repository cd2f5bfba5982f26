from typing import Optional

from cargobay.builder.build_executor import BuildExecutor
from cargobay.builder.artifact_correlator import ArtifactCorrelator
from cargobay.builder.message_parser import MessageStreamParser, DiagnosticChannel
from cargobay.common.config.constants import ArtifactFilter
from cargobay.common.config.settings import Settings
from cargobay.common.config.logging_config import get_build_logger
from cargobay.common.dto.artifact import ExecutableArtifact
from cargobay.common.dto.specs import ExecutableRequest
from cargobay.common.utils.time_utils import Timer


class BinaryCompiler:
    """Compile a single binary or example (i.e. what you can ``cargo run``)."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        executor: Optional[BuildExecutor] = None,
        correlator: Optional[ArtifactCorrelator] = None,
    ):
        self._executor = executor or BuildExecutor(settings)
        self._correlator = correlator or ArtifactCorrelator()

    async def compile(
        self,
        request: ExecutableRequest,
        diagnostics: Optional[DiagnosticChannel] = None,
    ) -> ExecutableArtifact:
        log = get_build_logger(request.kind, request.name, request.context.package.as_repr())
        command = self._executor.build_command(request)
        parser = MessageStreamParser(
            ArtifactFilter.EXECUTABLE,
            diagnostics=diagnostics,
            target_name=request.name,
        )

        with Timer() as timer:
            artifacts = await self._executor.execute(request, parser, command=command)
            artifact = self._correlator.single_executable(artifacts, request.name, command=command)

        log.info(
            f"Built {request.kind} {request.name} in {timer.elapsed_formatted} "
            f"(fresh={artifact.fresh}): {artifact.executable}"
        )
        return artifact
