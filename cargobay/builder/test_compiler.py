from typing import Optional, List

from cargobay.builder.build_executor import BuildExecutor
from cargobay.builder.artifact_correlator import ArtifactCorrelator
from cargobay.builder.message_parser import MessageStreamParser, DiagnosticChannel
from cargobay.builder.test_discoverer import TestDiscoverer
from cargobay.common.config.constants import ArtifactFilter
from cargobay.common.config.settings import Settings
from cargobay.common.config.logging_config import get_build_logger
from cargobay.common.dto.artifact import ExecutableArtifact
from cargobay.common.dto.specs import TestRequest
from cargobay.common.dto.test_result import TestArtifactResult
from cargobay.common.utils.time_utils import Timer


class TestCompiler:
    """Compile test artifacts and list the tests in each that match the request."""

    __test__ = False

    def __init__(
        self,
        settings: Optional[Settings] = None,
        executor: Optional[BuildExecutor] = None,
        correlator: Optional[ArtifactCorrelator] = None,
        discoverer: Optional[TestDiscoverer] = None,
    ):
        self._executor = executor or BuildExecutor(settings)
        self._correlator = correlator or ArtifactCorrelator()
        self._discoverer = discoverer or TestDiscoverer()

    async def compile(
        self,
        request: TestRequest,
        diagnostics: Optional[DiagnosticChannel] = None,
    ) -> List[TestArtifactResult]:
        artifacts = await self.build_artifacts(request, diagnostics)

        results: List[TestArtifactResult] = []
        for artifact in artifacts:
            results.append(
                await self._discoverer.discover(
                    artifact,
                    request.name,
                    workspace=request.context.workspace,
                )
            )
        return results

    async def build_artifacts(
        self,
        request: TestRequest,
        diagnostics: Optional[DiagnosticChannel] = None,
    ) -> List[ExecutableArtifact]:
        """Build the test artifacts without filtering by test name."""
        log = get_build_logger(
            "test",
            request.test_type.describe(),
            request.context.package.as_repr(),
        )
        parser = MessageStreamParser(
            ArtifactFilter.TEST,
            diagnostics=diagnostics,
            target_name=request.test_type.describe(),
        )

        with Timer() as timer:
            artifacts = await self._executor.execute(request, parser)
            executables = self._correlator.test_executables(artifacts)

        log.info(f"Built {len(executables)} test artifacts in {timer.elapsed_formatted}")
        return executables
