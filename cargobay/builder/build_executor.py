from typing import Optional, List

from cargobay.builder.process_invoker import ProcessInvoker, Request
from cargobay.builder.message_parser import MessageStreamParser
from cargobay.builder.error_classifier import BuildErrorClassifier
from cargobay.common.config.settings import Settings, get_settings
from cargobay.common.config.logging_config import get_logger
from cargobay.common.dto.artifact import BuildArtifact
from cargobay.common.exceptions.build_exceptions import (
    ArtifactInvariantError,
    ToolchainExecutionError,
)


logger = get_logger(__name__)


class BuildExecutor:
    """Run one cargo invocation: spawn, stream stdout, wait, classify.

    Stderr is drained concurrently with stdout so neither pipe can fill
    up and stall the child.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        invoker: Optional[ProcessInvoker] = None,
        classifier: Optional[BuildErrorClassifier] = None,
    ):
        self._settings = settings or get_settings()
        self._invoker = invoker or ProcessInvoker(self._settings)
        self._classifier = classifier or BuildErrorClassifier()

    def build_command(self, request: Request) -> List[str]:
        return self._invoker.build_command(request)

    async def execute(
        self,
        request: Request,
        parser: MessageStreamParser,
        command: Optional[List[str]] = None,
    ) -> List[BuildArtifact]:
        command = command or self.build_command(request)
        process = await self._invoker.spawn(command, cwd=request.context.workspace)

        try:
            artifacts = await parser.consume(process.stdout)
        except ArtifactInvariantError:
            await process.terminate()
            raise
        except (OSError, ValueError) as e:
            await process.terminate()
            raise ToolchainExecutionError(
                message=f"Failed to read cargo output: {e}",
                command=command,
                cause=e,
            ) from e

        exit_code = await process.wait()

        try:
            stderr = await process.stderr_text()
        except OSError as e:
            raise ToolchainExecutionError(
                message=f"Failed to read cargo stderr: {e}",
                command=command,
                cause=e,
            ) from e

        if exit_code == 0:
            logger.debug(
                f"Cargo finished: {parser.line_count} lines, "
                f"{parser.diagnostic_count} diagnostics, {len(artifacts)} artifacts"
            )
            return artifacts

        error = self._classifier.classify(stderr, exit_code=exit_code, command=command)
        if request.context.workspace is not None:
            error.with_context(workspace=str(request.context.workspace))
        logger.error(f"Cargo exited with {exit_code}: {error.message}")
        raise error
