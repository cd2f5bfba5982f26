import asyncio
import json
from typing import Optional, List, Union

from cargobay.common.config.constants import ArtifactFilter, MessageReason
from cargobay.common.config.logging_config import get_logger
from cargobay.common.dto.artifact import BuildArtifact
from cargobay.common.dto.diagnostic import CompilerMessage
from cargobay.common.exceptions.build_exceptions import ArtifactInvariantError


logger = get_logger(__name__)

Message = Union[CompilerMessage, BuildArtifact]


class DiagnosticChannel:
    """Queue of compiler diagnostics produced while a build runs.

    Consume it concurrently with ``await channel.get()`` or afterwards with
    :meth:`drain`.
    """

    def __init__(self):
        self._queue: "asyncio.Queue[CompilerMessage]" = asyncio.Queue()
        self._published = 0

    def publish(self, message: CompilerMessage) -> None:
        self._queue.put_nowait(message)
        self._published += 1

    async def get(self) -> CompilerMessage:
        return await self._queue.get()

    def drain(self) -> List[CompilerMessage]:
        messages: List[CompilerMessage] = []
        while not self._queue.empty():
            messages.append(self._queue.get_nowait())
        return messages

    @property
    def published(self) -> int:
        return self._published

    def __len__(self) -> int:
        return self._queue.qsize()


def parse_message(line: Union[str, bytes]) -> Optional[Message]:
    """Decode one line of ``cargo --message-format=json`` output.

    Returns None for blank lines, non-JSON text and reasons we do not use.
    Raises pydantic's ValidationError for malformed diagnostic or artifact records.
    """
    if isinstance(line, bytes):
        line = line.decode("utf-8", errors="replace")
    line = line.strip()
    if not line:
        return None

    try:
        payload = json.loads(line)
    except json.JSONDecodeError:
        logger.debug(f"Ignoring non-JSON line from cargo: {line[:200]}")
        return None

    if not isinstance(payload, dict):
        return None

    reason = payload.get("reason")
    if reason == MessageReason.COMPILER_MESSAGE.value:
        return CompilerMessage.model_validate(payload)
    if reason == MessageReason.COMPILER_ARTIFACT.value:
        return BuildArtifact.model_validate(payload)

    logger.debug(f"Ignoring cargo message with reason {reason!r}")
    return None


class MessageStreamParser:
    def __init__(
        self,
        artifact_filter: ArtifactFilter,
        diagnostics: Optional[DiagnosticChannel] = None,
        target_name: str = "",
    ):
        self._filter = artifact_filter
        self._diagnostics = diagnostics
        self._target_name = target_name
        self.artifacts: List[BuildArtifact] = []
        self.diagnostic_count = 0
        self.line_count = 0

    async def consume(self, stream: asyncio.StreamReader) -> List[BuildArtifact]:
        async for line in stream:
            self.handle_line(line)
        return list(self.artifacts)

    def handle_line(self, line: Union[str, bytes]) -> None:
        self.line_count += 1
        message = parse_message(line)
        if isinstance(message, CompilerMessage):
            self._handle_compiler_message(message)
        elif isinstance(message, BuildArtifact):
            self._handle_artifact(message)

    def _handle_compiler_message(self, message: CompilerMessage) -> None:
        self.diagnostic_count += 1
        logger.debug(
            f"Got compiler message ({message.message.level}) from {message.package_id}: "
            f"{message.message.message}"
        )
        if self._diagnostics is not None:
            self._diagnostics.publish(message)

    def _handle_artifact(self, artifact: BuildArtifact) -> None:
        if self._filter == ArtifactFilter.EXECUTABLE:
            if artifact.executable is None:
                return
            if self.artifacts:
                executables = [str(a.executable) for a in self.artifacts]
                executables.append(str(artifact.executable))
                raise ArtifactInvariantError(
                    target_name=self._target_name,
                    executables=executables,
                )
        elif not artifact.profile.test:
            # cargo --test builds binaries so that integration tests can run them
            logger.debug(f"Skipping non-test artifact {artifact.target.name}")
            return

        logger.debug(f"Got artifact {artifact.target.name} (fresh={artifact.fresh})")
        self.artifacts.append(artifact)
