import asyncio
from pathlib import Path
from typing import Optional, List, Union

from cargobay.common.config.constants import Subcommand
from cargobay.common.config.settings import Settings, get_settings
from cargobay.common.config.logging_config import get_logger
from cargobay.common.dto.specs import BuildContext, ExecutableRequest, TestRequest
from cargobay.common.exceptions.build_exceptions import ToolchainSpawnError


logger = get_logger(__name__)

Request = Union[ExecutableRequest, TestRequest]


class ToolchainProcess:
    """A running cargo child with stderr drained in the background.

    Stdout is left to the caller, which must consume it until EOF before
    calling :meth:`wait`.
    """

    def __init__(self, process: asyncio.subprocess.Process, command: List[str]):
        self._process = process
        self.command = command
        self._stderr_task = asyncio.ensure_future(self._read_stderr())

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def stdout(self) -> asyncio.StreamReader:
        return self._process.stdout

    @property
    def returncode(self) -> Optional[int]:
        return self._process.returncode

    async def _read_stderr(self) -> bytes:
        return await self._process.stderr.read()

    async def wait(self) -> int:
        return await self._process.wait()

    async def stderr_bytes(self) -> bytes:
        return await self._stderr_task

    async def stderr_text(self) -> str:
        stderr = await self.stderr_bytes()
        return stderr.decode("utf-8", errors="replace")

    async def terminate(self) -> None:
        if self._process.returncode is None:
            try:
                self._process.kill()
            except ProcessLookupError:
                pass
        await self._process.wait()
        try:
            await self._stderr_task
        except OSError as e:
            logger.debug(f"Discarding stderr of killed cargo process {self.pid}: {e}")


class ProcessInvoker:
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def build_command(self, request: Request) -> List[str]:
        if isinstance(request, ExecutableRequest):
            return self._build_base_command([Subcommand.BUILD.value], request.context) + request.selector_args()
        if isinstance(request, TestRequest):
            return (
                self._build_base_command([Subcommand.TEST.value, "--no-run"], request.context)
                + request.test_type.to_args()
            )
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    def _build_base_command(self, subcommand: List[str], context: BuildContext) -> List[str]:
        cmd = [self._settings.cargo_path, *subcommand]

        cmd.append(self._settings.message_format_arg())
        cmd.extend(["--package", context.package.as_repr()])

        if context.features is not None:
            cmd.extend(context.features.to_args())

        if context.release:
            cmd.append("--release")

        if context.target_dir is not None:
            cmd.extend(["--target-dir", str(context.target_dir)])

        return cmd

    async def spawn(
        self,
        command: List[str],
        cwd: Optional[Path] = None,
    ) -> ToolchainProcess:
        logger.debug(f"Running command: {' '.join(command)} (cwd={cwd or '.'})")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(cwd) if cwd is not None else None,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                limit=self._settings.stream_limit_bytes,
            )
        except OSError as e:
            raise ToolchainSpawnError(
                executable=command[0],
                command=command,
                cause=e,
            ) from e

        return ToolchainProcess(process, command)
