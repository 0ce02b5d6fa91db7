#
# src/gcharness/process/runner.py
#
"""
A deadlock-free child process runner using asyncio.subprocess.

Both pipes are drained by their own task while the child runs. Reading one
stream to EOF before touching the other stalls any child that fills the
second pipe's buffer first.
"""
import asyncio
import time

import structlog

from gcharness.exceptions import LaunchError, ProcessTimeoutError, StreamDrainError
from gcharness.process.models import CapturedOutput, LaunchSpec
from gcharness.process.protocols import ProcessRunner

log = structlog.get_logger("process.runner")

READ_CHUNK_SIZE = 64 * 1024
# How long drains may keep reading after the child has been killed.
DRAIN_GRACE_SECONDS = 5.0


async def _drain(reader: asyncio.StreamReader, buffer: bytearray, stream: str) -> None:
    """Append everything ``reader`` yields to ``buffer`` until EOF."""
    try:
        while chunk := await reader.read(READ_CHUNK_SIZE):
            buffer.extend(chunk)
    except OSError as e:
        raise StreamDrainError(stream, details=e) from e


def _decode(data: bytearray) -> str:
    return bytes(data).decode("utf-8", errors="replace")


class AsyncProcessRunner(ProcessRunner):
    """
    Implements the ProcessRunner protocol with asyncio.create_subprocess_exec.

    ``timeout`` bounds the whole run in seconds; ``None`` waits forever.
    """
    def __init__(self, timeout: float | None = None):
        if timeout is not None and timeout <= 0:
            raise ValueError(f"timeout must be positive or None, got {timeout}")
        self._timeout = timeout

    @property
    def timeout(self) -> float | None:
        return self._timeout

    async def run(self, spec: LaunchSpec) -> CapturedOutput:
        runner_log = log.bind(executable=spec.executable, command=spec.command_line)
        runner_log.info("Launching child process", emoji_key="launch")

        started = time.monotonic()
        try:
            process = await asyncio.create_subprocess_exec(
                *spec.args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=spec.cwd,
                env=spec.resolved_env(),
            )
        except OSError as e:
            runner_log.error("Child process could not be launched", error=str(e))
            raise LaunchError(spec.executable, e) from e

        runner_log = runner_log.bind(pid=process.pid)
        stdout_buffer = bytearray()
        stderr_buffer = bytearray()
        drains = [
            asyncio.create_task(_drain(process.stdout, stdout_buffer, "stdout")),
            asyncio.create_task(_drain(process.stderr, stderr_buffer, "stderr")),
        ]
        waiter = asyncio.create_task(process.wait())

        def capture(complete: bool) -> CapturedOutput:
            return CapturedOutput(
                stdout=_decode(stdout_buffer),
                stderr=_decode(stderr_buffer),
                exit_code=process.returncode if process.returncode is not None else -1,
                launch_spec=spec,
                duration_seconds=time.monotonic() - started,
                complete=complete,
            )

        try:
            done, pending = await asyncio.wait(
                [*drains, waiter],
                timeout=self._timeout,
                return_when=asyncio.FIRST_EXCEPTION,
            )
        except asyncio.CancelledError:
            await self._terminate(process, drains, waiter)
            raise

        failed = [task for task in done if task.exception() is not None]
        if failed:
            error = failed[0].exception()
            await self._terminate(process, drains, waiter)
            if isinstance(error, StreamDrainError):
                error.partial = capture(complete=False)
                runner_log.error("Failed to drain child output", stream=error.stream)
                raise error
            runner_log.error("Waiting for child process failed", error=str(error))
            raise StreamDrainError("process", partial=capture(complete=False), details=error) from error

        if pending:
            runner_log.warning(
                "Child process exceeded timeout, killing it",
                timeout=self._timeout,
                emoji_key="time",
            )
            await self._terminate(process, drains, waiter)
            raise ProcessTimeoutError(self._timeout, partial=capture(complete=False))

        result = capture(complete=True)
        runner_log.info(
            "Child process finished",
            exit_code=result.exit_code,
            duration=round(result.duration_seconds, 3),
        )
        runner_log.debug(
            "Child process output",
            stdout_len=len(result.stdout),
            stderr_len=len(result.stderr),
        )
        return result

    async def _terminate(
        self,
        process: asyncio.subprocess.Process,
        drains: list[asyncio.Task],
        waiter: asyncio.Task,
    ) -> None:
        """Kill the child if it is still alive, reap it and settle the drains."""
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
        if not waiter.done():
            await waiter

        _, still_running = await asyncio.wait(drains, timeout=DRAIN_GRACE_SECONDS)
        for task in still_running:
            task.cancel()
        # Retrieve outcomes so failed drains are not reported as never awaited.
        for task in drains:
            if task.done() and not task.cancelled():
                task.exception()

# 🔼⚙️
