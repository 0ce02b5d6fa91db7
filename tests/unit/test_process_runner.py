# tests/unit/test_process_runner.py

"""Tests for AsyncProcessRunner against real child processes."""

from pathlib import Path
from unittest.mock import patch

import pytest

from gcharness.exceptions import ConfigurationError, LaunchError, ProcessTimeoutError, StreamDrainError
from gcharness.process import AsyncProcessRunner, LaunchSpec, ProcessRunner, get_runner

# Well past the default 64 KiB pipe buffer on Linux and macOS.
FLOOD_BYTES = 1024 * 1024


@pytest.mark.asyncio
class TestAsyncProcessRunner:
    """Launch, capture and exit-code handling."""

    async def test_captures_streams_separately(self, python_spec):
        spec = python_spec(
            """
            import sys
            print("to stdout")
            print("to stderr", file=sys.stderr)
            """
        )
        captured = await AsyncProcessRunner().run(spec)

        assert captured.stdout.strip() == "to stdout"
        assert captured.stderr.strip() == "to stderr"
        assert captured.exit_code == 0
        assert captured.complete
        assert captured.launch_spec is spec
        assert captured.duration_seconds >= 0

    async def test_nonzero_exit_is_data(self, python_spec):
        captured = await AsyncProcessRunner().run(python_spec("import sys; sys.exit(7)"))
        assert captured.exit_code == 7
        assert captured.complete

    async def test_arguments_are_not_shell_interpreted(self, python_spec):
        spec = python_spec("import sys; print(sys.argv[1:])", "$HOME", "a b", "*;|")
        captured = await AsyncProcessRunner().run(spec)
        assert captured.stdout.strip() == "['$HOME', 'a b', '*;|']"

    async def test_missing_executable_raises_launch_error(self, tmp_path: Path):
        missing = str(tmp_path / "no-such-runtime")
        with pytest.raises(LaunchError) as excinfo:
            await AsyncProcessRunner().run(LaunchSpec(args=[missing, "-version"]))
        assert excinfo.value.executable == missing
        assert isinstance(excinfo.value.details, FileNotFoundError)

    async def test_non_executable_file_raises_launch_error(self, tmp_path: Path):
        script = tmp_path / "not-executable"
        script.write_text("print('hi')\n")
        script.chmod(0o644)
        with pytest.raises(LaunchError):
            await AsyncProcessRunner().run(LaunchSpec(args=[str(script)]))

    async def test_large_output_on_both_streams_does_not_deadlock(self, python_spec):
        spec = python_spec(
            f"""
            import sys
            block = "x" * 4096
            for _ in range({FLOOD_BYTES} // 4096):
                sys.stderr.write(block)
                sys.stdout.write(block)
            sys.stderr.flush()
            sys.stdout.flush()
            """
        )
        captured = await AsyncProcessRunner(timeout=60).run(spec)

        assert captured.exit_code == 0
        assert len(captured.stdout) == FLOOD_BYTES
        assert len(captured.stderr) == FLOOD_BYTES

    async def test_output_is_complete_when_run_returns(self, python_spec):
        spec = python_spec(
            """
            import sys, time
            for i in range(50):
                print(f"line {i}", flush=True)
                time.sleep(0.001)
            print("last line", file=sys.stderr, flush=True)
            """
        )
        captured = await AsyncProcessRunner().run(spec)
        assert captured.stdout.splitlines()[-1] == "line 49"
        assert captured.stderr.strip() == "last line"

    async def test_invalid_utf8_is_replaced(self, python_spec):
        spec = python_spec("import sys; sys.stdout.buffer.write(b'ok \\xff done')")
        captured = await AsyncProcessRunner().run(spec)
        assert captured.stdout == "ok � done"

    async def test_cwd_and_env_are_applied(self, python_spec, tmp_path: Path):
        base = python_spec("import os; print(os.getcwd()); print(os.environ['GCHARNESS_CHILD_VAR'])")
        spec = LaunchSpec(args=base.args, cwd=tmp_path, env={"GCHARNESS_CHILD_VAR": "set"})
        captured = await AsyncProcessRunner().run(spec)
        cwd_line, env_line = captured.stdout.splitlines()
        assert Path(cwd_line).resolve() == tmp_path.resolve()
        assert env_line == "set"

    async def test_timeout_kills_child_and_keeps_partial_output(self, python_spec):
        spec = python_spec(
            """
            import time
            print("started", flush=True)
            time.sleep(30)
            """
        )
        with pytest.raises(ProcessTimeoutError) as excinfo:
            await AsyncProcessRunner(timeout=1.0).run(spec)

        partial = excinfo.value.partial
        assert excinfo.value.timeout == 1.0
        assert partial is not None
        assert not partial.complete
        assert "started" in partial.stdout
        assert partial.exit_code != 0

    async def test_drain_failure_raises_with_partial_capture(self, python_spec):
        async def broken_drain(reader, buffer, stream):
            if stream == "stderr":
                raise StreamDrainError(stream, details=OSError("pipe broke"))
            while chunk := await reader.read(1024):
                buffer.extend(chunk)

        spec = python_spec("import time; time.sleep(30)")
        with patch("gcharness.process.runner._drain", broken_drain):
            with pytest.raises(StreamDrainError) as excinfo:
                await AsyncProcessRunner().run(spec)

        assert excinfo.value.stream == "stderr"
        assert excinfo.value.partial is not None
        assert not excinfo.value.partial.complete

    async def test_each_run_spawns_its_own_process(self, python_spec):
        runner = AsyncProcessRunner()
        spec = python_spec("import os; print(os.getpid())")
        first = await runner.run(spec)
        second = await runner.run(spec)
        assert first.stdout != second.stdout


class TestRunnerConstruction:
    """Runner options and the factory."""

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout_rejected(self, timeout: float) -> None:
        with pytest.raises(ValueError):
            AsyncProcessRunner(timeout=timeout)

    def test_runner_satisfies_protocol(self) -> None:
        assert isinstance(AsyncProcessRunner(), ProcessRunner)

    @pytest.mark.parametrize("name", ["asyncio", "AsyncIO"])
    def test_factory_returns_async_runner(self, name: str) -> None:
        runner = get_runner(name, timeout=5)
        assert isinstance(runner, AsyncProcessRunner)
        assert runner.timeout == 5

    def test_factory_rejects_unknown_runner(self) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported process runner"):
            get_runner("docker")

    def test_factory_has_no_subprocess_alias(self) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported process runner"):
            get_runner("subprocess")

    def test_factory_wraps_invalid_options(self) -> None:
        with pytest.raises(ConfigurationError, match="Failed to initialize"):
            get_runner("asyncio", timeout=-1)
