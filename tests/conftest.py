import stat
import sys
import textwrap
from pathlib import Path

import pytest

from gcharness.config import GcHarnessConfig, HarnessConfig
from gcharness.process import CapturedOutput, LaunchSpec

# Emulates a runtime's -Xlog:gc output for explicit collection requests.
FAKE_RUNTIME_BODY = """
import sys

args = sys.argv[1:]
flags = [arg for arg in args if arg.startswith("-")]
positional = [arg for arg in args if not arg.startswith("-")]
program_args = positional[1:]

print("[0.004s][info][gc] Using Shenandoah")
if program_args:
    print("Requesting explicit collection")
    if "-XX:+DisableExplicitGC" in flags:
        pass
    elif "-XX:-ExplicitGCInvokesConcurrent" in flags:
        print("[0.101s][info][gc] GC(0) Pause Full (System.gc()) 3M->1M(128M) 4.210ms")
    else:
        print("[0.101s][info][gc] GC(0) Pause Init Mark 0.112ms")
        print("[0.104s][info][gc] GC(0) Concurrent marking 3M->3M(128M) 2.004ms")
        print("[0.105s][info][gc] GC(0) Pause Final Mark 0.205ms")
"""

# Always runs a full collection, whatever the flags say.
BROKEN_RUNTIME_BODY = """
print("[0.101s][info][gc] GC(0) Pause Full (System.gc()) 3M->1M(128M) 4.210ms")
"""


def _make_executable(path: Path, body: str) -> Path:
    path.write_text(f"#!{sys.executable}\n" + textwrap.dedent(body), encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def python_spec():
    """Builds a LaunchSpec running ``code`` with the current interpreter."""
    def _build(code: str, *args: str) -> LaunchSpec:
        return LaunchSpec.build(sys.executable, ["-c", textwrap.dedent(code)], program_args=args)

    return _build


@pytest.fixture
def fake_runtime(tmp_path: Path) -> Path:
    if sys.platform == "win32":
        pytest.skip("Shebang executables are not supported on Windows")
    return _make_executable(tmp_path / "fake-java", FAKE_RUNTIME_BODY)


@pytest.fixture
def broken_runtime(tmp_path: Path) -> Path:
    if sys.platform == "win32":
        pytest.skip("Shebang executables are not supported on Windows")
    return _make_executable(tmp_path / "broken-java", BROKEN_RUNTIME_BODY)


@pytest.fixture
def fake_config(fake_runtime: Path) -> GcHarnessConfig:
    """Built-in scenarios, launched through the fake runtime."""
    return GcHarnessConfig(harness=HarnessConfig(runtime=str(fake_runtime), timeout=30))


@pytest.fixture
def make_captured():
    def _make(stdout: str = "", stderr: str = "", exit_code: int = 0, complete: bool = True) -> CapturedOutput:
        return CapturedOutput(
            stdout=stdout,
            stderr=stderr,
            exit_code=exit_code,
            launch_spec=LaunchSpec(args=["java", "-Xlog:gc", "TestExplicitGC", "test"]),
            complete=complete,
        )

    return _make
