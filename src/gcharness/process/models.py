#
# src/gcharness/process/models.py
#
"""
Immutable values describing one child-process launch and its captured output.
"""
import os
import shlex
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from attrs import define, field

_OUTPUT_DUMP_DIVIDER = "-" * 40


def _to_args(value: Iterable[str]) -> tuple[str, ...]:
    return tuple(str(arg) for arg in value)


def _to_env(value: Mapping[str, str] | None) -> Mapping[str, str] | None:
    if value is None:
        return None
    return MappingProxyType(dict(value))


def _validate_args(inst: Any, attr: Any, value: tuple[str, ...]) -> None:
    """A launch needs at least the executable."""
    if not value or not value[0]:
        raise ValueError("LaunchSpec requires a non-empty argument vector starting with the executable")


@define(frozen=True, slots=True)
class LaunchSpec:
    """
    The ordered argument vector for one child process.

    ``args`` is ``[runtime, *flags, entry_point, *program_args]`` and is passed
    to the OS as a vector, never through a shell.
    """
    args: tuple[str, ...] = field(converter=_to_args, validator=_validate_args)
    cwd: Path | None = field(default=None)
    # Mapping proxies are unhashable; env takes part in eq only.
    env: Mapping[str, str] | None = field(default=None, converter=_to_env, hash=False)

    @classmethod
    def build(
        cls,
        runtime: str,
        flags: Iterable[str] = (),
        entry_point: str | None = None,
        program_args: Iterable[str] = (),
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "LaunchSpec":
        """Assemble a fresh spec from its parts."""
        args = [runtime, *flags]
        if entry_point:
            args.append(entry_point)
        args.extend(program_args)
        return cls(args=args, cwd=cwd, env=env)

    @property
    def executable(self) -> str:
        return self.args[0]

    @property
    def command_line(self) -> str:
        """Shell-quoted rendering, for logs and reports only."""
        return shlex.join(self.args)

    def resolved_env(self) -> dict[str, str] | None:
        """The environment handed to the child: overrides merged over ours."""
        if self.env is None:
            return None
        return {**os.environ, **self.env}


@define(frozen=True, slots=True)
class CapturedOutput:
    """
    Everything a finished child wrote, plus how it exited.

    Instances are only built once the process has been reaped and both of its
    pipes have been drained, so they are sealed from the moment they exist.
    ``complete`` is False for captures salvaged from a timeout or a failed
    drain; those must not be pattern matched.
    """
    stdout: str
    stderr: str
    exit_code: int
    launch_spec: LaunchSpec | None = field(default=None)
    duration_seconds: float = field(default=0.0)
    complete: bool = field(default=True)

    @property
    def output(self) -> str:
        """Standard output followed by standard error."""
        return self.stdout + self.stderr

    def text(self, stream: str = "stdout") -> str:
        if stream == "stdout":
            return self.stdout
        if stream == "stderr":
            return self.stderr
        if stream == "both":
            return self.output
        raise ValueError(f"Unknown stream '{stream}'. Expected 'stdout', 'stderr' or 'both'.")

    def dump(self) -> str:
        """Render the full capture for failure diagnostics."""
        command = self.launch_spec.command_line if self.launch_spec else "<unknown>"
        lines = [
            f"Command: {command}",
            f"Exit code: {self.exit_code}",
            f"--- STDOUT ---\n{self.stdout}",
            f"--- STDERR ---\n{self.stderr}",
        ]
        if not self.complete:
            lines.append("(capture incomplete)")
        return f"\n{_OUTPUT_DUMP_DIVIDER}\n".join(lines)

# 🔼⚙️
