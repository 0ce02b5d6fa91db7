#
# src/gcharness/process/protocols.py
#
"""
Defines the protocol every process runner implements.
"""
from typing import Protocol, runtime_checkable

from gcharness.process.models import CapturedOutput, LaunchSpec


@runtime_checkable
class ProcessRunner(Protocol):
    """
    Protocol for something that can launch one child and capture its output.
    """
    async def run(self, spec: LaunchSpec) -> CapturedOutput:
        """
        Launches the child described by ``spec`` and waits for it to finish.

        Args:
            spec: The argument vector (and optional cwd/env) of the child.

        Returns:
            A sealed CapturedOutput. A nonzero exit code is reported as data,
            never raised.

        Raises:
            LaunchError: The executable could not be found or spawned.
            StreamDrainError: Reading one of the child's pipes failed.
            ProcessTimeoutError: The runner's timeout expired; the child
                was killed.
        """
        ...

# 🔼⚙️
