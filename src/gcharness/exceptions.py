#
# src/gcharness/exceptions.py
#
"""
Custom exceptions for gcharness.

Nothing raised here is retried: every failure is surfaced to the scenario
driver, which decides how it is reported.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gcharness.analysis.results import AssertionResult
    from gcharness.process.models import CapturedOutput


class HarnessError(Exception):
    """Base class for all gcharness errors."""

    pass


class ConfigurationError(HarnessError):
    """Raised when scenario configuration is missing or invalid."""

    pass


class LaunchError(HarnessError):
    """Raised when the child process cannot be found or spawned."""

    def __init__(self, executable: str, details: Exception | None = None):
        self.executable = executable
        self.details = details
        message = f"Could not launch '{executable}'"
        if details is not None:
            message += f": {details}"
        super().__init__(message)
        if details is not None and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class StreamDrainError(HarnessError):
    """Raised when reading one of the child's pipes fails.

    ``partial`` holds whatever was captured before the failure; it is marked
    incomplete and must not be fed to pattern matching.
    """

    def __init__(
        self,
        stream: str,
        partial: "CapturedOutput | None" = None,
        details: Exception | None = None,
    ):
        self.stream = stream
        self.partial = partial
        self.details = details
        super().__init__(f"Failed to drain child {stream}")
        if details is not None and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class ProcessTimeoutError(HarnessError):
    """Raised when the child outlives the runner's timeout and was killed."""

    def __init__(self, timeout: float, partial: "CapturedOutput | None" = None):
        self.timeout = timeout
        self.partial = partial
        super().__init__(f"Child process did not exit within {timeout:g}s and was killed")


class AssertionFailure(HarnessError):
    """Raised when a pattern expectation on captured output is violated."""

    def __init__(self, result: "AssertionResult"):
        self.result = result
        super().__init__(result.message)
        if hasattr(self, "add_note"):
            self.add_note(result.captured.dump())


class UnexpectedExitCode(AssertionFailure):
    """Raised when the child's exit code differs from the asserted one."""

    @property
    def expected(self) -> int | None:
        return self.result.expected_exit

    @property
    def actual(self) -> int:
        return self.result.captured.exit_code


# 🔼⚙️
