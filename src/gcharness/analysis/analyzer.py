#
# src/gcharness/analysis/analyzer.py
#
"""
Literal substring assertions over a child's captured output.
"""
import structlog

from gcharness.analysis.patterns import PatternSet
from gcharness.analysis.results import AssertionResult, ExpectationKind
from gcharness.exceptions import AssertionFailure, HarnessError, UnexpectedExitCode
from gcharness.process.models import CapturedOutput

log = structlog.get_logger("analysis.analyzer")

STREAMS = ("stdout", "stderr", "both")


class OutputAnalyzer:
    """
    Wraps a sealed CapturedOutput and checks markers against it.

    Matching is exact, case-sensitive substring search over the whole text of
    the selected stream. The ``should_*`` methods raise on the first violated
    expectation and return ``self`` otherwise, so they chain. ``check`` runs a
    whole PatternSet without stopping at the first failure.
    """
    def __init__(self, captured: CapturedOutput, stream: str = "stdout"):
        if stream not in STREAMS:
            raise ValueError(f"Unknown stream '{stream}'. Expected one of {list(STREAMS)}.")
        if not captured.complete:
            raise HarnessError("Refusing to analyze an incomplete capture")
        self._captured = captured
        self._stream = stream
        self._text = captured.text(stream)
        self._log = log.bind(stream=stream, exit_code=captured.exit_code)

    @property
    def captured(self) -> CapturedOutput:
        return self._captured

    @property
    def stream(self) -> str:
        return self._stream

    @property
    def text(self) -> str:
        return self._text

    def contains(self, marker: str) -> bool:
        return marker in self._text

    def _locate(self, position: int) -> int:
        return self._text.count("\n", 0, position) + 1

    # --- Result builders ---

    def expect_present(self, marker: str) -> AssertionResult:
        if self.contains(marker):
            return AssertionResult(
                passed=True,
                kind=ExpectationKind.REQUIRED,
                message=f"'{marker}' found in {self._stream}",
                captured=self._captured,
                marker=marker,
            )
        return AssertionResult(
            passed=False,
            kind=ExpectationKind.REQUIRED,
            message=f"'{marker}' missing from {self._stream}",
            captured=self._captured,
            marker=marker,
        )

    def expect_absent(self, marker: str) -> AssertionResult:
        position = self._text.find(marker)
        if position == -1:
            return AssertionResult(
                passed=True,
                kind=ExpectationKind.FORBIDDEN,
                message=f"'{marker}' absent from {self._stream}",
                captured=self._captured,
                marker=marker,
            )
        line_number = self._locate(position)
        return AssertionResult(
            passed=False,
            kind=ExpectationKind.FORBIDDEN,
            message=f"'{marker}' found in {self._stream} at offset {position} (line {line_number})",
            captured=self._captured,
            marker=marker,
            position=position,
            line_number=line_number,
        )

    def expect_exit_value(self, code: int) -> AssertionResult:
        actual = self._captured.exit_code
        return AssertionResult(
            passed=actual == code,
            kind=ExpectationKind.EXIT_CODE,
            message=f"Expected exit value {code}, got {actual}",
            captured=self._captured,
            expected_exit=code,
        )

    # --- Raising assertions ---

    def _enforce(self, result: AssertionResult, error_class: type[AssertionFailure] = AssertionFailure) -> "OutputAnalyzer":
        if not result.passed:
            self._log.debug("Assertion failed", kind=result.kind.value, marker=result.marker)
            raise error_class(result)
        return self

    def should_contain(self, marker: str) -> "OutputAnalyzer":
        return self._enforce(self.expect_present(marker))

    def should_not_contain(self, marker: str) -> "OutputAnalyzer":
        return self._enforce(self.expect_absent(marker))

    def should_have_exit_value(self, code: int) -> "OutputAnalyzer":
        return self._enforce(self.expect_exit_value(code), UnexpectedExitCode)

    def should_not_have_exit_value(self, code: int) -> "OutputAnalyzer":
        actual = self._captured.exit_code
        result = AssertionResult(
            passed=actual != code,
            kind=ExpectationKind.EXIT_CODE,
            message=f"Expected exit value other than {code}",
            captured=self._captured,
            expected_exit=code,
        )
        return self._enforce(result, UnexpectedExitCode)

    def stderr_should_be_empty(self) -> "OutputAnalyzer":
        stderr = self._captured.stderr
        result = AssertionResult(
            passed=not stderr,
            kind=ExpectationKind.FORBIDDEN,
            message=f"Expected empty stderr, got {len(stderr)} characters",
            captured=self._captured,
            position=0 if stderr else None,
        )
        return self._enforce(result)

    # --- Whole check pass ---

    def check(self, patterns: PatternSet, expected_exit: int | None = None) -> list[AssertionResult]:
        """
        Evaluate every expectation in ``patterns`` and return all results.

        A failed expectation never stops the remaining ones from running.
        """
        results = [self.expect_present(marker) for marker in patterns.required]
        results.extend(self.expect_absent(marker) for marker in patterns.forbidden)
        if expected_exit is not None:
            results.append(self.expect_exit_value(expected_exit))

        failures = sum(1 for result in results if not result.passed)
        self._log.debug("Check pass complete", checks=len(results), failures=failures)
        return results

# 🔼⚙️
