#
# src/gcharness/analysis/results.py
#
"""
Outcome of a single expectation checked against captured output.
"""
from enum import Enum

from attrs import define, field

from gcharness.process.models import CapturedOutput


class ExpectationKind(Enum):
    """What an assertion expected of the captured output."""

    REQUIRED = "required"
    FORBIDDEN = "forbidden"
    EXIT_CODE = "exit_code"


@define(frozen=True, slots=True)
class AssertionResult:
    """
    One checked expectation. Failed results keep the capture they were
    checked against so the whole output can be dumped for diagnosis.
    """
    passed: bool
    kind: ExpectationKind
    message: str
    captured: CapturedOutput = field(repr=False)
    marker: str | None = field(default=None)
    position: int | None = field(default=None)  # First occurrence of a forbidden marker
    line_number: int | None = field(default=None)
    expected_exit: int | None = field(default=None)

# 🔼⚙️
