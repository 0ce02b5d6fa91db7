#
# src/gcharness/scenarios/state.py
#
"""
Per-scenario progress tracking for the driver.
"""

from enum import Enum, auto

import structlog
from attrs import field, mutable

from gcharness.analysis.results import AssertionResult
from gcharness.process.models import CapturedOutput

log: structlog.stdlib.BoundLogger = structlog.get_logger("scenarios.state")


class ScenarioState(Enum):
    """Lifecycle of one scenario. ASSERTED and ERRORED are terminal."""

    PENDING = auto()
    RUNNING = auto()  # Child process launched.
    CAPTURED = auto()  # Streams drained, exit observed.
    ASSERTED = auto()  # Every expectation evaluated.
    ERRORED = auto()  # Launch, drain or timeout failure; counts as FAIL.


_TRANSITIONS = {
    ScenarioState.PENDING: {ScenarioState.RUNNING},
    ScenarioState.RUNNING: {ScenarioState.CAPTURED, ScenarioState.ERRORED},
    ScenarioState.CAPTURED: {ScenarioState.ASSERTED, ScenarioState.ERRORED},
    ScenarioState.ASSERTED: set(),
    ScenarioState.ERRORED: set(),
}


@mutable(slots=True)
class ScenarioOutcome:
    """
    Holds the progress and verdict of a single scenario.

    Mutable because the driver advances it through its states as the child
    is launched, captured and checked.
    """

    name: str = field()
    state: ScenarioState = field(default=ScenarioState.PENDING)
    captured: CapturedOutput | None = field(default=None, repr=False)
    results: list[AssertionResult] = field(factory=list, repr=False)
    error_message: str | None = field(default=None)

    def advance(self, new_state: ScenarioState) -> None:
        if new_state not in _TRANSITIONS[self.state]:
            raise ValueError(f"Scenario '{self.name}' cannot move from {self.state.name} to {new_state.name}")
        log.debug("Scenario state change", scenario=self.name, old=self.state.name, new=new_state.name)
        self.state = new_state

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self.state]

    @property
    def failures(self) -> list[AssertionResult]:
        return [result for result in self.results if not result.passed]

    @property
    def passed(self) -> bool:
        return self.state == ScenarioState.ASSERTED and not self.failures

    @property
    def verdict(self) -> str:
        if not self.is_terminal:
            return self.state.name
        return "PASS" if self.passed else "FAIL"

# 🔼⚙️
