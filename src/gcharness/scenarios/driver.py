#
# src/gcharness/scenarios/driver.py
#
"""
Runs scenarios one after another and aggregates their verdicts.
"""
from collections.abc import Iterable

import structlog
from attrs import define, field

from gcharness.analysis.analyzer import OutputAnalyzer
from gcharness.exceptions import LaunchError, ProcessTimeoutError, StreamDrainError
from gcharness.process.protocols import ProcessRunner
from gcharness.scenarios.models import Scenario
from gcharness.scenarios.state import ScenarioOutcome, ScenarioState
from gcharness.telemetry import StructLogger

log: StructLogger = structlog.get_logger("scenarios.driver")


@define(slots=True)
class DriverReport:
    """Verdicts of every scenario in one driver run, in run order."""
    outcomes: list[ScenarioOutcome] = field(factory=list)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failed(self) -> list[ScenarioOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1


class ScenarioDriver:
    """
    Launches each scenario's child through a ProcessRunner and checks its
    output with an OutputAnalyzer.
    """
    def __init__(self, runner: ProcessRunner, stream: str = "stdout"):
        self._runner = runner
        self._stream = stream
        log.debug("ScenarioDriver initialized.", runner=type(runner).__name__, stream=stream)

    async def run_scenario(self, scenario: Scenario) -> ScenarioOutcome:
        """
        Walk one scenario from PENDING to a terminal state.

        Launch, drain and timeout failures end in ERRORED; they never raise.
        """
        scenario_log = log.bind(scenario=scenario.name)
        outcome = ScenarioOutcome(name=scenario.name)

        outcome.advance(ScenarioState.RUNNING)
        try:
            captured = await self._runner.run(scenario.launch_spec)
        except LaunchError as e:
            scenario_log.error("Scenario could not launch its child", error=str(e))
            outcome.error_message = str(e)
            outcome.advance(ScenarioState.ERRORED)
            return outcome
        except (StreamDrainError, ProcessTimeoutError) as e:
            scenario_log.error("Scenario output capture failed", error=str(e))
            outcome.captured = e.partial
            outcome.error_message = str(e)
            outcome.advance(ScenarioState.ERRORED)
            return outcome

        outcome.captured = captured
        outcome.advance(ScenarioState.CAPTURED)

        analyzer = OutputAnalyzer(captured, stream=self._stream)
        outcome.results = analyzer.check(scenario.patterns, expected_exit=scenario.expected_exit)
        outcome.advance(ScenarioState.ASSERTED)

        if outcome.passed:
            scenario_log.info("Scenario passed", checks=len(outcome.results), emoji_key="pass")
        else:
            for failure in outcome.failures:
                scenario_log.warning(
                    "Expectation violated",
                    kind=failure.kind.value,
                    marker=failure.marker,
                    detail=failure.message,
                    emoji_key="fail",
                )
        return outcome

    async def run_all(self, scenarios: Iterable[Scenario]) -> DriverReport:
        report = DriverReport()
        for scenario in scenarios:
            report.outcomes.append(await self.run_scenario(scenario))
        log.info(
            "All scenarios finished",
            total=len(report.outcomes),
            failed=len(report.failed),
        )
        return report

# 🔼⚙️
