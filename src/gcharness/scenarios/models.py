#
# src/gcharness/scenarios/models.py
#
"""
Scenarios: one launch spec paired with the markers expected under it.
"""
from attrs import define, field

from gcharness.analysis.patterns import PatternSet
from gcharness.config.models import GcHarnessConfig, HarnessConfig, ScenarioConfig
from gcharness.process.models import LaunchSpec


@define(frozen=True, slots=True)
class Scenario:
    """A single (LaunchSpec, PatternSet) pair."""
    name: str
    launch_spec: LaunchSpec
    patterns: PatternSet
    expected_exit: int | None = field(default=None)
    description: str = field(default="")

    @classmethod
    def from_config(cls, scenario: ScenarioConfig, harness: HarnessConfig) -> "Scenario":
        """Build a fresh LaunchSpec for ``scenario`` under ``harness`` settings."""
        spec = LaunchSpec.build(
            runtime=harness.runtime,
            flags=(*harness.base_flags, *harness.extra_flags, *scenario.flags),
            entry_point=harness.entry_point,
            program_args=harness.program_args,
            cwd=harness.cwd,
        )
        return cls(
            name=scenario.name,
            launch_spec=spec,
            patterns=PatternSet(required=scenario.required, forbidden=scenario.forbidden),
            expected_exit=scenario.expected_exit,
            description=scenario.description,
        )


def build_scenarios(config: GcHarnessConfig, names: tuple[str, ...] | list[str] = ()) -> list[Scenario]:
    """Turn configured scenarios (optionally only ``names``) into runnable ones."""
    return [Scenario.from_config(scenario, config.harness) for scenario in config.select(names)]

# 🔼⚙️
