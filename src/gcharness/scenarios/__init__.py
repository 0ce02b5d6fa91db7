#
# src/gcharness/scenarios/__init__.py
#
"""
Scenario definition and driving sub-package for gcharness.
"""
from .driver import DriverReport, ScenarioDriver
from .models import Scenario, build_scenarios
from .state import ScenarioOutcome, ScenarioState

__all__ = [
    "DriverReport",
    "Scenario",
    "ScenarioDriver",
    "ScenarioOutcome",
    "ScenarioState",
    "build_scenarios",
]

# 🔼⚙️
