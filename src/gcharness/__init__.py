#
# src/gcharness/__init__.py
#
"""
gcharness: launch a runtime under controlled GC flags, capture its log
output without deadlocking, and assert which collection phases ran.
"""
from gcharness.analysis import AssertionResult, ExpectationKind, OutputAnalyzer, PatternSet
from gcharness.exceptions import (
    AssertionFailure,
    ConfigurationError,
    HarnessError,
    LaunchError,
    ProcessTimeoutError,
    StreamDrainError,
    UnexpectedExitCode,
)
from gcharness.process import AsyncProcessRunner, CapturedOutput, LaunchSpec, ProcessRunner, get_runner
from gcharness.scenarios import DriverReport, Scenario, ScenarioDriver, build_scenarios

__all__ = [
    "AssertionFailure",
    "AssertionResult",
    "AsyncProcessRunner",
    "CapturedOutput",
    "ConfigurationError",
    "DriverReport",
    "ExpectationKind",
    "HarnessError",
    "LaunchError",
    "LaunchSpec",
    "OutputAnalyzer",
    "PatternSet",
    "ProcessRunner",
    "ProcessTimeoutError",
    "Scenario",
    "ScenarioDriver",
    "StreamDrainError",
    "UnexpectedExitCode",
    "build_scenarios",
    "get_runner",
]

# 🔼⚙️
