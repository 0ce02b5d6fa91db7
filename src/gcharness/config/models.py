#
# config/models.py
#
"""
Attrs-based data models for gcharness configuration structure.
"""

import logging
from pathlib import Path
from typing import Any

from attrs import define, field

from gcharness.config.defaults import (
    DEFAULT_BASE_FLAGS,
    DEFAULT_ENTRY_POINT,
    DEFAULT_PROGRAM_ARGS,
    DEFAULT_RUNNER,
    DEFAULT_RUNTIME,
    DEFAULT_STREAM,
    DEFAULT_TIMEOUT_SECONDS,
    EXPLICIT_GC_SCENARIOS,
)


# --- Validators ---
def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_non_negative(inst: Any, attr: Any, value: float) -> None:
    """Validator ensures a number is zero or greater."""
    if isinstance(value, bool) or not isinstance(value, int | float) or value < 0:
        raise ValueError(f"Field '{attr.name}' must be a non-negative number, got {value!r}")


def _validate_stream(inst: Any, attr: Any, value: str) -> None:
    if value not in ("stdout", "stderr", "both"):
        raise ValueError(f"Invalid stream '{value}'. Must be one of ['stdout', 'stderr', 'both'].")


def _validate_non_empty(inst: Any, attr: Any, value: str) -> None:
    if not value:
        raise ValueError(f"Field '{attr.name}' must not be empty")


def _validate_optional_exit_code(inst: Any, attr: Any, value: int | None) -> None:
    """Validator accepts None or a plain integer exit code."""
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"Field '{attr.name}' must be an integer exit code, got {value!r}")


def _validate_markers(inst: Any, attr: Any, value: tuple[str, ...]) -> None:
    """Validator rejects empty markers, which would match any text."""
    for marker in value:
        if not marker:
            raise ValueError(f"Field '{attr.name}' contains an empty marker")


def _to_str_tuple(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


# --- Scenario and harness models ---
@define(frozen=True, slots=True)
class ScenarioConfig:
    """One flag combination and the markers expected under it."""
    name: str = field(validator=_validate_non_empty)
    flags: tuple[str, ...] = field(default=(), converter=_to_str_tuple)
    required: tuple[str, ...] = field(default=(), converter=_to_str_tuple, validator=_validate_markers)
    forbidden: tuple[str, ...] = field(default=(), converter=_to_str_tuple, validator=_validate_markers)
    expected_exit: int | None = field(default=None, validator=_validate_optional_exit_code)
    description: str = field(default="")

    def __attrs_post_init__(self) -> None:
        overlap = set(self.required) & set(self.forbidden)
        if overlap:
            raise ValueError(f"Scenario '{self.name}' marks {sorted(overlap)} both required and forbidden")


@define(frozen=True, slots=True)
class HarnessConfig:
    """How every scenario's child process is launched."""
    runtime: str = field(default=DEFAULT_RUNTIME, validator=_validate_non_empty)
    base_flags: tuple[str, ...] = field(default=DEFAULT_BASE_FLAGS, converter=_to_str_tuple)
    extra_flags: tuple[str, ...] = field(default=(), converter=_to_str_tuple)
    entry_point: str | None = field(default=DEFAULT_ENTRY_POINT)
    program_args: tuple[str, ...] = field(default=DEFAULT_PROGRAM_ARGS, converter=_to_str_tuple)
    cwd: Path | None = field(default=None)
    timeout: float = field(default=DEFAULT_TIMEOUT_SECONDS, validator=_validate_non_negative)
    stream: str = field(default=DEFAULT_STREAM, validator=_validate_stream)
    runner: str = field(default=DEFAULT_RUNNER)

    @property
    def effective_timeout(self) -> float | None:
        """``None`` when the bound is disabled (timeout of 0)."""
        return float(self.timeout) if self.timeout > 0 else None


@define(frozen=True, slots=True)
class GlobalConfig:
    """Global default settings for gcharness."""
    log_level: str = field(default="INFO", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def default_scenarios() -> tuple[ScenarioConfig, ...]:
    """The four built-in explicit-GC scenarios."""
    return tuple(
        ScenarioConfig(
            name=name,
            flags=flags,
            required=required,
            forbidden=forbidden,
            description=description,
        )
        for name, (flags, required, forbidden, description) in EXPLICIT_GC_SCENARIOS.items()
    )


@define(frozen=True, slots=True)
class GcHarnessConfig:
    """Root configuration object for the gcharness application."""
    harness: HarnessConfig = field(factory=HarnessConfig)
    scenarios: tuple[ScenarioConfig, ...] = field(factory=default_scenarios, converter=tuple)
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})
    config_file_path: Path | None = field(default=None)

    def select(self, names: tuple[str, ...] | list[str]) -> tuple[ScenarioConfig, ...]:
        """Return the named scenarios in configuration order."""
        if not names:
            return self.scenarios
        known = {scenario.name for scenario in self.scenarios}
        unknown = [name for name in names if name not in known]
        if unknown:
            raise KeyError(f"Unknown scenario(s): {unknown}. Available: {sorted(known)}")
        return tuple(scenario for scenario in self.scenarios if scenario.name in names)


# 🔼⚙️
