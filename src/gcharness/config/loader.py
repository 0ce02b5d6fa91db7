#
# config/loader.py
#
"""
Loads gcharness configuration from a TOML file and the environment.

Precedence: environment variables > config file > built-in defaults.
"""

import os
import shlex
import tomllib
from pathlib import Path
from typing import Any

import attrs
import structlog

from gcharness.config.models import (
    GcHarnessConfig,
    GlobalConfig,
    HarnessConfig,
    ScenarioConfig,
    default_scenarios,
)
from gcharness.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")

ENV_RUNTIME = "GCHARNESS_RUNTIME"
ENV_EXTRA_FLAGS = "GCHARNESS_EXTRA_FLAGS"
ENV_LOG_LEVEL = "GCHARNESS_LOG_LEVEL"


def _build(model: type, section: str, data: Any) -> Any:
    """Instantiate an attrs model from a TOML table, wrapping any mistake."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"[{section}] must be a table, got {type(data).__name__}")
    known = {a.name for a in attrs.fields(model)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown key(s) in [{section}]: {unknown}")
    try:
        return model(**data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid [{section}] configuration: {e}") from e


def _table(raw: dict[str, Any], section: str) -> dict[str, Any]:
    value = raw.get(section, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"[{section}] must be a table, got {type(value).__name__}")
    return dict(value)


def _apply_env_overrides(harness: HarnessConfig) -> HarnessConfig:
    changes: dict[str, Any] = {}
    runtime = os.environ.get(ENV_RUNTIME)
    if runtime:
        changes["runtime"] = runtime
    extra_flags = os.environ.get(ENV_EXTRA_FLAGS)
    if extra_flags:
        changes["extra_flags"] = (*harness.extra_flags, *shlex.split(extra_flags))
    if changes:
        log.debug("Applying environment overrides", **changes)
        harness = attrs.evolve(harness, **changes)
    return harness


def _parse(raw: dict[str, Any], config_path: Path | None) -> GcHarnessConfig:
    global_data = _table(raw, "global")
    env_level = os.environ.get(ENV_LOG_LEVEL)
    if env_level:
        global_data["log_level"] = env_level
    global_config = _build(GlobalConfig, "global", global_data)

    harness_data = _table(raw, "harness")
    if "cwd" in harness_data:
        harness_data["cwd"] = Path(harness_data["cwd"])
    harness = _apply_env_overrides(_build(HarnessConfig, "harness", harness_data))

    raw_scenarios = raw.get("scenarios")
    if raw_scenarios is None:
        scenarios = default_scenarios()
    else:
        if not isinstance(raw_scenarios, list) or not raw_scenarios:
            raise ConfigurationError("[[scenarios]] must be a non-empty array of tables")
        scenarios = tuple(
            _build(ScenarioConfig, f"scenarios.{index}", item)
            for index, item in enumerate(raw_scenarios)
        )

    names = [scenario.name for scenario in scenarios]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ConfigurationError(f"Duplicate scenario name(s): {duplicates}")

    return GcHarnessConfig(
        harness=harness,
        scenarios=scenarios,
        global_config=global_config,
        config_file_path=config_path,
    )


def load_config(config_path: Path | None = None) -> GcHarnessConfig:
    """
    Load configuration, falling back to the built-in scenarios.

    Args:
        config_path: TOML file to read, or ``None`` for defaults only.

    Raises:
        ConfigurationError: The file is missing, is not valid TOML, or holds
            invalid values.
    """
    if config_path is None:
        log.debug("No config file given, using built-in scenarios")
        return _parse({}, None)

    load_log = log.bind(config_path=str(config_path))
    load_log.info("Loading configuration", emoji_key="load")
    try:
        with config_path.open("rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: '{config_path}'") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in '{config_path}': {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Could not read '{config_path}': {e}") from e

    config = _parse(raw, config_path)
    load_log.debug("Configuration loaded", scenarios=len(config.scenarios))
    return config

# 🔼⚙️
