#
# src/gcharness/process/factory.py
#
"""
Factory for creating ProcessRunner instances.
"""
import structlog

from gcharness.exceptions import ConfigurationError
from gcharness.process.protocols import ProcessRunner
from gcharness.process.runner import AsyncProcessRunner

log = structlog.get_logger("process.factory")

RUNNER_MAP = {
    "asyncio": AsyncProcessRunner,
}


def get_runner(runner_name: str, timeout: float | None = None) -> ProcessRunner:
    """
    Factory function to get an instance of a ProcessRunner.
    """
    runner_key = runner_name.lower()
    runner_class = RUNNER_MAP.get(runner_key)

    if not runner_class:
        log.error("Unsupported process runner specified", runner=runner_name)
        raise ConfigurationError(
            f"Unsupported process runner: '{runner_name}'. "
            f"Available runners: {list(RUNNER_MAP.keys())}"
        )

    log.debug("Instantiating process runner", runner=runner_name, timeout=timeout)
    try:
        return runner_class(timeout=timeout)
    except ValueError as e:
        log.error("Failed to instantiate process runner", runner=runner_name, error=str(e))
        raise ConfigurationError(f"Failed to initialize runner '{runner_name}': {e}") from e

# 🔼⚙️
