#
# config/__init__.py
#
"""
Configuration handling sub-package for gcharness.

Exports the loading function and core configuration models.
"""

from .models import (
    GcHarnessConfig,
    GlobalConfig,
    HarnessConfig,
    ScenarioConfig,
    default_scenarios,
)
from .loader import load_config

__all__ = [
    "GcHarnessConfig",
    "GlobalConfig",
    "HarnessConfig",
    "ScenarioConfig",
    "default_scenarios",
    "load_config",
]

# 🔼⚙️
