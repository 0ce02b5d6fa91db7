#
# src/gcharness/process/__init__.py
#
"""
Child-process launch and output capture sub-package for gcharness.
"""
from .factory import get_runner
from .models import CapturedOutput, LaunchSpec
from .protocols import ProcessRunner
from .runner import AsyncProcessRunner

__all__ = [
    "AsyncProcessRunner",
    "CapturedOutput",
    "LaunchSpec",
    "ProcessRunner",
    "get_runner",
]

# 🔼⚙️
