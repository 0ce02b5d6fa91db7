#
# src/gcharness/analysis/__init__.py
#
"""
Captured-output assertion sub-package for gcharness.
"""
from .analyzer import OutputAnalyzer
from .patterns import PatternSet
from .results import AssertionResult, ExpectationKind

__all__ = [
    "AssertionResult",
    "ExpectationKind",
    "OutputAnalyzer",
    "PatternSet",
]

# 🔼⚙️
