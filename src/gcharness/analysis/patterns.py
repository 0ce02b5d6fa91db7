#
# src/gcharness/analysis/patterns.py
#
"""
The literal markers a scenario expects, or forbids, in captured output.
"""
from collections.abc import Iterable
from typing import Any

from attrs import define, field


def _to_markers(value: Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _validate_markers(inst: Any, attr: Any, value: tuple[str, ...]) -> None:
    """Validator rejects empty markers, which would match any text."""
    for marker in value:
        if not isinstance(marker, str) or not marker:
            raise ValueError(f"Field '{attr.name}' contains an empty or non-string marker: {marker!r}")


@define(frozen=True, slots=True)
class PatternSet:
    """
    Markers that must appear and markers that must not appear.

    Each marker is checked on its own against the whole captured text; the
    order of markers carries no meaning.
    """
    required: tuple[str, ...] = field(default=(), converter=_to_markers, validator=_validate_markers)
    forbidden: tuple[str, ...] = field(default=(), converter=_to_markers, validator=_validate_markers)

    def __attrs_post_init__(self) -> None:
        overlap = set(self.required) & set(self.forbidden)
        if overlap:
            raise ValueError(f"Markers cannot be both required and forbidden: {sorted(overlap)}")

    def __len__(self) -> int:
        return len(self.required) + len(self.forbidden)

# 🔼⚙️
