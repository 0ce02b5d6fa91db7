#
# src/gcharness/child.py
#
"""
Reference child program for explicit collection requests.

Run as ``python -m gcharness.child [arg]``: with any argument it announces and
performs an explicit collection, without one it does nothing.
"""
import gc
import sys
from enum import Enum


class Mode(Enum):
    """What the child does, decided once at start-up."""

    DEFAULT = "default"
    REQUEST_COLLECTION = "request_collection"

    @classmethod
    def from_args(cls, args: list[str]) -> "Mode":
        return cls.REQUEST_COLLECTION if args else cls.DEFAULT


def main(argv: list[str] | None = None) -> int:
    mode = Mode.from_args(sys.argv[1:] if argv is None else argv)
    if mode is Mode.REQUEST_COLLECTION:
        print("Requesting explicit collection", flush=True)
        gc.collect()
    return 0


if __name__ == "__main__":
    sys.exit(main())

# 🔼⚙️
