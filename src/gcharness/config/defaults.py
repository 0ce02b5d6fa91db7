#
# src/gcharness/config/defaults.py
#
"""
Built-in explicit-GC scenario catalog.

Every scenario launches the runtime in "request collection" mode and checks
how the collector answered the request through its ``-Xlog:gc`` output.
"""

DEFAULT_RUNTIME = "java"
DEFAULT_ENTRY_POINT = "TestExplicitGC"
# Any program argument puts the child in request-collection mode.
DEFAULT_PROGRAM_ARGS = ("test",)
DEFAULT_BASE_FLAGS = (
    "-Xmx128m",
    "-XX:+UnlockExperimentalVMOptions",
    "-XX:+UseShenandoahGC",
    "-Xlog:gc",
)
DEFAULT_TIMEOUT_SECONDS = 120.0
DEFAULT_STREAM = "stdout"
DEFAULT_RUNNER = "asyncio"

FULL_MARKERS = ("Pause Full",)
CONCURRENT_MARKERS = (
    "Pause Init Mark",
    "Pause Final Mark",
)

# name -> (extra flags, required markers, forbidden markers, description)
EXPLICIT_GC_SCENARIOS = {
    "default": (
        (),
        CONCURRENT_MARKERS,
        FULL_MARKERS,
        "Explicit GC runs a concurrent cycle by default",
    ),
    "disable-explicit-gc": (
        ("-XX:+DisableExplicitGC",),
        (),
        CONCURRENT_MARKERS + FULL_MARKERS,
        "Explicit GC requests are ignored",
    ),
    "explicit-gc-invokes-concurrent": (
        ("-XX:+ExplicitGCInvokesConcurrent",),
        CONCURRENT_MARKERS,
        FULL_MARKERS,
        "Explicit GC runs a concurrent cycle",
    ),
    "explicit-gc-not-concurrent": (
        ("-XX:-ExplicitGCInvokesConcurrent",),
        FULL_MARKERS,
        CONCURRENT_MARKERS,
        "Explicit GC runs a stop-the-world full collection",
    ),
}

# 🔼⚙️
