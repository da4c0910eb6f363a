"""A lightweight metrics facade: counters, gauges and histograms sent to a pluggable recorder."""

__version__ = "0.1.0"

__all__ = [
    "atomics",
    "common",
    "demo",
    "handles",
    "key",
    "label",
    "macros",
    "metadata",
    "recorder",
]