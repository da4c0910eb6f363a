"""Helpers that register and describe metrics against the current recorder."""

from __future__ import annotations

import inspect
from typing import Optional, Union

from .common import Unit
from .handles import Counter, Gauge, Histogram
from .key import Key, KeyName
from .label import LabelsLike
from .metadata import Level, Metadata
from .recorder import with_recorder

NameLike = Union[str, KeyName]


def _caller_module(depth: int) -> str:
    """Return the module name of the frame ``depth`` levels above the caller."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                return "__main__"
            frame = frame.f_back
        if frame is None:
            return "__main__"
        module = inspect.getmodule(frame)
        return module.__name__ if module is not None else "__main__"
    finally:
        del frame


def _metadata(target: Optional[str], level: Level) -> Metadata:
    if not isinstance(level, Level):
        raise TypeError(f"level must be a Level, not {type(level).__name__}")
    if target is not None and not isinstance(target, str):
        raise TypeError(f"target must be a string, not {type(target).__name__}")
    # Frames above this one: the public helper, then its caller.
    module = _caller_module(2)
    return Metadata(target if target is not None else module, level, module)


def counter(
    name: NameLike,
    labels: LabelsLike = None,
    *,
    target: Optional[str] = None,
    level: Level = Level.INFO,
) -> Counter:
    """Register a counter with the current recorder and return its handle.

    ``target`` defaults to the calling module.
    """
    metadata = _metadata(target, level)
    key = Key.from_parts(name, labels)
    return with_recorder(lambda recorder: recorder.register_counter(key, metadata))


def gauge(
    name: NameLike,
    labels: LabelsLike = None,
    *,
    target: Optional[str] = None,
    level: Level = Level.INFO,
) -> Gauge:
    """Register a gauge with the current recorder and return its handle.

    ``target`` defaults to the calling module.
    """
    metadata = _metadata(target, level)
    key = Key.from_parts(name, labels)
    return with_recorder(lambda recorder: recorder.register_gauge(key, metadata))


def histogram(
    name: NameLike,
    labels: LabelsLike = None,
    *,
    target: Optional[str] = None,
    level: Level = Level.INFO,
) -> Histogram:
    """Register a histogram with the current recorder and return its handle.

    ``target`` defaults to the calling module.
    """
    metadata = _metadata(target, level)
    key = Key.from_parts(name, labels)
    return with_recorder(lambda recorder: recorder.register_histogram(key, metadata))


def _describe_args(
    name: NameLike, description: str, unit: Optional[Unit]
) -> tuple[KeyName, Optional[Unit], str]:
    if not isinstance(description, str):
        raise TypeError(
            f"description must be a string, not {type(description).__name__}"
        )
    if unit is not None and not isinstance(unit, Unit):
        raise TypeError(f"unit must be a Unit, not {type(unit).__name__}")
    return KeyName(name), unit, description


def describe_counter(
    name: NameLike, description: str, unit: Optional[Unit] = None
) -> None:
    """Describe a counter, optionally giving its unit."""
    args = _describe_args(name, description, unit)
    with_recorder(lambda recorder: recorder.describe_counter(*args))


def describe_gauge(
    name: NameLike, description: str, unit: Optional[Unit] = None
) -> None:
    """Describe a gauge, optionally giving its unit."""
    args = _describe_args(name, description, unit)
    with_recorder(lambda recorder: recorder.describe_gauge(*args))


def describe_histogram(
    name: NameLike, description: str, unit: Optional[Unit] = None
) -> None:
    """Describe a histogram, optionally giving its unit."""
    args = _describe_args(name, description, unit)
    with_recorder(lambda recorder: recorder.describe_histogram(*args))


__all__ = [
    "counter",
    "gauge",
    "histogram",
    "describe_counter",
    "describe_gauge",
    "describe_histogram",
]