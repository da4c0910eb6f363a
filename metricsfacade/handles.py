"""Metric handles and the handler interfaces they forward to."""

from __future__ import annotations

import abc
from typing import Optional

from .common import Number, into_f64

_U64_MAX = (1 << 64) - 1


def _check_u64(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"counter values must be integers, not {type(value).__name__}")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"counter value {value} is outside the unsigned 64-bit range")
    return value


class CounterFn(abc.ABC):
    """Handler behind a counter."""

    @abc.abstractmethod
    def increment(self, value: int) -> None:
        """Increment the counter by ``value``."""

    @abc.abstractmethod
    def absolute(self, value: int) -> None:
        """Set the counter to at least ``value``.

        Callers syncing with an external counter may race; a smaller, stale value
        must never lower the counter.
        """


class GaugeFn(abc.ABC):
    """Handler behind a gauge."""

    @abc.abstractmethod
    def increment(self, value: float) -> None:
        """Increment the gauge by ``value``."""

    @abc.abstractmethod
    def decrement(self, value: float) -> None:
        """Decrement the gauge by ``value``."""

    @abc.abstractmethod
    def set(self, value: float) -> None:
        """Set the gauge to ``value``."""


class HistogramFn(abc.ABC):
    """Handler behind a histogram."""

    @abc.abstractmethod
    def record(self, value: float) -> None:
        """Record ``value`` into the histogram."""


class Counter:
    """A counter handle; without a handler it does nothing."""

    __slots__ = ("_inner",)

    def __init__(self, inner: Optional[CounterFn] = None) -> None:
        self._inner = inner

    @classmethod
    def noop(cls) -> "Counter":
        """Return a counter that discards every update."""
        return cls()

    def increment(self, value: int) -> None:
        """Increment the counter."""
        if self._inner is not None:
            self._inner.increment(_check_u64(value))

    def absolute(self, value: int) -> None:
        """Set the counter to an absolute value."""
        if self._inner is not None:
            self._inner.absolute(_check_u64(value))

    def __repr__(self) -> str:
        return "Counter(..)"


class Gauge:
    """A gauge handle; without a handler it does nothing."""

    __slots__ = ("_inner",)

    def __init__(self, inner: Optional[GaugeFn] = None) -> None:
        self._inner = inner

    @classmethod
    def noop(cls) -> "Gauge":
        """Return a gauge that discards every update."""
        return cls()

    def increment(self, value: Number) -> None:
        """Increment the gauge."""
        if self._inner is not None:
            self._inner.increment(into_f64(value))

    def decrement(self, value: Number) -> None:
        """Decrement the gauge."""
        if self._inner is not None:
            self._inner.decrement(into_f64(value))

    def set(self, value: Number) -> None:
        """Set the gauge."""
        if self._inner is not None:
            self._inner.set(into_f64(value))

    def __repr__(self) -> str:
        return "Gauge(..)"


class Histogram:
    """A histogram handle; without a handler it does nothing."""

    __slots__ = ("_inner",)

    def __init__(self, inner: Optional[HistogramFn] = None) -> None:
        self._inner = inner

    @classmethod
    def noop(cls) -> "Histogram":
        """Return a histogram that discards every value."""
        return cls()

    def record(self, value: Number) -> None:
        """Record a value in the histogram."""
        if self._inner is not None:
            self._inner.record(into_f64(value))

    def __repr__(self) -> str:
        return "Histogram(..)"


__all__ = ["CounterFn", "GaugeFn", "HistogramFn", "Counter", "Gauge", "Histogram"]