"""Thread-safe storage implementing the counter and gauge handlers."""

from __future__ import annotations

import threading

from .handles import CounterFn, GaugeFn

_U64_MASK = (1 << 64) - 1


class AtomicCounter(CounterFn):
    """An unsigned 64-bit counter that wraps on overflow."""

    def __init__(self, initial: int = 0) -> None:
        self._lock = threading.Lock()
        self._value = initial & _U64_MASK

    def increment(self, value: int) -> None:
        """Add ``value``, wrapping around at 2**64."""
        with self._lock:
            self._value = (self._value + value) & _U64_MASK

    def absolute(self, value: int) -> None:
        """Raise the counter to ``value`` if it is larger."""
        with self._lock:
            self._value = max(self._value, value & _U64_MASK)

    def load(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"AtomicCounter({self.load()})"


class AtomicGauge(GaugeFn):
    """A floating-point gauge with atomic updates."""

    def __init__(self, initial: float = 0.0) -> None:
        self._lock = threading.Lock()
        self._value = float(initial)

    def increment(self, value: float) -> None:
        """Add ``value`` to the gauge."""
        with self._lock:
            self._value += value

    def decrement(self, value: float) -> None:
        """Subtract ``value`` from the gauge."""
        with self._lock:
            self._value -= value

    def set(self, value: float) -> None:
        """Replace the gauge value."""
        with self._lock:
            self._value = float(value)

    def load(self) -> float:
        """Return the current value."""
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"AtomicGauge({self.load()})"


__all__ = ["AtomicCounter", "AtomicGauge"]