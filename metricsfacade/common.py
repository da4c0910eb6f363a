"""Units of measure, gauge operations and numeric conversion helpers."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

Number = Union[int, float, timedelta]

_CANONICAL_LABELS = {
    "count": "",
    "percent": "%",
    "seconds": "s",
    "milliseconds": "ms",
    "microseconds": "μs",
    "nanoseconds": "ns",
    "tebibytes": "TiB",
    "gibibytes": "GiB",
    "mebibytes": "MiB",
    "kibibytes": "KiB",
    "bytes": "B",
    "terabits_per_second": "Tbps",
    "gigabits_per_second": "Gbps",
    "megabits_per_second": "Mbps",
    "kilobits_per_second": "kbps",
    "bits_per_second": "bps",
    "count_per_second": "/s",
}


class Unit(enum.Enum):
    """Unit of measure for a metric."""

    COUNT = "count"
    PERCENT = "percent"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"
    TEBIBYTES = "tebibytes"
    GIBIBYTES = "gibibytes"
    MEBIBYTES = "mebibytes"
    KIBIBYTES = "kibibytes"
    BYTES = "bytes"
    TERABITS_PER_SECOND = "terabits_per_second"
    GIGABITS_PER_SECOND = "gigabits_per_second"
    MEGABITS_PER_SECOND = "megabits_per_second"
    KILOBITS_PER_SECOND = "kilobits_per_second"
    BITS_PER_SECOND = "bits_per_second"
    COUNT_PER_SECOND = "count_per_second"

    def as_str(self) -> str:
        """Return the string form of this unit."""
        return self.value

    def as_canonical_label(self) -> str:
        """Return the short display label, which may be empty."""
        return _CANONICAL_LABELS[self.value]

    @classmethod
    def from_string(cls, s: str) -> Optional["Unit"]:
        """Parse the output of :meth:`as_str` back into a unit, or return None."""
        try:
            return cls(s)
        except ValueError:
            return None

    def is_time_based(self) -> bool:
        """Whether this unit measures time."""
        return self in _TIME_UNITS

    def is_data_based(self) -> bool:
        """Whether this unit measures data or data rates."""
        return self in _DATA_UNITS

    def is_data_rate_based(self) -> bool:
        """Whether this unit measures a data rate."""
        return self in _DATA_RATE_UNITS


_TIME_UNITS = frozenset(
    {Unit.SECONDS, Unit.MILLISECONDS, Unit.MICROSECONDS, Unit.NANOSECONDS}
)
_DATA_RATE_UNITS = frozenset(
    {
        Unit.TERABITS_PER_SECOND,
        Unit.GIGABITS_PER_SECOND,
        Unit.MEGABITS_PER_SECOND,
        Unit.KILOBITS_PER_SECOND,
        Unit.BITS_PER_SECOND,
    }
)
_DATA_UNITS = frozenset(
    {Unit.TEBIBYTES, Unit.GIBIBYTES, Unit.MEBIBYTES, Unit.KIBIBYTES, Unit.BYTES}
) | _DATA_RATE_UNITS


class GaugeOp(enum.Enum):
    """Kind of update applied to a gauge."""

    ABSOLUTE = "absolute"
    INCREMENT = "increment"
    DECREMENT = "decrement"


@dataclass(frozen=True)
class GaugeValue:
    """A gauge operation together with its operand."""

    op: GaugeOp
    value: float

    def update_value(self, current: float) -> float:
        """Apply this operation to ``current`` and return the new value."""
        if self.op is GaugeOp.ABSOLUTE:
            return self.value
        if self.op is GaugeOp.INCREMENT:
            return current + self.value
        return current - self.value


def into_f64(value: Number) -> float:
    """Convert a number or a duration (as seconds) to a float."""
    if isinstance(value, bool):
        raise TypeError("booleans cannot be converted to a metric value")
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, (int, float)):
        return float(value)
    raise TypeError(f"cannot convert {type(value).__name__} to a metric value")


__all__ = ["Unit", "GaugeOp", "GaugeValue", "into_f64", "math"]