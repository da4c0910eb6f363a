"""A recorder that prints every metric operation, and a demo that exercises it."""

from __future__ import annotations

import argparse
import enum
import json
import math
import sys
from decimal import Decimal
from typing import Optional, TextIO, Union

from .common import Unit
from .handles import Counter, CounterFn, Gauge, GaugeFn, Histogram, HistogramFn
from .key import Key, KeyName
from .macros import (
    counter,
    describe_counter,
    describe_gauge,
    describe_histogram,
    gauge,
    histogram,
)
from .metadata import Metadata
from .recorder import Recorder, local_recorder


class MetricKind(enum.Enum):
    """The kind of metric a print handle stands for."""

    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"


_OPERATIONS = {
    MetricKind.COUNTER: frozenset({"increment", "absolute"}),
    MetricKind.GAUGE: frozenset({"increment", "decrement", "set"}),
    MetricKind.HISTOGRAM: frozenset({"record"}),
}


def _format_number(value: Union[int, float]) -> str:
    """Format a number the plain way: no exponent, no trailing ``.0``."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _format_unit(unit: Optional[Unit]) -> str:
    if unit is None:
        return "None"
    camel = "".join(part.capitalize() for part in unit.name.split("_"))
    return f"Some({camel})"


class PrintHandle(CounterFn, GaugeFn, HistogramFn):
    """A metric handler that prints each operation applied to it."""

    def __init__(
        self, key: Key, kind: MetricKind, out: Optional[TextIO] = None
    ) -> None:
        self.key = key
        self.kind = kind
        self._out = out

    def _emit(self, operation: str, value: Union[int, float]) -> None:
        if operation not in _OPERATIONS[self.kind]:
            raise TypeError(f"a {self.kind.value} handle does not support {operation}")
        print(
            f"{self.kind.value} {operation} for '{self.key}': {_format_number(value)}",
            file=self._out if self._out is not None else sys.stdout,
        )

    def increment(self, value: Union[int, float]) -> None:
        """Print a counter or gauge increment."""
        self._emit("increment", value)

    def absolute(self, value: int) -> None:
        """Print a counter absolute update."""
        self._emit("absolute", value)

    def decrement(self, value: float) -> None:
        """Print a gauge decrement."""
        self._emit("decrement", value)

    def set(self, value: float) -> None:
        """Print a gauge set."""
        self._emit("set", value)

    def record(self, value: float) -> None:
        """Print a histogram record."""
        self._emit("record", value)

    def __repr__(self) -> str:
        return f"PrintHandle({self.key!r}, {self.kind.value})"


class PrintRecorder(Recorder):
    """A recorder that prints descriptions and hands out printing handles."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out

    def _describe(
        self, kind: MetricKind, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        print(
            f"({kind.value}) registered key {KeyName(key).as_str()} "
            f"with unit {_format_unit(unit)} "
            f"and description {json.dumps(description, ensure_ascii=False)}",
            file=self._out if self._out is not None else sys.stdout,
        )

    def describe_counter(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        self._describe(MetricKind.COUNTER, key, unit, description)

    def describe_gauge(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        self._describe(MetricKind.GAUGE, key, unit, description)

    def describe_histogram(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        self._describe(MetricKind.HISTOGRAM, key, unit, description)

    def register_counter(self, key: Key, metadata: Metadata) -> Counter:
        return Counter(PrintHandle(key, MetricKind.COUNTER, self._out))

    def register_gauge(self, key: Key, metadata: Metadata) -> Gauge:
        return Gauge(PrintHandle(key, MetricKind.GAUGE, self._out))

    def register_histogram(self, key: Key, metadata: Metadata) -> Histogram:
        return Histogram(PrintHandle(key, MetricKind.HISTOGRAM, self._out))

    def __repr__(self) -> str:
        return "PrintRecorder()"


def _run_demo() -> None:
    server_name = "web03"
    common_labels = [("listener", "frontend")]

    describe_counter("requests_processed", "number of requests processed")
    describe_counter("bytes_sent", "total number of bytes sent", Unit.BYTES)
    describe_gauge("connection_count", "current number of client connections")
    describe_histogram(
        "svc.execution_time", "execution time of request handler", Unit.MILLISECONDS
    )
    describe_gauge("unused_gauge", "some gauge we'll never use in this program")
    describe_histogram(
        "unused_histogram",
        "some histogram we'll also never use in this program",
        Unit.SECONDS,
    )

    counter("test_counter").increment(1)
    counter("test_counter", {"type": "absolute"}).absolute(42)

    gauge("test_gauge").increment(1.0)
    gauge("test_gauge", {"type": "decrement"}).decrement(1.0)
    gauge("test_gauge", {"type": "set"}).set(3.1459)

    histogram("test_histogram").record(0.57721)

    label_sets = [
        None,
        {"listener": "frontend"},
        {"listener": "frontend", "server": server_name},
        common_labels,
    ]
    request_label_sets = [
        None,
        {"request_type": "admin"},
        {"request_type": "admin", "server": server_name},
        common_labels,
    ]
    histogram_label_sets = [
        None,
        {"type": "users"},
        {"type": "users", "server": server_name},
        common_labels,
    ]

    for labels in label_sets:
        counter("bytes_sent", labels).increment(64)
    for labels in request_label_sets:
        counter("requests_processed", labels).increment(1)
    for labels in label_sets:
        counter("bytes_sent", labels).absolute(64)

    for labels in label_sets:
        gauge("connection_count", labels).set(300.0)
    for labels in label_sets:
        gauge("connection_count", labels).increment(300.0)
    for labels in label_sets:
        gauge("connection_count", labels).decrement(300.0)

    for labels in histogram_label_sets:
        histogram("svc.execution_time", labels).record(70.0)


def main(argv: Optional[list[str]] = None) -> int:
    """Describe and emit a set of metrics, printing every operation.

    The printing recorder is installed for the current thread while the demo runs.
    """
    parser = argparse.ArgumentParser(
        prog="metricsfacade-demo",
        description="Emit sample metrics through a recorder that prints them.",
    )
    parser.parse_args(argv)
    with local_recorder(PrintRecorder()):
        _run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["MetricKind", "PrintHandle", "PrintRecorder", "main"]