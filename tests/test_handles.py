from datetime import timedelta

import pytest

from metricsfacade.handles import (
    Counter,
    CounterFn,
    Gauge,
    GaugeFn,
    Histogram,
    HistogramFn,
)


class RecordingCounter(CounterFn):
    def __init__(self):
        self.calls = []

    def increment(self, value):
        self.calls.append(("increment", value))

    def absolute(self, value):
        self.calls.append(("absolute", value))


class RecordingGauge(GaugeFn):
    def __init__(self):
        self.calls = []

    def increment(self, value):
        self.calls.append(("increment", value))

    def decrement(self, value):
        self.calls.append(("decrement", value))

    def set(self, value):
        self.calls.append(("set", value))


class RecordingHistogram(HistogramFn):
    def __init__(self):
        self.values = []

    def record(self, value):
        self.values.append(value)


def test_counter_forwards_to_handler():
    inner = RecordingCounter()
    counter = Counter(inner)
    counter.increment(1)
    counter.absolute(42)
    assert inner.calls == [("increment", 1), ("absolute", 42)]


def test_counter_rejects_negative_values():
    counter = Counter(RecordingCounter())
    with pytest.raises(ValueError):
        counter.increment(-1)


def test_counter_rejects_out_of_range_values():
    counter = Counter(RecordingCounter())
    with pytest.raises(ValueError):
        counter.absolute(2**64)


def test_counter_rejects_floats():
    counter = Counter(RecordingCounter())
    with pytest.raises(TypeError):
        counter.increment(1.5)


def test_gauge_forwards_as_floats():
    inner = RecordingGauge()
    gauge = Gauge(inner)
    gauge.increment(1)
    gauge.decrement(1.0)
    gauge.set(3.1459)
    assert inner.calls == [("increment", 1.0), ("decrement", 1.0), ("set", 3.1459)]
    assert all(isinstance(value, float) for _, value in inner.calls)


def test_gauge_accepts_durations_as_seconds():
    inner = RecordingGauge()
    Gauge(inner).set(timedelta(seconds=2))
    assert inner.calls == [("set", 2.0)]


def test_gauge_rejects_strings():
    with pytest.raises(TypeError):
        Gauge(RecordingGauge()).set("1.0")


def test_histogram_records_values():
    inner = RecordingHistogram()
    histogram = Histogram(inner)
    histogram.record(0.57721)
    histogram.record(70)
    histogram.record(timedelta(milliseconds=500))
    assert inner.values == [0.57721, 70.0, 0.5]


def test_cloned_handles_share_handler():
    inner = RecordingHistogram()
    first = Histogram(inner)
    second = Histogram(inner)
    first.record(1.0)
    second.record(2.0)
    assert inner.values == [1.0, 2.0]


def test_noop_handles_discard_updates():
    recorder = RecordingCounter()
    noop = Counter.noop()
    noop.increment(5)
    assert recorder.calls == []
    assert repr(noop) == "Counter(..)"
    assert repr(Gauge.noop()) == "Gauge(..)"
    assert repr(Histogram.noop()) == "Histogram(..)"


def test_handler_interfaces_are_abstract():
    with pytest.raises(TypeError):
        CounterFn()
    with pytest.raises(TypeError):
        GaugeFn()
    with pytest.raises(TypeError):
        HistogramFn()