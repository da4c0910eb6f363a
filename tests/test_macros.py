from typing import Optional

import pytest

from metricsfacade.atomics import AtomicCounter, AtomicGauge
from metricsfacade.common import Unit
from metricsfacade.handles import Counter, Gauge, Histogram, HistogramFn
from metricsfacade.key import Key, KeyName
from metricsfacade.label import Label
from metricsfacade.macros import (
    counter,
    describe_counter,
    describe_gauge,
    describe_histogram,
    gauge,
    histogram,
)
from metricsfacade.metadata import Level, Metadata
from metricsfacade.recorder import Recorder, local_recorder


class _ListHistogram(HistogramFn):
    def __init__(self) -> None:
        self.values: list[float] = []

    def record(self, value: float) -> None:
        self.values.append(value)


class RecordingRecorder(Recorder):
    def __init__(self) -> None:
        self.descriptions: list[tuple[str, KeyName, Optional[Unit], str]] = []
        self.registrations: list[tuple[str, Key, Metadata]] = []
        self.counters: dict[Key, AtomicCounter] = {}
        self.gauges: dict[Key, AtomicGauge] = {}
        self.histograms: dict[Key, _ListHistogram] = {}

    def describe_counter(self, key, unit, description):
        self.descriptions.append(("counter", key, unit, description))

    def describe_gauge(self, key, unit, description):
        self.descriptions.append(("gauge", key, unit, description))

    def describe_histogram(self, key, unit, description):
        self.descriptions.append(("histogram", key, unit, description))

    def register_counter(self, key, metadata):
        self.registrations.append(("counter", key, metadata))
        return Counter(self.counters.setdefault(key, AtomicCounter()))

    def register_gauge(self, key, metadata):
        self.registrations.append(("gauge", key, metadata))
        return Gauge(self.gauges.setdefault(key, AtomicGauge()))

    def register_histogram(self, key, metadata):
        self.registrations.append(("histogram", key, metadata))
        return Histogram(self.histograms.setdefault(key, _ListHistogram()))


@pytest.fixture
def recorder():
    rec = RecordingRecorder()
    with local_recorder(rec):
        yield rec


def test_literal_key(recorder):
    describe_counter("abcdef", "a counter")
    describe_counter("abcdef", "a counter", Unit.NANOSECONDS)
    counter("abcdef")
    counter("abcdef").increment(1)
    assert recorder.descriptions == [
        ("counter", KeyName("abcdef"), None, "a counter"),
        ("counter", KeyName("abcdef"), Unit.NANOSECONDS, "a counter"),
    ]
    assert recorder.counters[Key("abcdef")].load() == 1
    assert len(recorder.registrations) == 2


def test_literal_key_literal_labels(recorder):
    counter("abcdef", {"uvw": "xyz"}).increment(1)
    key = Key.from_parts("abcdef", [Label("uvw", "xyz")])
    assert recorder.counters[key].load() == 1
    assert str(recorder.registrations[0][1]) == "Key(abcdef, [uvw = xyz])"


def test_nonliteral_key(recorder):
    some_u16 = 0
    describe_counter(f"response_status_{some_u16}", "a counter", Unit.NANOSECONDS)
    counter(f"response_status_{some_u16}").increment(1)
    assert recorder.descriptions[0][1] == KeyName("response_status_0")
    assert recorder.counters[Key("response_status_0")].load() == 1


def test_nonliteral_key_nonliteral_labels(recorder):
    dynamic_val = "xyz"
    labels = [("uvw", f"{dynamic_val}!")]
    counter("response_status_0", labels).increment(12)
    key = Key.from_parts("response_status_0", [Label("uvw", "xyz!")])
    assert recorder.counters[key].load() == 12


def test_const_key_and_description(recorder):
    KEY = "abcdef"
    DESC = "a counter"
    describe_counter(KEY, DESC)
    counter(KEY).increment(17)
    assert recorder.descriptions == [("counter", KeyName("abcdef"), None, "a counter")]
    assert recorder.counters[Key("abcdef")].load() == 17


def test_empty_labels_match_plain_key(recorder):
    counter("qwe").increment(1)
    counter("qwe", []).increment(1)
    counter("qwe", {"foo": "bar"}).increment(1)
    assert recorder.counters[Key("qwe")].load() == 2
    assert recorder.counters[Key("qwe", {"foo": "bar"})].load() == 1


def test_label_pairs_with_empty_values(recorder):
    counter("some_metric", [("process_type", ""), ("success", "")])
    key = recorder.registrations[0][1]
    assert list(key.labels()) == [Label("process_type", ""), Label("success", "")]
    assert key.name() == "some_metric"


def test_gauge_operations(recorder):
    gauge("connection_count").set(300.0)
    gauge("connection_count").increment(5)
    gauge("connection_count").decrement(1.5)
    assert recorder.gauges[Key("connection_count")].load() == 303.5


def test_histogram_records(recorder):
    histogram("svc.execution_time", {"type": "users"}).record(70.0)
    histogram("svc.execution_time", {"type": "users"}).record(3)
    key = Key("svc.execution_time", {"type": "users"})
    assert recorder.histograms[key].values == [70.0, 3.0]


def test_describe_gauge_and_histogram(recorder):
    describe_gauge("g", "a gauge")
    describe_histogram("h", "a histogram", Unit.MILLISECONDS)
    assert recorder.descriptions == [
        ("gauge", KeyName("g"), None, "a gauge"),
        ("histogram", KeyName("h"), Unit.MILLISECONDS, "a histogram"),
    ]


def test_default_metadata_uses_calling_module(recorder):
    counter("m")
    metadata = recorder.registrations[0][2]
    assert metadata == Metadata(__name__, Level.INFO, __name__)


def test_explicit_target_and_level(recorder):
    gauge("m", target="frontend", level=Level.DEBUG)
    histogram("m", level=Level.ERROR)
    assert recorder.registrations[0][2] == Metadata("frontend", Level.DEBUG, __name__)
    assert recorder.registrations[1][2].level is Level.ERROR
    assert recorder.registrations[1][2].target == __name__


def test_uninitialized_reaches_no_local_recorder():
    rec = RecordingRecorder()
    with local_recorder(rec):
        counter("counter_bench", {"request": "http", "svc": "admin"}).increment(42)
    counter("counter_bench").increment(42)
    assert len(rec.registrations) == 1
    key = Key("counter_bench", {"request": "http", "svc": "admin"})
    assert rec.counters[key].load() == 42


def test_dynamic_labels_repeated(recorder):
    label_val = "12345"
    for _ in range(3):
        counter("counter_bench", {"request": "http", "uid": label_val}).increment(42)
    key = Key("counter_bench", [("request", "http"), ("uid", "12345")])
    assert recorder.counters[key].load() == 126


def test_invalid_name_raises(recorder):
    with pytest.raises(TypeError):
        counter(123)
    with pytest.raises(TypeError):
        describe_counter(123, "desc")


def test_invalid_description_and_unit_raise(recorder):
    with pytest.raises(TypeError):
        describe_counter("x", 5)
    with pytest.raises(TypeError):
        describe_gauge("x", "desc", "bytes")
    assert recorder.descriptions == []


def test_invalid_level_and_target_raise(recorder):
    with pytest.raises(TypeError):
        counter("x", level="info")
    with pytest.raises(TypeError):
        gauge("x", target=5)
    assert recorder.registrations == []