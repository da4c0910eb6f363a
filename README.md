# metricsfacade

A lightweight metrics facade. Libraries emit counters, gauges and histograms
through one small API; the application decides where those metrics go by
installing a recorder. Until a recorder is installed, every call goes to a
no-op recorder and the handles it returns discard every update.

## Installing

```
pip install metricsfacade
```

## Emitting metrics

```python
from metricsfacade.macros import counter, gauge, histogram, describe_counter
from metricsfacade.common import Unit

describe_counter("bytes_sent", "total number of bytes sent", Unit.BYTES)

counter("requests_processed").increment(1)
counter("requests_processed", {"request_type": "admin"}).increment(1)
gauge("connection_count", [("listener", "frontend")]).set(300.0)
histogram("svc.execution_time").record(70.0)
```

`counter`, `gauge` and `histogram` build a `Key` from the name and labels and
ask the current recorder to register it. They also take keyword-only
`target` and `level` (a `metricsfacade.metadata.Level`, `INFO` by default);
`target` defaults to the calling module. The recorder receives these as a
`Metadata` object.

Labels may be given as a mapping, as a sequence of `(key, value)` pairs, or as
a sequence of `Label` objects (`metricsfacade.label`); keys and values must be
strings. Label order is kept and counts for key equality.

Counter values must be integers in the unsigned 64-bit range; anything else
raises `TypeError` or `ValueError`. Gauge and histogram values accept an
`int`, a `float` or a `datetime.timedelta` (recorded in seconds); booleans are
rejected with `TypeError`.

`metricsfacade.common.Unit` lists the supported units, with `as_str()`,
`as_canonical_label()` (for example `"ms"` or `"GiB"`), `Unit.from_string()`
(which returns `None` for an unknown name) and the `is_time_based()`,
`is_data_based()` and `is_data_rate_based()` checks.

## Writing a recorder

Subclass `metricsfacade.recorder.Recorder` and implement the `describe_*` and
`register_*` methods. Registration returns handles (`Counter`, `Gauge`,
`Histogram` from `metricsfacade.handles`) wrapping an object that implements
`CounterFn`, `GaugeFn` or `HistogramFn`. `metricsfacade.atomics.AtomicCounter`
(wrapping at 2**64, with `absolute()` never lowering the value) and
`AtomicGauge` are thread-safe ready-made stores with a `load()` method.

Install a recorder once for the whole process:

```python
from metricsfacade.recorder import set_global_recorder

set_global_recorder(MyRecorder())
```

A second call raises `SetRecorderError`, whose `into_inner()` gives the
rejected recorder back.

For tests or a limited section of code, use a recorder on the current thread
only; it takes priority over the global one:

```python
from metricsfacade.macros import counter
from metricsfacade.recorder import local_recorder, with_local_recorder

with local_recorder(MyRecorder()):
    counter("jobs").increment(1)

with_local_recorder(MyRecorder(), lambda: counter("jobs").increment(1))
```

## Demo

`metricsfacade.demo` has `PrintRecorder`, which prints every description and
every operation on its handles. The demo command uses it on the current
thread while it describes and emits a set of sample metrics:

```
metricsfacade-demo
```

## What it does not do

The package stores no metric data beyond the atomic counter and gauge
helpers, keeps no histogram buckets or summaries, and ships no exporter: it
does not serve metrics over the network or write them anywhere. Those are
left to the recorder you install.