"""Recorders and the global and thread-local recorder registry."""

from __future__ import annotations

import abc
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, Optional, TypeVar

from .common import Unit
from .handles import Counter, Gauge, Histogram
from .key import Key, KeyName
from .metadata import Metadata

T = TypeVar("T")

_SET_RECORDER_ERROR = (
    "attempted to set a recorder after the metrics system was already initialized"
)


class Recorder(abc.ABC):
    """Interface between the emission helpers and an exporter."""

    @abc.abstractmethod
    def describe_counter(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        """Describe a counter with an optional unit and a description."""

    @abc.abstractmethod
    def describe_gauge(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        """Describe a gauge with an optional unit and a description."""

    @abc.abstractmethod
    def describe_histogram(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        """Describe a histogram with an optional unit and a description."""

    @abc.abstractmethod
    def register_counter(self, key: Key, metadata: Metadata) -> Counter:
        """Register a counter and return its handle."""

    @abc.abstractmethod
    def register_gauge(self, key: Key, metadata: Metadata) -> Gauge:
        """Register a gauge and return its handle."""

    @abc.abstractmethod
    def register_histogram(self, key: Key, metadata: Metadata) -> Histogram:
        """Register a histogram and return its handle."""


class NoopRecorder(Recorder):
    """A recorder that ignores descriptions and hands out no-op handles."""

    def describe_counter(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        pass

    def describe_gauge(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        pass

    def describe_histogram(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        pass

    def register_counter(self, key: Key, metadata: Metadata) -> Counter:
        return Counter.noop()

    def register_gauge(self, key: Key, metadata: Metadata) -> Gauge:
        return Gauge.noop()

    def register_histogram(self, key: Key, metadata: Metadata) -> Histogram:
        return Histogram.noop()

    def __repr__(self) -> str:
        return "NoopRecorder()"


class SetRecorderError(Exception):
    """Raised when a recorder is installed after one already was."""

    def __init__(self, recorder: Any) -> None:
        super().__init__(_SET_RECORDER_ERROR)
        self.recorder = recorder

    def into_inner(self) -> Any:
        """Return the recorder that could not be installed."""
        return self.recorder

    def __repr__(self) -> str:
        return "SetRecorderError(..)"


class RecorderOnceCell:
    """A cell that can hold a recorder, set at most once."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._recorder: Optional[Recorder] = None

    def set(self, recorder: Recorder) -> None:
        """Install ``recorder``; raise SetRecorderError if one is already set."""
        with self._lock:
            if self._recorder is not None:
                raise SetRecorderError(recorder)
            self._recorder = recorder

    def try_load(self) -> Optional[Recorder]:
        """Return the installed recorder, or None."""
        return self._recorder

    def __repr__(self) -> str:
        return f"RecorderOnceCell({self._recorder!r})"


_NOOP_RECORDER = NoopRecorder()
_GLOBAL_RECORDER = RecorderOnceCell()
_LOCAL = threading.local()


def set_global_recorder(recorder: Recorder) -> None:
    """Install the process-wide recorder.

    This may succeed only once; later calls raise SetRecorderError.
    """
    _GLOBAL_RECORDER.set(recorder)


@contextmanager
def local_recorder(recorder: Recorder) -> Iterator[Recorder]:
    """Use ``recorder`` on the current thread for the duration of the block."""
    previous = getattr(_LOCAL, "recorder", None)
    _LOCAL.recorder = recorder
    try:
        yield recorder
    finally:
        _LOCAL.recorder = previous


def with_local_recorder(recorder: Recorder, func: Callable[[], T]) -> T:
    """Call ``func`` with ``recorder`` acting as the current thread's recorder."""
    with local_recorder(recorder):
        return func()


def with_recorder(func: Callable[[Recorder], T]) -> T:
    """Call ``func`` with the current recorder.

    A thread-local recorder wins over the global one; with neither, a no-op
    recorder is used.
    """
    recorder = getattr(_LOCAL, "recorder", None)
    if recorder is None:
        recorder = _GLOBAL_RECORDER.try_load()
    if recorder is None:
        recorder = _NOOP_RECORDER
    return func(recorder)


__all__ = [
    "Recorder",
    "NoopRecorder",
    "SetRecorderError",
    "RecorderOnceCell",
    "set_global_recorder",
    "local_recorder",
    "with_local_recorder",
    "with_recorder",
]