"""Shared test fixtures for all test modules."""

import itertools
import time
from collections.abc import Iterator
from typing import Any

import pytest

from telemetria.adapters.recorders.influx import SimpleRecorder
from telemetria.statsd.context import use_client

FIXED_TIME_NS = 1_700_000_000_123_456_789


class FakeInfluxClient:
    """Records write_points calls instead of talking to InfluxDB."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self.error = error

    def write_points(
        self,
        points: Any,
        time_precision: str | None = None,
        database: str | None = None,
        retention_policy: str | None = None,
        tags: dict[str, str] | None = None,
        batch_size: int | None = None,
        protocol: str = "json",
        consistency: str | None = None,
    ) -> bool:
        self.calls.append(
            {
                "points": list(points),
                "time_precision": time_precision,
                "database": database,
                "protocol": protocol,
            }
        )
        if self.error is not None:
            raise self.error
        return True


class FakeStatsClient:
    """Records every call made to it, mimicking DogStatsd's method names."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.socket_timeout: float | None = 0

    def _record(self, method: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((method, args, kwargs))

    def gauge(self, *args: Any, **kwargs: Any) -> None:
        self._record("gauge", *args, **kwargs)

    def increment(self, *args: Any, **kwargs: Any) -> None:
        self._record("increment", *args, **kwargs)

    def decrement(self, *args: Any, **kwargs: Any) -> None:
        self._record("decrement", *args, **kwargs)

    def histogram(self, *args: Any, **kwargs: Any) -> None:
        self._record("histogram", *args, **kwargs)

    def distribution(self, *args: Any, **kwargs: Any) -> None:
        self._record("distribution", *args, **kwargs)

    def timing(self, *args: Any, **kwargs: Any) -> None:
        self._record("timing", *args, **kwargs)

    def set(self, *args: Any, **kwargs: Any) -> None:
        self._record("set", *args, **kwargs)

    def event(self, *args: Any, **kwargs: Any) -> None:
        self._record("event", *args, **kwargs)

    def flush(self) -> None:
        self._record("flush")

    def close_socket(self) -> None:
        self._record("close_socket")


@pytest.fixture
def influx_client() -> FakeInfluxClient:
    """Fake InfluxDB client that records writes."""
    return FakeInfluxClient()


@pytest.fixture
def http_recorder(influx_client: FakeInfluxClient) -> SimpleRecorder:
    """SimpleRecorder over the fake client, writing to database "test"."""
    return SimpleRecorder(client=influx_client, database="test", transport="http")


@pytest.fixture
def frozen_time_ns(monkeypatch: pytest.MonkeyPatch) -> int:
    """Freeze time.time_ns at FIXED_TIME_NS."""
    monkeypatch.setattr(time, "time_ns", lambda: FIXED_TIME_NS)
    return FIXED_TIME_NS


@pytest.fixture
def ticking_time_ns(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make time.time_ns advance by one second on every call."""
    ticks = itertools.count(FIXED_TIME_NS, 1_000_000_000)
    monkeypatch.setattr(time, "time_ns", lambda: next(ticks))


@pytest.fixture
def stats_client() -> FakeStatsClient:
    """Fake statsd client that records calls."""
    return FakeStatsClient()


@pytest.fixture
def bound_stats_client(stats_client: FakeStatsClient) -> Iterator[FakeStatsClient]:
    """Fake statsd client bound to the current context for the test."""
    with use_client(stats_client):
        yield stats_client


@pytest.fixture
def influx_client_factory() -> type[FakeInfluxClient]:
    """The FakeInfluxClient class, for tests that need a failing client."""
    return FakeInfluxClient


class RecordingRecorder:
    """In-memory recorder keeping every metric written to it."""

    def __init__(self, error: Exception | None = None) -> None:
        self.metrics: list[Any] = []
        self.error = error

    def write_one(self, metric: Any) -> None:
        self.write_many([metric])

    def write_many(self, metrics: Any) -> None:
        if self.error is not None:
            raise self.error
        self.metrics.extend(metrics)

    def with_precision(self, precision: str) -> "RecordingRecorder":
        return self


@pytest.fixture
def recording_recorder() -> RecordingRecorder:
    """Recorder that keeps metrics in memory."""
    return RecordingRecorder()


@pytest.fixture
def recorder_factory() -> type[RecordingRecorder]:
    """The RecordingRecorder class, for tests that need a failing recorder."""
    return RecordingRecorder
