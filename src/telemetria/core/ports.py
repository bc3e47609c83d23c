"""Port interfaces for recorders and the transports behind them.

These protocols define the contracts that adapters must implement.
The core domain depends only on these interfaces, not concrete clients.
"""

from collections.abc import Sequence
from typing import Any, Protocol, Self, runtime_checkable

from telemetria.core.models import Metric


@runtime_checkable
class RecorderPort(Protocol):
    """Port for submitting metrics to a persistent time-series store.

    Examples: SimpleRecorder, NoRecorder.
    """

    def write_one(self, metric: Metric) -> None:
        """Immediately store a single metric."""
        ...

    def write_many(self, metrics: Sequence[Metric]) -> None:
        """Immediately store a batch of metrics in one transport call."""
        ...

    def with_precision(self, precision: str) -> Self:
        """Return a copy of this recorder writing with another precision."""
        ...


@runtime_checkable
class TimeSeriesWriterPort(Protocol):
    """Port for the transport client a SimpleRecorder writes through.

    ``influxdb.InfluxDBClient`` satisfies it for both HTTP and UDP.
    """

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
        """Write points (or pre-encoded lines) to the store."""
        ...


@runtime_checkable
class StatsClientPort(Protocol):
    """Port for the statsd-style client held in the request context.

    ``datadog.dogstatsd.DogStatsd`` satisfies it.
    """

    def gauge(self, metric: str, value: float, tags=None, sample_rate=None): ...

    def increment(self, metric: str, value=1, tags=None, sample_rate=None): ...

    def decrement(self, metric: str, value=1, tags=None, sample_rate=None): ...

    def histogram(self, metric: str, value: float, tags=None, sample_rate=None): ...

    def distribution(self, metric: str, value: float, tags=None, sample_rate=None): ...

    def timing(self, metric: str, value: float, tags=None, sample_rate=None): ...

    def set(self, metric: str, value, tags=None, sample_rate=None): ...

    def event(self, title: str, message: str, *args: Any, **kwargs: Any): ...

    def flush(self): ...

    def close_socket(self): ...
