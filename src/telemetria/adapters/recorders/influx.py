"""InfluxDB recorder adapter.

SimpleRecorder writes metrics through an InfluxDB client configured for
either HTTP or UDP transport. It uses all of the client's defaults and only
allows configuring the precision.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

import requests
from influxdb.exceptions import InfluxDBClientError, InfluxDBServerError

from telemetria.core.encoding.line_protocol import (
    DEFAULT_PRECISION,
    encode_point,
    resolve_precision,
    to_point,
)
from telemetria.core.errors import (
    BatchConstructionError,
    PointConstructionError,
    WriteError,
)
from telemetria.core.models import Metric
from telemetria.core.ports import TimeSeriesWriterPort

logger = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (
    InfluxDBClientError,
    InfluxDBServerError,
    requests.RequestException,
    OSError,
)


@dataclass(frozen=True)
class SimpleRecorder:
    """Recorder writing to one database through one InfluxDB client.

    Attributes:
        client: Transport client. Shared by copies made with with_precision.
        database: Target database name.
        precision: Timestamp resolution (ns, us, ms, s, m or h).
        transport: "http" or "udp", as selected by the recorder factory.

    Example:
        ```python
        recorder = new_recorder("http://localhost:8086/test")
        recorder.write_one(Metric("cpu", {"load": 0.5}, {"host": "a"}))
        ```
    """

    client: TimeSeriesWriterPort
    database: str
    precision: str = DEFAULT_PRECISION
    transport: str = "http"

    def write_one(self, metric: Metric) -> None:
        """Immediately store the metric in the persistent storage."""
        self.write_many([metric])

    def write_many(self, metrics: Sequence[Metric]) -> None:
        """Immediately store the metrics in the persistent storage.

        All metrics are converted before anything is sent, so an invalid
        metric aborts the whole batch.

        Raises:
            BatchConstructionError: The precision is not recognised.
            PointConstructionError: A metric could not be converted.
            WriteError: The transport reported a failure.
        """
        try:
            time_precision = resolve_precision(self.precision)
        except ValueError as e:
            raise BatchConstructionError(self.precision) from e

        lines: list[str] = []
        for metric in metrics:
            try:
                point = to_point(metric, time_precision)
                lines.append(encode_point(point, time_precision))
            except (ValueError, TypeError) as e:
                raise PointConstructionError(metric, str(e)) from e

        if not lines:
            return

        logger.debug(
            "Writing %d point(s) to %s database '%s'",
            len(lines),
            self.transport,
            self.database,
        )
        try:
            self.client.write_points(
                lines,
                time_precision=time_precision,
                database=self.database or None,
                protocol="line",
            )
        except _TRANSPORT_ERRORS as e:
            raise WriteError(len(lines)) from e

    def with_precision(self, precision: str) -> "SimpleRecorder":
        """Create a new SimpleRecorder with the specified precision."""
        return replace(self, precision=precision)
