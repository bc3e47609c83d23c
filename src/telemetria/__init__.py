"""telemetria - metrics emission for InfluxDB and DogStatsD.

Recorders write metrics to an InfluxDB-compatible store over HTTP or UDP;
the statsd subpackage forwards semantic calls to a context-bound DogStatsD
client.
"""

from telemetria.adapters.logging import RecorderHandler
from telemetria.adapters.recorders import NoRecorder, SimpleRecorder, new_recorder
from telemetria.core.errors import (
    AddressParseError,
    BatchConstructionError,
    MissingClientError,
    PointConstructionError,
    TelemetryError,
    TransportConstructionError,
    UnsupportedSchemeError,
    WriteError,
)
from telemetria.core.models import Metric
from telemetria.core.ports import RecorderPort, StatsClientPort, TimeSeriesWriterPort

__all__ = [
    "AddressParseError",
    "BatchConstructionError",
    "Metric",
    "MissingClientError",
    "NoRecorder",
    "PointConstructionError",
    "RecorderHandler",
    "RecorderPort",
    "SimpleRecorder",
    "StatsClientPort",
    "TelemetryError",
    "TimeSeriesWriterPort",
    "TransportConstructionError",
    "UnsupportedSchemeError",
    "WriteError",
    "new_recorder",
]
