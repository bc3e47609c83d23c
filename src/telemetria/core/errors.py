"""Exception taxonomy for recorder construction and writes.

Every error raised while building a recorder or writing through one derives
from TelemetryError. Transport failures are chained as ``__cause__``.
"""

from telemetria.core.models import Metric


class TelemetryError(Exception):
    """Base class for recorder errors."""


class AddressParseError(TelemetryError):
    """The recorder address could not be parsed."""

    def __init__(self, address: str, reason: str) -> None:
        super().__init__(f"Could not parse address '{address}': {reason}")
        self.address = address
        self.reason = reason


class UnsupportedSchemeError(TelemetryError):
    """No recorder exists for the scheme of the address."""

    def __init__(self, address: str, scheme: str) -> None:
        super().__init__(f"I don't know how to create a recorder for '{address}'")
        self.address = address
        self.scheme = scheme


class TransportConstructionError(TelemetryError):
    """The underlying HTTP or UDP client could not be created."""

    def __init__(self, address: str, transport: str) -> None:
        super().__init__(f"Could not create a {transport} recorder for '{address}'")
        self.address = address
        self.transport = transport


class BatchConstructionError(TelemetryError):
    """The batch configuration was rejected, e.g. an unknown precision."""

    def __init__(self, precision: str) -> None:
        super().__init__(f"Invalid precision '{precision}' for metric batch")
        self.precision = precision


class PointConstructionError(TelemetryError):
    """A metric could not be converted into a point."""

    def __init__(self, metric: Metric, reason: str) -> None:
        super().__init__(f"Could not persist metric '{metric.name}': {reason}")
        self.metric = metric
        self.reason = reason


class WriteError(TelemetryError):
    """The transport reported a failure while writing a batch."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Could not write {count} metric(s)")
        self.count = count


class MissingClientError(RuntimeError):
    """No statsd client is bound in the current context.

    This is a setup error, so it is not a TelemetryError.
    """
