"""Conversion of metrics into InfluxDB line protocol.

The actual escaping and formatting is done by ``influxdb.line_protocol``;
this module validates metrics, stamps them and normalises precision tokens.
"""

import math
import time
from collections.abc import Mapping
from typing import Any

from influxdb.line_protocol import make_lines

from telemetria.core.models import Metric

DEFAULT_PRECISION = "ns"

# Accepted precision tokens mapped to the token the influxdb client expects.
# An empty token means nanoseconds.
_PRECISION_TOKENS = {
    "": "n",
    "n": "n",
    "ns": "n",
    "u": "u",
    "us": "u",
    "µs": "u",
    "ms": "ms",
    "s": "s",
    "m": "m",
    "h": "h",
}

# Nanoseconds per unit of each client precision
_NANOSECONDS_PER_UNIT = {
    "n": 1,
    "u": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60_000_000_000,
    "h": 3_600_000_000_000,
}


def resolve_precision(precision: str) -> str:
    """Map a precision token to the influxdb client's time_precision.

    Args:
        precision: One of ns, us, ms, s, m or h (n and u are also accepted).

    Returns:
        The client token (n, u, ms, s, m or h).

    Raises:
        ValueError: If the token is unknown.
    """
    try:
        return _PRECISION_TOKENS[precision]
    except KeyError:
        raise ValueError(f"unknown precision '{precision}'") from None


def scale_timestamp(timestamp_ns: int, client_precision: str) -> int:
    """Truncate a nanosecond epoch timestamp to the given client precision."""
    return timestamp_ns // _NANOSECONDS_PER_UNIT[client_precision]


def _check_fields(fields: Mapping[str, Any]) -> None:
    if not fields:
        raise ValueError("point without fields is unsupported")
    for key, value in fields.items():
        if not isinstance(key, str) or not key:
            raise ValueError(f"invalid field key {key!r}")
        if isinstance(value, bool | int | str):
            continue
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"field '{key}' has unsupported value {value!r}")
            continue
        raise ValueError(
            f"field '{key}' has unsupported type {type(value).__name__}"
        )


def _check_tags(tags: Mapping[str, Any]) -> None:
    for key, value in tags.items():
        if not isinstance(key, str) or not key:
            raise ValueError(f"invalid tag key {key!r}")
        if not isinstance(value, str):
            raise ValueError(f"tag '{key}' must be a string")


def to_point(metric: Metric, client_precision: str) -> dict[str, Any]:
    """Build a point dict for the metric, stamped with the current time.

    The timestamp is taken when this function is called, so every point of a
    batch carries its own time.

    Raises:
        ValueError: If the metric cannot be represented as a point.
    """
    if not isinstance(metric.name, str) or not metric.name:
        raise ValueError("missing measurement name")
    _check_fields(metric.fields)
    _check_tags(metric.tags)
    return {
        "measurement": metric.name,
        "tags": dict(metric.tags),
        "fields": dict(metric.fields),
        "time": scale_timestamp(time.time_ns(), client_precision),
    }


def encode_point(point: dict[str, Any], client_precision: str) -> str:
    """Encode a single point to one line of line protocol (no newline)."""
    return make_lines({"points": [point]}, client_precision).rstrip("\n")
