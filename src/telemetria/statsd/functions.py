"""Telemetry helper functions forwarding to the context-bound statsd client.

Every helper accepts keyword-only ``rate`` (sample rate, default 1.0),
``tags`` (a mapping rendered as ``key:value`` strings, or a ready list of
strings) and ``client`` (used instead of the context-bound client). The
client's return value is returned unchanged and its exceptions propagate.
"""

import time
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from datetime import timedelta
from typing import Any

from telemetria.core.ports import StatsClientPort
from telemetria.statsd.context import client_from_context

Tags = Mapping[str, str] | Sequence[str] | None


def _tags(tags: Tags) -> list[str] | None:
    """Render tags as the ``key:value`` list statsd expects."""
    if tags is None:
        return None
    if isinstance(tags, Mapping):
        return [f"{key}:{value}" for key, value in tags.items()]
    return list(tags)


def _client(client: StatsClientPort | None) -> StatsClientPort:
    return client if client is not None else client_from_context()


def _milliseconds(duration: timedelta | float) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds() * 1000
    return duration * 1000


def gauge(
    name: str,
    value: float,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Any:
    """Measure the value of a metric at a particular time."""
    return _client(client).gauge(name, value, tags=_tags(tags), sample_rate=rate)


def count(
    name: str,
    value: int,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Any:
    """Track how many times something happened per second."""
    return _client(client).increment(name, value, tags=_tags(tags), sample_rate=rate)


def histogram(
    name: str,
    value: float,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Any:
    """Track the statistical distribution of a set of values on each host."""
    return _client(client).histogram(name, value, tags=_tags(tags), sample_rate=rate)


def distribution(
    name: str,
    value: float,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Any:
    """Track the statistical distribution of a set of values across hosts."""
    return _client(client).distribution(
        name, value, tags=_tags(tags), sample_rate=rate
    )


def incr(
    name: str,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Any:
    """Count of 1."""
    return _client(client).increment(name, tags=_tags(tags), sample_rate=rate)


def decr(
    name: str,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Any:
    """Count of -1."""
    return _client(client).decrement(name, tags=_tags(tags), sample_rate=rate)


def set(
    name: str,
    value: str,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Any:
    """Count the number of unique elements in a group."""
    return _client(client).set(name, value, tags=_tags(tags), sample_rate=rate)


def time_in_milliseconds(
    name: str,
    value: float,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Any:
    """Send timing information in milliseconds."""
    return _client(client).timing(name, value, tags=_tags(tags), sample_rate=rate)


def timing(
    name: str,
    value: timedelta | float,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Any:
    """Send timing information.

    Args:
        name: Metric name.
        value: Duration as a timedelta or a number of seconds. It is sent
            in milliseconds.
    """
    return time_in_milliseconds(
        name, _milliseconds(value), rate=rate, tags=tags, client=client
    )


def timing_defer(
    name: str,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Callable[[], Any]:
    """Start a timer and return a callable that emits the elapsed time.

    The client is looked up when the returned callable runs, not when the
    timer starts.

    Example:
        ```python
        done = timing_defer("db.query")
        try:
            run_query()
        finally:
            done()
        ```
    """
    start = time.perf_counter()

    def done() -> Any:
        elapsed = time.perf_counter() - start
        return timing(name, elapsed, rate=rate, tags=tags, client=client)

    return done


@contextmanager
def timer(
    name: str,
    *,
    rate: float = 1.0,
    tags: Tags = None,
    client: StatsClientPort | None = None,
) -> Iterator[None]:
    """Context manager emitting the time spent inside the with block.

    The timing is sent even if the block raises.
    """
    done = timing_defer(name, rate=rate, tags=tags, client=client)
    try:
        yield
    finally:
        done()


def event(
    title: str,
    text: str,
    *,
    tags: Tags = None,
    client: StatsClientPort | None = None,
    **event_options: Any,
) -> Any:
    """Send an event.

    Args:
        title: Event title.
        text: Event body.
        **event_options: Forwarded to the client (alert_type, priority,
            aggregation_key, source_type_name, date_happened, hostname).
    """
    return _client(client).event(title, text, tags=_tags(tags), **event_options)


def simple_event(
    title: str, text: str, *, client: StatsClientPort | None = None
) -> Any:
    """Send an event with only a title and text."""
    return _client(client).event(title, text)


def flush(*, client: StatsClientPort | None = None) -> Any:
    """Force a flush of all buffered payloads."""
    return _client(client).flush()


def close(*, client: StatsClientPort | None = None) -> Any:
    """Close the client socket."""
    return _client(client).close_socket()


def set_write_timeout(
    timeout: float | None, *, client: StatsClientPort | None = None
) -> None:
    """Set the socket timeout used for writes.

    The current socket is closed so the next send opens one with the new
    timeout.
    """
    target = _client(client)
    target.socket_timeout = timeout
    target.close_socket()
