"""DogStatsD client holder and telemetry helpers.

Usage:
    ```python
    from telemetria import statsd

    statsd.new("myapp", host="localhost", port=8125)
    statsd.gauge("queue.depth", 12, tags={"queue": "emails"})
    with statsd.timer("db.query"):
        run_query()
    ```
"""

from telemetria.statsd.context import (
    client_from_context,
    create_client,
    new,
    reset_client,
    set_client,
    use_client,
)
from telemetria.statsd.functions import (
    close,
    count,
    decr,
    distribution,
    event,
    flush,
    gauge,
    histogram,
    incr,
    set,
    set_write_timeout,
    simple_event,
    time_in_milliseconds,
    timer,
    timing,
    timing_defer,
)

__all__ = [
    "client_from_context",
    "close",
    "count",
    "create_client",
    "decr",
    "distribution",
    "event",
    "flush",
    "gauge",
    "histogram",
    "incr",
    "new",
    "reset_client",
    "set",
    "set_client",
    "set_write_timeout",
    "simple_event",
    "time_in_milliseconds",
    "timer",
    "timing",
    "timing_defer",
    "use_client",
]
