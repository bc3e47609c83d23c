"""Example sending DogStatsD metrics from request handlers.

Run with:
    python examples/statsd_example.py

Start a DogStatsD agent (or `nc -klu 8125`) to see the datagrams.
"""

import random
import time

from telemetria import statsd


def handle_request(path: str) -> None:
    """Pretend to handle a request, recording what happened."""
    statsd.incr("requests", tags={"path": path})
    with statsd.timer("request.duration", tags={"path": path}):
        time.sleep(random.uniform(0.01, 0.05))
    statsd.gauge("queue.depth", random.randint(0, 10))


def main() -> None:
    with statsd.use_client(statsd.create_client("example", host="localhost", port=8125)):
        statsd.simple_event("Example started", "Sending a few requests")
        for path in ("/", "/login", "/"):
            handle_request(path)
        statsd.flush()
        statsd.close()


if __name__ == "__main__":
    main()
