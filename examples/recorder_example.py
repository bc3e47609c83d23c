"""Example writing metrics to InfluxDB through a recorder.

Run with:
    python examples/recorder_example.py http://localhost:8086/test

Pass "off" as the address to use a NoRecorder instead.
"""

import logging
import sys
import time

from telemetria import Metric, NoRecorder, RecorderPort, TelemetryError, new_recorder


def build_recorder(address: str) -> RecorderPort:
    """Create a recorder, or a NoRecorder when telemetry is off."""
    if address == "off":
        return NoRecorder()
    return new_recorder(address)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    address = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8086/test"
    recorder = build_recorder(address).with_precision("ms")

    for i in range(5):
        batch = [
            Metric("cpu", {"load": 0.1 * i}, {"host": "web-1"}),
            Metric("requests", {"count": i, "path": "/"}, {"host": "web-1"}),
        ]
        try:
            recorder.write_many(batch)
        except TelemetryError as e:
            logging.error("Could not record metrics: %s (%s)", e, e.__cause__)
        time.sleep(1)


if __name__ == "__main__":
    main()
