"""Recorder that discards everything."""

from collections.abc import Sequence
from typing import Any


class NoRecorder:
    """Null-object implementation of RecorderPort.

    Any call is a no-op. Use it to switch telemetry off without branching
    at call sites.
    """

    def write_one(self, metric: Any) -> None:
        """Do nothing."""

    def write_many(self, metrics: Sequence[Any]) -> None:
        """Do nothing."""

    def with_precision(self, precision: str) -> "NoRecorder":
        """Return this same NoRecorder."""
        return self

    def __repr__(self) -> str:
        return "NoRecorder()"
